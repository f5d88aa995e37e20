"""Access to non-public members for tests.

Lets tests read and write private fields, properties and static fields,
invoke private methods, and call constructors without going through the
public API of a class. Use it as a last resort: reaching for it often is a
sign that the code under test wants a seam.

Example:
    class Counter:
        def __init__(self):
            self._count = 0

        def _bump(self, by):
            self._count += by
            return self._count

    counter = Counter()
    set_field(counter, "_count", 5)
    assert get_field(counter, "_count") == 5
    assert invoke_function(counter, "_bump", int, 2) == 7

All functions validate their arguments before touching the target and raise
InvalidArgumentError when a required argument is missing. Exceptions raised by
the member itself propagate unchanged.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence, Type, TypeVar

from privy.core import guard
from privy.core.exceptions import (
    CastMismatchError,
    InvalidArgumentError,
    MemberNotFoundError,
    UnsupportedMemberError,
)
from privy.core.resolution import (
    MemberDescriptor,
    MemberKind,
    MemberScope,
    ResolvedMember,
    accepts_type,
    is_type_form,
    resolve_constructor,
    resolve_member,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_CAST_MISMATCH_TEMPLATE = (
    "Error invoking function '{0}'. The return type was not the expected type. "
    "Expected '{1}'. But was '{2}'"
)


def _check_name(name: Any, argument_name: str) -> None:
    guard.against_none_or_empty(name, argument_name)
    guard.against(
        not isinstance(name, str),
        InvalidArgumentError,
        f"{argument_name} must be a string, got {type(name).__name__}",
    )


def _check_result_type(result_type: Any) -> None:
    guard.against(result_type is None, InvalidArgumentError, "result_type cannot be null")
    guard.against(
        not is_type_form(result_type),
        InvalidArgumentError,
        f"result_type must be a class, union or generic alias, got {result_type!r}",
    )


def _instance_target(
    instance: Any,
    name: Any,
    argument_name: str,
    declaring_type: Optional[type] = None,
) -> type:
    guard.against(instance is None, InvalidArgumentError, "instance cannot be null")
    _check_name(name, argument_name)
    if declaring_type is None:
        return type(instance)
    guard.against_non_type(declaring_type, "declaring_type")
    guard.against(
        not isinstance(instance, declaring_type),
        InvalidArgumentError,
        f"instance of {type(instance).__name__} is not a {declaring_type.__name__}",
    )
    return declaring_type


def _static_target(type_: Any, name: Any, argument_name: str) -> type:
    guard.against_non_type(type_, "type_")
    _check_name(name, argument_name)
    return type_


def _field_info(start: type, field_name: str, instance: Any) -> ResolvedMember:
    descriptor = MemberDescriptor(MemberKind.FIELD, field_name, MemberScope.INSTANCE)
    resolved = resolve_member(start, descriptor, instance)
    if resolved is None:
        raise MemberNotFoundError(
            f"Field '{field_name}' does not exist (is the field a static field?)",
            member_name=field_name,
            member_kind=MemberKind.FIELD.value,
        )
    return resolved


def _static_field_info(type_: type, field_name: str) -> ResolvedMember:
    descriptor = MemberDescriptor(MemberKind.FIELD, field_name, MemberScope.STATIC)
    resolved = resolve_member(type_, descriptor)
    if resolved is None:
        raise MemberNotFoundError(
            f"Static Field '{field_name}' does not exist (is the field an instance field?)",
            member_name=field_name,
            member_kind=MemberKind.FIELD.value,
        )
    return resolved


def _property_info(start: type, property_name: str) -> ResolvedMember:
    descriptor = MemberDescriptor(
        MemberKind.PROPERTY, property_name, MemberScope.INSTANCE, include_public=True
    )
    resolved = resolve_member(start, descriptor)
    if resolved is None:
        raise MemberNotFoundError(
            f"Property '{property_name}' does not exist",
            member_name=property_name,
            member_kind=MemberKind.PROPERTY.value,
        )
    return resolved


def _method_info(start: type, name: str, scope: MemberScope) -> ResolvedMember:
    resolved = resolve_member(start, MemberDescriptor(MemberKind.METHOD, name, scope))
    if resolved is None:
        raise UnsupportedMemberError(
            "Type does not include a member by this name: " + name,
            member_name=name,
        )
    return resolved


def _call(resolved: ResolvedMember, start: type, instance: Any, arguments: Sequence[Any]) -> Any:
    # Binding through the descriptor protocol keeps classmethods bound to the
    # requested type rather than to the declaring base class.
    bound = resolved.member.__get__(instance, start)
    return bound(*arguments)


def _type_name(result_type: Any) -> str:
    if isinstance(result_type, tuple):
        return " | ".join(_type_name(option) for option in result_type)
    if isinstance(result_type, type) and not hasattr(result_type, "__origin__"):
        return result_type.__name__
    return str(result_type)


def _cast(name: str, result: Any, result_type: Any) -> Any:
    if result is None or accepts_type(result_type, type(result)):
        return result
    expected = _type_name(result_type)
    actual = type(result).__name__
    message = _CAST_MISMATCH_TEMPLATE.format(name, expected, actual)
    logger.debug(message)
    raise CastMismatchError(
        message, member_name=name, expected_type=expected, actual_type=actual
    )


def get_constant(type_: type, const_name: str) -> Any:
    """Gets a constant value from a type.

    Constants are class-level data attributes, so this is a static field
    lookup.

    Args:
        type_: The class on which to look for the constant.
        const_name: Name of the constant.

    Returns:
        The value of the constant.
    """
    return get_static_field(type_, const_name)


def get_field(instance: Any, field_name: str, declaring_type: Optional[type] = None) -> Any:
    """Gets a private instance field.

    Args:
        instance: The object holding the field.
        field_name: Name of the field, e.g. ``"_count"`` or ``"__count"``.
        declaring_type: Class to start the lookup from instead of the runtime
            type. Needed to reach a ``__name`` field declared on a base class
            when a subclass declares the same name.

    Returns:
        The value of the field.

    Raises:
        InvalidArgumentError: If instance is None or field_name is empty.
        MemberNotFoundError: If no non-public instance field has that name.
    """
    start = _instance_target(instance, field_name, "field_name", declaring_type)
    resolved = _field_info(start, field_name, instance)
    if resolved.class_default:
        return resolved.member
    if resolved.member is None:
        return vars(instance)[resolved.attribute_name]
    try:
        return resolved.member.__get__(instance, start)
    except AttributeError as err:
        raise MemberNotFoundError(
            f"Field '{field_name}' has not been assigned a value",
            member_name=field_name,
            member_kind=MemberKind.FIELD.value,
        ) from err


def set_field(
    instance: Any,
    field_name: str,
    value: Any,
    declaring_type: Optional[type] = None,
) -> None:
    """Sets a private instance field.

    The value is written straight into the instance storage, so custom
    ``__setattr__`` hooks and frozen dataclasses do not get in the way.

    Args:
        instance: The object holding the field.
        field_name: Name of the field.
        value: The value to set it to.
        declaring_type: Class to start the lookup from instead of the runtime
            type. Use this to set a field declared on a parent class.

    Raises:
        InvalidArgumentError: If instance is None or field_name is empty.
        MemberNotFoundError: If no non-public instance field has that name.
    """
    start = _instance_target(instance, field_name, "field_name", declaring_type)
    resolved = _field_info(start, field_name, instance)
    if resolved.class_default or resolved.member is None:
        vars(instance)[resolved.attribute_name] = value
    else:
        resolved.member.__set__(instance, value)


def get_property(
    instance: Any, property_name: str, declaring_type: Optional[type] = None
) -> Any:
    """Gets a property, public or private.

    Args:
        instance: The object exposing the property.
        property_name: Name of the property.
        declaring_type: Class to start the lookup from instead of the runtime
            type, e.g. to read a base-class property a subclass overrides.

    Returns:
        The value returned by the property getter.

    Raises:
        InvalidArgumentError: If instance is None or property_name is empty.
        MemberNotFoundError: If no property has that name.
    """
    start = _instance_target(instance, property_name, "property_name", declaring_type)
    resolved = _property_info(start, property_name)
    return resolved.member.__get__(instance, start)


def set_property(
    instance: Any,
    property_name: str,
    value: Any,
    declaring_type: Optional[type] = None,
) -> None:
    """Sets a property, public or private.

    Raises:
        InvalidArgumentError: If instance is None or property_name is empty.
        MemberNotFoundError: If the property does not exist or has no setter.
            The message names the property and the value being assigned.
    """
    start = _instance_target(instance, property_name, "property_name", declaring_type)
    try:
        resolved = _property_info(start, property_name)
        member = resolved.member
        if isinstance(member, property) and member.fset is None:
            raise MemberNotFoundError(
                f"Property '{property_name}' has no setter",
                member_name=property_name,
                member_kind=MemberKind.PROPERTY.value,
            )
    except MemberNotFoundError as err:
        logger.debug("Unable to set property %r: %s", property_name, err)
        raise MemberNotFoundError(
            f"Property {property_name} not found, unable to set it to value {value}",
            member_name=property_name,
            member_kind=MemberKind.PROPERTY.value,
        ) from err

    if isinstance(member, property):
        member.__set__(instance, value)
    else:
        # cached_property keeps its value in the instance dict
        vars(instance)[member.attrname] = value


def get_static_field(type_: type, field_name: str) -> Any:
    """Gets a private class-level field.

    Args:
        type_: The class on which to look for the field.
        field_name: Name of the field.

    Returns:
        The value of the field.

    Raises:
        InvalidArgumentError: If type_ is not a class or field_name is empty.
        MemberNotFoundError: If no non-public static field has that name.
    """
    start = _static_target(type_, field_name, "field_name")
    return _static_field_info(start, field_name).member


def set_static_field(type_: type, field_name: str, value: Any) -> None:
    """Sets a private class-level field on the class that declares it.

    Raises:
        InvalidArgumentError: If type_ is not a class or field_name is empty.
        MemberNotFoundError: If no non-public static field has that name. The
            message names the field and the value being assigned.
    """
    start = _static_target(type_, field_name, "field_name")
    try:
        resolved = _static_field_info(start, field_name)
    except MemberNotFoundError as err:
        logger.debug("Unable to set static field %r: %s", field_name, err)
        raise MemberNotFoundError(
            f"Field {field_name} not found, unable to set it to value {value}",
            member_name=field_name,
            member_kind=MemberKind.FIELD.value,
        ) from err
    setattr(resolved.owner, resolved.attribute_name, value)


def invoke_method(instance: Any, name: str, *arguments: Any) -> None:
    """Invokes a private instance method, discarding its return value.

    Raises:
        InvalidArgumentError: If instance is None or name is empty.
        UnsupportedMemberError: If no non-public instance method has that name.
    """
    start = _instance_target(instance, name, "name")
    _call(_method_info(start, name, MemberScope.INSTANCE), start, instance, arguments)


def invoke_function(instance: Any, name: str, result_type: Type[T], *arguments: Any) -> Optional[T]:
    """Invokes a private instance method and checks the type of its result.

    Args:
        instance: The object whose method is invoked.
        name: Name of the method.
        result_type: Expected class of the result. Tuples, unions and
            parameterised generics such as ``list[int]`` are accepted; a
            ``None`` result always passes.
        *arguments: Positional arguments handed to the method.

    Returns:
        The method's return value.

    Raises:
        InvalidArgumentError: If instance is None, name is empty or
            result_type is missing or not a type.
        UnsupportedMemberError: If no non-public instance method has that name.
        CastMismatchError: If the result is not a ``result_type``.
    """
    start = _instance_target(instance, name, "name")
    _check_result_type(result_type)
    result = _call(_method_info(start, name, MemberScope.INSTANCE), start, instance, arguments)
    return _cast(name, result, result_type)


def invoke_static_method(type_: type, name: str, *arguments: Any) -> None:
    """Invokes a private static or class method, discarding its return value.

    Raises:
        InvalidArgumentError: If type_ is not a class or name is empty.
        UnsupportedMemberError: If no non-public static method has that name.
    """
    start = _static_target(type_, name, "name")
    _call(_method_info(start, name, MemberScope.STATIC), start, None, arguments)


def invoke_static_function(type_: type, name: str, result_type: Type[T], *arguments: Any) -> Optional[T]:
    """Invokes a private static or class method and checks its result type.

    Raises:
        InvalidArgumentError: If type_ is not a class, name is empty or
            result_type is missing or not a type.
        UnsupportedMemberError: If no non-public static method has that name.
        CastMismatchError: If the result is not a ``result_type``.
    """
    start = _static_target(type_, name, "name")
    _check_result_type(result_type)
    result = _call(_method_info(start, name, MemberScope.STATIC), start, None, arguments)
    return _cast(name, result, result_type)


def construct(
    type_: Type[T],
    argument_types: Sequence[type] = (),
    arguments: Sequence[Any] = (),
) -> Optional[T]:
    """Creates an instance through a constructor matching ``argument_types``.

    Args:
        type_: The class to instantiate.
        argument_types: Declared classes of the arguments, used to match the
            constructor signature.
        arguments: The argument values, one per entry in argument_types.

    Returns:
        The new instance, or None when no constructor accepts the argument
        types. Callers must check for None.

    Raises:
        InvalidArgumentError: If type_ is not a class, the two sequences
            differ in length, or an argument is not an instance of its
            declared type.
    """
    guard.against_non_type(type_, "type_")
    argument_types = tuple(argument_types)
    arguments = tuple(arguments)
    guard.against(
        len(argument_types) != len(arguments),
        InvalidArgumentError,
        "argument_types and arguments must have the same length",
    )
    for index, (argument_type, argument) in enumerate(zip(argument_types, arguments)):
        guard.against(
            not isinstance(argument_type, type),
            InvalidArgumentError,
            f"argument_types[{index}] must be a class",
        )
        guard.against(
            argument is not None and not isinstance(argument, argument_type),
            InvalidArgumentError,
            f"arguments[{index}] is not an instance of {argument_type.__name__}",
        )

    if resolve_constructor(type_, argument_types) is None:
        logger.debug(
            "No constructor of %s accepts (%s)",
            type_.__qualname__,
            ", ".join(argument_type.__name__ for argument_type in argument_types),
        )
        return None
    created = type_(*arguments)
    return created if isinstance(created, type_) else None


__all__ = [
    "get_constant",
    "get_field",
    "set_field",
    "get_property",
    "set_property",
    "get_static_field",
    "set_static_field",
    "invoke_method",
    "invoke_function",
    "invoke_static_method",
    "invoke_static_function",
    "construct",
]
