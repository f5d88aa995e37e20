"""Member resolution over a class's MRO.

Python has no access modifiers, so "non-public" follows the naming convention:
a member is non-public when its name starts with an underscore and is not a
dunder. Names written as ``__name`` are mangled against every class visited
during the walk (``__count`` looked up on ``Base`` becomes ``_Base__count``),
which makes private names of base classes reachable.

A lookup walks the MRO of the starting class, most-derived first, and the
first class whose ``__dict__`` holds the (mangled) name decides the outcome:
the attribute is returned if its kind and scope match the descriptor, and the
lookup fails otherwise. Nothing is cached.

Instance fields live in the instance ``__dict__`` or in ``__slots__``. A class
level value annotated in the class body (``_count: int = 0``) is the default of
an instance field until the instance assigns its own; unannotated and
``ClassVar`` values are static fields.

An instance method is any callable class attribute that binds through
``__get__`` (plain functions, ``functools.lru_cache`` wrappers and similar
decorator objects), plus ``partialmethod`` and ``singledispatchmethod``.

Limitations:

- There is no overload resolution. A class holds one attribute per name, so
  the most-derived definition always wins and argument types are never used
  to choose between candidates. ``functools.singledispatchmethod`` members
  receive the arguments unchanged and dispatch on their own.
- A plain function stored as a class attribute (``_callback = lambda: 1``)
  binds like a method, so it is neither a static field nor a static method.
  Only the instance method operations reach it, and they pass the instance
  as its first argument.
"""

from __future__ import annotations

import functools
import inspect
import logging
import types
import typing
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

logger = logging.getLogger(__name__)

_METHOD_TYPES = (
    types.FunctionType,
    functools.partialmethod,
    functools.singledispatchmethod,
)
_STATIC_METHOD_TYPES = (staticmethod, classmethod)
_PROPERTY_TYPES = (property, functools.cached_property)


class MemberKind(str, Enum):
    """Kinds of members the accessor can resolve."""

    FIELD = "field"
    PROPERTY = "property"
    METHOD = "method"
    CONSTRUCTOR = "constructor"


class MemberScope(str, Enum):
    """Whether a member belongs to an instance or to the class itself."""

    INSTANCE = "instance"
    STATIC = "static"


@dataclass(frozen=True)
class MemberDescriptor:
    """What to look for: kind, exact name, scope and visibility.

    Attributes:
        kind: The member kind.
        name: Case-sensitive member name as the caller wrote it.
        scope: Instance or static.
        include_public: Whether public names are acceptable. Only property
            lookups set this.
    """

    kind: MemberKind
    name: str
    scope: MemberScope
    include_public: bool = False


@dataclass(frozen=True)
class ResolvedMember:
    """Outcome of a successful lookup.

    Attributes:
        descriptor: The descriptor that was resolved.
        owner: Class on which the member was found.
        attribute_name: The (possibly mangled) attribute name actually used.
        member: The raw class attribute (function, property, slot descriptor,
            static value) or, for constructors, the call signature. ``None``
            for instance fields stored in the instance ``__dict__``.
        class_default: True when ``member`` is the class-level default of an
            instance field the instance has not assigned yet.
    """

    descriptor: MemberDescriptor
    owner: type
    attribute_name: str
    member: Any = None
    class_default: bool = False


def is_non_public(name: str) -> bool:
    """Return True if ``name`` follows the private naming convention."""
    if not name.startswith("_"):
        return False
    return not (name.startswith("__") and name.endswith("__"))


def mangle(name: str, owner: type) -> str:
    """Apply Python's private name mangling for ``owner``.

    Mirrors what the compiler does for ``__name`` inside a class body:
    leading underscores are stripped from the class name, and a class named
    only with underscores does not mangle.
    """
    if not name.startswith("__") or name.endswith("__"):
        return name
    class_name = owner.__name__.lstrip("_")
    if not class_name:
        return name
    return f"_{class_name}{name}"


def lineage(start: type) -> List[type]:
    """Classes searched for ``start``, most-derived first, without ``object``."""
    return [klass for klass in inspect.getmro(start) if klass is not object]


def is_descriptor(value: Any) -> bool:
    """Return True if ``value`` takes part in the descriptor protocol."""
    return hasattr(type(value), "__get__")


def is_instance_method(attribute: Any) -> bool:
    """Return True if a class attribute binds to instances as a method."""
    if isinstance(attribute, _METHOD_TYPES):
        return True
    if isinstance(attribute, (type,) + _STATIC_METHOD_TYPES + _PROPERTY_TYPES):
        return False
    return callable(attribute) and is_descriptor(attribute)


def _is_classvar(annotation: Any) -> bool:
    if isinstance(annotation, str):
        # postponed annotations are not evaluated here
        return annotation.split("[", 1)[0].strip() in ("ClassVar", "typing.ClassVar")
    return annotation is typing.ClassVar or typing.get_origin(annotation) is typing.ClassVar


def declares_instance_field(klass: type, attribute_name: str) -> bool:
    """Return True if ``klass`` annotates ``attribute_name`` as an instance attribute."""
    annotations = inspect.get_annotations(klass)
    if attribute_name not in annotations:
        return False
    return not _is_classvar(annotations[attribute_name])


def _matches_kind(
    descriptor: MemberDescriptor, klass: type, attribute_name: str, attribute: Any
) -> bool:
    if descriptor.kind is MemberKind.PROPERTY:
        return isinstance(attribute, _PROPERTY_TYPES)
    if descriptor.kind is MemberKind.METHOD:
        if descriptor.scope is MemberScope.STATIC:
            return isinstance(attribute, _STATIC_METHOD_TYPES)
        return is_instance_method(attribute)
    if descriptor.kind is MemberKind.FIELD:
        if descriptor.scope is MemberScope.STATIC:
            return not is_descriptor(attribute) and not declares_instance_field(
                klass, attribute_name
            )
        return isinstance(attribute, types.MemberDescriptorType)
    return False


def _resolved(
    descriptor: MemberDescriptor,
    owner: type,
    attribute_name: str,
    member: Any,
    class_default: bool = False,
) -> ResolvedMember:
    logger.debug(
        "Resolved %s %s %r on %s as %r",
        descriptor.scope.value,
        descriptor.kind.value,
        descriptor.name,
        owner.__qualname__,
        attribute_name,
    )
    return ResolvedMember(
        descriptor=descriptor,
        owner=owner,
        attribute_name=attribute_name,
        member=member,
        class_default=class_default,
    )


def resolve_member(
    start: type,
    descriptor: MemberDescriptor,
    instance: Any = None,
) -> Optional[ResolvedMember]:
    """Look up a field, property or method described by ``descriptor``.

    Args:
        start: Class at which the MRO walk begins.
        descriptor: Kind, name, scope and visibility to match.
        instance: Required for instance fields, whose values live on the
            instance rather than on the class.

    Returns:
        The resolved member, or None when nothing matches.

    Raises:
        ValueError: If the descriptor asks for a constructor; use
            resolve_constructor for those.
    """
    if descriptor.kind is MemberKind.CONSTRUCTOR:
        raise ValueError("Constructors are resolved with resolve_constructor")

    if not descriptor.include_public and not is_non_public(descriptor.name):
        logger.debug(
            "Skipping %s lookup for public name %r", descriptor.kind.value, descriptor.name
        )
        return None

    instance_fields = False
    instance_dict: Optional[Dict[str, Any]] = None
    if descriptor.kind is MemberKind.FIELD and descriptor.scope is MemberScope.INSTANCE:
        instance_fields = True
        instance_dict = getattr(instance, "__dict__", None)

    for klass in lineage(start):
        attribute_name = mangle(descriptor.name, klass)
        if instance_fields and instance_dict and attribute_name in instance_dict:
            return _resolved(descriptor, klass, attribute_name, None)
        if attribute_name not in klass.__dict__:
            continue
        attribute = klass.__dict__[attribute_name]
        if _matches_kind(descriptor, klass, attribute_name, attribute):
            return _resolved(descriptor, klass, attribute_name, attribute)
        if (
            instance_fields
            and instance_dict is not None
            and not is_descriptor(attribute)
            and declares_instance_field(klass, attribute_name)
        ):
            return _resolved(
                descriptor, klass, attribute_name, attribute, class_default=True
            )
        logger.debug(
            "%r on %s is a %s, not a %s %s",
            attribute_name,
            klass.__qualname__,
            type(attribute).__name__,
            descriptor.scope.value,
            descriptor.kind.value,
        )
        return None
    return None


def _annotation_hints(cls: type) -> Dict[str, Any]:
    for factory in ("__init__", "__new__"):
        target = cls.__dict__.get(factory)
        if target is None:
            target = getattr(cls, factory, None)
        if isinstance(target, staticmethod):
            target = target.__func__
        try:
            hints = typing.get_type_hints(target)
        except (NameError, TypeError, AttributeError):
            continue
        if hints:
            return hints
    return {}


def is_type_form(value: Any) -> bool:
    """Return True if ``value`` can describe the type of a result.

    Classes, ``Any``, unions, parameterised generics and non-empty tuples of
    those qualify. Strings, TypeVars and plain values do not.
    """
    if value is Any or isinstance(value, type):
        return True
    if isinstance(value, tuple):
        return bool(value) and all(is_type_form(option) for option in value)
    return typing.get_origin(value) is not None


def accepts_type(annotation: Any, candidate: type) -> bool:
    """Return True if a value of class ``candidate`` satisfies ``annotation``.

    Unions accept any of their members, parameterised generics are checked
    against their origin class, and anything that is not a class (strings,
    TypeVars, ``Any``) accepts everything.
    """
    if annotation is inspect.Parameter.empty or annotation is Any:
        return True
    if annotation is None:
        annotation = type(None)
    if isinstance(annotation, tuple):
        return any(accepts_type(option, candidate) for option in annotation)
    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        return any(accepts_type(option, candidate) for option in typing.get_args(annotation))
    if origin is not None:
        annotation = origin
    if isinstance(annotation, type):
        return isinstance(candidate, type) and issubclass(candidate, annotation)
    return True


def resolve_constructor(
    cls: type, argument_types: Sequence[type]
) -> Optional[ResolvedMember]:
    """Find a constructor of ``cls`` that accepts ``argument_types``.

    Python classes have a single call signature. It matches when the
    argument types bind to its parameters positionally and each type is
    accepted by the parameter's annotation. Classes whose signature cannot be
    introspected (some builtins) only match an empty argument list.

    Returns:
        The resolved constructor with its signature, or None.
    """
    descriptor = MemberDescriptor(
        kind=MemberKind.CONSTRUCTOR,
        name="__init__",
        scope=MemberScope.STATIC,
        include_public=True,
    )
    try:
        signature = inspect.signature(cls)
    except (TypeError, ValueError):
        if argument_types:
            return None
        return _resolved(descriptor, cls, "__init__", None)

    try:
        bound = signature.bind(*argument_types)
    except TypeError:
        logger.debug("Signature %s of %s does not bind %d arguments", signature, cls.__qualname__, len(argument_types))
        return None

    hints = _annotation_hints(cls)
    for parameter_name, bound_type in bound.arguments.items():
        parameter = signature.parameters[parameter_name]
        annotation = hints.get(parameter_name, parameter.annotation)
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            candidates = tuple(bound_type)
        else:
            candidates = (bound_type,)
        for candidate in candidates:
            if not accepts_type(annotation, candidate):
                logger.debug(
                    "Parameter %r of %s does not accept %s",
                    parameter_name,
                    cls.__qualname__,
                    getattr(candidate, "__name__", candidate),
                )
                return None
    return _resolved(descriptor, cls, "__init__", signature)


__all__ = [
    "MemberKind",
    "MemberScope",
    "MemberDescriptor",
    "ResolvedMember",
    "accepts_type",
    "is_descriptor",
    "is_non_public",
    "lineage",
    "mangle",
    "resolve_constructor",
    "resolve_member",
]
