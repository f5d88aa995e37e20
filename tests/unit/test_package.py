"""
Tests for the top-level privy package.
"""

import logging

import yaml

import privy
from privy.core.config import get_config


class TestPublicApi:
    """Tests for the names exported by the package."""

    def test_exports_are_importable(self):
        """Verify that every name in __all__ exists."""
        for name in privy.__all__:
            assert hasattr(privy, name), name

    def test_version(self):
        """Verify that a version string is available."""
        assert isinstance(privy.__version__, str)

    def test_docstring_example(self):
        """Verify the example from the package documentation."""

        class Account:
            _fee = 2

            def __init__(self):
                self.__balance = 10

            def _withdraw(self, amount):
                self.__balance -= amount + self._fee
                return self.__balance

        account = Account()
        privy.set_field(account, "__balance", 100)

        assert privy.invoke_function(account, "_withdraw", int, 8) == 90
        assert privy.get_static_field(Account, "_fee") == 2
        privy.are_equal_with_tolerance(1.0, 1.0005, tolerance=0.001)


class TestInitializePrivy:
    """Tests for initialize_privy."""

    def test_loads_and_activates_config(self, tmp_path):
        """Verify that the loaded configuration becomes active."""
        logger = logging.getLogger("privy")
        handlers, level = list(logger.handlers), logger.level
        config_file = tmp_path / "privy.yaml"
        config_file.write_text(yaml.dump({"ensure": {"float_tolerance": 0.25}}))

        try:
            config = privy.initialize_privy(config_path=str(config_file), verbose_logging=True)

            assert get_config() is config
            assert config.ensure.float_tolerance == 0.25
            assert logger.level == logging.DEBUG
        finally:
            logger.handlers = handlers
            logger.setLevel(level)
