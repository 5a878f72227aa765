"""Errors raised while wiring the application together."""


class UtilError(Exception):
    """Base for errors outside the domain, such as startup and DI wiring."""

    pass


class ConfigurationError(UtilError):
    """A setting needed to build a component is missing or unusable.

    ``setting`` is the dotted settings path, which is also the environment
    variable name with ``__`` in place of the dots.
    """

    def __init__(self, setting: str, message: str):
        self.setting = setting
        super().__init__(f"{setting}: {message}")

    @property
    def env_var(self) -> str:
        return self.setting.replace(".", "__").upper()
