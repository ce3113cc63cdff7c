"""Exceptions raised while resolving REST alignment configuration."""


class ConfigurationError(ValueError):
    """A property value cannot be turned into a usable configuration.

    Raised at startup only. Callers treat it as terminal for initialization.
    """

    def __init__(self, message: str, *, property_name: str | None = None) -> None:
        super().__init__(message)
        self.property_name = property_name
