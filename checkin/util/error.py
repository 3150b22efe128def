"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class DependencyInjectionError(UtilError, ValueError):
    """Container assembly error (unknown component, missing implementation)."""

    pass
