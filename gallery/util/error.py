"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Missing or invalid configuration.

    The only error allowed to abort process startup.
    """

    pass
