"""Exceptions raised outside the generator core.

The classifier, extractor and renderer never raise for missing or unusual
shapes; only configuration discovery and document loading do.
"""


class SwaggerInterfaceError(Exception):
    """Base class for errors the CLI reports to the user."""


class ConfigError(SwaggerInterfaceError):
    """No usable project configuration was found."""


class DocumentError(SwaggerInterfaceError):
    """The Swagger document could not be fetched or is not a mapping of paths."""
