class GaussflowError(Exception):
    """Base class for exceptions in the gaussflow package."""

    pass


class ValidationError(GaussflowError):
    """Exception raised for invalid values handed to public constructors."""

    pass


class ConfigurationError(GaussflowError):
    """Exception raised for configuration-related errors."""

    pass


class ParsingError(GaussflowError):
    """Exception raised when an output file cannot be read for parsing."""

    pass
