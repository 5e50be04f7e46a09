"""Exception hierarchy for rae-lexicon."""


class RaeLexError(Exception):
    """Base exception for all rae-lexicon errors."""


class SerializationError(RaeLexError):
    """An assembled record could not be serialized."""


class UpstreamError(RaeLexError):
    """The dictionary service failed or answered with a non-200 status."""


class ConfigError(RaeLexError, ValueError):
    """Invalid configuration file or value."""
