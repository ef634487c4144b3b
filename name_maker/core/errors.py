"""Exception hierarchy for name-maker."""


class NameMakerError(Exception):
    """Base class for all name-maker errors."""

    pass


class InitializationError(NameMakerError):
    """Raised when the name corpus cannot be loaded.

    A generator is never constructed around a corpus that failed to load.
    """

    pass


class SamplingError(NameMakerError):
    """Raised when a draw is attempted against an empty name pool."""

    pass


class ArgumentError(NameMakerError):
    """Raised by the CLI for malformed command-line input."""

    pass
