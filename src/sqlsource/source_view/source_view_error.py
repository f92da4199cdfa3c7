class SourceViewError(Exception):
    """Base exception for source view errors."""


class SourceViewSettingsError(SourceViewError):
    """Raised when source view settings cannot be loaded or saved."""


class SourceViewObjectTypeError(SourceViewError):
    """Raised when an object type name is not recognised."""
