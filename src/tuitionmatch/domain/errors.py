class MatchingInputError(ValueError):
    """Raised when the engine receives structurally invalid input."""


class CatalogUnavailableError(RuntimeError):
    """Raised when the card catalog snapshot cannot be read."""
