class DomainError(Exception):
    """Base exception for ingestion and derivation failures."""


class ValidationError(DomainError):
    """Raised when API input is invalid (empty roster, unknown export...)."""


class MalformedEntryError(DomainError):
    """Raised when a roster entry has no resolvable name or department."""


class IngestionError(DomainError):
    """Raised when workbook bytes cannot be acquired or decoded."""
