"""Custom exception hierarchy for photocat."""

from __future__ import annotations


class PhotoCatalogError(Exception):
    """Base class for all custom errors raised by photocat."""


# --- 2-layer hierarchy ---

class DomainError(PhotoCatalogError):
    """Base class for domain-level errors."""


class InfrastructureError(PhotoCatalogError):
    """Base class for infrastructure-level errors."""


# --- Domain errors ---

class DateFormatError(DomainError):
    """Raised when a stored photo date cannot be parsed."""


# --- Infrastructure errors ---

class CatalogIOError(InfrastructureError):
    """Raised when a catalog document cannot be read or written."""


class CatalogParseError(InfrastructureError):
    """Raised when a catalog document does not contain a JSON array."""


# --- Settings errors ---

class SettingsError(PhotoCatalogError):
    """Base class for settings related failures."""


class SettingsLoadError(SettingsError):
    """Raised when the settings file cannot be parsed or loaded."""


class SettingsValidationError(SettingsError):
    """Raised when settings data fails schema validation."""
