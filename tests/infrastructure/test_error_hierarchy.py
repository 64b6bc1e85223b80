"""Tests for the custom error hierarchy."""

import pytest
from photocat.errors import (
    PhotoCatalogError,
    DomainError,
    InfrastructureError,
    DateFormatError,
    CatalogIOError,
    CatalogParseError,
    SettingsError,
    SettingsLoadError,
    SettingsValidationError,
)


def test_domain_error_is_catalog_error():
    assert issubclass(DomainError, PhotoCatalogError)
    assert isinstance(DomainError("x"), PhotoCatalogError)


def test_infrastructure_error_is_catalog_error():
    assert issubclass(InfrastructureError, PhotoCatalogError)
    assert isinstance(InfrastructureError("x"), PhotoCatalogError)


@pytest.mark.parametrize("error_type", [DateFormatError])
def test_domain_errors(error_type):
    assert issubclass(error_type, DomainError)


@pytest.mark.parametrize("error_type", [CatalogIOError, CatalogParseError])
def test_infrastructure_errors(error_type):
    assert issubclass(error_type, InfrastructureError)


def test_settings_errors():
    assert issubclass(SettingsLoadError, SettingsError)
    assert issubclass(SettingsValidationError, SettingsError)
    assert not issubclass(SettingsError, InfrastructureError)


def test_error_message():
    err = DateFormatError("bad date for photo-42")
    assert str(err) == "bad date for photo-42"
