"""Domain layer: catalog records, store contract and lookup/format services."""

from .models import Album, FormattedPhoto, Photo, normalize_id
from .repositories import ICatalogStore

__all__ = ["Album", "FormattedPhoto", "ICatalogStore", "Photo", "normalize_id"]
