from .json_catalog_store import JsonCatalogStore

__all__ = ["JsonCatalogStore"]
