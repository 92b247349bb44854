from catalog.storage.db import CatalogStore, create_engine_from_settings

__all__ = ["CatalogStore", "create_engine_from_settings"]
