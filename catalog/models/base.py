"""Base class for catalog table models."""

from typing import ClassVar

from sqlmodel import SQLModel

from catalog.settings import app_settings


class CatalogModel(SQLModel):
    """
    Base for all catalog entities.

    Derived values (display names, URLs, formatted dates) are read-only
    properties computed from the stored columns on every access; they are
    never persisted.

    Attributes:
        URL_SEGMENT: Path segment of the entity's canonical reference path.
    """

    URL_SEGMENT: ClassVar[str] = ""

    @property
    def url(self) -> str:
        """Canonical reference path, e.g. "/catalog/author/1"."""
        return f"{app_settings.CATALOG_URL_PREFIX}/{self.URL_SEGMENT}/{self.id}"  # type: ignore[attr-defined]
