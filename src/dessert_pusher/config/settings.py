"""Application settings for the dashboard host."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, ValidationError

from dessert_pusher.config.catalog import DessertCatalog, default_catalog, load_catalog, read_yaml
from dessert_pusher.exceptions import CatalogLoadError


class AppSettings(BaseModel):
    """Host-level settings.  Every field has a working default."""

    catalog_path: Path | None = Field(
        default=None,
        description="YAML catalog to load. None = built-in thirteen-dessert catalog.",
    )
    images_dir: Path | None = Field(
        default=None,
        description="Directory holding dessert pictures named after Dessert.image. "
                    "None = show dessert names instead of pictures.",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Root log level for the host process",
    )
    share_template: str = Field(
        default="I've clicked {desserts_sold} Desserts for a total of {revenue}$ "
                "#AndroidDessertPusher",
        description="str.format template; receives desserts_sold and revenue",
    )
    sharing_not_available: str = Field(
        default="Sharing Not Available",
        description="Notice shown when no share handler accepts the text",
    )

    def load_catalog(self) -> DessertCatalog:
        if self.catalog_path is None:
            return default_catalog()
        return load_catalog(self.catalog_path)


def load_settings(path: str | Path) -> AppSettings:
    """Load :class:`AppSettings` from YAML.

    Relative ``catalog_path`` / ``images_dir`` entries are resolved against
    the settings file's directory.
    """
    path = Path(path)
    data = read_yaml(path)
    for key in ("catalog_path", "images_dir"):
        if data.get(key) is not None:
            data[key] = path.parent / data[key]
    try:
        return AppSettings(**data)
    except ValidationError as exc:
        raise CatalogLoadError(path, str(exc)) from exc
