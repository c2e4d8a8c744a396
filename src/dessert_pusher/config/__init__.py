"""Configuration models — catalog and host settings."""

from dessert_pusher.config.dessert import Dessert
from dessert_pusher.config.catalog import (
    DEFAULT_DESSERTS,
    DessertCatalog,
    default_catalog,
    load_catalog,
)
from dessert_pusher.config.settings import AppSettings, load_settings

__all__ = [
    "Dessert",
    "DessertCatalog",
    "DEFAULT_DESSERTS",
    "default_catalog",
    "load_catalog",
    "AppSettings",
    "load_settings",
]
