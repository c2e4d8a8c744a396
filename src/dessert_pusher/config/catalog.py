"""Dessert catalog — the fixed, ordered list of production tiers.

The catalog is sorted by ``start_production_amount`` and its first entry
starts at 0, so there is always a dessert to show.  Both properties are
checked once, when the catalog is built; the tier selector relies on them
and never re-checks.

YAML layout::

    desserts:
      - name: cupcake
        image: cupcake.png
        price: 5
        start_production_amount: 0
      - ...
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterator

import numpy as np
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from dessert_pusher.config.dessert import Dessert
from dessert_pusher.exceptions import CatalogLoadError


class DessertCatalog(BaseModel):
    """Immutable, threshold-ordered sequence of desserts."""

    model_config = ConfigDict(frozen=True)

    desserts: tuple[Dessert, ...] = Field(description="Desserts in order of start_production_amount")

    @model_validator(mode="after")
    def _check_order(self) -> DessertCatalog:
        if not self.desserts:
            raise ValueError("catalog must contain at least one dessert")
        if self.desserts[0].start_production_amount != 0:
            raise ValueError(
                f"first dessert {self.desserts[0].name!r} must start production at 0, "
                f"got {self.desserts[0].start_production_amount}"
            )
        for prev, cur in zip(self.desserts, self.desserts[1:]):
            if cur.start_production_amount < prev.start_production_amount:
                raise ValueError(
                    f"desserts out of order: {cur.name!r} ({cur.start_production_amount}) "
                    f"follows {prev.name!r} ({prev.start_production_amount})"
                )
        return self

    def __len__(self) -> int:
        return len(self.desserts)

    def __iter__(self) -> Iterator[Dessert]:  # type: ignore[override]
        return iter(self.desserts)

    def __getitem__(self, index: int) -> Dessert:
        return self.desserts[index]

    @property
    def first(self) -> Dessert:
        return self.desserts[0]

    @property
    def thresholds(self) -> np.ndarray:
        """``start_production_amount`` of every dessert, as an int64 array."""
        return np.array([d.start_production_amount for d in self.desserts], dtype=np.int64)

    @property
    def prices(self) -> np.ndarray:
        return np.array([d.price for d in self.desserts], dtype=np.int64)

    def index_of(self, dessert: Dessert) -> int:
        """Position of *dessert* in the catalog (by identity, not equality)."""
        for i, candidate in enumerate(self.desserts):
            if candidate is dessert:
                return i
        raise ValueError(f"{dessert.name!r} is not an entry of this catalog")


# ═══════════════════════════════════════════════════════════════════════════
# Default catalog
# ═══════════════════════════════════════════════════════════════════════════

_DEFAULT_ROWS: list[tuple[str, int, int]] = [
    # name, price, start_production_amount
    ("cupcake", 5, 0),
    ("donut", 10, 2),
    ("eclair", 15, 5),
    ("froyo", 30, 20),
    ("gingerbread", 50, 30),
    ("honeycomb", 100, 40),
    ("icecreamsandwich", 500, 50),
    ("jellybean", 1000, 60),
    ("kitkat", 2000, 70),
    ("lollipop", 3000, 80),
    ("marshmallow", 4000, 90),
    ("nougat", 5000, 100),
    ("oreo", 6000, 200),
]

DEFAULT_DESSERTS: tuple[Dessert, ...] = tuple(
    Dessert(name=name, image=f"{name}.png", price=price, start_production_amount=start)
    for name, price, start in _DEFAULT_ROWS
)
"""The thirteen Android desserts, cheapest first."""


def default_catalog() -> DessertCatalog:
    """Catalog built from :data:`DEFAULT_DESSERTS`."""
    return DessertCatalog(desserts=DEFAULT_DESSERTS)


# ═══════════════════════════════════════════════════════════════════════════
# YAML loading
# ═══════════════════════════════════════════════════════════════════════════

def read_yaml(path: str | Path) -> dict[str, Any]:
    """Read a YAML mapping, wrapping I/O and parse failures in ``CatalogLoadError``."""
    path = Path(path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise CatalogLoadError(path, str(exc)) from exc
    except yaml.YAMLError as exc:
        raise CatalogLoadError(path, f"invalid YAML: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise CatalogLoadError(path, f"expected a mapping at top level, got {type(data).__name__}")
    return data


def load_catalog(path: str | Path) -> DessertCatalog:
    """Load a :class:`DessertCatalog` from a YAML file."""
    data = read_yaml(path)
    try:
        return DessertCatalog(**data)
    except ValidationError as exc:
        raise CatalogLoadError(path, str(exc)) from exc
