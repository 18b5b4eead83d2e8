from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

import numpy as np

# factor name -> level name -> signed percentage (50 means +50%)
FactorTable = Mapping[str, Mapping[str, float]]

# factor name -> active level name
EnvironmentFactors = Mapping[str, str]


@dataclass(frozen=True)
class Crop:
    """
    Static description of a crop.

    price and sale_price are optional. A missing value is kept as None and
    turns every figure that depends on it into NaN.
    """

    name: str
    yield_per_plant: float
    price: float | None = None
    sale_price: float | None = None
    factors: FactorTable = field(default_factory=dict)

    def __post_init__(self) -> None:
        # detached from the caller's tables
        object.__setattr__(self, "factors", {f: dict(levels) for f, levels in self.factors.items()})


@dataclass(frozen=True)
class CropEntry:
    crop: Crop
    num_crops: int

    def __post_init__(self) -> None:
        if self.num_crops < 0:
            raise ValueError(f"num_crops must be >= 0 (got {self.num_crops} for {self.crop.name!r})")


def as_number(value: float | None) -> float:
    """Return value as float, NaN when it is missing."""
    if value is None:
        return np.nan
    return float(value)


def _parse_factors(name: str, raw: Mapping[str, Mapping[str, Any]] | None) -> dict[str, dict[str, float]]:
    if not raw:
        return {}

    factors: dict[str, dict[str, float]] = {}
    for factor, levels in raw.items():
        if not isinstance(levels, Mapping):
            raise ValueError(f"{name}: factor {factor!r} must map level names to percentages")
        parsed: dict[str, float] = {}
        for level, pct in levels.items():
            try:
                parsed[str(level)] = float(pct)
            except (TypeError, ValueError):
                raise ValueError(f"{name}: {factor}.{level} is not a number: {pct!r}") from None
        factors[str(factor)] = parsed
    return factors


def crop_from_record(record: Mapping[str, Any]) -> Crop:
    """
    Build a Crop from a plain mapping.

    Expected keys:
      - name
      - yield (missing -> NaN)
      - price, salePrice (optional)
      - factors (optional): {factor: {level: pct}}
    """
    name = str(record.get("name", ""))
    price = record.get("price")
    sale_price = record.get("salePrice")

    return Crop(
        name=name,
        yield_per_plant=as_number(record.get("yield")),
        price=None if price is None else float(price),
        sale_price=None if sale_price is None else float(sale_price),
        factors=_parse_factors(name, record.get("factors")),
    )


def _parse_num_crops(name: str, raw: Any) -> int:
    if raw is None:
        raise ValueError(f"{name}: numCrops is missing")
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ValueError(f"{name}: numCrops is not a number: {raw!r}") from None
    if not value.is_integer():
        raise ValueError(f"{name}: numCrops must be a whole number (got {raw!r})")
    return int(value)


def entry_from_record(record: Mapping[str, Any]) -> CropEntry:
    """Build a CropEntry from {"crop": <record or Crop>, "numCrops": n}."""
    crop = record["crop"]
    if not isinstance(crop, Crop):
        crop = crop_from_record(crop)
    return CropEntry(crop=crop, num_crops=_parse_num_crops(crop.name, record.get("numCrops")))


def collection_from_records(records: Iterable[Mapping[str, Any]]) -> list[CropEntry]:
    return [entry_from_record(r) for r in records]
