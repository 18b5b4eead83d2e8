from __future__ import annotations

from typing import Iterable

from farmyield.crops import Crop, CropEntry, EnvironmentFactors, as_number
from farmyield.factors import check_combine, matching_percentages, yield_multiplier


def resolve_plant_yield(
    crop: Crop,
    environment_factors: EnvironmentFactors | None = None,
    *,
    combine: str = "compound",
) -> float:
    """
    Yield of a single plant under the active environment.

    Parameters
    ----------
    crop : Crop
        Crop definition; crop.factors maps factor -> level -> percentage.
    environment_factors : mapping, optional
        Active level per factor, e.g. {"sun": "high", "wind": "low"}.
        Factors the crop does not declare are ignored.
    combine : {"compound", "additive"}
        How several matching percentages are combined (see
        farmyield.factors.yield_multiplier).

    Returns
    -------
    float
        Base yield scaled by the combined adjustment. Not rounded.
    """
    check_combine(combine)

    base = crop.yield_per_plant
    if not environment_factors or not crop.factors:
        return base

    pcts = matching_percentages(crop.factors, environment_factors)
    if not pcts:
        return base
    return base * yield_multiplier(pcts, combine=combine)


def compute_crop_yield(
    entry: CropEntry,
    environment_factors: EnvironmentFactors | None = None,
    *,
    combine: str = "compound",
) -> float:
    return resolve_plant_yield(entry.crop, environment_factors, combine=combine) * entry.num_crops


def compute_total_yield(
    collection: Iterable[CropEntry],
    environment_factors: EnvironmentFactors | None = None,
    *,
    combine: str = "compound",
) -> float:
    return sum((compute_crop_yield(e, environment_factors, combine=combine) for e in collection), 0.0)


def compute_crop_cost(entry: CropEntry) -> float:
    """Planting cost: price * num_crops. NaN when the crop has no price."""
    return as_number(entry.crop.price) * entry.num_crops


def compute_total_cost(collection: Iterable[CropEntry]) -> float:
    return sum((compute_crop_cost(e) for e in collection), 0.0)


def compute_crop_revenue(
    entry: CropEntry,
    environment_factors: EnvironmentFactors | None = None,
    *,
    combine: str = "compound",
) -> float:
    """Adjusted yield times sale price. NaN when the crop has no sale price."""
    crop_yield = compute_crop_yield(entry, environment_factors, combine=combine)
    return crop_yield * as_number(entry.crop.sale_price)


def compute_total_revenue(
    collection: Iterable[CropEntry],
    environment_factors: EnvironmentFactors | None = None,
    *,
    combine: str = "compound",
) -> float:
    return sum((compute_crop_revenue(e, environment_factors, combine=combine) for e in collection), 0.0)


def compute_crop_profit(
    entry: CropEntry,
    environment_factors: EnvironmentFactors | None = None,
    *,
    combine: str = "compound",
) -> float:
    """
    Revenue minus cost for one entry.

    Negative when cost exceeds revenue. NaN if either price is missing.
    """
    revenue = compute_crop_revenue(entry, environment_factors, combine=combine)
    return revenue - compute_crop_cost(entry)


def compute_total_profit(
    collection: Iterable[CropEntry],
    environment_factors: EnvironmentFactors | None = None,
    *,
    combine: str = "compound",
) -> float:
    return sum((compute_crop_profit(e, environment_factors, combine=combine) for e in collection), 0.0)
