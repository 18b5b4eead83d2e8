from __future__ import annotations

from typing import Iterable

import pandas as pd

from farmyield.crops import CropEntry, EnvironmentFactors
from farmyield.farm import (
    compute_crop_cost,
    compute_crop_profit,
    compute_crop_revenue,
    compute_crop_yield,
    resolve_plant_yield,
)

BREAKDOWN_COLUMNS = ["crop", "num_crops", "plant_yield", "yield", "cost", "revenue", "profit"]


def crop_breakdown(
    collection: Iterable[CropEntry],
    environment_factors: EnvironmentFactors | None = None,
    *,
    combine: str = "compound",
) -> pd.DataFrame:
    """
    One row per planting entry, in input order.

    Returns schema:
      - crop (str)
      - num_crops (int)
      - plant_yield (float): adjusted yield of one plant
      - yield, cost, revenue, profit (float): NaN where a price is missing
    """
    rows = []
    for entry in collection:
        rows.append(
            {
                "crop": entry.crop.name,
                "num_crops": entry.num_crops,
                "plant_yield": float(resolve_plant_yield(entry.crop, environment_factors, combine=combine)),
                "yield": float(compute_crop_yield(entry, environment_factors, combine=combine)),
                "cost": compute_crop_cost(entry),
                "revenue": compute_crop_revenue(entry, environment_factors, combine=combine),
                "profit": compute_crop_profit(entry, environment_factors, combine=combine),
            }
        )

    return pd.DataFrame(rows, columns=BREAKDOWN_COLUMNS)
