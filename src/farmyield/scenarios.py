from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Iterable

import pandas as pd

from farmyield.crops import CropEntry
from farmyield.factors import check_combine
from farmyield.farm import (
    compute_total_cost,
    compute_total_profit,
    compute_total_revenue,
    compute_total_yield,
)

logger = logging.getLogger(__name__)

TOTAL_COLUMNS = ["total_yield", "total_cost", "total_revenue", "total_profit"]


@dataclass(frozen=True)
class ScenarioConfig:
    # None sweeps every factor declared by any crop in the collection
    factor_names: tuple[str, ...] | None = None
    combine: str = "compound"


def declared_factor_levels(collection: Iterable[CropEntry]) -> dict[str, list[str]]:
    """
    Factor name -> level names declared across crops.

    Factors are sorted by name. Levels keep the order in which they are first
    declared (e.g. low, medium, high).
    """
    levels: dict[str, list[str]] = {}
    for entry in collection:
        for factor, table in entry.crop.factors.items():
            seen = levels.setdefault(factor, [])
            seen.extend(level for level in table if level not in seen)
    return {f: levels[f] for f in sorted(levels)}


def enumerate_environments(
    collection: Iterable[CropEntry],
    cfg: ScenarioConfig = ScenarioConfig(),
) -> list[dict[str, str]]:
    """
    Every combination of declared levels over the selected factors.

    Factors are taken in sorted order; the last factor varies fastest.
    A collection that declares no factors gives a single empty environment.
    """
    declared = declared_factor_levels(collection)

    if cfg.factor_names is None:
        names = list(declared)
    else:
        unknown = sorted(set(cfg.factor_names) - set(declared))
        if unknown:
            raise ValueError(f"Unknown factors {unknown}. Declared factors: {list(declared)}")
        names = sorted(set(cfg.factor_names))

    return [dict(zip(names, combo)) for combo in itertools.product(*(declared[n] for n in names))]


def profit_by_environment(
    collection: Iterable[CropEntry],
    cfg: ScenarioConfig = ScenarioConfig(),
) -> pd.DataFrame:
    """
    Totals for each environment produced by enumerate_environments.

    Returns one row per environment with a column per swept factor followed
    by total_yield, total_cost, total_revenue and total_profit.
    """
    check_combine(cfg.combine)

    entries = list(collection)
    envs = enumerate_environments(entries, cfg)
    logger.debug("sweeping %d environments over %d entries", len(envs), len(entries))

    rows = []
    for env in envs:
        rows.append(
            {
                **env,
                "total_yield": compute_total_yield(entries, env, combine=cfg.combine),
                "total_cost": compute_total_cost(entries),
                "total_revenue": compute_total_revenue(entries, env, combine=cfg.combine),
                "total_profit": compute_total_profit(entries, env, combine=cfg.combine),
            }
        )

    factor_cols = sorted(envs[0]) if envs else []
    return pd.DataFrame(rows, columns=factor_cols + TOTAL_COLUMNS)
