from __future__ import annotations

import logging

from farmyield.crops import EnvironmentFactors, FactorTable

logger = logging.getLogger(__name__)

COMBINE_RULES = ("compound", "additive")


def check_combine(combine: str) -> None:
    if combine not in COMBINE_RULES:
        raise ValueError(f"combine must be one of {COMBINE_RULES} (got {combine!r})")


def matching_percentages(
    factors: FactorTable,
    environment_factors: EnvironmentFactors | None,
) -> list[float]:
    """
    Percentages that apply under the active environment.

    A factor contributes only when the environment sets it and the crop
    declares a percentage for the active level. Order follows the
    environment mapping.
    """
    if not environment_factors or not factors:
        return []

    pcts: list[float] = []
    for factor, level in environment_factors.items():
        levels = factors.get(factor)
        if levels is None:
            logger.debug("factor %r not declared by crop, skipped", factor)
            continue
        if level not in levels:
            logger.debug("level %r not declared for factor %r, skipped", level, factor)
            continue
        pcts.append(float(levels[level]))
    return pcts


def yield_multiplier(pcts: list[float], *, combine: str = "compound") -> float:
    """
    Combine percentage adjustments into one multiplier on base yield.

    compound:
        m = prod(1 + p/100)
    additive:
        m = 1 + sum(p)/100
    """
    check_combine(combine)
    if combine == "additive":
        return 1.0 + sum(pcts) / 100.0

    m = 1.0
    for p in pcts:
        m *= 1.0 + p / 100.0
    return m
