import pytest

from farmyield.crops import Crop, CropEntry
from farmyield.farm import compute_total_profit
from farmyield.scenarios import (
    ScenarioConfig,
    declared_factor_levels,
    enumerate_environments,
    profit_by_environment,
)

LMH = {"low": -50, "medium": 0, "high": 50}
WIND = {"low": 30, "medium": 0, "high": -15}


def _crops():
    corn = Crop(name="corn", yield_per_plant=3, price=2, sale_price=3, factors={"sun": LMH, "wind": WIND})
    pumpkin = Crop(
        name="pumpkin",
        yield_per_plant=4,
        price=3,
        sale_price=5,
        factors={"sun": LMH, "wind": WIND, "rain": LMH},
    )
    return [CropEntry(corn, 5), CropEntry(pumpkin, 2)]


def test_declared_factor_levels_keeps_declaration_order():
    levels = declared_factor_levels(_crops())
    assert list(levels) == ["rain", "sun", "wind"]
    assert levels["sun"] == ["low", "medium", "high"]
    assert levels["wind"] == ["low", "medium", "high"]


def test_enumerate_environments_full_grid():
    envs = enumerate_environments(_crops())
    assert len(envs) == 27
    assert envs[0] == {"rain": "low", "sun": "low", "wind": "low"}
    assert envs[-1] == {"rain": "high", "sun": "high", "wind": "high"}
    assert len({tuple(sorted(e.items())) for e in envs}) == 27


def test_enumerate_environments_restricted_and_empty():
    envs = enumerate_environments(_crops(), ScenarioConfig(factor_names=("sun",)))
    assert envs == [{"sun": "low"}, {"sun": "medium"}, {"sun": "high"}]

    plain = [CropEntry(Crop(name="corn", yield_per_plant=3), 5)]
    assert enumerate_environments(plain) == [{}]


def test_enumerate_environments_unknown_factor_raises():
    with pytest.raises(ValueError, match="hail"):
        enumerate_environments(_crops(), ScenarioConfig(factor_names=("hail",)))


def test_profit_by_environment_matches_direct_totals():
    crops = _crops()
    df = profit_by_environment(crops)

    assert list(df.columns) == ["rain", "sun", "wind", "total_yield", "total_cost", "total_revenue", "total_profit"]
    assert len(df) == 27

    row = df[(df["sun"] == "low") & (df["rain"] == "medium") & (df["wind"] == "low")].iloc[0]
    assert row["total_profit"] == pytest.approx(39.25)
    assert row["total_cost"] == pytest.approx(16.0)

    for _, r in df.iterrows():
        env = {"rain": r["rain"], "sun": r["sun"], "wind": r["wind"]}
        assert r["total_profit"] == pytest.approx(compute_total_profit(crops, env))


def test_profit_by_environment_rejects_unknown_combine_rule():
    with pytest.raises(ValueError):
        profit_by_environment(_crops(), ScenarioConfig(combine="geometric"))


def test_declared_factor_levels_appends_levels_first_seen_on_later_crops():
    corn = Crop(name="corn", yield_per_plant=3, factors={"sun": {"low": -50, "high": 50}})
    pumpkin = Crop(name="pumpkin", yield_per_plant=4, factors={"sun": {"low": -40, "medium": 0, "extreme": 80}})

    levels = declared_factor_levels([CropEntry(corn, 1), CropEntry(pumpkin, 1)])
    assert levels == {"sun": ["low", "high", "medium", "extreme"]}
