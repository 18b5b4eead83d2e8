import pandas as pd

from farmyield.crops import Crop, CropEntry
from farmyield.scenarios import ScenarioConfig, profit_by_environment

LMH = {"low": -50, "medium": 0, "high": 50}

crops = [
    CropEntry(Crop(name="corn", yield_per_plant=3, price=2, sale_price=3, factors={"sun": LMH, "rain": LMH}), 5),
    CropEntry(Crop(name="pumpkin", yield_per_plant=4, price=3, sale_price=5, factors={"sun": LMH}), 2),
]

pd.set_option("display.width", 120)

for combine in ("compound", "additive"):
    df = profit_by_environment(crops, ScenarioConfig(combine=combine))
    print(f"\n=== {combine} ===")
    print(df.sort_values("total_profit", ascending=False).to_string(index=False))
