import matplotlib.pyplot as plt

from farmyield.crops import Crop, CropEntry
from farmyield.scenarios import ScenarioConfig, profit_by_environment

LMH = {"low": -50, "medium": 0, "high": 50}
WIND = {"low": 30, "medium": 0, "high": -15}

crops = [
    CropEntry(Crop(name="corn", yield_per_plant=3, price=2, sale_price=3, factors={"sun": LMH, "wind": WIND}), 5),
    CropEntry(Crop(name="pumpkin", yield_per_plant=4, price=3, sale_price=5, factors={"sun": LMH, "wind": WIND}), 2),
]

df = profit_by_environment(crops, ScenarioConfig(factor_names=("sun", "wind")))

plt.figure()
for wind in sorted(df["wind"].unique()):
    sub = df[df["wind"] == wind]
    plt.plot(sub["sun"], sub["total_profit"], marker="o", label=f"wind={wind}")
plt.axhline(0.0, color="grey", linewidth=0.8)
plt.title("Total profit by sun level")
plt.xlabel("Sun level")
plt.ylabel("Total profit")
plt.legend()

plt.show()
