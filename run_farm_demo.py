from farmyield.crops import collection_from_records
from farmyield.farm import compute_total_profit, compute_total_yield
from farmyield.summary import crop_breakdown

LMH = {"low": -50, "medium": 0, "high": 50}

records = [
    {
        "crop": {"name": "corn", "yield": 3, "price": 2, "salePrice": 3, "factors": {"sun": LMH, "wind": {"low": 30, "medium": 0, "high": -15}}},
        "numCrops": 5,
    },
    {
        "crop": {"name": "pumpkin", "yield": 4, "price": 3, "salePrice": 5, "factors": {"sun": LMH, "rain": LMH}},
        "numCrops": 2,
    },
]
crops = collection_from_records(records)

env = {"sun": "low", "rain": "medium", "wind": "low"}

print(crop_breakdown(crops, env))
print(f"\nTotal yield : {compute_total_yield(crops, env):8.2f}")
print(f"Total profit: {compute_total_profit(crops, env):8.2f}")
print(f"(no factors): {compute_total_profit(crops):8.2f}")
