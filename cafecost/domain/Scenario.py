"""SimulationScenario domain entity: a what-if snapshot of volume, revenue and waste."""
from typing import Dict, Optional
from cafecost.utilities.numbers import safe_parse


class SimulationScenario:
    def __init__(self, id: str = "", name: str = "", monthly_sales_volume: float = 0,
                 monthly_revenue: float = 0, waste_percent: float = 0,
                 sales_mix: Optional[Dict[str, float]] = None,
                 overhead_mix: Optional[Dict[str, float]] = None,
                 created_at: Optional[int] = None):
        self.id = id
        self.name = name
        self.monthly_sales_volume = safe_parse(monthly_sales_volume)
        self.monthly_revenue = safe_parse(monthly_revenue)
        self.waste_percent = safe_parse(waste_percent)
        # Mix the scenario was saved with; informational, the engine does not read it
        self.sales_mix = dict(sales_mix or {})
        self.overhead_mix = dict(overhead_mix or {})
        self.created_at = created_at

    def __str__(self) -> str:
        return (f"{self.name} - {self.monthly_sales_volume:g} units / "
                f"{self.monthly_revenue:g} revenue / waste {self.waste_percent:g}%")

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return SimulationScenario(
            id=str(d.get("id") or ""),
            name=str(d.get("name") or ""),
            monthly_sales_volume=d.get("monthly_sales_volume", d.get("monthlySalesVolume", 0)),
            monthly_revenue=d.get("monthly_revenue", d.get("monthlyRevenue", 0)),
            waste_percent=d.get("waste_percent", d.get("wastePercent", 0)),
            sales_mix=d.get("sales_mix", d.get("categorySalesMixPercent")),
            overhead_mix=d.get("overhead_mix", d.get("categoryOverheadMixPercent")),
            created_at=d.get("created_at", d.get("createdAt")),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "monthlySalesVolume": self.monthly_sales_volume,
            "monthlyRevenue": self.monthly_revenue,
            "wastePercent": self.waste_percent,
            "categorySalesMixPercent": self.sales_mix,
            "categoryOverheadMixPercent": self.overhead_mix,
            "createdAt": self.created_at,
        }
