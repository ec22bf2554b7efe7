"""Per-menu economics: cost, net profit, margin and recommended price."""
from __future__ import annotations
from dataclasses import dataclass
from datetime import date as _date
from typing import Any, Dict, Iterable, Optional

from cafecost.domain.Menu import Menu
from cafecost.domain.Settings import Settings
from cafecost.logic.costing.recipe_cost import (
    IngredientSource,
    index_ingredients,
    menu_ingredient_cost,
    missing_ingredient_count,
)
from cafecost.logic.overhead.allocation import allocate
from cafecost.utilities.numbers import safe_parse

__all__ = ["net_profit", "margin_percent", "recommended_price", "MenuEconomics", "menu_economics"]


def net_profit(sell_price: float, cost: float) -> float:
    return safe_parse(sell_price) - safe_parse(cost)


def margin_percent(sell_price: float, profit: float) -> float:
    price = safe_parse(sell_price)
    if price <= 0:
        return 0.0
    return safe_parse(profit) / price * 100


def recommended_price(cost: float, target_margin_percent: float, rounding_unit: int) -> float:
    """Price reaching the target margin, rounded to the unit; the cost itself once the target is >= 100."""
    c = safe_parse(cost)
    target = safe_parse(target_margin_percent)
    if target >= 100:
        return c
    unit = rounding_unit if rounding_unit in (10, 100) else 100
    return float(round(c / (1 - target / 100) / unit) * unit)


@dataclass
class MenuEconomics:
    menu: Menu
    ingredient_cost: float = 0.0
    overhead_per_unit: float = 0.0
    cost: float = 0.0
    net_profit: float = 0.0
    margin: float = 0.0
    recommended_price: float = 0.0
    missing_count: int = 0

    @property
    def has_missing_ingredients(self) -> bool:
        return self.missing_count > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "menu_id": self.menu.id,
            "name": self.menu.name,
            "category": self.menu.category,
            "temp": self.menu.temp,
            "sell_price": self.menu.sell_price,
            "ingredient_cost": self.ingredient_cost,
            "overhead_per_unit": self.overhead_per_unit,
            "cost": self.cost,
            "net_profit": self.net_profit,
            "margin": self.margin,
            "recommended_price": self.recommended_price,
            "missing_count": self.missing_count,
        }


def menu_economics(menu: Menu, ingredients: IngredientSource, overheads: Iterable[Any],
                   settings: Settings, today: Optional[_date] = None) -> MenuEconomics:
    index = index_ingredients(ingredients)
    ingredient_cost = menu_ingredient_cost(menu, index)
    overhead = allocate(overheads, settings, menu.category, today)
    cost = ingredient_cost + (overhead if settings.include_overhead_in_cost else 0.0)
    profit = net_profit(menu.sell_price, cost)
    return MenuEconomics(
        menu=menu,
        ingredient_cost=ingredient_cost,
        overhead_per_unit=overhead,
        cost=cost,
        net_profit=profit,
        margin=margin_percent(menu.sell_price, profit),
        recommended_price=recommended_price(cost, settings.target_margin_percent, settings.rounding_unit),
        missing_count=missing_ingredient_count(menu, index),
    )
