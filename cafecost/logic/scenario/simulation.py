"""What-if simulation at an assumed monthly volume, revenue and waste rate.

The scenario works on averages: one average price (revenue / volume) against
the flat mean ingredient cost of all menus, inflated by waste, plus the
uniform overhead per unit at the assumed volume. Category mix is deliberately
not applied here.
"""
from __future__ import annotations
from datetime import date as _date
from typing import Any, Dict, Iterable, List, Optional

from cafecost.domain.Menu import Menu
from cafecost.domain.Scenario import SimulationScenario
from cafecost.domain.Settings import Settings
from cafecost.logic.costing.recipe_cost import IngredientSource, index_ingredients, menu_ingredient_cost
from cafecost.logic.overhead.allocation import uniform_overhead_per_unit
from cafecost.logic.pricing.economics import margin_percent
from cafecost.utilities.numbers import safe_parse

__all__ = [
    "mean_ingredient_cost", "build_metrics", "run_scenario", "compare_scenarios",
    "mix_total", "normalize_mix", "mix_ready",
]

_EMPTY_METRICS = {
    'average_price': 0.0,
    'overhead_per_unit': 0.0,
    'ingredient_cost': 0.0,
    'average_cost': 0.0,
    'average_cost_with_overhead': 0.0,
    'net_profit': 0.0,
    'margin': 0.0,
    'monthly_profit': 0.0,
    'net_profit_with_overhead': 0.0,
    'margin_with_overhead': 0.0,
    'monthly_profit_with_overhead': 0.0,
}


def mean_ingredient_cost(menus: Iterable[Menu], ingredients: IngredientSource) -> float:
    menus = list(menus)
    if not menus:
        return 0.0
    index = index_ingredients(ingredients)
    return sum(menu_ingredient_cost(menu, index) for menu in menus) / len(menus)


def build_metrics(volume: Any, revenue: Any, waste_percent: Any, avg_ingredient_cost: float,
                  overheads: Iterable[Any], include_overhead_in_cost: bool,
                  today: Optional[_date] = None) -> Dict[str, float]:
    """Metrics both as configured and with overhead always included.

    All figures are 0 when the volume or the revenue is not positive.
    """
    v = safe_parse(volume)
    rev = safe_parse(revenue)
    if v <= 0 or rev <= 0:
        return dict(_EMPTY_METRICS)

    ingredient_cost = safe_parse(avg_ingredient_cost) * (1 + safe_parse(waste_percent) / 100)
    average_price = rev / v
    overhead = uniform_overhead_per_unit(overheads, v, today)

    cost_with_overhead = ingredient_cost + overhead
    cost = ingredient_cost + (overhead if include_overhead_in_cost else 0.0)
    profit = average_price - cost
    profit_with_overhead = average_price - cost_with_overhead

    return {
        'average_price': average_price,
        'overhead_per_unit': overhead,
        'ingredient_cost': ingredient_cost,
        'average_cost': cost,
        'average_cost_with_overhead': cost_with_overhead,
        'net_profit': profit,
        'margin': margin_percent(average_price, profit),
        'monthly_profit': profit * v,
        'net_profit_with_overhead': profit_with_overhead,
        'margin_with_overhead': margin_percent(average_price, profit_with_overhead),
        'monthly_profit_with_overhead': profit_with_overhead * v,
    }


def run_scenario(scenario: SimulationScenario, menus: Iterable[Menu], ingredients: IngredientSource,
                 overheads: Iterable[Any], settings: Settings,
                 today: Optional[_date] = None) -> Dict[str, Any]:
    """Replay a saved scenario against the current ingredients, menus and overheads."""
    metrics = build_metrics(
        scenario.monthly_sales_volume,
        scenario.monthly_revenue,
        scenario.waste_percent,
        mean_ingredient_cost(menus, ingredients),
        overheads,
        settings.include_overhead_in_cost,
        today,
    )
    return {'scenario': scenario.to_dict(), 'metrics': metrics}


def mix_total(mix: Dict[str, Any]) -> float:
    return sum(safe_parse(v) for v in (mix or {}).values())


def normalize_mix(mix: Dict[str, Any], mode: str = "percent") -> Dict[str, float]:
    """Percent mode passes values through; count mode rescales counts to percents of the total."""
    values = {k: safe_parse(v) for k, v in (mix or {}).items()}
    if mode != "count":
        return values
    total = sum(values.values())
    if total <= 0:
        return {k: 0.0 for k in values}
    return {k: v / total * 100 for k, v in values.items()}


def mix_ready(mix: Dict[str, Any], mode: str = "percent") -> bool:
    total = mix_total(mix)
    if mode == "count":
        return total > 0
    return round(total) == 100


def compare_scenarios(scenarios: Iterable[SimulationScenario], menus: Iterable[Menu],
                      ingredients: IngredientSource, overheads: Iterable[Any], settings: Settings,
                      today: Optional[_date] = None) -> List[Dict[str, Any]]:
    menus = list(menus)
    overheads = list(overheads)
    index = index_ingredients(ingredients)
    return [run_scenario(s, menus, index, overheads, settings, today) for s in scenarios]


