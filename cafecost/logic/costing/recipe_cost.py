"""Ingredient unit cost and recipe cost aggregation.

Recipe lines reference ingredients by id. A line whose ingredient has been
deleted costs 0 and is reported through the missing count instead of failing.
"""
from __future__ import annotations
from typing import Any, Dict, Iterable, List, Mapping, Union
import logging

from cafecost.domain.Ingredient import Ingredient
from cafecost.domain.Menu import Menu

logger = logging.getLogger(__name__)

__all__ = [
    "unit_cost", "index_ingredients", "menu_ingredient_cost",
    "missing_ingredient_count", "recipe_cost_breakdown",
]

IngredientSource = Union[Iterable[Ingredient], Mapping[str, Ingredient]]


def unit_cost(ingredient: Ingredient) -> float:
    """Price of one unit (g/ml/ea): pack_price / pack_size, or 0 when pack_size <= 0."""
    if ingredient.pack_size <= 0:
        return 0.0
    return ingredient.pack_price / ingredient.pack_size


def index_ingredients(ingredients: IngredientSource) -> Dict[str, Ingredient]:
    if isinstance(ingredients, Mapping):
        return dict(ingredients)
    return {ing.id: ing for ing in ingredients}


def menu_ingredient_cost(menu: Menu, ingredients: IngredientSource) -> float:
    """Sum of unit cost x amount over the recipe lines; unknown ingredient ids add nothing."""
    index = index_ingredients(ingredients)
    total = 0.0
    for line in menu.recipe_items:
        ingredient = index.get(line.ingredient_id)
        if ingredient is None:
            continue
        total += unit_cost(ingredient) * line.amount
    return total


def missing_ingredient_count(menu: Menu, ingredients: IngredientSource) -> int:
    """Number of recipe lines whose ingredient id no longer resolves."""
    index = index_ingredients(ingredients)
    missing = sum(1 for line in menu.recipe_items if line.ingredient_id not in index)
    if missing:
        logger.debug("Menu %s references %d missing ingredient(s)", menu.id or menu.name, missing)
    return missing


def recipe_cost_breakdown(menu: Menu, ingredients: IngredientSource) -> Dict[str, Any]:
    """Per-line costing for a menu.

    Returns structure:
    {
      'lines': [ { 'ingredient_id', 'name', 'amount', 'unit_type', 'unit_cost', 'cost', 'missing' }, ... ],
      'total': float,
      'missing_count': int
    }
    """
    index = index_ingredients(ingredients)
    lines: List[Dict[str, Any]] = []
    total = 0.0
    missing = 0
    for line in menu.recipe_items:
        ingredient = index.get(line.ingredient_id)
        if ingredient is None:
            missing += 1
            lines.append({
                'ingredient_id': line.ingredient_id,
                'name': '',
                'amount': line.amount,
                'unit_type': line.unit_type,
                'unit_cost': 0.0,
                'cost': 0.0,
                'missing': True,
            })
            continue
        per_unit = unit_cost(ingredient)
        cost = per_unit * line.amount
        total += cost
        lines.append({
            'ingredient_id': line.ingredient_id,
            'name': ingredient.name,
            'amount': line.amount,
            'unit_type': line.unit_type,
            'unit_cost': per_unit,
            'cost': cost,
            'missing': False,
        })
    return {'lines': lines, 'total': total, 'missing_count': missing}
