"""Menu domain entity: category, variant, sell price, recipe lines and preparation steps."""
from typing import List, Optional
from cafecost.utilities.constants import MAX_MENU_STEPS, MENU_CATEGORIES, UNIT_TYPES
from cafecost.utilities.numbers import safe_parse


class RecipeLine:
    """One recipe line. Holds the ingredient id only; the ingredient may since have been deleted."""

    def __init__(self, ingredient_id: str = "", amount: float = 0, unit_type: str = "g"):
        self.ingredient_id = ingredient_id
        self.amount = safe_parse(amount)
        self.unit_type = unit_type if unit_type in UNIT_TYPES else "g"

    def __str__(self) -> str:
        return f"{self.ingredient_id} x {self.amount:g}{self.unit_type}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return RecipeLine(
            ingredient_id=str(d.get("ingredient_id", d.get("ingredientId", "")) or ""),
            amount=d.get("amount", 0),
            unit_type=d.get("unit_type", d.get("unitType", "g")),
        )

    def to_dict(self):
        return {"ingredientId": self.ingredient_id, "amount": self.amount, "unitType": self.unit_type}


class Menu:
    def __init__(self, id: str = "", name: str = "", category: str = "drink", temp: str = "HOT",
                 size_label: str = "", sell_price: float = 0, steps: Optional[List[str]] = None,
                 recipe_items: Optional[List[RecipeLine]] = None, created_at: Optional[int] = None):
        self.id = id
        self.name = name
        self.category = category if category in MENU_CATEGORIES else "drink"
        # HOT/ICE only means something for drinks, but is kept as entered
        self.temp = temp if temp in ("HOT", "ICE") else "HOT"
        self.size_label = size_label
        self.sell_price = safe_parse(sell_price)
        self.steps = [s for s in (steps or []) if s and s.strip()][:MAX_MENU_STEPS]
        self.recipe_items = recipe_items[:] if recipe_items else []
        self.created_at = created_at

    def __str__(self) -> str:
        label = f" {self.size_label}" if self.size_label else ""
        return f"{self.name}{label} [{self.category}/{self.temp}] - {self.sell_price:g} - {len(self.recipe_items)} lines"

    __repr__ = __str__

    def ingredient_ids(self) -> List[str]:
        return [line.ingredient_id for line in self.recipe_items]

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        lines = d.get("recipe_items", d.get("recipeItems", [])) or []
        return Menu(
            id=str(d.get("id") or ""),
            name=str(d.get("name") or ""),
            category=d.get("category") or "drink",
            temp=d.get("temp") or "HOT",
            size_label=str(d.get("size_label", d.get("sizeLabel", "")) or ""),
            sell_price=d.get("sell_price", d.get("sellPrice", 0)),
            steps=[str(s) for s in (d.get("steps") or [])],
            recipe_items=[RecipeLine.from_dict(line) for line in lines],
            created_at=d.get("created_at", d.get("createdAt")),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "temp": self.temp,
            "sizeLabel": self.size_label,
            "sellPrice": self.sell_price,
            "steps": self.steps,
            "recipeItems": [line.to_dict() for line in self.recipe_items],
            "createdAt": self.created_at,
        }
