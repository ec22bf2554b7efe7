"""Ingredient domain entity: a purchasable pack (size + price) in one unit type."""
from typing import Optional
from cafecost.utilities.constants import INGREDIENT_CATEGORIES, UNIT_TYPES
from cafecost.utilities.numbers import safe_parse


class Ingredient:
    def __init__(self, id: str = "", name: str = "", category: str = "etc", unit_type: str = "g",
                 pack_size: float = 0, pack_price: float = 0, created_at: Optional[int] = None):
        self.id = id
        self.name = name
        self.category = category if category in INGREDIENT_CATEGORIES else "etc"
        self.unit_type = unit_type if unit_type in UNIT_TYPES else "g"
        self.pack_size = safe_parse(pack_size)
        self.pack_price = safe_parse(pack_price)
        self.created_at = created_at

    def __str__(self) -> str:
        return f"{self.name} ({self.id}) - {self.pack_price:g} / {self.pack_size:g}{self.unit_type}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient from a stored mapping. Accepts camelCase keys, ignores unknown ones.'''
        d = dict(data) if isinstance(data, dict) else {}
        aliases = {"unitType": "unit_type", "packSize": "pack_size",
                   "packPrice": "pack_price", "createdAt": "created_at"}
        for src, dst in aliases.items():
            if src in d and dst not in d:
                d[dst] = d.pop(src)
        allowed = {"id", "name", "category", "unit_type", "pack_size", "pack_price", "created_at"}
        filtered = {k: v for k, v in d.items() if k in allowed}
        filtered["id"] = str(filtered.get("id") or "")
        filtered["name"] = str(filtered.get("name") or "")
        return Ingredient(**filtered)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "unitType": self.unit_type,
            "packSize": self.pack_size,
            "packPrice": self.pack_price,
            "createdAt": self.created_at,
        }
