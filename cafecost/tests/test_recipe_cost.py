import unittest
from cafecost.domain.Ingredient import Ingredient
from cafecost.domain.Menu import Menu, RecipeLine
from cafecost.logic.costing.recipe_cost import (
    unit_cost,
    menu_ingredient_cost,
    missing_ingredient_count,
    recipe_cost_breakdown,
)


class TestRecipeCost(unittest.TestCase):

    def setUp(self):
        self.bean = Ingredient("bean", "Espresso beans", "beverage", "g", 1000, 24000)
        self.milk = Ingredient("milk", "Milk", "beverage", "ml", 1000, 2500)
        self.ingredients = [self.bean, self.milk]

    def test_unit_cost(self):
        self.assertEqual(unit_cost(self.bean), 24.0)
        self.assertEqual(unit_cost(self.milk), 2.5)

    def test_unit_cost_zero_pack_size(self):
        broken = Ingredient("x", "Broken", "etc", "g", 0, 5000)
        self.assertEqual(unit_cost(broken), 0.0)

    def test_americano_cost(self):
        menu = Menu("m1", "Americano", "drink", "HOT", "", 4500, recipe_items=[RecipeLine("bean", 18)])
        self.assertAlmostEqual(menu_ingredient_cost(menu, self.ingredients), 432.0)

    def test_latte_cost_sums_lines(self):
        menu = Menu("m2", "Latte", "drink", "ICE", "", 5000,
                    recipe_items=[RecipeLine("bean", 18), RecipeLine("milk", 200, "ml")])
        self.assertAlmostEqual(menu_ingredient_cost(menu, self.ingredients), 932.0)

    def test_missing_ingredient_is_counted_not_costed(self):
        menu = Menu("m3", "Mystery", "drink", recipe_items=[RecipeLine("bean", 18), RecipeLine("deleted", 50)])
        self.assertAlmostEqual(menu_ingredient_cost(menu, self.ingredients), 432.0)
        self.assertEqual(missing_ingredient_count(menu, self.ingredients), 1)

    def test_empty_recipe(self):
        menu = Menu("m4", "Water", "drink")
        self.assertEqual(menu_ingredient_cost(menu, self.ingredients), 0.0)
        self.assertEqual(missing_ingredient_count(menu, self.ingredients), 0)

    def test_breakdown(self):
        menu = Menu("m5", "Latte", "drink",
                    recipe_items=[RecipeLine("bean", 18), RecipeLine("gone", 10)])
        result = recipe_cost_breakdown(menu, {i.id: i for i in self.ingredients})
        self.assertAlmostEqual(result['total'], 432.0)
        self.assertEqual(result['missing_count'], 1)
        self.assertEqual(len(result['lines']), 2)
        self.assertEqual(result['lines'][0]['name'], "Espresso beans")
        self.assertTrue(result['lines'][1]['missing'])


if __name__ == "__main__":
    unittest.main()
