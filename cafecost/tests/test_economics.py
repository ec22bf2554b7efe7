import unittest
from datetime import date
from cafecost.domain.Ingredient import Ingredient
from cafecost.domain.Menu import Menu, RecipeLine
from cafecost.domain.Overhead import ItemizedOverhead, OverheadItem
from cafecost.domain.Settings import Settings
from cafecost.logic.pricing.economics import (
    net_profit,
    margin_percent,
    recommended_price,
    menu_economics,
)
from cafecost.logic.pricing.dashboard import (
    summarize_menus,
    summarize_categories,
    average_margin,
    lowest_margin,
    build_dashboard,
)

TODAY = date(2025, 6, 1)


class TestPricing(unittest.TestCase):

    def test_margin(self):
        self.assertAlmostEqual(margin_percent(4500, net_profit(4500, 432)), 90.4, places=1)
        self.assertEqual(margin_percent(0, 100), 0.0)

    def test_recommended_price(self):
        self.assertEqual(recommended_price(432, 65, 100), 1200)
        self.assertEqual(recommended_price(432, 65, 10), 1230)
        self.assertEqual(recommended_price(1000, 0, 100), 1000)

    def test_recommended_price_at_full_margin_is_cost(self):
        self.assertEqual(recommended_price(432, 100, 100), 432)


class TestMenuEconomics(unittest.TestCase):

    def setUp(self):
        self.ingredients = [Ingredient("bean", "Beans", "beverage", "g", 1000, 24000)]
        self.americano = Menu("m1", "Americano", "drink", "HOT", "", 4500, recipe_items=[RecipeLine("bean", 18)])
        self.overheads = [ItemizedOverhead("labor", "l1", "Staff", [OverheadItem("A", 1_000_000)])]

    def test_ingredients_only(self):
        settings = Settings(include_overhead_in_cost=False)
        econ = menu_economics(self.americano, self.ingredients, self.overheads, settings, TODAY)
        self.assertAlmostEqual(econ.cost, 432)
        self.assertAlmostEqual(econ.net_profit, 4068)
        self.assertAlmostEqual(econ.margin, 90.4, places=1)
        self.assertEqual(econ.overhead_per_unit, 1000)
        self.assertFalse(econ.has_missing_ingredients)

    def test_with_overhead(self):
        settings = Settings(monthly_sales_volume=1000)
        econ = menu_economics(self.americano, self.ingredients, self.overheads, settings, TODAY)
        self.assertAlmostEqual(econ.cost, 1432)
        self.assertAlmostEqual(econ.net_profit, 3068)
        # 1432 / 0.35 = 4091.4 -> 4100
        self.assertEqual(econ.recommended_price, 4100)

    def test_missing_ingredient_flag(self):
        menu = Menu("m2", "Ghost", "dessert", sell_price=3000, recipe_items=[RecipeLine("gone", 1)])
        econ = menu_economics(menu, self.ingredients, [], Settings(), TODAY)
        self.assertTrue(econ.has_missing_ingredients)
        self.assertEqual(econ.to_dict()["missing_count"], 1)


class TestDashboard(unittest.TestCase):

    def setUp(self):
        self.ingredients = [Ingredient("bean", "Beans", "beverage", "g", 1000, 24000)]
        self.menus = [
            Menu("m1", "Americano", "drink", sell_price=4500, recipe_items=[RecipeLine("bean", 18)]),
            Menu("m2", "Double", "drink", sell_price=1000, recipe_items=[RecipeLine("bean", 36)]),
            Menu("m3", "Cake", "dessert", sell_price=6000, recipe_items=[RecipeLine("flour", 100)]),
        ]
        self.settings = Settings(include_overhead_in_cost=False)

    def test_categories(self):
        summaries = summarize_menus(self.menus, self.ingredients, [], self.settings, TODAY)
        categories = summarize_categories(summaries)
        self.assertEqual(categories['drink']['count'], 2)
        self.assertEqual(categories['drink']['total_sell'], 5500)
        self.assertAlmostEqual(categories['drink']['total_cost'], 432 + 864)
        self.assertEqual(categories['food']['count'], 0)
        self.assertEqual(categories['etc']['total_net'], 0.0)

    def test_average_and_lowest(self):
        summaries = summarize_menus(self.menus, self.ingredients, [], self.settings, TODAY)
        self.assertEqual(lowest_margin(summaries).menu.name, "Double")
        expected = (4068 / 4500 * 100 + 136 / 1000 * 100 + 100.0) / 3
        self.assertAlmostEqual(average_margin(summaries), expected)

    def test_empty(self):
        self.assertEqual(average_margin([]), 0.0)
        self.assertIsNone(lowest_margin([]))

    def test_build_dashboard(self):
        overheads = [ItemizedOverhead("labor", "l1", "Staff", [OverheadItem("A", 500_000)])]
        data = build_dashboard(self.menus, self.ingredients, overheads, self.settings, TODAY)
        self.assertEqual(data['overhead_total'], 500_000)
        self.assertEqual(data['overhead_per_unit'], 500)
        self.assertEqual(len(data['menus']), 3)
        self.assertEqual(data['missing_menus'], 1)
        self.assertEqual(data['lowest_margin']['name'], "Double")


if __name__ == "__main__":
    unittest.main()
