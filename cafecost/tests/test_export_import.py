import unittest
from datetime import date
from cafecost.domain.Ingredient import Ingredient
from cafecost.domain.Menu import Menu, RecipeLine
from cafecost.domain.Overhead import (
    DepreciationOverhead,
    ItemizedOverhead,
    LeaseFacility,
    UtilitiesOverhead,
)
from cafecost.logic.overhead.ledger import monthly_amount, total_monthly_overhead
from cafecost.utilities.export_import import (
    to_csv,
    parse_csv,
    parse_pairs,
    format_pairs,
    overheads_from_csv,
    overheads_to_csv,
    ingredients_from_csv,
    ingredients_to_csv,
    menus_from_csv,
    menus_to_csv,
)

TODAY = date(2025, 6, 1)

OVERHEAD_CSV = (
    "category,amount,facilityType,facilityRent,facilityManagementFee,facilityDeposit,"
    "facilityContractStart,facilityContractEnd,laborItems,utilitiesElectric,utilitiesSubscriptions,"
    "depreciationItems,etcItems\n"
    "facility,,lease,1500000,200000,10000000,2024-01-01,2025-12-31,,,,,\n"
    "인건비,,,,,,,,Barista:2000000|Part-time:800000,,,,\n"
    "utilities,,,,,,,,,120000,POS:33000|Music:11000,,\n"
    "depreciation,,,,,,,,,,,Espresso machine:12000000:60:2024-01-01:installment|Grinder:1200000::,\n"
    "spaceship,,,,,,,,,,,,Cleaning:50000\n"
)


class TestCsvBasics(unittest.TestCase):

    def test_to_csv_quotes_every_cell(self):
        text = to_csv([["a", 'say "hi"', 3], ["x,y", None, ""]])
        self.assertEqual(text, '"a","say ""hi""","3"\n"x,y","",""')

    def test_parse_csv_handles_quotes_and_blank_rows(self):
        rows = parse_csv('\ufeff"a", b ,"c,d"\r\n\r\n"x ""y""",2,3\n')
        self.assertEqual(rows, [["a", "b", "c,d"], ['x "y"', "2", "3"]])

    def test_parse_pairs_drops_bad_entries(self):
        items = parse_pairs("POS:33000| Kiosk : 55000 |:10|Refund:-5||Free")
        self.assertEqual(items, [
            {"name": "POS", "amount": 33000.0},
            {"name": "Kiosk", "amount": 55000.0},
            {"name": "Free", "amount": 0.0},
        ])

    def test_format_pairs(self):
        self.assertEqual(format_pairs([{"name": "POS", "amount": 33000.0}, {"name": "Tip", "amount": 1.5}]),
                         "POS:33000|Tip:1.5")


class TestOverheadCsv(unittest.TestCase):

    def test_import(self):
        overheads = overheads_from_csv(OVERHEAD_CSV)
        self.assertEqual(len(overheads), 5)
        lease, labor, utilities, depreciation, other = overheads

        self.assertIsInstance(lease, LeaseFacility)
        self.assertAlmostEqual(monthly_amount(lease, TODAY), 2_116_666.67, places=2)

        self.assertIsInstance(labor, ItemizedOverhead)
        self.assertEqual(labor.category, "labor")
        self.assertEqual(monthly_amount(labor), 2_800_000)

        self.assertIsInstance(utilities, UtilitiesOverhead)
        self.assertEqual(monthly_amount(utilities), 164_000)

        self.assertIsInstance(depreciation, DepreciationOverhead)
        self.assertEqual(depreciation.items[0].payment_method, "installment")
        self.assertEqual(depreciation.items[1].useful_months, 36)
        self.assertAlmostEqual(monthly_amount(depreciation), 200_000 + 1_200_000 / 36)

        self.assertEqual(other.category, "etc")
        self.assertEqual(monthly_amount(other), 50_000)

    def test_export_then_import_keeps_totals(self):
        overheads = overheads_from_csv(OVERHEAD_CSV)
        text = overheads_to_csv(overheads)
        self.assertTrue(text.startswith('"category","amount","facilityType"'))
        again = overheads_from_csv(text)
        self.assertAlmostEqual(total_monthly_overhead(again, TODAY), total_monthly_overhead(overheads, TODAY))

    def test_header_only_or_empty(self):
        self.assertEqual(overheads_from_csv("category,amount\n"), [])
        self.assertEqual(overheads_from_csv(""), [])

    def test_amount_column_is_ignored(self):
        text = "category,amount,laborItems\nlabor,999,Barista:2000000\n기타,123,\n"
        labor, other = overheads_from_csv(text)
        self.assertEqual(monthly_amount(labor), 2_000_000)
        self.assertEqual(monthly_amount(other), 0.0)

    def test_malformed_numbers_import_as_zero(self):
        overheads = overheads_from_csv("category,laborItems\nlabor,Barista:lots\n")
        self.assertEqual(monthly_amount(overheads[0]), 0.0)


class TestCatalogCsv(unittest.TestCase):

    def test_ingredients(self):
        text = ingredients_to_csv([Ingredient("bean", "Beans, dark", "beverage", "g", 1000, 24000)])
        parsed = ingredients_from_csv(text)
        self.assertEqual(parsed[0].name, "Beans, dark")
        self.assertEqual(parsed[0].pack_price, 24000)

    def test_menus(self):
        menu = Menu("m1", "Latte", "drink", "ICE", "L", 5000, steps=["Pull shot", "Add milk"],
                    recipe_items=[RecipeLine("bean", 18), RecipeLine("milk", 200)])
        parsed = menus_from_csv(menus_to_csv([menu]))
        self.assertEqual(parsed[0].temp, "ICE")
        self.assertEqual(parsed[0].steps, ["Pull shot", "Add milk"])
        self.assertEqual(parsed[0].ingredient_ids(), ["bean", "milk"])
        self.assertEqual(parsed[0].recipe_items[1].amount, 200)


if __name__ == "__main__":
    unittest.main()
