import unittest
from datetime import date
from cafecost.domain.Overhead import ItemizedOverhead, OverheadItem
from cafecost.domain.Settings import Settings
from cafecost.logic.overhead.allocation import (
    uniform_overhead_per_unit,
    overhead_per_unit_by_category,
    allocate,
)

TODAY = date(2025, 6, 1)


class TestAllocation(unittest.TestCase):

    def setUp(self):
        self.overheads = [ItemizedOverhead("labor", "l1", "Staff", [OverheadItem("A", 1_000_000)])]

    def test_uniform(self):
        self.assertEqual(uniform_overhead_per_unit(self.overheads, 1000, TODAY), 1000)

    def test_uniform_without_volume(self):
        self.assertEqual(uniform_overhead_per_unit(self.overheads, 0, TODAY), 0.0)
        self.assertEqual(uniform_overhead_per_unit(self.overheads, -5, TODAY), 0.0)

    def test_by_category(self):
        # 25% of the overhead carried by 50% of the volume
        self.assertEqual(overhead_per_unit_by_category(self.overheads, 1000, 50, 25, TODAY), 500)

    def test_by_category_falls_back_to_uniform(self):
        self.assertEqual(overhead_per_unit_by_category(self.overheads, 1000, 0, 25, TODAY), 1000)
        self.assertEqual(overhead_per_unit_by_category(self.overheads, 1000, 50, 0, TODAY), 1000)

    def test_by_category_without_volume(self):
        self.assertEqual(overhead_per_unit_by_category(self.overheads, 0, 50, 25, TODAY), 0.0)

    def test_allocate_uses_settings_mix(self):
        settings = Settings(monthly_sales_volume=1000,
                            category_sales_mix={"drink": 80, "dessert": 20},
                            category_overhead_mix={"drink": 40, "dessert": 60})
        self.assertEqual(allocate(self.overheads, settings, "drink", TODAY), 500)
        self.assertEqual(allocate(self.overheads, settings, "dessert", TODAY), 3000)
        # food has no weights at all
        self.assertEqual(allocate(self.overheads, settings, "food", TODAY), 1000)

    def test_equal_mixes_match_uniform(self):
        settings = Settings(monthly_sales_volume=2000)
        self.assertAlmostEqual(allocate(self.overheads, settings, "drink", TODAY),
                               uniform_overhead_per_unit(self.overheads, 2000, TODAY))


if __name__ == "__main__":
    unittest.main()
