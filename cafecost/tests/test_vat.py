import unittest
from cafecost.logic.tax.vat import supply_price, vat_amount, estimate_tax


class TestVat(unittest.TestCase):

    def test_inclusive(self):
        self.assertAlmostEqual(supply_price(11_000, "inclusive"), 10_000)
        self.assertAlmostEqual(vat_amount(11_000, "inclusive"), 1_000)

    def test_exclusive(self):
        self.assertAlmostEqual(supply_price(10_000, "exclusive"), 10_000)
        self.assertAlmostEqual(vat_amount(10_000, "exclusive"), 1_000)

    def test_inclusive_split_adds_back_to_amount(self):
        for amount in (0, 1, 999, 11_000, 1_234_567.89):
            for rate in (0, 5, 10, 20):
                supply = supply_price(amount, "inclusive", rate)
                vat = vat_amount(amount, "inclusive", rate)
                self.assertAlmostEqual(supply + vat, amount, places=6, msg=(amount, rate))
                self.assertLessEqual(supply, amount)

    def test_exclusive_adds_rate_on_top(self):
        for amount in (0, 1, 999, 10_000, 1_234_567.89):
            for rate in (0, 5, 10, 20):
                self.assertEqual(supply_price(amount, "exclusive", rate), amount)
                self.assertAlmostEqual(vat_amount(amount, "exclusive", rate), amount * rate / 100, places=6)

    def test_negative_rate_is_zero(self):
        self.assertAlmostEqual(vat_amount(10_000, "exclusive", -5), 0)

    def test_monthly_estimate(self):
        est = estimate_tax(11_000_000, 5_500_000, labor_cost=2_000_000, other_cost=500_000)
        self.assertEqual(est.multiplier, 1)
        self.assertAlmostEqual(est.sales_supply, 10_000_000)
        self.assertAlmostEqual(est.sales_vat, 1_000_000)
        self.assertAlmostEqual(est.purchase_vat, 500_000)
        self.assertAlmostEqual(est.vat_payable, 500_000)
        self.assertAlmostEqual(est.profit_estimate, 2_500_000)
        self.assertAlmostEqual(est.assumed_tax, 200_000)
        self.assertFalse(est.is_refund)

    def test_quarterly_scales_everything(self):
        est = estimate_tax(11_000_000, 5_500_000, labor_cost=2_000_000, other_cost=500_000, period="quarterly")
        self.assertEqual(est.multiplier, 3)
        self.assertAlmostEqual(est.vat_payable, 1_500_000)
        self.assertAlmostEqual(est.assumed_tax, 600_000)

    def test_refund(self):
        est = estimate_tax(1_100_000, 3_300_000, period="yearly")
        self.assertTrue(est.is_refund)
        self.assertAlmostEqual(est.vat_payable, -200_000 * 12)

    def test_unknown_period_is_monthly(self):
        est = estimate_tax(1_100_000, 0, period="weekly")
        self.assertEqual(est.period, "monthly")
        self.assertEqual(est.multiplier, 1)


if __name__ == "__main__":
    unittest.main()
