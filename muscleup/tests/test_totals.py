import unittest
from decimal import Decimal

from muscleup.domain.FoodEntry import FoodEntry
from muscleup.domain.MealLedger import MealLedger
from muscleup.domain.PlanTotals import PlanTotals
from muscleup.logic.extraction.parser import extract_meal_ledger
from muscleup.logic.reporting.totals import compute_plan_totals
from muscleup.tests.samples import FITTR_TEXT


class TestComputePlanTotals(unittest.TestCase):

    def test_two_entries_in_different_sections(self):
        ledger = MealLedger({
            "Breakfast": [FoodEntry("Oats", "80 gm", 300, 10, 40, 8)],
            "Dinner": [FoodEntry("Rice", "100 gm", 200, 5, 20, 4)],
        })
        self.assertEqual(compute_plan_totals(ledger), PlanTotals(500, 15, 60, 12))

    def test_missing_ledger_is_zero(self):
        self.assertEqual(compute_plan_totals(None), PlanTotals(0, 0, 0, 0))
        self.assertEqual(compute_plan_totals(MealLedger()), PlanTotals(0, 0, 0, 0))

    def test_sum_matches_every_entry(self):
        ledger = extract_meal_ledger(FITTR_TEXT)
        totals = compute_plan_totals(ledger)
        self.assertEqual(totals.calories, sum((e.calories for e in ledger.entries()), Decimal(0)))
        self.assertEqual(totals.protein, Decimal("83.8"))
        self.assertEqual(totals.carbs, Decimal("73.8"))
        self.assertEqual(totals.fats, Decimal("41.7"))

    def test_full_precision_kept(self):
        ledger = MealLedger({"Snacks": [FoodEntry("A", "1", "0.1", "0.1", 0, 0),
                                        FoodEntry("B", "1", "0.2", "0.2", 0, 0)]})
        totals = compute_plan_totals(ledger)
        self.assertEqual(totals.calories, Decimal("0.3"))
        self.assertEqual(totals.formatted()["protein"], "0.30")


class TestDomainEntities(unittest.TestCase):

    def test_negative_values_rejected(self):
        with self.assertRaises(ValueError):
            FoodEntry("Oats", "80 gm", -1, 10, 40, 8)

    def test_unknown_section_rejected(self):
        with self.assertRaises(ValueError):
            MealLedger({"Brunch": []})

    def test_ledger_dict_round_trip(self):
        ledger = extract_meal_ledger(FITTR_TEXT)
        self.assertEqual(MealLedger.from_dict(ledger.to_dict()), ledger)


if __name__ == '__main__':
    unittest.main()
