"""
Test cases for the yield model.
"""

import unittest

from agroclimate.config import EngineConfig
from agroclimate.crops import load_crop_profiles
from agroclimate.engine import ForecastEstimate, predict_yield
from agroclimate.engine.yield_model import precipitation_adjustment, range_adjustment


class TestYieldModel(unittest.TestCase):
    """Test suite for predict_yield and its adjustments."""

    def setUp(self):
        self.maize = load_crop_profiles()[0]

    def test_range_adjustment(self):
        """
        Test the full bonus at the midpoint, zero at the edge and the
        full malus from twice the half width onwards.
        """
        self.assertAlmostEqual(range_adjustment(21.0, (18.0, 24.0), 20.0), 20.0)
        self.assertAlmostEqual(range_adjustment(24.0, (18.0, 24.0), 20.0), 0.0)
        self.assertAlmostEqual(range_adjustment(27.0, (18.0, 24.0), 20.0), -20.0)
        self.assertAlmostEqual(range_adjustment(40.0, (18.0, 24.0), 20.0), -20.0)

    def test_precipitation_adjustment(self):
        self.assertAlmostEqual(precipitation_adjustment(0.0, self.maize, 15.0), -15.0)
        self.assertAlmostEqual(precipitation_adjustment(1.4, self.maize, 15.0), 0.0)
        self.assertAlmostEqual(precipitation_adjustment(2.8, self.maize, 15.0), 15.0)
        self.assertAlmostEqual(precipitation_adjustment(50.0, self.maize, 15.0), 15.0)

    def test_ideal_conditions_are_capped(self):
        """Test that the sum above 100 is clamped."""
        estimate = ForecastEstimate(temperature=21.0, humidity=70.0, precipitation=2.8)
        self.assertEqual(predict_yield(estimate, self.maize), 100.0)

    def test_edge_of_ranges_without_rain(self):
        estimate = ForecastEstimate(temperature=24.0, humidity=80.0, precipitation=0.0)
        self.assertAlmostEqual(predict_yield(estimate, self.maize), 55.0)

    def test_hostile_conditions(self):
        estimate = ForecastEstimate(temperature=33.0, humidity=100.0, precipitation=0.0)
        self.assertAlmostEqual(predict_yield(estimate, self.maize), 25.0)

    def test_result_is_bounded(self):
        """Test that a low baseline never produces a negative yield."""
        estimate = ForecastEstimate(temperature=33.0, humidity=100.0, precipitation=0.0)
        config = EngineConfig(baseline_yield=10.0)
        self.assertEqual(predict_yield(estimate, self.maize, config), 0.0)


if __name__ == "__main__":
    unittest.main()
