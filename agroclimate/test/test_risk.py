"""
Test cases for pest and disease risk assessment.
"""

import unittest

from agroclimate.engine import ForecastEstimate, RiskRule, assess_disease_risk, assess_pest_risk
from agroclimate.engine.risk import evaluate_risk


def estimate(temperature=25.0, humidity=60.0, precipitation=0.0):
    return ForecastEstimate(
        temperature=temperature, humidity=humidity, precipitation=precipitation
    )


class TestPestRisk(unittest.TestCase):
    """Test suite for assess_pest_risk."""

    def test_high(self):
        self.assertEqual(assess_pest_risk(estimate(25.0, 85.0)), "high")
        self.assertEqual(assess_pest_risk(estimate(20.0, 85.0)), "high")
        self.assertEqual(assess_pest_risk(estimate(30.0, 85.0)), "high")

    def test_medium(self):
        """
        Test the medium band, including humid days too hot for the high band.
        """
        self.assertEqual(assess_pest_risk(estimate(31.0, 70.0)), "medium")
        self.assertEqual(assess_pest_risk(estimate(31.0, 85.0)), "medium")
        self.assertEqual(assess_pest_risk(estimate(18.0, 66.0)), "medium")

    def test_humidity_bound_is_exclusive(self):
        """Test that exactly 80% humidity does not reach the high band."""
        self.assertEqual(assess_pest_risk(estimate(25.0, 80.0)), "medium")
        self.assertEqual(assess_pest_risk(estimate(25.0, 65.0)), "low")

    def test_low(self):
        self.assertEqual(assess_pest_risk(estimate(25.0, 60.0)), "low")
        self.assertEqual(assess_pest_risk(estimate(35.0, 90.0)), "low")
        self.assertEqual(assess_pest_risk(estimate(10.0, 90.0)), "low")


class TestDiseaseRisk(unittest.TestCase):
    """Test suite for assess_disease_risk."""

    def test_high(self):
        self.assertEqual(assess_disease_risk(estimate(humidity=85.0, precipitation=6.0)), "high")

    def test_medium(self):
        self.assertEqual(
            assess_disease_risk(estimate(humidity=85.0, precipitation=4.0)), "medium"
        )
        self.assertEqual(
            assess_disease_risk(estimate(humidity=75.0, precipitation=5.0)), "medium"
        )

    def test_low(self):
        self.assertEqual(
            assess_disease_risk(estimate(humidity=75.0, precipitation=3.0)), "low"
        )
        self.assertEqual(
            assess_disease_risk(estimate(humidity=60.0, precipitation=30.0)), "low"
        )


class TestEvaluateRisk(unittest.TestCase):
    """Test suite for the rule table evaluation."""

    def test_first_matching_rule_wins(self):
        rules = (
            RiskRule(level="severe", min_precipitation=10.0),
            RiskRule(level="some", min_precipitation=1.0),
        )
        self.assertEqual(evaluate_risk(estimate(precipitation=12.0), rules), "severe")
        self.assertEqual(evaluate_risk(estimate(precipitation=5.0), rules), "some")
        self.assertEqual(evaluate_risk(estimate(precipitation=0.0), rules), "low")

    def test_custom_default(self):
        self.assertEqual(evaluate_risk(estimate(), (), default="none"), "none")


if __name__ == "__main__":
    unittest.main()
