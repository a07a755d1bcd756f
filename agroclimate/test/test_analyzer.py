"""
Test cases for the analyzer.py classes and functions.
"""

import unittest
from datetime import datetime, timedelta, timezone

from agroclimate.analyzer import (
    PatternAnalyzer,
    analyze,
    analyze_months,
    analyze_seasons,
    classify_pattern,
    is_anomaly,
)
from agroclimate.config import EngineConfig
from agroclimate.schema import WeatherObservation
from agroclimate.seasons import SUMMER, WINTER


def make_observations(start, temperatures, humidity=60.0, precipitation=None):
    """Daily observations starting at ``start``, one per temperature."""
    precipitation = precipitation or [0.0] * len(temperatures)
    return [
        WeatherObservation(
            location_id="harare",
            timestamp=start + timedelta(days=index),
            temperature=temperature,
            humidity=humidity,
            precipitation=precipitation[index],
            wind_speed=3.0,
        )
        for index, temperature in enumerate(temperatures)
    ]


class TestPatternAnalyzer(unittest.TestCase):
    """Test suite for the PatternAnalyzer class."""

    def setUp(self):
        self.start = datetime(2024, 1, 5, 12, tzinfo=timezone.utc)
        self.observations = make_observations(
            self.start,
            [20.0, 22.0, 24.0, 26.0, 28.0],
            precipitation=[0.0, 1.0, 2.0, 3.0, 4.0],
        )

    def test_statistics(self):
        """
        Test mean, population standard deviation and trend of each variable.
        """
        pattern = analyze(self.observations, SUMMER)

        self.assertFalse(pattern.insufficient_data)
        self.assertEqual(pattern.location_id, "harare")
        self.assertEqual(pattern.season, "summer")
        self.assertEqual(pattern.sample_count, 5)
        self.assertAlmostEqual(pattern.temperature.mean, 24.0)
        self.assertAlmostEqual(pattern.temperature.std, 8**0.5)
        self.assertAlmostEqual(pattern.temperature.trend, 2.0)
        self.assertAlmostEqual(pattern.humidity.std, 0.0)
        self.assertAlmostEqual(pattern.humidity.trend, 0.0)
        self.assertAlmostEqual(pattern.precipitation.trend, 1.0)
        self.assertAlmostEqual(pattern.total_precipitation, 10.0)

    def test_standard_deviation_is_never_negative(self):
        """Test that every variable's spread is zero or positive."""
        pattern = analyze(self.observations, SUMMER)
        for variable in ("temperature", "humidity", "precipitation"):
            self.assertGreaterEqual(pattern.statistics_for(variable).std, 0.0)

    def test_insufficient_data(self):
        """
        Test that fewer observations than the minimum produce a flagged
        pattern without statistics.
        """
        pattern = analyze(self.observations[:2], SUMMER)

        self.assertTrue(pattern.insufficient_data)
        self.assertEqual(pattern.sample_count, 2)
        self.assertIsNone(pattern.temperature)
        self.assertIsNone(pattern.humidity)
        self.assertIsNone(pattern.precipitation)
        self.assertEqual(pattern.anomalies, [])
        self.assertEqual(pattern.summary, "summer: insufficient data")

    def test_empty_observations(self):
        """Test that an empty series is flagged and has no location."""
        pattern = analyze([], SUMMER)
        self.assertTrue(pattern.insufficient_data)
        self.assertIsNone(pattern.location_id)
        self.assertEqual(pattern.sample_count, 0)

    def test_min_samples_is_configurable(self):
        """Test that the sample threshold comes from the config."""
        pattern = analyze(self.observations, SUMMER, EngineConfig(min_samples=6))
        self.assertTrue(pattern.insufficient_data)

    def test_detect_anomalies(self):
        """
        Test that a single outlier beyond two standard deviations is reported.
        """
        observations = make_observations(self.start, [20.0] * 9 + [40.0])
        pattern = analyze(observations, SUMMER)

        self.assertEqual(len(pattern.anomalies), 1)
        anomaly = pattern.anomalies[0]
        self.assertEqual(anomaly.variable, "temperature")
        self.assertEqual(anomaly.value, 40.0)
        self.assertIs(anomaly.observation, observations[-1])
        self.assertAlmostEqual(anomaly.deviation, 3.0)

    def test_no_anomalies_without_spread(self):
        """Test that identical values never produce anomalies."""
        observations = make_observations(self.start, [25.0] * 6)
        pattern = analyze(observations, SUMMER)

        self.assertEqual(pattern.temperature.std, 0.0)
        self.assertEqual(pattern.anomalies, [])

    def test_calculate_trend_single_value(self):
        """Test that the trend of a single value is zero."""
        analyzer = PatternAnalyzer(self.observations[:1], SUMMER)
        self.assertEqual(analyzer.calculate_trend("temperature"), 0.0)

    def test_summary(self):
        """Test the one-line summary of a sufficient pattern."""
        pattern = analyze(self.observations, SUMMER)
        self.assertEqual(
            pattern.summary,
            "summer: Avg 24.0°C (20.0-28.0°C), Precip 10.0mm, Humidity 60.0%",
        )


class TestAnalyzerFunctions(unittest.TestCase):
    """Test suite for the module level helpers."""

    def test_is_anomaly(self):
        """Test the anomaly bound is exclusive and needs a positive spread."""
        self.assertTrue(is_anomaly(31.0, 20.0, 5.0, 2.0))
        self.assertFalse(is_anomaly(30.0, 20.0, 5.0, 2.0))
        self.assertTrue(is_anomaly(9.0, 20.0, 5.0, 2.0))
        self.assertFalse(is_anomaly(100.0, 20.0, 0.0, 2.0))

    def test_is_anomaly_default_multiplier(self):
        """
        Test a season of 25°C +/- 2°C: 30°C (2.5σ) is anomalous, 26°C (0.5σ)
        is not.
        """
        multiplier = EngineConfig().anomaly_multiplier
        self.assertTrue(is_anomaly(30.0, 25.0, 2.0, multiplier))
        self.assertFalse(is_anomaly(26.0, 25.0, 2.0, multiplier))

    def test_classify_pattern(self):
        """Test the coarse classification of a season."""
        self.assertEqual(classify_pattern(30.0, 150.0), "hot_wet")
        self.assertEqual(classify_pattern(30.0, 20.0), "hot_dry")
        self.assertEqual(classify_pattern(10.0, 150.0), "cool_wet")
        self.assertEqual(classify_pattern(10.0, 20.0), "cool_dry")
        self.assertEqual(classify_pattern(20.0, 75.0), "moderate")

    def test_analyze_seasons(self):
        """
        Test that a mixed series is split by season before analysis.
        """
        january = make_observations(
            datetime(2024, 1, 1, tzinfo=timezone.utc), [28.0, 29.0, 30.0]
        )
        july = make_observations(
            datetime(2024, 7, 1, tzinfo=timezone.utc), [12.0, 13.0, 14.0, 15.0]
        )

        patterns = analyze_seasons(january + july)

        self.assertEqual(
            set(patterns), {"summer", "autumn", "winter", "spring"}
        )
        self.assertEqual(patterns["summer"].sample_count, 3)
        self.assertAlmostEqual(patterns["summer"].temperature.mean, 29.0)
        self.assertEqual(patterns["winter"].sample_count, 4)
        self.assertAlmostEqual(patterns["winter"].temperature.mean, 13.5)
        self.assertTrue(patterns["autumn"].insufficient_data)
        self.assertTrue(patterns["spring"].insufficient_data)

    def test_analyze_seasons_subset(self):
        """Test that only the requested seasons are analyzed."""
        observations = make_observations(
            datetime(2024, 7, 1, tzinfo=timezone.utc), [12.0, 13.0, 14.0]
        )
        patterns = analyze_seasons(observations, seasons=(WINTER,))
        self.assertEqual(list(patterns), ["winter"])

    def test_analyze_months(self):
        """
        Test that each calendar month with enough readings gets its own
        pattern, named after the month and in calendar order.
        """
        march = make_observations(
            datetime(2024, 3, 1, tzinfo=timezone.utc), [20.0, 21.0, 22.0, 23.0, 24.0]
        )
        january = make_observations(
            datetime(2024, 1, 1, tzinfo=timezone.utc),
            [30.0] * 6,
            precipitation=[20.0] * 6,
        )
        # Four readings are below the monthly minimum
        july = make_observations(
            datetime(2024, 7, 1, tzinfo=timezone.utc), [12.0, 13.0, 14.0, 15.0]
        )

        patterns = analyze_months(march + january + july)

        self.assertEqual(list(patterns), ["January", "March"])
        self.assertEqual(patterns["January"].season, "January")
        self.assertEqual(patterns["January"].sample_count, 6)
        self.assertEqual(patterns["January"].pattern_type, "hot_wet")
        self.assertTrue(patterns["January"].summary.startswith("January: Avg 30.0"))
        self.assertAlmostEqual(patterns["March"].temperature.mean, 22.0)
        self.assertAlmostEqual(patterns["March"].temperature.trend, 1.0)
        self.assertFalse(patterns["March"].insufficient_data)

    def test_analyze_months_minimum_is_configurable(self):
        observations = make_observations(
            datetime(2024, 7, 1, tzinfo=timezone.utc), [12.0, 13.0, 14.0]
        )
        self.assertEqual(analyze_months(observations), {})

        patterns = analyze_months(observations, EngineConfig(min_monthly_samples=3))
        self.assertEqual(list(patterns), ["July"])
        self.assertEqual(patterns["July"].sample_count, 3)


if __name__ == "__main__":
    unittest.main()
