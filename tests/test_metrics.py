"""Tests for envelope totals, infiltration, comfort and ventilation metrics."""

import unittest
from dataclasses import replace

from heatload.core.config import ComfortBounds, VentilationRates
from heatload.metrics import (
    aggregate_infiltration,
    cleanroom_airflow,
    climate_differences,
    element_heat_gain,
    envelope_totals,
    internal_load_breakdown,
    is_comfortable,
    min_air_change_cfm,
    ventilation_requirement,
)
from heatload.model import (
    Elements,
    EnvelopeElement,
    InsideCondition,
    InternalLoads,
    Opening,
    Season,
    SeasonalValues,
    default_project_state,
)


class TestEnvelopeTotals(unittest.TestCase):
    """Test the seasonal heat gain table."""

    def setUp(self):
        self.state = default_project_state()

    def test_default_totals(self):
        """Test seasonal totals for the default project."""
        totals = envelope_totals(self.state.elements, self.state.internal_loads, self.state.room.floor_area)
        self.assertEqual(totals.summer, 6974)
        self.assertEqual(totals.monsoon, 6264)
        self.assertEqual(totals.winter, 5929)
        self.assertEqual(totals.get(Season.MONSOON), 6264)

    def test_empty_project(self):
        totals = envelope_totals(Elements(), InternalLoads(), 0)
        self.assertEqual((totals.summer, totals.monsoon, totals.winter), (0, 0, 0))

    def test_partitions_included(self):
        """Test that partitions count towards the heat gain table."""
        partition = EnvelopeElement(id=9, area=100.0, u_value=0.5, diff=SeasonalValues(10.0, 10.0, 10.0))
        elements = replace(self.state.elements, partitions=(partition,))
        totals = envelope_totals(elements, self.state.internal_loads, self.state.room.floor_area)
        self.assertEqual(totals.summer, 6974 + 500)
        self.assertEqual(totals.winter, 5929 + 500)

    def test_internal_loads_added_every_season(self):
        loads = InternalLoads()
        loads = replace(loads, equipment=replace(loads.equipment, kw=1.0))
        totals = envelope_totals(Elements(), loads, 0)
        self.assertEqual(totals.summer, 3412)
        self.assertEqual(totals.monsoon, 3412)
        self.assertEqual(totals.winter, 3412)

    def test_bad_values_count_as_zero(self):
        element = EnvelopeElement(id=1, area="abc", u_value=0.5, diff=SeasonalValues(10.0, 10.0, 10.0))  # type: ignore
        totals = envelope_totals(Elements(walls=(element,)), InternalLoads(), 0)
        self.assertEqual(totals.summer, 0)

    def test_element_heat_gain(self):
        glass = self.state.elements.glass[0]
        self.assertEqual(element_heat_gain(glass, Season.SUMMER), 1190)
        self.assertEqual(element_heat_gain(glass, Season.WINTER), 340)

    def test_internal_load_breakdown(self):
        breakdown = internal_load_breakdown(self.state.internal_loads, self.state.room.floor_area)
        self.assertEqual(breakdown.people_sensible, 980)
        self.assertEqual(breakdown.people_latent, 820)
        self.assertEqual(breakdown.lights, 563)
        self.assertEqual(breakdown.equipment, 1706)


class TestInfiltration(unittest.TestCase):
    """Test aggregation of opening airflow."""

    def test_empty(self):
        totals = aggregate_infiltration(())
        self.assertEqual(totals.total_infil_cfm, 0.0)
        self.assertEqual(totals.total_exfil_cfm, 0.0)

    def test_sum(self):
        doors = (
            Opening(id=1, infil_cfm=30.0, exfil_cfm=5.0),
            Opening(id=2, infil_cfm=20.5, exfil_cfm="x"),  # type: ignore
        )
        totals = aggregate_infiltration(doors)
        self.assertEqual(totals.total_infil_cfm, 50.5)
        self.assertEqual(totals.total_exfil_cfm, 5.0)


class TestComfort(unittest.TestCase):
    """Test the ASHRAE 55 comfort check."""

    def test_default_inside_is_comfortable(self):
        self.assertTrue(is_comfortable(default_project_state().climate.inside))

    def test_too_warm(self):
        self.assertFalse(is_comfortable(InsideCondition(db=82.0, rh=50.0)))

    def test_too_humid(self):
        self.assertFalse(is_comfortable(InsideCondition(db=75.0, rh=65.0)))

    def test_custom_bounds(self):
        bounds = ComfortBounds(db_min=68.0, db_max=74.0, rh_max=55.0)
        self.assertTrue(is_comfortable(InsideCondition(db=70.0, rh=50.0), bounds))
        self.assertFalse(is_comfortable(InsideCondition(db=75.0, rh=50.0), bounds))

    def test_climate_differences(self):
        """Test outside minus inside dry bulb and humidity ratio."""
        differences = climate_differences(default_project_state().climate)
        self.assertEqual(differences[Season.SUMMER].db, 30.0)
        self.assertEqual(differences[Season.SUMMER].gr, 35.0)
        self.assertEqual(differences[Season.MONSOON].gr, 85.0)
        self.assertEqual(differences[Season.WINTER].db, -20.0)
        self.assertEqual(differences[Season.WINTER].gr, -25.0)


class TestVentilation(unittest.TestCase):
    """Test outdoor air and air change requirements."""

    def test_default_requirement(self):
        result = ventilation_requirement(150, 4)
        self.assertAlmostEqual(result.cfm_people, 20.0)
        self.assertAlmostEqual(result.cfm_area, 9.0)
        self.assertEqual(result.total_cfm, 29)
        self.assertEqual(result.formula, "(5 × 4p) + (0.06 × 150ft²) = 29 CFM")

    def test_rounds_up(self):
        # 5 * 1 + 0.06 * 10 = 5.6
        self.assertEqual(ventilation_requirement(10, 1).total_cfm, 6)

    def test_custom_rates(self):
        result = ventilation_requirement(100, 2, VentilationRates(people_cfm=10.0, area_cfm=0.12))
        self.assertEqual(result.total_cfm, 32)

    def test_bad_input_is_zero(self):
        self.assertEqual(ventilation_requirement("", None).total_cfm, 0)

    def test_min_air_change_cfm(self):
        self.assertAlmostEqual(min_air_change_cfm(default_project_state().room), 12.5)

    def test_cleanroom_airflow(self):
        """Test the supply airflow band of an ISO class."""
        airflow = cleanroom_airflow(default_project_state().room, "ISO 7")
        self.assertEqual(airflow.ach_min, 60.0)
        self.assertEqual(airflow.ach_max, 90.0)
        self.assertAlmostEqual(airflow.cfm_min, 1500.0)
        self.assertAlmostEqual(airflow.cfm_max, 2250.0)

    def test_cleanroom_airflow_unknown_class(self):
        self.assertIsNone(cleanroom_airflow(default_project_state().room, "ISO 1"))


if __name__ == "__main__":
    unittest.main()
