"""Parametrized tests for heat-load behavior.

Uses pytest.mark.parametrize to check calculations across input ranges.
"""

import pytest

from heatload.engine import AddOpening, UpdateClimate, UpdateOpening, UpdateRoom, apply
from heatload.metrics import is_comfortable, size_system
from heatload.model import InsideCondition, default_project_state
from heatload.physics.thermal import round_half_up


class TestRoomVolume:
    """Parametrized tests for the derived room volume."""

    @pytest.fixture
    def state(self):
        """Create the default project."""
        return default_project_state()

    @pytest.mark.parametrize(
        "floor_area,height,expected_volume",
        [
            (150, 10, 1500),
            (200, 12, 2400),
            (12.5, 8.3, 104),  # 103.75 rounds half up
            (10, 0.25, 3),  # 2.5 rounds half up
            ("", 10, 0),  # blank input
            ("abc", 10, 0),  # garbage input
            (100, None, 0),
        ],
    )
    def test_volume_from_geometry(self, state, floor_area, height, expected_volume):
        """Test volume follows floor area × height."""
        state = apply(state, UpdateRoom({"floor_area": floor_area, "height": height}))
        assert state.room.volume == expected_volume
        assert state.room.volume == round_half_up(state.room.floor_area * state.room.height)

    @pytest.mark.parametrize("height", [8, 9.5, 11, 14.75])
    def test_volume_after_height_only(self, state, height):
        """Test editing only the height still refreshes the volume."""
        state = apply(state, UpdateRoom({"height": height}))
        assert state.room.volume == round_half_up(150 * height)


class TestComfortZone:
    """Parametrized tests for the ASHRAE 55 comfort check."""

    @pytest.mark.parametrize(
        "db,rh,expected",
        [
            (75, 50, True),  # default design
            (73, 60, True),  # lower DB bound, RH limit
            (79, 30, True),  # upper DB bound
            (72.9, 50, False),  # too cold
            (79.1, 50, False),  # too warm
            (82, 50, False),
            (75, 60.1, False),  # too humid
            ("", 50, False),  # blank DB reads as 0
        ],
    )
    def test_comfort(self, db, rh, expected):
        """Test comfort classification of inside conditions."""
        assert is_comfortable(InsideCondition(db=db, rh=rh)) is expected


class TestSizingGuards:
    """Parametrized tests for guarded sizing outputs."""

    @pytest.fixture
    def state(self):
        """Create the default project."""
        return default_project_state()

    @pytest.mark.parametrize(
        "adp,bypass_factor,expect_airflow",
        [
            (55, 0.10, True),
            (60, 0.05, True),
            (74.9, 0.10, True),
            (75, 0.10, False),  # no rise
            (80, 0.10, False),  # negative rise
            (55, 1.0, False),  # full bypass
            (55, 1.2, False),
        ],
    )
    def test_dehumidified_cfm_guard(self, state, adp, bypass_factor, expect_airflow):
        """Test dehumidified CFM is 0 whenever the rise is not positive."""
        result = size_system(state, {"adp": adp, "bypass_factor": bypass_factor})
        assert result.is_configured is expect_airflow
        if expect_airflow:
            assert result.deh_cfm > 0
            assert result.supply_air >= result.deh_cfm
        else:
            assert result.deh_cfm == 0
            assert result.supply_air == 0

    @pytest.mark.parametrize("infil_cfm", [0, 10, 50, 250, 1000])
    def test_eshf_bounds(self, state, infil_cfm):
        """Test 0 ≤ ESHF ≤ 1 when the room heat is positive."""
        state = apply(state, AddOpening({"infil_cfm": infil_cfm}))
        result = size_system(state)
        assert 0 <= result.eshf <= 1

    @pytest.mark.parametrize("outside_gr", [65, 80, 100, 150, 200])
    def test_eshf_bounds_across_humidity(self, state, outside_gr):
        """Test ESHF stays in range as outside air gets more humid."""
        state = apply(state, AddOpening({"infil_cfm": 100}))
        state = apply(state, UpdateClimate("outside", {"gr": outside_gr}, season="summer"))
        result = size_system(state)
        assert 0 <= result.eshf <= 1

    @pytest.mark.parametrize(
        "safety_factor,expected_ersh",
        [
            (0, 6974),
            (10, 7671),
            (20, 8369),
        ],
    )
    def test_safety_factor(self, state, safety_factor, expected_ersh):
        """Test ERSH scales with the safety factor."""
        assert size_system(state, {"safety_factor": safety_factor}).ersh == expected_ersh


class TestInfiltrationConsistency:
    """Parametrized tests for the stored infiltration airflow."""

    @pytest.mark.parametrize(
        "flows",
        [
            [],
            [30],
            [30, 20],
            [12.5, "7.5", ""],
            [100, "abc", 0],
        ],
    )
    def test_cfm_matches_openings(self, flows):
        """Test stored cfm equals the opening sum after every edit."""
        state = default_project_state()
        for flow in flows:
            state = apply(state, AddOpening({"infil_cfm": flow}))
            assert state.infiltration.cfm == state.infiltration.door_cfm
        for door in state.infiltration.doors:
            state = apply(state, UpdateOpening(door.id, "infil_cfm", 5))
            assert state.infiltration.cfm == state.infiltration.door_cfm
        assert state.infiltration.cfm == 5 * len(flows)
