"""
Unit tests for the reactor model and SCRAM logic.
"""

import logging

import numpy as np
import pytest

from plantsim.models.reactor import ReactorModel
from plantsim.safety.scram_logic import ALERT_THRESHOLDS, ScramSystem
from plantsim.tests.helpers import NOON, scripted_rng
from plantsim.types import ControlState, EmergencyKind, ParameterStatus, SimulationMode


def make_state(**changes):
    return ReactorModel(scripted_rng()).default_state(NOON).replace(**changes)


class TestReactorModel:
    """Test reactor tick behaviour."""

    def test_training_mode_is_frozen(self):
        """Test that training mode returns the same snapshot untouched."""
        model = ReactorModel(np.random.default_rng(1))
        state = make_state()
        control = ControlState(mode=SimulationMode.TRAINING)
        assert model.advance(state, control, NOON) is state

    def test_nominal_bounds(self, live):
        """Test that nominal operation stays within the nominal bands."""
        model = ReactorModel(np.random.default_rng(2))
        state = make_state()
        for _ in range(1000):
            state = model.advance(state, live, NOON)
            assert 315 <= state.core_temperature <= 330
            assert 15.0 <= state.primary_loop_pressure <= 15.8
            assert 52000 <= state.coolant_flow_rate <= 58000
            assert 100 <= state.containment_pressure <= 103
            assert 0.1 <= state.radiation_level <= 0.15
            assert all(0 <= rod <= 100 for rod in state.control_rod_positions)
            assert len(state.control_rod_positions) == 5
            assert not state.scram_active

    def test_emergency_volatility(self):
        """Test that an emergency quadruples the base noise."""
        rng = scripted_rng()
        model = ReactorModel(rng)
        model.advance(make_state(), ControlState(emergency_active=True,
                                                 emergency_kind=EmergencyKind.CYBER), NOON)
        assert rng.uniform.call_args_list[0].args == (-2.0, 2.0)

        rng = scripted_rng()
        ReactorModel(rng).advance(make_state(), ControlState(), NOON)
        assert rng.uniform.call_args_list[0].args == (-0.5, 0.5)

    def test_loca_widens_bands(self):
        """Test that LOCA raises the temperature and pressure ceilings and lowers the flow floor."""
        model = ReactorModel(scripted_rng(uniform=0.0))
        state = make_state(core_temperature=400.0, primary_loop_pressure=17.0,
                           coolant_flow_rate=30000.0, containment_pressure=120.0,
                           radiation_level=1.0)
        loca = ControlState(emergency_active=True, emergency_kind=EmergencyKind.LOCA)
        result = model.advance(state, loca, NOON)
        assert result.core_temperature == 380
        assert result.primary_loop_pressure == 16.5
        assert result.coolant_flow_rate == 40000
        assert result.containment_pressure == 115
        assert result.radiation_level == 0.8

        blackout = ControlState(emergency_active=True, emergency_kind=EmergencyKind.BLACKOUT)
        result = model.advance(state, blackout, NOON)
        assert result.core_temperature == 330
        assert result.primary_loop_pressure == 15.8
        assert result.coolant_flow_rate == 52000
        assert result.containment_pressure == 115

    def test_burnup_scales_with_time_multiplier(self):
        """Test burnup increments on its event, scaled by the time multiplier."""
        model = ReactorModel(scripted_rng(random_values=(0.0, 1.0)))
        result = model.advance(make_state(), ControlState(time_multiplier=10.0), NOON)
        assert result.fuel_burnup == pytest.approx(34.1)

    def test_burnup_capped_and_monotonic(self, live):
        """Test burnup never decreases and never exceeds 100."""
        model = ReactorModel(scripted_rng(random_values=(0.0, 1.0)))
        result = model.advance(make_state(fuel_burnup=99.995), live, NOON)
        assert result.fuel_burnup == 100.0

        model = ReactorModel(np.random.default_rng(5))
        state = make_state()
        for _ in range(500):
            new_state = model.advance(state, live, NOON)
            assert new_state.fuel_burnup >= state.fuel_burnup
            state = new_state

    def test_single_rod_drift(self, live):
        """Test that a rod event moves exactly the chosen rod."""
        model = ReactorModel(scripted_rng(random_values=(1.0, 0.0), uniform=0.3, integers=2))
        result = model.advance(make_state(), live, NOON)
        assert result.control_rod_positions == (65.0, 60.0, 70.3, 55.0, 62.0)

    def test_scram_trip_logged(self, caplog):
        """Test automatic trip on a threshold breach."""
        model = ReactorModel(scripted_rng(uniform=2.0))
        loca = ControlState(emergency_active=True, emergency_kind=EmergencyKind.LOCA)
        with caplog.at_level(logging.WARNING, logger="plantsim.models.reactor"):
            result = model.advance(make_state(core_temperature=339.0), loca, NOON)
        assert result.core_temperature == 341.0
        assert result.scram_active
        assert "SCRAM" in caplog.text

    def test_scram_clears_with_conditions(self, live):
        """Test that SCRAM is derived, not latched."""
        model = ReactorModel(scripted_rng(uniform=0.0))
        result = model.advance(make_state(scram_active=True), live, NOON)
        assert not result.scram_active

    def test_scram_matches_returned_values(self):
        """Test that SCRAM equals the threshold disjunction on every returned snapshot."""
        model = ReactorModel(np.random.default_rng(11))
        scram = ScramSystem()
        state = make_state()
        seen_trip = False
        for kind in EmergencyKind:
            control = ControlState(emergency_active=True, emergency_kind=kind)
            for _ in range(300):
                state = model.advance(state, control, NOON)
                assert state.scram_active == scram.check(state)
                seen_trip |= state.scram_active
        assert seen_trip


class TestScramSystem:
    """Test SCRAM thresholds, margins and display status."""

    @pytest.mark.parametrize("changes", [
        {"core_temperature": 340.01},
        {"primary_loop_pressure": 16.01},
        {"coolant_flow_rate": 49999.0},
        {"radiation_level": 0.51},
        {"containment_pressure": 110.01},
    ])
    def test_each_threshold_trips(self, changes):
        assert ScramSystem().check(make_state(**changes))

    def test_limits_are_not_trips(self):
        """Test that values exactly at the limits do not trip."""
        state = make_state(core_temperature=340.0, primary_loop_pressure=16.0,
                           coolant_flow_rate=50000.0, radiation_level=0.5,
                           containment_pressure=110.0)
        assert not ScramSystem().check(state)

    def test_threshold_values(self):
        assert ALERT_THRESHOLDS.high_core_temperature == 340
        assert ALERT_THRESHOLDS.high_primary_pressure == 16.0
        assert ALERT_THRESHOLDS.low_coolant_flow == 50000
        assert ALERT_THRESHOLDS.high_radiation == 0.5
        assert ALERT_THRESHOLDS.high_containment_pressure == 110

    def test_safety_margins(self):
        margins = ScramSystem().get_safety_margins(make_state())
        assert margins["core_temperature_margin"] == pytest.approx(20.0)
        assert margins["coolant_flow_margin"] == pytest.approx(5000.0)
        assert all(margin > 0 for margin in margins.values())

    def test_tripped_conditions(self):
        state = make_state(core_temperature=350.0, coolant_flow_rate=45000.0)
        assert ScramSystem().get_tripped_conditions(state) == [
            "High Core Temperature", "Low Coolant Flow"]

    def test_parameter_status(self):
        """Test normal/warning/danger bands."""
        scram = ScramSystem()
        assert set(scram.get_parameter_status(make_state()).values()) == {ParameterStatus.NORMAL}

        status = scram.get_parameter_status(make_state(
            core_temperature=332.0, primary_loop_pressure=16.0,
            coolant_flow_rate=51000.0, containment_pressure=106.0,
            radiation_level=0.3))
        assert status["core_temperature"] is ParameterStatus.WARNING
        assert status["primary_loop_pressure"] is ParameterStatus.DANGER
        assert status["coolant_flow_rate"] is ParameterStatus.WARNING
        assert status["containment_pressure"] is ParameterStatus.WARNING
        assert status["radiation_level"] is ParameterStatus.WARNING

        status = scram.get_parameter_status(make_state(coolant_flow_rate=49000.0))
        assert status["coolant_flow_rate"] is ParameterStatus.DANGER

    def test_summary(self):
        summary = ScramSystem().get_safety_status_summary(make_state(scram_active=True))
        assert "SCRAM Status: ACTIVE" in summary
        assert "High Radiation" in summary
