"""
Tests for the playback query and the transport state functions.
"""
import pytest

from yieldpoint.config import LUDERS_SLOWDOWN, MILD_STEEL, PLAYBACK_DURATION_S
from yieldpoint.model import playback
from yieldpoint.model.curve import generate_curve
from yieldpoint.model.errors import InvalidArgumentError
from yieldpoint.model.phases import DeformationPhase
from yieldpoint.model.playback import SimulationState, query_state
from yieldpoint.model.thresholds import THRESHOLDS

FRACTURE = THRESHOLDS.fracture
RATE = FRACTURE / PLAYBACK_DURATION_S


# =============================================================================
# Query
# =============================================================================

class TestQueryState:

    def test_past_fracture_clamps(self, curve):
        result = query_state(curve, 0.5)
        assert result.strain == FRACTURE
        assert result.phase == DeformationPhase.FRACTURE
        assert result.stress == 0.0

    def test_negative_strain_clamps_to_zero(self, curve):
        result = query_state(curve, -0.2)
        assert result.strain == 0.0
        assert result.stress == 0.0
        assert result.phase == DeformationPhase.ELASTIC

    def test_strain_hardening_scenario(self, curve):
        result = query_state(curve, 0.08)
        assert result.phase == DeformationPhase.STRAIN_HARDENING
        assert MILD_STEEL.lower_yield_stress < result.stress < MILD_STEEL.ultimate_tensile_strength

    def test_stress_from_first_sample_at_or_above(self, curve):
        target = 0.05123
        result = query_state(curve, target)
        index = next(i for i, s in enumerate(curve.strains) if s >= target)
        assert result.stress == curve.stresses[index]
        assert result.strain == target

    def test_exact_sample_strain(self, curve):
        index = 123
        result = query_state(curve, float(curve.strains[index]))
        assert result.stress == curve.stresses[index]

    def test_phase_is_exact_not_quantised(self):
        """A coarse curve still reports the phase of the query strain itself."""
        coarse = generate_curve(4)
        result = query_state(coarse, 0.0017)
        assert result.phase == DeformationPhase.UPPER_YIELD
        assert result.stress == coarse.stresses[1]

    def test_last_sample_when_none_above(self):
        curve = generate_curve(3, overshoot=0.0)
        result = query_state(curve, FRACTURE)
        assert result.stress == curve.stresses[-1]

    def test_nan_rejected(self, curve):
        with pytest.raises(InvalidArgumentError):
            query_state(curve, float("nan"))


# =============================================================================
# Transport
# =============================================================================

class TestTransport:

    def test_paused_state_does_not_move(self):
        state = SimulationState(current_strain=0.01)
        assert playback.advance(state, 1.0) is state

    def test_advance_at_base_rate(self):
        state = SimulationState(is_playing=True)
        nxt = playback.advance(state, 1.0)
        assert nxt.current_strain == pytest.approx(RATE)
        assert nxt.is_playing

    def test_speed_multiplier(self):
        state = SimulationState(is_playing=True, playback_speed=2.0)
        assert playback.advance(state, 0.5).current_strain == pytest.approx(RATE)

    def test_luders_plateau_slowdown(self):
        state = SimulationState(current_strain=0.03, is_playing=True)
        nxt = playback.advance(state, 1.0)
        assert nxt.current_strain == pytest.approx(0.03 + RATE * LUDERS_SLOWDOWN)

    def test_stops_at_fracture(self):
        state = SimulationState(current_strain=0.149, is_playing=True)
        nxt = playback.advance(state, 1.0)
        assert nxt.current_strain == FRACTURE
        assert not nxt.is_playing

    def test_negative_tick_rejected(self):
        with pytest.raises(InvalidArgumentError):
            playback.advance(SimulationState(is_playing=True), -0.1)

    def test_toggle_play(self):
        state = playback.toggle_play(SimulationState())
        assert state.is_playing
        assert not playback.toggle_play(state).is_playing

    def test_reset_keeps_speed(self):
        state = SimulationState(current_strain=0.1, is_playing=True, playback_speed=2.0)
        assert playback.reset(state) == SimulationState(playback_speed=2.0)

    @pytest.mark.parametrize("percentage, strain", [
        (50.0, FRACTURE / 2),
        (0.0, 0.0),
        (100.0, FRACTURE),
        (150.0, FRACTURE),
        (-5.0, 0.0),
    ])
    def test_seek(self, percentage, strain):
        state = playback.seek(SimulationState(), percentage)
        assert state.current_strain == pytest.approx(strain)

    def test_progress(self):
        assert playback.progress(SimulationState(current_strain=FRACTURE / 4)) == pytest.approx(25.0)

    def test_set_speed(self):
        assert playback.set_speed(SimulationState(), 4).playback_speed == 4.0
        with pytest.raises(InvalidArgumentError):
            playback.set_speed(SimulationState(), 0.0)

    def test_full_run_reaches_fracture(self, curve):
        state = SimulationState(is_playing=True)
        ticks = 0
        while state.is_playing:
            state = playback.advance(state, 0.016)
            ticks += 1
        assert state.current_strain == FRACTURE
        assert query_state(curve, state.current_strain).phase == DeformationPhase.FRACTURE
        # the plateau slowdown makes the run longer than the nominal duration
        assert ticks * 0.016 > PLAYBACK_DURATION_S

    def test_timeline_markers(self):
        markers = playback.timeline_markers()
        assert [m.title for m in markers] == ["Upper Yield Point", "End of Plateau", "Start of Necking (UTS)"]
        assert markers[0].position == pytest.approx(1.2)
        assert markers[1].position == pytest.approx(70 / 1.5)
        assert markers[2].position == pytest.approx(80.0)
