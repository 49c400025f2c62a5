"""
Tests for the curve generator.
"""
import numpy as np
import pytest
from matplotlib.figure import Figure

from yieldpoint.config import CURVE_OVERSHOOT
from yieldpoint.model.curve import Curve, DataPoint, cached_curve, generate_curve
from yieldpoint.model.errors import InvalidArgumentError
from yieldpoint.model.phases import DeformationPhase
from yieldpoint.model.physics import classify_phase, stress_at
from yieldpoint.model.playback import query_state
from yieldpoint.model.thresholds import THRESHOLDS


class TestGenerateCurve:

    @pytest.mark.parametrize("resolution", [1, 7, 400, 600])
    def test_point_count_and_span(self, resolution):
        curve = generate_curve(resolution)
        assert len(curve) == resolution + 1
        assert curve.resolution == resolution
        assert curve.strains[0] == 0.0
        assert curve.max_strain == THRESHOLDS.fracture + CURVE_OVERSHOOT

    def test_strictly_increasing(self, curve):
        assert np.all(np.diff(curve.strains) > 0)

    def test_deterministic(self):
        a = generate_curve(600)
        b = generate_curve(600)
        assert np.array_equal(a.strains, b.strains)
        assert np.array_equal(a.stresses, b.stresses)
        assert np.array_equal(a.phase_indices, b.phase_indices)

    def test_samples_match_scalar_functions(self, curve):
        for point in curve.points[::17]:
            assert point.stress == stress_at(point.strain)
            assert point.phase == classify_phase(point.strain)

    def test_tail_past_fracture_is_zero(self, curve):
        tail = curve.strains >= THRESHOLDS.fracture
        assert tail.any()
        assert np.all(curve.stresses[tail] == 0.0)

    def test_custom_overshoot(self):
        curve = generate_curve(10, overshoot=0.0)
        assert curve.max_strain == THRESHOLDS.fracture
        assert curve[-1].phase == DeformationPhase.FRACTURE

    @pytest.mark.parametrize("resolution", [0, -5, 2.5, True, "400"])
    def test_invalid_resolution(self, resolution):
        with pytest.raises(InvalidArgumentError):
            generate_curve(resolution)

    def test_negative_overshoot(self):
        with pytest.raises(InvalidArgumentError):
            generate_curve(10, overshoot=-0.01)

    def test_numpy_integer_resolution(self):
        assert len(generate_curve(np.int64(20))) == 21


class TestCurveContainer:

    def test_items_are_data_points(self, curve):
        point = curve[0]
        assert isinstance(point, DataPoint)
        assert point == DataPoint(strain=0.0, stress=0.0, phase=DeformationPhase.ELASTIC)

    def test_iteration_matches_points(self, curve):
        assert list(curve) == list(curve.points)

    def test_data_points_are_frozen(self, curve):
        with pytest.raises(AttributeError):
            curve[3].stress = 1.0

    def test_arrays_are_read_only(self, curve):
        with pytest.raises(ValueError):
            curve.stresses[0] = 1.0

    def test_mismatched_arrays(self):
        with pytest.raises(InvalidArgumentError):
            Curve(strains=np.zeros(3), stresses=np.zeros(2), phase_indices=np.zeros(3, dtype=np.int64))

    def test_cached_curve_is_shared(self):
        assert cached_curve(50) is cached_curve(50)
        assert cached_curve(50) is not cached_curve(51)

    def test_plot_returns_figure(self, curve):
        fig = curve.plot(current=query_state(curve, 0.05), show=False)
        assert isinstance(fig, Figure)
        ax = fig.axes[0]
        assert ax.get_xlabel() == "Strain (ε)"
        assert ax.get_xlim() == (0.0, 0.16)
