"""
Tests for the specimen geometry model.
"""
import numpy as np
import pytest

from yieldpoint.config import SPECIMEN_BASE_WIDTH, SPECIMEN_MAX_PINCH
from yieldpoint.model.phases import DeformationPhase
from yieldpoint.model.physics import classify_phase
from yieldpoint.model.specimen import (
    PLATEAU_DONE, active_bands, luders_bands, outline_path, specimen_shape
)
from yieldpoint.model.thresholds import THRESHOLDS


def shape_at(strain):
    return specimen_shape(strain, classify_phase(strain))


class TestSpecimenShape:

    def test_unloaded(self):
        shape = shape_at(0.0)
        assert shape.width == SPECIMEN_BASE_WIDTH
        assert shape.necking_amount == 0.0
        assert shape.plateau_progress == 0.0
        assert not shape.is_fractured

    def test_elongation_grows_with_strain(self):
        assert shape_at(0.1).width == pytest.approx(SPECIMEN_BASE_WIDTH + 30.0)

    def test_plateau_progress_midway(self):
        mid = (THRESHOLDS.lower_yield_start + THRESHOLDS.plateau_end) / 2
        assert shape_at(mid).plateau_progress == pytest.approx(0.5)

    def test_bands_persist_after_plateau(self):
        assert shape_at(0.09).plateau_progress == PLATEAU_DONE

    def test_necking_pinch(self):
        mid = (THRESHOLDS.necking_start + THRESHOLDS.fracture) / 2
        assert shape_at(mid).necking_amount == pytest.approx(SPECIMEN_MAX_PINCH / 2)

    def test_fractured(self):
        shape = shape_at(THRESHOLDS.fracture)
        assert shape.is_fractured
        assert shape.necking_amount == SPECIMEN_MAX_PINCH


class TestLudersBands:

    def test_deterministic_for_seed(self):
        assert luders_bands(seed=7) == luders_bands(seed=7)
        assert luders_bands(seed=7) != luders_bands(seed=8)

    def test_band_ranges(self):
        bands = luders_bands(50)
        assert len(bands) == 50
        assert [b.index for b in bands] == list(range(50))
        assert all(0.0 <= b.threshold < 1.0 for b in bands)
        assert all(0.8 <= b.width_factor < 1.2 for b in bands)

    def test_none_active_before_plateau(self):
        assert active_bands(shape_at(0.001), luders_bands()) == []

    def test_all_active_after_plateau(self):
        bands = luders_bands()
        active = active_bands(shape_at(0.1), bands)
        assert len(active) == len(bands)
        assert not any(a.is_fresh for a in active)

    def test_partial_during_plateau(self):
        bands = luders_bands()
        shape = shape_at((THRESHOLDS.lower_yield_start + THRESHOLDS.plateau_end) / 2)
        active = active_bands(shape, bands)
        assert len(active) == sum(b.threshold < shape.plateau_progress for b in bands)
        for a in active:
            assert a.is_fresh == (shape.plateau_progress - a.band.threshold < 0.05)


class TestOutline:

    def test_intact_single_polygon(self):
        polygons = outline_path(shape_at(0.13))
        assert len(polygons) == 1
        assert polygons[0].shape[1] == 2

    def test_straight_sides_before_necking(self):
        poly = outline_path(shape_at(0.05))[0]
        assert np.allclose(np.abs(poly[:, 1]), 30.0)

    def test_neck_is_pinched(self):
        poly = outline_path(shape_at(0.14))[0]
        assert np.abs(poly[:, 1]).max() == pytest.approx(30.0)
        assert np.abs(poly[:, 1]).min() < 30.0 - 1.0

    def test_fractured_two_halves(self):
        left, right = outline_path(shape_at(0.16))
        assert left[:, 0].max() <= 0.0
        assert right[:, 0].min() > 0.0
