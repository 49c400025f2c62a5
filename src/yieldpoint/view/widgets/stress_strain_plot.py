"""Live stress-strain chart."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
import pyqtgraph as pg
from PySide6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget
from PySide6.QtCore import Qt

from yieldpoint.config import CHART_MAX_STRAIN, CHART_MAX_STRESS
from yieldpoint.model.phases import PHASE_METADATA, DeformationPhase

if TYPE_CHECKING:
    from yieldpoint.model.curve import Curve
    from yieldpoint.model.playback import QueryResult

logger = logging.getLogger(__name__)


class StressStrainPlot(QWidget):
    """
    Ghost line of the full curve, the active line up to the cursor, and a dot
    at the current point. Lüders plateau and necking ranges are shaded.
    """

    GHOST_COLOR = '#bbbbbb'
    ACTIVE_COLOR = '#1f77b4'
    FRACTURE_COLOR = '#ff3333'

    def __init__(self, curve: Curve, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.curve = curve

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.plot_widget = pg.PlotWidget()
        self.plot_widget.setBackground('w')
        self.plot_widget.showGrid(x=False, y=True, alpha=0.3)
        self.plot_widget.setLabel('bottom', 'Strain (ε)', color='black')
        self.plot_widget.setLabel('left', 'Stress (σ) [MPa]', color='black')
        self.plot_widget.setTitle('Stress-Strain', color='black', size='12pt')
        for axis in ('bottom', 'left'):
            self.plot_widget.getAxis(axis).setPen('k')
            self.plot_widget.getAxis(axis).setTextPen('k')
        self.plot_widget.setXRange(0.0, CHART_MAX_STRAIN, padding=0)
        self.plot_widget.setYRange(0.0, CHART_MAX_STRESS, padding=0)
        self.plot_widget.setMouseEnabled(x=False, y=False)
        layout.addWidget(self.plot_widget)

        th = curve.thresholds
        for (x1, x2), phase in (
            ((th.lower_yield_start, th.plateau_end), DeformationPhase.LUDERS_PLATEAU),
            ((th.necking_start, th.fracture), DeformationPhase.NECKING),
        ):
            brush = pg.mkColor(PHASE_METADATA[phase].color)
            brush.setAlpha(20)
            region = pg.LinearRegionItem(values=(x1, x2), movable=False, brush=brush, pen=pg.mkPen(None))
            self.plot_widget.addItem(region)

        self.ghost_line = self.plot_widget.plot(
            curve.strains, curve.stresses, pen=pg.mkPen(color=self.GHOST_COLOR, width=2)
        )
        self.active_line = self.plot_widget.plot([], [], pen=pg.mkPen(color=self.ACTIVE_COLOR, width=3))
        self.cursor = pg.ScatterPlotItem(size=12, brush=pg.mkBrush('w'))
        self.plot_widget.addItem(self.cursor)

        # Overlay stats
        self.stats = QLabel(self)
        self.stats.setFrameShape(QFrame.StyledPanel)
        self.stats.setAlignment(Qt.AlignRight)
        self.stats.setStyleSheet("background: rgba(255, 255, 255, 200); font-family: monospace; padding: 4px;")
        layout.addWidget(self.stats)

    def update_state(self, result: QueryResult) -> None:
        mask = self.curve.strains <= result.strain
        is_fractured = result.phase == DeformationPhase.FRACTURE

        color = self.FRACTURE_COLOR if is_fractured else self.ACTIVE_COLOR
        self.active_line.setData(self.curve.strains[mask], self.curve.stresses[mask])
        self.active_line.setPen(pg.mkPen(color=color, width=3))

        if is_fractured:
            self.cursor.setData([], [])
        else:
            edge = PHASE_METADATA[result.phase].color
            self.cursor.setData(
                np.array([result.strain]), np.array([result.stress]),
                pen=pg.mkPen(color=edge, width=2),
            )

        self.stats.setText(
            f"<b>{result.phase.value.upper()}</b><br>"
            f"σ = {result.stress:.1f} MPa<br>"
            f"ε = {result.strain * 100:.2f} %"
        )
