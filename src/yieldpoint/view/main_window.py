"""
Main Application Window
=======================
The primary GUI container: specimen on the left, live chart on the right,
phase description and transport controls below.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects the controls to the PlaybackController and the
   controller's state broadcasts back to every widget.
"""
import logging

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QMainWindow, QMessageBox, QSplitter, QVBoxLayout, QWidget

from yieldpoint.controller.playback import PlaybackController
from yieldpoint.model.errors import YieldPointError
from yieldpoint.model.playback import QueryResult, SimulationState
from yieldpoint.view.widgets.controls import Controls
from yieldpoint.view.widgets.info_panel import InfoPanel
from yieldpoint.view.widgets.specimen_view import SpecimenView
from yieldpoint.view.widgets.stress_strain_plot import StressStrainPlot

logger = logging.getLogger(__name__)

VISIBLE_APP_NAME = "Yield Point Phenomenon | Simulator"


class MainWindow(QMainWindow):
    def __init__(self, controller: PlaybackController) -> None:
        super().__init__()
        self.controller = controller

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1400, 800)

        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QVBoxLayout(main_widget)

        # --- Specimen | Chart ---
        splitter = QSplitter(Qt.Horizontal)
        self.specimen_view = SpecimenView()
        self.chart = StressStrainPlot(controller.curve)
        splitter.addWidget(self.specimen_view)
        splitter.addWidget(self.chart)
        splitter.setStretchFactor(0, 5)
        splitter.setStretchFactor(1, 7)
        main_layout.addWidget(splitter, 1)

        # --- Info ---
        info_row = QHBoxLayout()
        self.info_panel = InfoPanel()
        info_row.addWidget(self.info_panel)
        info_row.addStretch(1)
        main_layout.addLayout(info_row)

        # --- Controls ---
        self.controls = Controls()
        main_layout.addWidget(self.controls)

        self.controls.play_pause_clicked.connect(controller.play_pause)
        self.controls.reset_clicked.connect(controller.reset)
        self.controls.seek_requested.connect(controller.seek)
        self.controls.speed_changed.connect(self._on_speed_changed)
        controller.state_changed.connect(self._on_state_changed)

        self._on_state_changed(controller.state, controller.current())

    def _on_speed_changed(self, speed: float) -> None:
        try:
            self.controller.set_speed(speed)
        except YieldPointError as e:
            logger.exception("Failed to change playback speed")
            QMessageBox.critical(self, "Playback error", str(e))

    def _on_state_changed(self, state: SimulationState, result: QueryResult) -> None:
        self.specimen_view.update_state(result)
        self.chart.update_state(result)
        self.info_panel.set_phase(result.phase)
        self.controls.set_progress(self.controller.progress(), state.is_playing)
