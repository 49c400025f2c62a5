"""Transport controls: reset, play/pause, speed and the timeline slider."""
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QColor, QPainter, QPen
from PySide6.QtWidgets import (
    QComboBox, QHBoxLayout, QLabel, QPushButton, QSlider, QVBoxLayout, QWidget
)

from yieldpoint.model.phases import PHASE_METADATA
from yieldpoint.model.playback import TimelineMarker, timeline_markers

# Slider works in tenths of a percent
SLIDER_STEPS = 1000
SPEEDS = (0.5, 1.0, 2.0, 4.0)


class TimelineSlider(QSlider):
    """Horizontal slider with tick marks at the key events of the test."""

    def __init__(self, markers: tuple[TimelineMarker, ...], parent: Optional[QWidget] = None) -> None:
        super().__init__(Qt.Horizontal, parent)
        self.markers = markers
        self.setRange(0, SLIDER_STEPS)
        self.setToolTip("\n".join(f"{m.position:.1f}% - {m.title}" for m in markers))

    def paintEvent(self, event) -> None:
        super().paintEvent(event)
        painter = QPainter(self)
        for marker in self.markers:
            x = int(marker.position / 100.0 * self.width())
            painter.setPen(QPen(QColor(PHASE_METADATA[marker.phase].color), 2))
            painter.drawLine(x, self.height() - 6, x, self.height())
        painter.end()


class Controls(QWidget):
    play_pause_clicked = Signal()
    reset_clicked = Signal()
    seek_requested = Signal(float)  # percent
    speed_changed = Signal(float)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        layout = QHBoxLayout(self)

        self.reset_btn = QPushButton("Reset")
        self.reset_btn.clicked.connect(self.reset_clicked)
        layout.addWidget(self.reset_btn)

        self.play_btn = QPushButton("Play")
        self.play_btn.clicked.connect(self.play_pause_clicked)
        layout.addWidget(self.play_btn)

        self.speed_combo = QComboBox()
        for speed in SPEEDS:
            self.speed_combo.addItem(f"{speed:g}x", speed)
        self.speed_combo.setCurrentIndex(SPEEDS.index(1.0))
        self.speed_combo.currentIndexChanged.connect(
            lambda idx: self.speed_changed.emit(float(self.speed_combo.itemData(idx)))
        )
        layout.addWidget(self.speed_combo)

        timeline = QVBoxLayout()
        labels = QHBoxLayout()
        for text in ("START", "YIELD", "PLATEAU", "HARDENING", "NECK"):
            labels.addWidget(QLabel(text), alignment=Qt.AlignCenter)
        timeline.addLayout(labels)

        self.slider = TimelineSlider(timeline_markers())
        self.slider.sliderMoved.connect(lambda value: self.seek_requested.emit(value / SLIDER_STEPS * 100.0))
        timeline.addWidget(self.slider)
        layout.addLayout(timeline, 1)

        self.progress_label = QLabel("0.0% SIM")
        self.progress_label.setMinimumWidth(90)
        self.progress_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        layout.addWidget(self.progress_label)

    def set_progress(self, percentage: float, is_playing: bool) -> None:
        self.play_btn.setText("Pause" if is_playing else "Play")
        if not self.slider.isSliderDown():
            self.slider.blockSignals(True)
            self.slider.setValue(int(round(percentage / 100.0 * SLIDER_STEPS)))
            self.slider.blockSignals(False)
        self.progress_label.setText(f"{percentage:.1f}% SIM")
