"""
Specimen Widget
===============
Paints the tensile specimen, its grips and the Lüders bands with QPainter.
All geometry comes from `yieldpoint.model.specimen`; this widget only maps
scene coordinates onto the widget and picks colours.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QLinearGradient, QPainter, QPainterPath, QPen, QPolygonF, QTransform
from PySide6.QtWidgets import QWidget

from yieldpoint.model.phases import PHASE_METADATA, DeformationPhase
from yieldpoint.model.playback import QueryResult
from yieldpoint.model.specimen import SpecimenShape, active_bands, luders_bands, outline_path, specimen_shape

logger = logging.getLogger(__name__)

# Visible scene rectangle (x, y, w, h)
SCENE_RECT = QRectF(-250.0, -100.0, 500.0, 200.0)
GRIP_LENGTH = 40.0
GRIP_HALF_HEIGHT = 50.0
BAND_SKEW = -0.577  # tan(-30 deg)


class SpecimenView(QWidget):
    YIELDED_COLOR = QColor("#000080")
    GLOW_COLOR = QColor("#00f3ff")

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(400, 200)
        self.bands = luders_bands()
        self.phase = DeformationPhase.ELASTIC
        self.shape: SpecimenShape = specimen_shape(0.0, self.phase)

    def update_state(self, result: QueryResult) -> None:
        self.phase = result.phase
        self.shape = specimen_shape(result.strain, result.phase)
        self.update()

    def _scene_transform(self) -> QTransform:
        scale = min(self.width() / SCENE_RECT.width(), self.height() / SCENE_RECT.height())
        transform = QTransform()
        transform.translate(self.width() / 2, self.height() / 2)
        transform.scale(scale, scale)
        return transform

    @staticmethod
    def _path(polygons) -> QPainterPath:
        path = QPainterPath()
        for poly in polygons:
            path.addPolygon(QPolygonF([QPointF(float(x), float(y)) for x, y in poly]))
            path.closeSubpath()
        return path

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.setTransform(self._scene_transform())

        shape = self.shape
        half_w = shape.width / 2

        # Grips
        painter.setPen(QPen(QColor("#555555"), 2))
        painter.setBrush(QBrush(QColor("#333333")))
        painter.drawRect(QRectF(-half_w - GRIP_LENGTH, -GRIP_HALF_HEIGHT, GRIP_LENGTH, 2 * GRIP_HALF_HEIGHT))
        painter.drawRect(QRectF(half_w, -GRIP_HALF_HEIGHT, GRIP_LENGTH, 2 * GRIP_HALF_HEIGHT))

        # Body
        body = self._path(outline_path(shape))
        gradient = QLinearGradient(0, -shape.half_height, 0, shape.half_height)
        gradient.setColorAt(0.0, QColor("#777777"))
        gradient.setColorAt(0.5, QColor("#999999"))
        gradient.setColorAt(1.0, QColor("#777777"))
        if self.phase == DeformationPhase.ELASTIC:
            painter.setPen(QPen(QColor(PHASE_METADATA[self.phase].color), 2))
        else:
            painter.setPen(QPen(QColor("#666666"), 1))
        painter.setBrush(QBrush(gradient))
        painter.drawPath(body)

        # Lüders bands, clipped to the body
        painter.save()
        painter.setClipPath(body)
        painter.setPen(Qt.NoPen)
        for active in active_bands(shape, self.bands):
            skew = QTransform(1.0, 0.0, BAND_SKEW, 1.0, 0.0, 0.0)
            band_rect = QRectF(active.x_start, -GRIP_HALF_HEIGHT, active.width * 1.5, 2 * GRIP_HALF_HEIGHT)
            painter.setBrush(QBrush(self.YIELDED_COLOR))
            painter.setOpacity(0.9)
            painter.drawPolygon(skew.map(QPolygonF(band_rect)))
            if active.is_fresh:
                glow_rect = QRectF(active.x_start, -GRIP_HALF_HEIGHT, 2.0, 2 * GRIP_HALF_HEIGHT)
                painter.setBrush(QBrush(self.GLOW_COLOR))
                painter.setOpacity(0.8)
                painter.drawPolygon(skew.map(QPolygonF(glow_rect)))
        painter.restore()

        painter.end()
