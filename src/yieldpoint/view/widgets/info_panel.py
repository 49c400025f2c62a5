"""Panel explaining the current deformation phase."""
from typing import Optional

from PySide6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget

from yieldpoint.model.phases import PHASE_METADATA, DeformationPhase


class InfoPanel(QFrame):
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setFrameShape(QFrame.StyledPanel)
        self.setMaximumWidth(460)

        layout = QVBoxLayout(self)
        self.title = QLabel()
        self.description = QLabel()
        self.description.setWordWrap(True)
        layout.addWidget(self.title)
        layout.addWidget(self.description)

        self._phase: Optional[DeformationPhase] = None
        self.set_phase(DeformationPhase.ELASTIC)

    def set_phase(self, phase: DeformationPhase) -> None:
        if phase == self._phase:
            return
        self._phase = phase
        meta = PHASE_METADATA[phase]
        self.title.setText(f"<b>{meta.title.upper()}</b>")
        self.description.setText(meta.description)
        self.setStyleSheet(f"InfoPanel {{ border-left: 4px solid {meta.color}; }}")
