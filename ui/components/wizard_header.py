# -*- coding: utf-8 -*-
"""
Wizard Header Component - Step badge, skip action and progress bar.
"""

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QProgressBar
from PyQt5.QtCore import pyqtSignal

from ui.components.action_button import ActionButton
from ui.design_system import Colors, Spacing
from ui.font_utils import create_font, FontManager


class WizardHeader(QWidget):
    """
    Reusable wizard header component.

    Features:
    - "Step X of N" badge
    - Optional skip button
    - Progress bar driven by a percentage

    Signals:
        skip_clicked: Emitted when the skip button is clicked

    Usage:
        header = WizardHeader(skip_text="Skip Tutorial")
        header.skip_clicked.connect(controller.skip)
        header.set_progress(0, 6, 16.67)
    """

    skip_clicked = pyqtSignal()

    def __init__(self, show_skip: bool = True, skip_text: str = "Skip", parent=None):
        """
        Initialize wizard header.

        Args:
            show_skip: Whether to show the skip button
            skip_text: Text for the skip button
            parent: Parent widget
        """
        super().__init__(parent)
        self.show_skip = show_skip
        self.skip_text = skip_text

        self._setup_ui()

    def _setup_ui(self):
        """Setup header UI."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(Spacing.LG)

        top_row = QHBoxLayout()
        top_row.setSpacing(Spacing.SM)

        self.step_badge = QLabel("")
        self.step_badge.setFont(create_font(size=FontManager.SIZE_SMALL, weight=FontManager.WEIGHT_MEDIUM))
        self.step_badge.setStyleSheet(f"""
            QLabel {{
                color: {Colors.TEXT_PRIMARY};
                border: 1px solid {Colors.BORDER_DEFAULT};
                border-radius: 9px;
                padding: 2px 8px;
                background: transparent;
            }}
        """)
        top_row.addWidget(self.step_badge)
        top_row.addStretch()

        if self.show_skip:
            self.btn_skip = ActionButton(self.skip_text, variant="ghost", width=120, height=32)
            self.btn_skip.clicked.connect(self.skip_clicked.emit)
            top_row.addWidget(self.btn_skip)

        layout.addLayout(top_row)

        self.progress_bar = QProgressBar()
        self.progress_bar.setRange(0, 100)
        self.progress_bar.setValue(0)
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedHeight(6)
        self.progress_bar.setStyleSheet(f"""
            QProgressBar {{
                border: none;
                background-color: {Colors.PROGRESS_TRACK};
                border-radius: 3px;
            }}
            QProgressBar::chunk {{
                background-color: {Colors.PROGRESS_CHUNK};
                border-radius: 3px;
            }}
        """)
        layout.addWidget(self.progress_bar)

    def set_progress(self, current_index: int, step_count: int, percentage: float):
        """
        Update badge and progress bar.

        Args:
            current_index: Current step index (0-based)
            step_count: Total number of steps
            percentage: Progress percentage (0-100)
        """
        self.step_badge.setText(f"Step {current_index + 1} of {step_count}")
        self.progress_bar.setValue(round(percentage))
