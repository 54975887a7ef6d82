# -*- coding: utf-8 -*-
"""
Wizard Footer Component - Previous/Next navigation buttons.
"""

from PyQt5.QtWidgets import QWidget, QHBoxLayout
from PyQt5.QtCore import pyqtSignal

from ui.components.action_button import ActionButton
from ui.design_system import Spacing


class WizardFooter(QWidget):
    """
    Reusable wizard footer component.

    The Previous button is hidden (not just disabled) when there is no
    previous step; the Next button then takes the full width.

    Signals:
        previous_clicked: Emitted when Previous button is clicked
        next_clicked: Emitted when Next button is clicked

    Usage:
        footer = WizardFooter(next_text="Next →")
        footer.next_clicked.connect(controller.next)
    """

    # Signals
    previous_clicked = pyqtSignal()
    next_clicked = pyqtSignal()

    def __init__(self, next_text: str = "Next →", previous_text: str = "Previous", parent=None):
        """
        Initialize wizard footer.

        Args:
            next_text: Text for next button
            previous_text: Text for previous button
            parent: Parent widget
        """
        super().__init__(parent)
        self.next_text = next_text
        self.previous_text = previous_text

        self._setup_ui()

    def _setup_ui(self):
        """Setup footer UI."""
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(Spacing.MD)

        self.btn_previous = ActionButton(f"← {self.previous_text}", variant="outline")
        self.btn_previous.clicked.connect(self.previous_clicked.emit)
        layout.addWidget(self.btn_previous)

        self.btn_next = ActionButton(self.next_text, variant="primary")
        self.btn_next.clicked.connect(self.next_clicked.emit)
        layout.addWidget(self.btn_next)

    def set_previous_visible(self, visible: bool):
        """Show/hide previous button."""
        self.btn_previous.setVisible(visible)

    def set_next_text(self, text: str):
        """Update next button text."""
        self.btn_next.setText(text)
