# -*- coding: utf-8 -*-
"""
Step Content View - read-only rendering of a step's page content.
"""

from typing import List, Optional

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel
from PyQt5.QtCore import Qt

from services.wizard import Step
from ui.design_system import Colors, Spacing, CardDimensions
from ui.font_utils import create_font, FontManager

# Symbolic icon names used in step catalogs
ICON_GLYPHS = {
    "target": "🎯",
    "trending-up": "📈",
    "shield": "🛡",
    "wallet": "👛",
    "users": "👥",
    "zap": "⚡",
    "gift": "🎁",
}


def icon_glyph(name: Optional[str]) -> str:
    return ICON_GLYPHS.get(name or "", "")


class StepContentView(QWidget):
    """
    Shows the current step: icon, title, description and highlights.

    The view never changes the step; the wizard calls set_step() whenever
    the controller moves.
    """

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.highlight_labels: List[QLabel] = []
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(Spacing.MD)

        self.icon_label = QLabel("")
        self.icon_label.setAlignment(Qt.AlignCenter)
        self.icon_label.setFixedSize(CardDimensions.ICON_CIRCLE, CardDimensions.ICON_CIRCLE)
        self.icon_label.setFont(create_font(size=FontManager.SIZE_DISPLAY))
        self.icon_label.setStyleSheet(f"""
            QLabel {{
                background-color: {Colors.PRIMARY_SOFT};
                border-radius: {CardDimensions.ICON_CIRCLE // 2}px;
            }}
        """)
        layout.addWidget(self.icon_label, 0, Qt.AlignHCenter)

        self.title_label = QLabel("")
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setWordWrap(True)
        self.title_label.setFont(create_font(size=FontManager.SIZE_TITLE, weight=FontManager.WEIGHT_SEMIBOLD))
        self.title_label.setStyleSheet(f"color: {Colors.TEXT_PRIMARY}; background: transparent;")
        layout.addWidget(self.title_label)

        self.description_label = QLabel("")
        self.description_label.setAlignment(Qt.AlignCenter)
        self.description_label.setWordWrap(True)
        self.description_label.setStyleSheet(f"color: {Colors.TEXT_SECONDARY}; background: transparent;")
        layout.addWidget(self.description_label)

        layout.addSpacing(Spacing.MD)

        self.highlights_layout = QVBoxLayout()
        self.highlights_layout.setSpacing(Spacing.MD)
        layout.addLayout(self.highlights_layout)

    def set_step(self, step: Step):
        """Render a step's content."""
        self.icon_label.setText(icon_glyph(step.icon))
        self.icon_label.setVisible(bool(step.icon))
        self.title_label.setText(step.content.title)
        self.description_label.setText(step.content.description)
        self._set_highlights(step.content.highlights)

    def _set_highlights(self, highlights):
        # Rows are rebuilt; highlight count can differ between steps
        while self.highlights_layout.count():
            item = self.highlights_layout.takeAt(0)
            row = item.layout()
            while row is not None and row.count():
                widget = row.takeAt(0).widget()
                if widget is not None:
                    widget.deleteLater()
            if row is not None:
                row.deleteLater()
        self.highlight_labels = []

        for highlight in highlights:
            row = QHBoxLayout()
            row.setSpacing(Spacing.MD)

            check = QLabel("✓")
            check.setFixedWidth(20)
            check.setStyleSheet(f"color: {Colors.PRIMARY}; background: transparent;")
            row.addWidget(check)

            label = QLabel(highlight)
            label.setWordWrap(True)
            label.setStyleSheet(f"color: {Colors.TEXT_SECONDARY}; background: transparent;")
            row.addWidget(label, 1)

            self.highlights_layout.addLayout(row)
            self.highlight_labels.append(label)
