# -*- coding: utf-8 -*-
"""
Action Button Component - Reusable button with consistent styling.

Single source of button styling for the wizard footer, header and
quick tour card.
"""

from typing import Optional

from PyQt5.QtWidgets import QPushButton, QSizePolicy
from PyQt5.QtCore import Qt

from ui.design_system import Colors
from ui.font_utils import create_font, FontManager


class ActionButton(QPushButton):
    """
    Reusable action button with consistent styling.

    Variants:
    - primary: solid violet - main actions (Next, Get Started, Start Exploring)
    - outline: bordered - secondary actions (Previous)
    - ghost: text only - low emphasis actions (Skip Tutorial)

    Usage:
        btn = ActionButton("Next", variant="primary")
        btn = ActionButton("Skip Tutorial", variant="ghost", height=32)
    """

    VARIANTS = ("primary", "outline", "ghost")

    def __init__(
        self,
        text: str,
        variant: str = "primary",
        width: Optional[int] = None,
        height: int = 40,
        parent=None
    ):
        """
        Initialize action button.

        Args:
            text: Button text
            variant: "primary", "outline" or "ghost"
            width: Fixed width in pixels; None lets the button stretch
            height: Button height in pixels
            parent: Parent widget
        """
        super().__init__(text, parent)
        if variant not in self.VARIANTS:
            raise ValueError(f"Unknown button variant: {variant}")

        self.variant = variant
        self.setCursor(Qt.PointingHandCursor)
        self.setFont(create_font(size=FontManager.SIZE_BODY, weight=FontManager.WEIGHT_MEDIUM))
        self.setFixedHeight(height)
        if width is not None:
            self.setFixedWidth(width)
        else:
            self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)

        self._apply_style(variant)

    def _apply_style(self, variant: str):
        """Apply button styling based on variant."""
        if variant == "primary":
            self.setStyleSheet(f"""
                QPushButton {{
                    background-color: {Colors.PRIMARY};
                    color: {Colors.TEXT_ON_PRIMARY};
                    border: none;
                    padding: 8px 12px;
                    border-radius: 6px;
                }}
                QPushButton:hover {{
                    background-color: {Colors.PRIMARY_HOVER};
                }}
                QPushButton:disabled {{
                    background-color: {Colors.BUTTON_DISABLED};
                }}
            """)
        elif variant == "outline":
            self.setStyleSheet(f"""
                QPushButton {{
                    background-color: {Colors.SURFACE};
                    color: {Colors.TEXT_PRIMARY};
                    border: 1px solid {Colors.BORDER_DEFAULT};
                    padding: 8px 12px;
                    border-radius: 6px;
                }}
                QPushButton:hover {{
                    background-color: {Colors.BUTTON_OUTLINE_HOVER};
                }}
            """)
        else:
            self.setStyleSheet(f"""
                QPushButton {{
                    background: transparent;
                    color: {Colors.TEXT_SECONDARY};
                    border: none;
                    padding: 4px 8px;
                }}
                QPushButton:hover {{
                    color: {Colors.TEXT_PRIMARY};
                }}
            """)
