# -*- coding: utf-8 -*-
"""
Font Utilities

Single place for font configuration. Widgets get their fonts from
create_font() instead of setting font properties in QSS.

Usage:
    from ui.font_utils import create_font, FontManager

    label.setFont(create_font(size=FontManager.SIZE_TITLE, weight=FontManager.WEIGHT_SEMIBOLD))
"""

from typing import List, Optional

from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import QApplication

# CSS weights -> Qt5 0-99 weight scale
_QT_WEIGHTS = {
    400: QFont.Normal,
    500: QFont.Medium,
    600: QFont.DemiBold,
    700: QFont.Bold,
}


class FontManager:
    """Font configuration constants and factory."""

    PRIMARY_FONT_FAMILY = "Inter"
    FALLBACK_FONT_FAMILY = "Segoe UI"

    # Default sizes (in points)
    SIZE_SMALL = 8
    SIZE_BODY = 10
    SIZE_SUBHEADING = 12
    SIZE_TITLE = 16
    SIZE_DISPLAY = 20

    # Weights
    WEIGHT_REGULAR = 400
    WEIGHT_MEDIUM = 500
    WEIGHT_SEMIBOLD = 600
    WEIGHT_BOLD = 700

    @staticmethod
    def create_font(
        size: int = SIZE_BODY,
        weight: int = WEIGHT_REGULAR,
        families: Optional[List[str]] = None
    ) -> QFont:
        """
        Create a QFont.

        Args:
            size: Font size in points
            weight: CSS-style weight (400, 600, ...)
            families: Font family list (default: primary + fallback)
        """
        if families is None:
            families = [FontManager.PRIMARY_FONT_FAMILY, FontManager.FALLBACK_FONT_FAMILY]

        font = QFont()
        font.setFamilies(families)
        font.setPointSize(size)
        font.setWeight(_QT_WEIGHTS.get(weight, QFont.Normal))
        return font


def create_font(
    size: int = FontManager.SIZE_BODY,
    weight: int = FontManager.WEIGHT_REGULAR,
    families: Optional[List[str]] = None
) -> QFont:
    """Convenience wrapper for FontManager.create_font()."""
    return FontManager.create_font(size, weight, families)


def set_application_default_font():
    """
    Set default font for entire application.

    Should be called once at application startup.
    """
    QApplication.setFont(create_font())
