"""
Blockcast Design System

Design tokens shared by the onboarding widgets: colors, spacing and
component dimensions.
"""


class Colors:
    """
    Color palette (dark theme is the application default)
    """
    # Primary Colors
    PRIMARY = "#7C3AED"  # Blockcast violet
    PRIMARY_HOVER = "#6D28D9"
    PRIMARY_SOFT = "#EDE9FE"  # Icon circles, bonus card background
    SECONDARY = "#0EA5E9"

    # Surfaces
    BACKGROUND = "#0B0B12"  # Backdrop behind the wizard card
    SURFACE = "#FFFFFF"  # Card
    SURFACE_MUTED = "#F4F4F5"

    # Text Colors
    TEXT_PRIMARY = "#18181B"
    TEXT_SECONDARY = "#71717A"
    TEXT_ON_PRIMARY = "#FFFFFF"

    # Border & Divider Colors
    BORDER_DEFAULT = "#E4E4E7"

    # Button States
    BUTTON_OUTLINE_HOVER = "#F4F4F5"
    BUTTON_DISABLED = "#A1A1AA"

    # Progress bar
    PROGRESS_TRACK = "#E4E4E7"
    PROGRESS_CHUNK = PRIMARY


class Spacing:
    """Spacing scale in pixels."""
    XS = 4
    SM = 8
    MD = 12
    LG = 16
    XL = 24


class CardDimensions:
    """Onboarding card dimensions."""
    WIZARD_MAX_WIDTH = 512
    QUICK_TOUR_MAX_WIDTH = 448
    PADDING = 24
    BORDER_RADIUS = 12
    ICON_CIRCLE = 64
