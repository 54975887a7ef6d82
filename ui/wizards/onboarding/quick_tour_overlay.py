# -*- coding: utf-8 -*-
"""
Quick Tour Overlay - welcome bonus card shown instead of the step sequence.
"""

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel
from PyQt5.QtCore import Qt, pyqtSignal

from app.config import Config
from ui.components.action_button import ActionButton
from ui.design_system import Colors, Spacing, CardDimensions
from ui.font_utils import create_font, FontManager
from ui.wizards.framework.base_wizard import create_card
from ui.wizards.framework.step_content_view import icon_glyph


def format_eth(amount: float) -> str:
    """Format an ETH amount without trailing zeros (0.1, 0.25, 1)."""
    return f"{amount:.3f}".rstrip("0").rstrip(".")


class QuickTourOverlay(QWidget):
    """
    Welcome bonus card.

    Signals:
        start_exploring_clicked: Emitted when the user leaves the quick tour
    """

    start_exploring_clicked = pyqtSignal()

    def __init__(self, bonus_eth: float = None, parent=None):
        """
        Initialize the overlay.

        Args:
            bonus_eth: Bonus amount shown on the card (default: Config.WELCOME_BONUS_ETH)
            parent: Parent widget
        """
        super().__init__(parent)
        self.bonus_eth = Config.WELCOME_BONUS_ETH if bonus_eth is None else bonus_eth
        self._setup_ui()

    def _setup_ui(self):
        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)

        card = create_card(CardDimensions.QUICK_TOUR_MAX_WIDTH)
        outer.addWidget(card, 0, Qt.AlignCenter)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(
            CardDimensions.PADDING, CardDimensions.PADDING,
            CardDimensions.PADDING, CardDimensions.PADDING
        )
        layout.setSpacing(Spacing.LG)

        icon = QLabel(icon_glyph("gift"))
        icon.setAlignment(Qt.AlignCenter)
        icon.setFixedSize(CardDimensions.ICON_CIRCLE, CardDimensions.ICON_CIRCLE)
        icon.setFont(create_font(size=FontManager.SIZE_DISPLAY))
        icon.setStyleSheet(f"""
            QLabel {{
                background-color: {Colors.PRIMARY_SOFT};
                border-radius: {CardDimensions.ICON_CIRCLE // 2}px;
            }}
        """)
        layout.addWidget(icon, 0, Qt.AlignHCenter)

        self.title_label = QLabel("Welcome Bonus!")
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setFont(create_font(size=FontManager.SIZE_TITLE, weight=FontManager.WEIGHT_SEMIBOLD))
        self.title_label.setStyleSheet(f"color: {Colors.TEXT_PRIMARY}; background: transparent;")
        layout.addWidget(self.title_label)

        amount = format_eth(self.bonus_eth)
        self.description_label = QLabel(f"You've received {amount} ETH to start betting")
        self.description_label.setAlignment(Qt.AlignCenter)
        self.description_label.setWordWrap(True)
        self.description_label.setStyleSheet(f"color: {Colors.TEXT_SECONDARY}; background: transparent;")
        layout.addWidget(self.description_label)

        bonus_box = QWidget()
        bonus_box.setObjectName("BonusBox")
        bonus_box.setAttribute(Qt.WA_StyledBackground, True)
        bonus_box.setStyleSheet(f"""
            #BonusBox {{
                background-color: {Colors.PRIMARY_SOFT};
                border-radius: 8px;
            }}
        """)
        bonus_layout = QVBoxLayout(bonus_box)
        bonus_layout.setContentsMargins(Spacing.LG, Spacing.LG, Spacing.LG, Spacing.LG)
        bonus_layout.setSpacing(Spacing.XS)

        self.amount_label = QLabel(f"+{amount} ETH")
        self.amount_label.setAlignment(Qt.AlignCenter)
        self.amount_label.setFont(create_font(size=FontManager.SIZE_DISPLAY, weight=FontManager.WEIGHT_BOLD))
        self.amount_label.setStyleSheet(f"color: {Colors.PRIMARY}; background: transparent;")
        bonus_layout.addWidget(self.amount_label)

        wallet_note = QLabel("Added to your wallet")
        wallet_note.setAlignment(Qt.AlignCenter)
        wallet_note.setStyleSheet(f"color: {Colors.TEXT_SECONDARY}; background: transparent;")
        bonus_layout.addWidget(wallet_note)

        layout.addWidget(bonus_box)

        self.btn_start = ActionButton("Start Exploring", variant="primary")
        self.btn_start.clicked.connect(self.start_exploring_clicked.emit)
        layout.addWidget(self.btn_start)
