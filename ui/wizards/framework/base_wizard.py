# -*- coding: utf-8 -*-
"""
Base Wizard - Abstract base class for all wizards.

Provides unified wizard UI with:
- Header with step badge, skip action and progress
- Step content page
- Navigation buttons (Previous, Next/Finish)
- Optional overlay page (e.g. quick tour)
"""

from typing import Callable, Optional
from abc import ABCMeta, abstractmethod

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QFrame, QStackedWidget, QSizePolicy
from PyQt5.QtCore import Qt, pyqtSignal

from services.wizard import StepCatalog
from ui.components.wizard_header import WizardHeader
from ui.components.wizard_footer import WizardFooter
from ui.design_system import Colors, Spacing, CardDimensions
from .step_content_view import StepContentView
from .wizard_controller import WizardController
from utils.logger import get_logger

logger = get_logger(__name__)


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


def create_card(max_width: int) -> QFrame:
    """Create a white rounded card frame."""
    card = QFrame()
    card.setObjectName("WizardCard")
    card.setMaximumWidth(max_width)
    card.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Maximum)
    card.setStyleSheet(f"""
        #WizardCard {{
            background-color: {Colors.SURFACE};
            border: 1px solid {Colors.BORDER_DEFAULT};
            border-radius: {CardDimensions.BORDER_RADIUS}px;
        }}
    """)
    return card


class BaseWizard(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizards.

    Subclasses must implement:
    - create_catalog(): Create and return the step catalog

    The wizard never closes itself: the host listens to wizard_completed
    (or passes on_complete) and disposes the wizard.
    """

    # Signals
    wizard_completed = pyqtSignal()

    PAGE_STEPS = 0
    PAGE_OVERLAY = 1

    def __init__(self, on_complete: Optional[Callable[[], None]] = None, parent: Optional[QWidget] = None):
        """
        Initialize the wizard.

        Args:
            on_complete: Zero-argument callback invoked once when the wizard concludes
            parent: Parent widget
        """
        super().__init__(parent)

        self.catalog = self.create_catalog()
        self.controller = WizardController(self.catalog, on_complete=on_complete, parent=self)

        # Connect controller signals
        self.controller.step_changed.connect(self._on_step_changed)
        self.controller.quick_tour_changed.connect(self._on_quick_tour_changed)
        self.controller.wizard_completed.connect(self.wizard_completed.emit)

        self._setup_ui()
        self._refresh()

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def create_catalog(self) -> StepCatalog:
        """
        Create and return the step catalog.

        Returns:
            StepCatalog instance
        """
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def get_wizard_title(self) -> str:
        """Get window title. Override to customize."""
        return "Wizard"

    def get_skip_text(self) -> str:
        return "Skip"

    def get_next_text(self) -> str:
        return "Next →"

    def get_submit_button_text(self) -> str:
        """Text of the Next button on the last step."""
        return "Finish"

    def create_overlay(self) -> Optional[QWidget]:
        """
        Create the page shown while the quick tour is active.

        Returns:
            Overlay widget, or None if the wizard has no quick tour
        """
        return None

    # =========================================================================
    # UI Setup
    # =========================================================================

    def _setup_ui(self):
        """Setup the wizard UI."""
        self.setWindowTitle(self.get_wizard_title())
        self.setStyleSheet(f"BaseWizard {{ background-color: {Colors.BACKGROUND}; }}")
        self.setAttribute(Qt.WA_StyledBackground, True)

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(Spacing.LG, Spacing.LG, Spacing.LG, Spacing.LG)

        self.pages = QStackedWidget()
        self.pages.addWidget(self._create_steps_page())

        self.overlay = self.create_overlay()
        if self.overlay is not None:
            self.pages.addWidget(self.overlay)

        main_layout.addWidget(self.pages, 1, Qt.AlignCenter)

    def _create_steps_page(self) -> QWidget:
        """Create the card holding header, step content and footer."""
        card = create_card(CardDimensions.WIZARD_MAX_WIDTH)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(
            CardDimensions.PADDING, CardDimensions.PADDING,
            CardDimensions.PADDING, CardDimensions.PADDING
        )
        layout.setSpacing(Spacing.XL)

        self.header = WizardHeader(show_skip=True, skip_text=self.get_skip_text())
        self.header.skip_clicked.connect(self.controller.skip)
        layout.addWidget(self.header)

        self.content_view = StepContentView()
        layout.addWidget(self.content_view)

        self.footer = WizardFooter(next_text=self.get_next_text())
        self.footer.previous_clicked.connect(self.controller.previous)
        self.footer.next_clicked.connect(self.controller.next)
        layout.addWidget(self.footer)

        return card

    # =========================================================================
    # Host API
    # =========================================================================

    def show_quick_tour(self):
        """Switch to the quick tour overlay (entry point for hosts)."""
        if self.overlay is None:
            raise RuntimeError(f"{self.__class__.__name__} has no quick tour overlay")
        self.controller.start_quick_tour()

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def _on_step_changed(self, old_index: int, new_index: int):
        """Handle step change."""
        self._refresh()

    def _on_quick_tour_changed(self, active: bool):
        if self.overlay is None:
            logger.warning(f"{self.__class__.__name__} has no quick tour overlay, staying on steps page")
            return
        self.pages.setCurrentIndex(self.PAGE_OVERLAY if active else self.PAGE_STEPS)

    def _refresh(self):
        """Render the current step, progress and navigation buttons."""
        self.content_view.set_step(self.controller.current_step())
        self.header.set_progress(
            self.controller.current_index,
            self.controller.step_count(),
            self.controller.progress()
        )

        self.footer.set_previous_visible(self.controller.can_go_previous())
        if self.controller.is_last_step():
            self.footer.set_next_text(self.get_submit_button_text())
        else:
            self.footer.set_next_text(self.get_next_text())
