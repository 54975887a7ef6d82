# -*- coding: utf-8 -*-
"""
Step catalog for multi-step wizards.

Holds the fixed, ordered set of step definitions without UI coupling.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from services.exceptions import InvalidCatalogError, StepOutOfRangeError
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class StepContent:
    """Page content rendered for a step."""
    title: str
    description: str
    highlights: Tuple[str, ...] = ()

    def __post_init__(self):
        # Never alias a caller's list
        object.__setattr__(self, "highlights", tuple(self.highlights))


@dataclass(frozen=True)
class Step:
    """
    One immutable catalog entry.

    The id is the step's position in its catalog (0-based).
    """
    id: int
    title: str
    short_description: str
    content: StepContent
    icon: Optional[str] = None  # display hint only


class StepCatalog:
    """
    Immutable, ordered list of wizard steps.

    The catalog is validated once at construction:
    - it must contain at least one step
    - every step id must equal its position
    """

    def __init__(self, steps: Sequence[Step]):
        """
        Initialize the catalog.

        Args:
            steps: Ordered step definitions

        Raises:
            InvalidCatalogError: If the catalog is empty or ids do not match positions
        """
        self._steps: Tuple[Step, ...] = tuple(steps)

        if not self._steps:
            raise InvalidCatalogError("Step catalog must contain at least one step")

        errors = [
            f"step '{step.title}' has id {step.id}, expected {position}"
            for position, step in enumerate(self._steps)
            if step.id != position
        ]
        if errors:
            raise InvalidCatalogError(
                "Step ids must match catalog positions",
                errors=errors
            )

    def get(self, index: int) -> Step:
        """
        Get the step at a position.

        Raises:
            StepOutOfRangeError: If index is outside [0, length)
        """
        if not 0 <= index < len(self._steps):
            logger.error(f"Invalid step index: {index} (valid range: 0-{len(self._steps) - 1})")
            raise StepOutOfRangeError(index, len(self._steps), context="StepCatalog.get")
        return self._steps[index]

    def length(self) -> int:
        """Get total number of steps."""
        return len(self._steps)

    def titles(self) -> List[str]:
        """Get step titles in order (for step indicators)."""
        return [step.title for step in self._steps]

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)
