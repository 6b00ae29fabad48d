"""
Answer Normalizer
psyscore/scoring/normalizer.py

Direction-corrects raw answers before aggregation.

Reverse scoring:
    options declared   → adjusted = max(option values) − raw + 1
    no options known   → adjusted = (point_count + 1) − raw     (6 − raw on a 5-point scale)

Weighting is NOT applied here; the normalizer only corrects direction.
In strict mode every raw value is checked against the item's option range
(or 1..point_count when the item declares no options) before any reversal.
"""

from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Mapping, Optional, Tuple

import structlog

from psyscore.core.exceptions import AnswerValidationError
from psyscore.models.scoring import ItemMetadata

logger = structlog.get_logger(__name__)

DEFAULT_POINT_COUNT = 5


@dataclass
class NormalizedAnswers:
    """Output of AnswerNormalizer.normalize()."""
    values: Dict[Hashable, float]                        # direction-corrected, same keys as input
    reversed_items: List[Hashable] = field(default_factory=list)

    @property
    def used_reverse_scoring(self) -> bool:
        return bool(self.reversed_items)


class AnswerNormalizer:
    """Validate and reverse-score raw answers. Stateless."""

    def __init__(self, point_count: int = DEFAULT_POINT_COUNT, strict: bool = False):
        if point_count < 2:
            raise ValueError(f"point_count must be >= 2, got {point_count}")
        self.point_count = point_count
        self.strict = strict

    def declared_range(self, item: Optional[ItemMetadata]) -> Tuple[float, float]:
        """Valid (min, max) for an item: its options, else the scale default."""
        if item is not None and item.option_range is not None:
            return item.option_range
        return 1.0, float(self.point_count)

    def reverse_value(self, raw: float, item: Optional[ItemMetadata] = None) -> float:
        """Invert one raw value. Applying it twice returns the original value."""
        if item is not None and item.option_range is not None:
            return item.option_range[1] - raw + 1
        return (self.point_count + 1) - raw

    def check_range(self, key: Hashable, raw: float, item: Optional[ItemMetadata] = None) -> None:
        low, high = self.declared_range(item)
        if not low <= raw <= high:
            raise AnswerValidationError(
                f"Item {key} score {raw:g} is outside the {low:g}-{high:g} range",
                item=key,
                expected=(low, high),
                actual=raw,
            )

    def normalize(
        self,
        answers: Mapping[Hashable, float],
        metadata: Optional[Mapping[Hashable, ItemMetadata]] = None,
    ) -> NormalizedAnswers:
        """
        Args:
            answers: Item key → raw value.
            metadata: Item key → ItemMetadata, keyed like `answers`. When None,
                      values pass through unchanged (after strict range checks).

        Returns:
            NormalizedAnswers with the direction-corrected values.

        Raises:
            AnswerValidationError: strict mode and a value outside its range.
        """
        adjusted: Dict[Hashable, float] = {}
        reversed_items: List[Hashable] = []

        for key, raw in answers.items():
            item = metadata.get(key) if metadata else None
            if self.strict:
                self.check_range(key, raw, item)

            if item is not None and item.reverse_scored:
                adjusted[key] = self.reverse_value(raw, item)
                reversed_items.append(key)
            else:
                adjusted[key] = raw

        if reversed_items:
            logger.debug(
                "answers_reverse_scored",
                reversed_count=len(reversed_items),
                answer_count=len(adjusted),
            )

        return NormalizedAnswers(values=adjusted, reversed_items=reversed_items)
