"""
Dimension Aggregation Strategies
psyscore/scoring/dimensions.py

Two mutually exclusive ways of grouping a generic scale's answers, chosen
once per call by select_dimension_strategy():

    ExplicitDimensions — caller supplied DimensionDefinitions; an answer joins a
                         definition when its item's order_num, or its key read as
                         an integer, is in the definition's member list.
    ImplicitDimensions — no definitions; answers are grouped by each item's own
                         tag (dimension → subdomain → domain). Untagged items are
                         left out.

Each group reports sum, mean (both rounded to 0.01), item count and, for
explicit definitions, the description. Groups aggregate the raw answers.
"""

from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Mapping, Optional, Sequence, Union

from psyscore.models.scoring import DimensionDefinition, ItemMetadata
from psyscore.scoring.utils import round_half_up

UNNAMED_DIMENSION = "Unknown"


@dataclass
class DimensionScore:
    """Aggregate of one dimension group."""
    total: float
    mean: float
    question_count: int
    description: Optional[str] = None


def _summarize(values: List[float], description: Optional[str] = None) -> DimensionScore:
    total = sum(values)
    return DimensionScore(
        total=round_half_up(total),
        mean=round_half_up(total / len(values)),
        question_count=len(values),
        description=description,
    )


def _key_as_ordinal(key: Hashable) -> Optional[int]:
    if isinstance(key, int) and not isinstance(key, bool):
        return key
    try:
        return int(str(key).strip())
    except ValueError:
        return None


@dataclass
class ExplicitDimensions:
    """Group answers by caller-supplied member lists."""
    definitions: Sequence[DimensionDefinition]
    kind: str = field(default="explicit", init=False)

    @staticmethod
    def is_member(
        key: Hashable,
        item: Optional[ItemMetadata],
        members: Sequence[int],
    ) -> bool:
        if item is not None and item.order_num is not None and item.order_num in members:
            return True
        ordinal = _key_as_ordinal(key)
        return ordinal is not None and ordinal in members

    def aggregate(
        self,
        answers: Mapping[Hashable, float],
        questions: Mapping[Hashable, ItemMetadata],
    ) -> Dict[str, DimensionScore]:
        scores: Dict[str, DimensionScore] = {}
        for definition in self.definitions:
            members = definition.questions or []
            collected = [
                value
                for key, value in answers.items()
                if self.is_member(key, questions.get(key), members)
            ]
            if collected:
                scores[definition.name or UNNAMED_DIMENSION] = _summarize(
                    collected, definition.description or ""
                )
        return scores


@dataclass
class ImplicitDimensions:
    """Group answers by each item's own dimension/subdomain/domain tag."""
    kind: str = field(default="implicit", init=False)

    def aggregate(
        self,
        answers: Mapping[Hashable, float],
        questions: Mapping[Hashable, ItemMetadata],
    ) -> Dict[str, DimensionScore]:
        groups: Dict[str, List[float]] = {}
        for key, value in answers.items():
            item = questions.get(key)
            tag = item.group_tag if item is not None else None
            if tag:
                groups.setdefault(tag, []).append(value)
        return {tag: _summarize(values) for tag, values in groups.items()}


DimensionStrategy = Union[ExplicitDimensions, ImplicitDimensions]


def select_dimension_strategy(
    questions: Optional[Mapping[Hashable, ItemMetadata]],
    dimension_config: Optional[Sequence[DimensionDefinition]] = None,
) -> Optional[DimensionStrategy]:
    """
    Pick the aggregation strategy for one call.

    Returns None (no dimension breakdown) when no item metadata is supplied,
    or when there are neither definitions nor any item carrying a `dimension` tag.
    An empty definition list still counts as "definitions supplied" and selects
    the implicit strategy.
    """
    if questions is None:
        return None

    has_tagged_items = any(item.dimension for item in questions.values())
    if dimension_config is None and not has_tagged_items:
        return None

    if dimension_config:
        return ExplicitDimensions(definitions=list(dimension_config))
    return ImplicitDimensions()
