from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional, Tuple

from psyscore.models.enumerations import ScoreTrend


class OptionSpec(BaseModel):
    """
    One selectable answer option of an item.
    """

    value: float = Field(..., description="Numeric value recorded when this option is chosen")
    label: str = Field(default="", description="Display label of the option")


class ItemMetadata(BaseModel):
    """
    Per-item scoring metadata supplied by the caller.
    """

    id: Optional[str] = Field(default=None, description="Item identifier")
    content: Optional[str] = Field(default=None, description="Item text")
    order_num: Optional[int] = Field(
        default=None,
        ge=1,
        description="Positional ordinal of the item within its scale"
    )
    reverse_scored: bool = Field(
        default=False,
        description="Whether the item is phrased opposite to the measured construct"
    )
    weight: Optional[float] = Field(
        default=None,
        description="Item weight; treated as 1.0 when unset"
    )
    dimension: Optional[str] = Field(default=None, description="Dimension tag")
    domain: Optional[str] = Field(default=None, description="Domain tag")
    subdomain: Optional[str] = Field(default=None, description="Subdomain tag")
    options: List[OptionSpec] = Field(
        default_factory=list,
        description="Option set defining the valid value range"
    )

    @property
    def effective_weight(self) -> float:
        return 1.0 if self.weight is None else self.weight

    @property
    def option_range(self) -> Optional[Tuple[float, float]]:
        """(min, max) option value, or None when no options are declared."""
        if not self.options:
            return None
        values = [opt.value for opt in self.options]
        return min(values), max(values)

    @property
    def group_tag(self) -> Optional[str]:
        """Dimension tag, falling back to subdomain then domain."""
        return self.dimension or self.subdomain or self.domain


class ScaleConfig(BaseModel):
    """
    Aggregation settings of a generic scale.
    """

    method: Optional[str] = Field(
        default=None,
        description="Aggregation method: sum, average or weighted (unknown names fall back to sum)"
    )
    max_score: Optional[float] = Field(default=None, description="Upper bound of the scale score")
    min_score: Optional[float] = Field(default=None, description="Lower bound of the scale score")


class InterpretationLevel(BaseModel):
    """
    One severity band, matched on an inclusive score range.
    """

    level: Optional[str] = Field(default=None, description="Severity label, e.g. normal/mild")
    range_min: Optional[float] = Field(default=None, description="Inclusive lower bound (default 0)")
    range_max: Optional[float] = Field(default=None, description="Inclusive upper bound (default +inf)")
    description: Optional[str] = Field(default=None)
    suggestions: Optional[List[str]] = Field(default=None)


class InterpretationConfig(BaseModel):
    levels: Optional[List[InterpretationLevel]] = None


class DimensionDefinition(BaseModel):
    """
    Explicit dimension: a named list of member item ordinals.
    """

    name: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    questions: List[int] = Field(default_factory=list, description="Member item ordinals")


class ScoringRequest(BaseModel):
    """
    Request accepted by the scoring entry point.
    """

    scale_code: Optional[str] = Field(default=None, description="Scale identifier, e.g. SCL-90")
    answers: Optional[Dict[str, float]] = Field(
        default=None,
        description="Item key to raw numeric answer"
    )
    scale_config: Optional[ScaleConfig] = None
    questions: Optional[Dict[str, ItemMetadata]] = Field(
        default=None,
        description="Item key to scoring metadata"
    )
    interpretation_config: Optional[InterpretationConfig] = None
    dimension_config: Optional[List[DimensionDefinition]] = None


class ScoringEnvelope(BaseModel):
    """
    Unified response: either scores or an error, never both.
    """

    success: bool
    scores: Optional[Dict[str, Any]] = None
    error: Optional[str] = None


class StatisticsRequest(BaseModel):
    total_means: List[float] = Field(
        default_factory=list,
        description="total_mean of completed assessments, newest first"
    )


class ScoreStatisticsResponse(BaseModel):
    avg_score: Optional[float] = None
    min_score: Optional[float] = None
    max_score: Optional[float] = None
    completed_count: int = 0
    recent_trend: Optional[ScoreTrend] = None
