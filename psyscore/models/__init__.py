from psyscore.models.enumerations import ScoreTrend, ScoringMethod, SeverityLevel
from psyscore.models.scoring import (
    DimensionDefinition,
    InterpretationConfig,
    InterpretationLevel,
    ItemMetadata,
    OptionSpec,
    ScaleConfig,
    ScoreStatisticsResponse,
    ScoringEnvelope,
    ScoringRequest,
    StatisticsRequest,
)

__all__ = [
    "DimensionDefinition",
    "InterpretationConfig",
    "InterpretationLevel",
    "ItemMetadata",
    "OptionSpec",
    "ScaleConfig",
    "ScoreStatisticsResponse",
    "ScoreTrend",
    "ScoringEnvelope",
    "ScoringMethod",
    "ScoringRequest",
    "SeverityLevel",
    "StatisticsRequest",
]
