from enum import Enum


class ScoringMethod(str, Enum):
    SUM = "sum"            # Plain total, no explicit weights assumed
    AVERAGE = "average"    # Weighted total divided by total weight
    WEIGHTED = "weighted"  # Weighted total, explicit weights present

    @classmethod
    def resolve(cls, value):
        """Return the method with exactly this name, or None when the name is unknown."""
        if isinstance(value, cls):
            return value
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


class SeverityLevel(str, Enum):
    NORMAL = "normal"
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


class ScoreTrend(str, Enum):
    IMPROVING = "improving"  # Recent scores lower than older ones
    DECLINING = "declining"
    STABLE = "stable"
