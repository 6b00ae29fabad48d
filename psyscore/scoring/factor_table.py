"""
SCL-90 Factor Table
psyscore/scoring/factor_table.py

The SCL-90 (Symptom Checklist-90) groups its 90 items into nine symptom
factors plus a residual bucket of additional items. Item ordinals and the
Chinese normative means are published values and must not be tuned.

Factor                      | Items  | Norm mean
────────────────────────────┼────────┼──────────
somatization                | 1–12   | 1.37
obsessive_compulsive        | 13–22  | 1.62
interpersonal_sensitivity   | 23–31  | 1.65
depression                  | 32–44  | 1.50
anxiety                     | 45–54  | 1.39
hostility                   | 55–60  | 1.48
phobic_anxiety              | 61–67  | 1.23
paranoid_ideation           | 68–73  | 1.43
psychoticism                | 74–83  | 1.29
additional                  | 84–90  | 1.40

National norm (total mean): 1.44, SD 0.43.
"""

from dataclasses import dataclass
from typing import FrozenSet, Tuple

SCL90_ITEM_COUNT = 90
SCL90_MAX_VALUE = 5

NATIONAL_NORM_MEAN = 1.44
NATIONAL_NORM_SD = 0.43


@dataclass(frozen=True)
class FactorDefinition:
    """One factor: a contiguous, inclusive ordinal range with its norm mean."""
    key: str
    name: str
    name_zh: str
    first_item: int
    last_item: int
    norm_mean: float
    description: str

    @property
    def item_ordinals(self) -> range:
        return range(self.first_item, self.last_item + 1)

    @property
    def item_count(self) -> int:
        return self.last_item - self.first_item + 1


SCL90_FACTORS: Tuple[FactorDefinition, ...] = (
    FactorDefinition(
        key="somatization",
        name="Somatization",
        name_zh="躯体化",
        first_item=1,
        last_item=12,
        norm_mean=1.37,
        description="Bodily discomfort, including cardiovascular, gastrointestinal and respiratory complaints",
    ),
    FactorDefinition(
        key="obsessive_compulsive",
        name="Obsessive-Compulsive",
        name_zh="强迫症状",
        first_item=13,
        last_item=22,
        norm_mean=1.62,
        description="Clinical obsessive-compulsive symptoms in thought, behaviour and experience",
    ),
    FactorDefinition(
        key="interpersonal_sensitivity",
        name="Interpersonal Sensitivity",
        name_zh="人际关系敏感",
        first_item=23,
        last_item=31,
        norm_mean=1.65,
        description="Unease and feelings of inferiority in interpersonal contact",
    ),
    FactorDefinition(
        key="depression",
        name="Depression",
        name_zh="抑郁",
        first_item=32,
        last_item=44,
        norm_mean=1.50,
        description="Depressive symptoms such as loss of interest, lack of drive and loss of energy",
    ),
    FactorDefinition(
        key="anxiety",
        name="Anxiety",
        name_zh="焦虑",
        first_item=45,
        last_item=54,
        norm_mean=1.39,
        description="Anxious experience: tension, restlessness, nervousness",
    ),
    FactorDefinition(
        key="hostility",
        name="Hostility",
        name_zh="敌对",
        first_item=55,
        last_item=60,
        norm_mean=1.48,
        description="Hostile thoughts, feelings and behaviour such as irritation, arguing, throwing things",
    ),
    FactorDefinition(
        key="phobic_anxiety",
        name="Phobic Anxiety",
        name_zh="恐怖",
        first_item=61,
        last_item=67,
        norm_mean=1.23,
        description="Fear of specific places, crowds or objects",
    ),
    FactorDefinition(
        key="paranoid_ideation",
        name="Paranoid Ideation",
        name_zh="偏执",
        first_item=68,
        last_item=73,
        norm_mean=1.43,
        description="Projective thinking, hostility, suspiciousness, passivity and grandiosity",
    ),
    FactorDefinition(
        key="psychoticism",
        name="Psychoticism",
        name_zh="精神病性",
        first_item=74,
        last_item=83,
        norm_mean=1.29,
        description="Psychotic manifestations in thought, affect and behaviour",
    ),
    FactorDefinition(
        key="additional",
        name="Additional Items",
        name_zh="其他",
        first_item=84,
        last_item=90,
        norm_mean=1.40,
        description="Other symptoms including sleep, appetite and thoughts of death",
    ),
)

SCL90_ORDINALS: FrozenSet[int] = frozenset(range(1, SCL90_ITEM_COUNT + 1))


def _check_partition() -> None:
    """The factor ranges must cover 1..90 exactly once."""
    seen = []
    for factor in SCL90_FACTORS:
        seen.extend(factor.item_ordinals)
    if len(seen) != len(set(seen)) or set(seen) != SCL90_ORDINALS:
        raise RuntimeError("SCL-90 factor table does not partition items 1..90")


_check_partition()
