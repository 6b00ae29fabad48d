"""
scoring/ — Assessment Scoring Engine

Modules:
    utils.py                  - Half-up rounding and guarded division
    normalizer.py             - AnswerNormalizer (range checks, reverse scoring)
    factor_table.py           - Frozen SCL-90 factor table and national norms
    fixed_factor_scorer.py    - FixedFactorScorer (SCL-90)
    interpretation.py         - Ordered threshold → severity lookup
    dimensions.py             - Explicit / implicit dimension strategies
    configurable_scorer.py    - ConfigurableScorer (generic scales)
    scoring_router.py         - ScoringRouter (dispatch + response envelope)
    statistics.py             - ScoreStatisticsCalculator (dashboard aggregates)
"""
