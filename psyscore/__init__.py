"""
psyscore — Psychological Assessment Scoring Engine

Turns a student's raw questionnaire answers into total, factor/dimension and
severity scores. The engine is pure and stateless; the FastAPI app in
psyscore.main is a thin HTTP surface over psyscore.scoring.
"""

__version__ = "1.0.0"
