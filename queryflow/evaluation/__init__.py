from .evaluator import (
    CELEBRATION_RATIO,
    FEEDBACK_MESSAGES,
    EvaluationResult,
    FeedbackTier,
    accuracy_percent,
    evaluate,
    feedback_tier,
    score_band,
    should_celebrate,
)

__all__ = [
    "CELEBRATION_RATIO",
    "FEEDBACK_MESSAGES",
    "EvaluationResult",
    "FeedbackTier",
    "accuracy_percent",
    "evaluate",
    "feedback_tier",
    "score_band",
    "should_celebrate",
]
