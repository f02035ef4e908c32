"""Session performance summary for the dashboard."""

from models.interview import PerformanceStats, SessionState


def _rounded_mean(values: list[int]) -> int:
    return round(sum(values) / len(values)) if values else 0


def compute_stats(state: SessionState) -> PerformanceStats:
    total = len(state.questions.technical) + len(state.questions.behavioral)
    answered = len(state.answers)

    technical = [f.score for key, f in state.feedback.items() if key.startswith("technical-")]
    behavioral = [f.score for key, f in state.feedback.items() if key.startswith("behavioral-")]

    return PerformanceStats(
        total_questions=total,
        answered_questions=answered,
        average_score=_rounded_mean([f.score for f in state.feedback.values()]),
        completion_rate=round(answered / total * 100) if total else 0,
        avg_technical_score=_rounded_mean(technical),
        avg_behavioral_score=_rounded_mean(behavioral),
        technical_answered=len(technical),
        behavioral_answered=len(behavioral),
    )
