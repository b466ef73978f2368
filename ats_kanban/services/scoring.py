"""
Interview score averaging.

Scores arrive as explicit ``InterviewScore`` records. A record whose score is
``None`` is an unscored interview and does not take part in the mean.
"""

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class InterviewScore:
    """The score of a single interview, or ``None`` when it was not scored."""

    score: Optional[float] = None

    @property
    def is_scored(self) -> bool:
        return self.score is not None


def average_score(records: Iterable[InterviewScore]) -> float:
    """Arithmetic mean of the present scores; 0 when no score is present."""
    scores = [record.score for record in records if record.is_scored]
    if not scores:
        return 0
    return sum(scores) / len(scores)
