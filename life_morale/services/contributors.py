"""Top drainers and uplifters among the raw current answers."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from ..models import Answer, Contributor
from ..utils import is_number

TOP_N = 3


def rank_contributors(answers: Sequence[Answer], limit: int = TOP_N) -> Tuple[List[Contributor], List[Contributor]]:
    """Return ``(drainers, uplifters)`` ranked by raw, uncalibrated score.

    Unanswered items are skipped. Sorting is stable, so ties keep the
    original answer order in both directions.
    """
    answered = [
        Contributor(index=index, score=answer.score, note=answer.note)
        for index, answer in enumerate(answers)
        if is_number(answer.score)
    ]
    drainers = sorted(answered, key=lambda item: item.score)[:limit]
    uplifters = sorted(answered, key=lambda item: -item.score)[:limit]
    return drainers, uplifters
