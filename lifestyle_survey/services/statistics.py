"""
Summary statistics over stored surveys.

The reducer walks the records once and returns None for an empty set,
so callers can tell "no data yet" apart from a summary of zeros.
"""

from typing import Iterable, Optional

from lifestyle_survey.models.record import SurveyRecord
from lifestyle_survey.models.summary import SurveySummary


def summarize(records: Iterable[SurveyRecord]) -> Optional[SurveySummary]:
    """Fold survey records into a SurveySummary, or None if there are none."""
    count = 0
    age_total = 0
    oldest = None
    youngest = None
    pizza_lovers = 0
    eat_out_total = 0

    for record in records:
        count += 1
        age_total += record.age
        oldest = record.age if oldest is None else max(oldest, record.age)
        youngest = record.age if youngest is None else min(youngest, record.age)
        if record.likes_pizza:
            pizza_lovers += 1
        eat_out_total += record.rating_eatout

    if count == 0:
        return None

    return SurveySummary(
        total_surveys=count,
        average_age=age_total / count,
        oldest_person=oldest,
        youngest_person=youngest,
        percentage_pizza_lovers=pizza_lovers / count * 100,
        average_eat_out_rating=eat_out_total / count,
    )


def format_one_decimal(value: float) -> str:
    """Display helper: 29.666 -> '29.7'."""
    return f'{value:.1f}'
