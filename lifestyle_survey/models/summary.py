from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class SurveySummary:
    """Aggregate over every stored survey. Computed on demand, never stored."""
    total_surveys: int
    average_age: float
    oldest_person: int
    youngest_person: int
    percentage_pizza_lovers: float
    average_eat_out_rating: float

    def to_dict(self) -> dict:
        return asdict(self)
