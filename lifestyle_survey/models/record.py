from dataclasses import dataclass
from datetime import date as date_type
from typing import Optional


FOOD_FIELDS = ('likes_pizza', 'likes_pasta', 'likes_papandwors', 'likes_chickenstirfry')
RATING_FIELDS = ('rating_eatout', 'rating_watchmovies', 'rating_watchtv', 'rating_listenradio')

FOOD_LABELS = {
    'likes_pizza': 'Pizza',
    'likes_pasta': 'Pasta',
    'likes_papandwors': 'Pap and Wors',
    'likes_chickenstirfry': 'Chicken Stir Fry',
}

RATING_LABELS = {
    'rating_eatout': 'I like to eat out',
    'rating_watchmovies': 'I like to watch movies',
    'rating_watchtv': 'I like to watch TV',
    'rating_listenradio': 'I like to listen to the radio',
}


@dataclass
class SurveyRecord:
    """One stored survey response, as returned by a backend."""
    full_name: str
    contact_number: str
    date: str  # YYYY-MM-DD
    age: int
    likes_pizza: bool = False
    likes_pasta: bool = False
    likes_papandwors: bool = False
    likes_chickenstirfry: bool = False
    rating_eatout: int = 0
    rating_watchmovies: int = 0
    rating_watchtv: int = 0
    rating_listenradio: int = 0
    id: Optional[int] = None
    created_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: dict) -> 'SurveyRecord':
        """Build a record from a stored row.

        Column names are matched case-insensitively, so rows keyed
        `likes_papAndWors` or `rating_eatOut` map onto the same fields.
        """
        data = {key.lower(): value for key, value in row.items()}
        row_date = data.get('date')
        if isinstance(row_date, date_type):
            row_date = row_date.isoformat()

        return cls(
            full_name=data.get('full_name') or '',
            contact_number=data.get('contact_number') or '',
            date=row_date,
            age=int(data['age']),
            **{field: bool(data.get(field)) for field in FOOD_FIELDS},
            **{field: int(data.get(field) or 0) for field in RATING_FIELDS},
            id=data.get('id'),
            created_at=str(data['created_at']) if data.get('created_at') is not None else None,
        )

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'created_at': self.created_at,
            'full_name': self.full_name,
            'contact_number': self.contact_number,
            'date': self.date,
            'age': self.age,
            **{field: getattr(self, field) for field in FOOD_FIELDS},
            **{field: getattr(self, field) for field in RATING_FIELDS},
        }
