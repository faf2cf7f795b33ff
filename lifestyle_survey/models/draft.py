from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Optional

from lifestyle_survey.models.record import FOOD_FIELDS, RATING_FIELDS


def _parse_date(value) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value:
        return None
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        return None


def _parse_rating(value) -> int:
    """Ratings that are missing or unreadable fall back to 0 (unset).

    Only whole numbers are read: 4.9 or "4.9" become 0 rather than 4.
    """
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        value = value.strip()
        if value.isascii() and value.isdigit():
            return int(value)
    return 0


@dataclass(frozen=True)
class SurveyDraft:
    """A survey response that is still being filled in.

    Age is kept as the raw text the respondent typed, so that an empty
    field and an out-of-range number can be told apart during validation.
    """
    full_name: str = ''
    contact_number: str = ''
    date: Optional[date] = None
    age: str = ''
    likes_pizza: bool = False
    likes_pasta: bool = False
    likes_papandwors: bool = False
    likes_chickenstirfry: bool = False
    rating_eatout: int = 0
    rating_watchmovies: int = 0
    rating_watchtv: int = 0
    rating_listenradio: int = 0

    @classmethod
    def from_form(cls, form) -> 'SurveyDraft':
        """Build a draft from submitted HTML form data.

        Unchecked checkboxes and unselected radio groups are simply absent
        from the form, which maps them to False and 0.
        """
        return cls(
            full_name=form.get('full_name', ''),
            contact_number=form.get('contact_number', ''),
            date=_parse_date(form.get('date')),
            age=form.get('age', '').strip(),
            **{name: name in form for name in FOOD_FIELDS},
            **{name: _parse_rating(form.get(name)) for name in RATING_FIELDS},
        )

    @classmethod
    def from_json(cls, data: dict) -> 'SurveyDraft':
        """Build a draft from a JSON request body."""
        age = data.get('age')
        return cls(
            full_name=str(data.get('full_name') or ''),
            contact_number=str(data.get('contact_number') or ''),
            date=_parse_date(data.get('date')),
            age='' if age is None else str(age).strip(),
            # JSON booleans only; the string "false" must not count as a yes
            **{name: data.get(name) is True for name in FOOD_FIELDS},
            **{name: _parse_rating(data.get(name)) for name in RATING_FIELDS},
        )

    def with_value(self, name: str, value) -> 'SurveyDraft':
        """Return a copy of the draft with one field changed."""
        if name == 'date':
            value = _parse_date(value)
        elif name == 'age':
            value = '' if value is None else str(value).strip()
        elif name in FOOD_FIELDS:
            value = bool(value)
        elif name in RATING_FIELDS:
            value = _parse_rating(value)
        elif name not in ('full_name', 'contact_number'):
            raise KeyError(f"Unknown survey field: {name}")
        return replace(self, **{name: value})

    def to_insert_payload(self) -> dict:
        """Row sent to the backend. Only call this on a validated draft."""
        return {
            'full_name': self.full_name,
            'contact_number': self.contact_number,
            'date': self.date.isoformat(),
            'age': int(self.age),
            **{name: getattr(self, name) for name in FOOD_FIELDS},
            **{name: getattr(self, name) for name in RATING_FIELDS},
        }
