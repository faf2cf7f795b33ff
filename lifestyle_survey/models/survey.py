from datetime import datetime
from lifestyle_survey import db
from lifestyle_survey.models.record import SurveyRecord


class Survey(db.Model):
    """One completed lifestyle survey."""
    __tablename__ = 'surveys'

    id = db.Column(db.Integer, primary_key=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    full_name = db.Column(db.String(200), nullable=False)
    contact_number = db.Column(db.String(50), nullable=False)
    date = db.Column(db.Date, nullable=False)
    age = db.Column(db.Integer, nullable=False)

    likes_pizza = db.Column(db.Boolean, default=False, nullable=False)
    likes_pasta = db.Column(db.Boolean, default=False, nullable=False)
    likes_papandwors = db.Column(db.Boolean, default=False, nullable=False)
    likes_chickenstirfry = db.Column(db.Boolean, default=False, nullable=False)

    # 1-5, never the unset 0
    rating_eatout = db.Column(db.Integer, nullable=False)
    rating_watchmovies = db.Column(db.Integer, nullable=False)
    rating_watchtv = db.Column(db.Integer, nullable=False)
    rating_listenradio = db.Column(db.Integer, nullable=False)

    __table_args__ = (
        db.CheckConstraint('age >= 5 AND age <= 120', name='valid_age'),
        db.CheckConstraint('rating_eatout >= 1 AND rating_eatout <= 5', name='valid_rating_eatout'),
        db.CheckConstraint('rating_watchmovies >= 1 AND rating_watchmovies <= 5', name='valid_rating_watchmovies'),
        db.CheckConstraint('rating_watchtv >= 1 AND rating_watchtv <= 5', name='valid_rating_watchtv'),
        db.CheckConstraint('rating_listenradio >= 1 AND rating_listenradio <= 5', name='valid_rating_listenradio'),
    )

    def to_record(self) -> SurveyRecord:
        return SurveyRecord.from_row({
            column.name: getattr(self, column.name) for column in self.__table__.columns
        })

    def __repr__(self):
        return f'<Survey {self.id} {self.full_name}>'
