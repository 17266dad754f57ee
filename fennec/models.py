import uuid
from datetime import datetime
from flask_sqlalchemy import SQLAlchemy

from .status import TournamentStatus

db = SQLAlchemy()


def new_record_id() -> str:
    """Generate an opaque 24-character hex record id."""
    return uuid.uuid4().hex[:24]


def _iso(value):
    return value.isoformat() if value else None


class Player(db.Model):
    __tablename__ = 'players'

    id = db.Column(db.String(24), primary_key=True, default=new_record_id)
    name = db.Column(db.String(100), nullable=False)
    position = db.Column(db.String(50), nullable=False)
    age = db.Column(db.Integer, nullable=False)
    nationality = db.Column(db.String(100), nullable=False)
    jersey_number = db.Column(db.Integer, unique=True, nullable=False, index=True)
    is_available = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'position': self.position,
            'age': self.age,
            'nationality': self.nationality,
            'jerseyNumber': self.jersey_number,
            'isAvailable': self.is_available,
            'createdAt': _iso(self.created_at),
        }

    def __repr__(self):
        return f"<Player id={self.id} jersey={self.jersey_number} name={self.name!r}>"


class Team(db.Model):
    __tablename__ = 'teams'

    id = db.Column(db.String(24), primary_key=True, default=new_record_id)
    name = db.Column(db.String(100), nullable=False)
    formation = db.Column(db.String(20), nullable=False)
    # Ordered player ids, duplicates kept as supplied
    player_ids = db.Column(db.JSON, nullable=False, default=list)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'formation': self.formation,
            'players': list(self.player_ids or []),
            'createdAt': _iso(self.created_at),
        }

    def __repr__(self):
        return f"<Team id={self.id} name={self.name!r}>"


class Tournament(db.Model):
    __tablename__ = 'tournaments'

    id = db.Column(db.String(24), primary_key=True, default=new_record_id)
    name = db.Column(db.String(200), nullable=False)
    start_date = db.Column(db.DateTime, nullable=False)
    end_date = db.Column(db.DateTime, nullable=False)
    location = db.Column(db.String(200), nullable=False)
    team_ids = db.Column(db.JSON, nullable=False, default=list)
    max_teams = db.Column(db.Integer, nullable=False, default=16)
    status = db.Column(db.String(20), nullable=False, default=TournamentStatus.UPCOMING.value)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'startDate': _iso(self.start_date),
            'endDate': _iso(self.end_date),
            'location': self.location,
            'teams': list(self.team_ids or []),
            'maxTeams': self.max_teams,
            'status': self.status,
            'createdAt': _iso(self.created_at),
        }

    def __repr__(self):
        return f"<Tournament id={self.id} name={self.name!r} status={self.status}>"
