import logging
from typing import List

from ..errors import InvalidReference, NotFound
from ..expansion import expand, expand_all
from ..models import Tournament
from ..status import TournamentStatus, parse_status
from ..validation import FieldSpec, check_record_id, id_list, integer, parse_fields, text, timestamp
from .team_store import TeamStore

logger = logging.getLogger(__name__)


def _status(value) -> str:
    return parse_status(value).value


class TournamentStore:
    """
    Manages tournaments.

    Reads expand ``teams`` into full teams, and each team's ``players``
    into full players, by reusing the team store's expansion as the lookup.
    Status changes are only ever made by explicit updates.
    """

    FIELDS: FieldSpec = {
        'name': ('name', text('name')),
        'startDate': ('start_date', timestamp('startDate')),
        'endDate': ('end_date', timestamp('endDate')),
        'location': ('location', text('location')),
        'teams': ('team_ids', id_list('teams')),
        'maxTeams': ('max_teams', integer('maxTeams')),
        'status': ('status', _status),
    }
    REQUIRED = ('name', 'startDate', 'endDate', 'location')

    def __init__(self, db, teams: TeamStore, default_max_teams: int = 16):
        self.db = db
        self.teams = teams
        self.default_max_teams = default_max_teams

    def _get(self, tournament_id: str) -> Tournament:
        check_record_id(tournament_id)
        tournament = self.db.session.get(Tournament, tournament_id)
        if not tournament:
            raise NotFound('Tournament', tournament_id)
        return tournament

    def _check_teams_exist(self, team_ids: List[str]):
        if not team_ids:
            return
        count = self.teams.count_existing(team_ids)
        if count < len(set(team_ids)):
            logger.warning(f"Rejected tournament write with unknown team ids: {team_ids}")
            raise InvalidReference('One or more team IDs are invalid')

    def expand_tournament(self, tournament: Tournament) -> dict:
        return expand(tournament.to_dict(), 'teams', self.teams.find_many)

    def list_tournaments(self) -> List[dict]:
        tournaments = Tournament.query.order_by(Tournament.created_at.asc()).all()
        return expand_all([t.to_dict() for t in tournaments], 'teams', self.teams.find_many)

    def get_tournament(self, tournament_id: str) -> dict:
        return self.expand_tournament(self._get(tournament_id))

    def create_tournament(self, data: dict) -> dict:
        values = parse_fields(data, self.FIELDS, required=self.REQUIRED)
        values.setdefault('team_ids', [])
        values.setdefault('max_teams', self.default_max_teams)
        values.setdefault('status', TournamentStatus.UPCOMING.value)
        self._check_teams_exist(values['team_ids'])

        tournament = Tournament(**values)
        self.db.session.add(tournament)
        self.db.session.commit()

        logger.info(f"Created tournament {tournament.id} ({tournament.name})")
        return self.expand_tournament(tournament)

    def update_tournament(self, tournament_id: str, data: dict) -> dict:
        values = parse_fields(data, self.FIELDS)
        if 'team_ids' in values:
            self._check_teams_exist(values['team_ids'])

        tournament = self._get(tournament_id)
        if 'status' in values and values['status'] != tournament.status:
            logger.info(f"Tournament {tournament.id} status {tournament.status} -> {values['status']}")

        for column, value in values.items():
            setattr(tournament, column, value)
        self.db.session.commit()

        logger.info(f"Updated tournament {tournament.id}: {sorted(values)}")
        return self.expand_tournament(tournament)

    def delete_tournament(self, tournament_id: str):
        tournament = self._get(tournament_id)
        self.db.session.delete(tournament)
        self.db.session.commit()
        logger.info(f"Deleted tournament {tournament_id}")
