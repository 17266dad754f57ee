import logging
from typing import Dict, List

from ..errors import InvalidReference, NotFound
from ..expansion import expand, expand_all
from ..models import Team
from ..validation import FieldSpec, check_record_id, id_list, parse_fields, text
from .player_store import PlayerStore

logger = logging.getLogger(__name__)


class TeamStore:
    """
    Manages teams. A team lists player ids; reads return the players
    embedded in the same order.
    """

    FIELDS: FieldSpec = {
        'name': ('name', text('name')),
        'formation': ('formation', text('formation')),
        'players': ('player_ids', id_list('players')),
    }
    REQUIRED = ('name', 'formation')

    def __init__(self, db, players: PlayerStore):
        self.db = db
        self.players = players

    def _get(self, team_id: str) -> Team:
        check_record_id(team_id)
        team = self.db.session.get(Team, team_id)
        if not team:
            raise NotFound('Team', team_id)
        return team

    def _check_players_exist(self, player_ids: List[str]):
        if not player_ids:
            return
        count = self.players.count_existing(player_ids)
        if count < len(set(player_ids)):
            logger.warning(f"Rejected team write with unknown player ids: {player_ids}")
            raise InvalidReference('One or more player IDs are invalid')

    def expand_team(self, team: Team) -> dict:
        return expand(team.to_dict(), 'players', self.players.find_many)

    def expand_teams(self, teams: List[Team]) -> List[dict]:
        return expand_all([t.to_dict() for t in teams], 'players', self.players.find_many)

    def count_existing(self, team_ids: List[str]) -> int:
        """Batched existence check: how many distinct ids resolve."""
        return Team.query.filter(Team.id.in_(list(set(team_ids)))).count()

    def find_many(self, team_ids: List[str]) -> Dict[str, dict]:
        """Batched lookup: id -> expanded team dict for the ids that exist."""
        if not team_ids:
            return {}
        teams = Team.query.filter(Team.id.in_(list(set(team_ids)))).all()
        return {t['id']: t for t in self.expand_teams(teams)}

    def list_teams(self) -> List[dict]:
        teams = Team.query.order_by(Team.created_at.asc()).all()
        return self.expand_teams(teams)

    def get_team(self, team_id: str) -> dict:
        return self.expand_team(self._get(team_id))

    def create_team(self, data: dict) -> dict:
        values = parse_fields(data, self.FIELDS, required=self.REQUIRED)
        values.setdefault('player_ids', [])
        self._check_players_exist(values['player_ids'])

        team = Team(**values)
        self.db.session.add(team)
        self.db.session.commit()

        logger.info(f"Created team {team.id} ({team.name}, {len(team.player_ids)} players)")
        return self.expand_team(team)

    def update_team(self, team_id: str, data: dict) -> dict:
        values = parse_fields(data, self.FIELDS)
        if 'player_ids' in values:
            self._check_players_exist(values['player_ids'])

        team = self._get(team_id)
        for column, value in values.items():
            setattr(team, column, value)
        self.db.session.commit()

        logger.info(f"Updated team {team.id}: {sorted(values)}")
        return self.expand_team(team)

    def delete_team(self, team_id: str):
        team = self._get(team_id)
        self.db.session.delete(team)
        self.db.session.commit()
        logger.info(f"Deleted team {team_id}")
