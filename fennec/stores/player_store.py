import logging
from typing import Dict, List, Optional

from sqlalchemy.exc import IntegrityError

from ..errors import DuplicateKey, NotFound
from ..models import Player
from ..validation import FieldSpec, boolean, check_record_id, integer, parse_fields, text

logger = logging.getLogger(__name__)


class PlayerStore:
    """
    Manages the player roster.

    Jersey numbers are unique across all players. Deleting a player does
    not touch teams that still reference it.
    """

    FIELDS: FieldSpec = {
        'name': ('name', text('name')),
        'position': ('position', text('position')),
        'age': ('age', integer('age')),
        'nationality': ('nationality', text('nationality')),
        'jerseyNumber': ('jersey_number', integer('jerseyNumber')),
        'isAvailable': ('is_available', boolean('isAvailable')),
    }
    REQUIRED = ('name', 'position', 'age', 'nationality', 'jerseyNumber')

    def __init__(self, db):
        self.db = db

    def _get(self, player_id: str) -> Player:
        check_record_id(player_id)
        player = self.db.session.get(Player, player_id)
        if not player:
            raise NotFound('Player', player_id)
        return player

    def _check_jersey_free(self, jersey_number: int, exclude_id: Optional[str] = None):
        query = Player.query.filter(Player.jersey_number == jersey_number)
        if exclude_id:
            query = query.filter(Player.id != exclude_id)
        if query.first():
            logger.warning(f"Rejected duplicate jersey number {jersey_number}")
            raise DuplicateKey('jerseyNumber', jersey_number, 'Jersey number already taken')

    def _commit(self, jersey_number):
        try:
            self.db.session.commit()
        except IntegrityError:
            # Lost a race with a concurrent write on the unique column
            self.db.session.rollback()
            raise DuplicateKey('jerseyNumber', jersey_number, 'Jersey number already taken')

    def list_players(self) -> List[dict]:
        """All players, ascending by jersey number."""
        players = Player.query.order_by(Player.jersey_number.asc()).all()
        return [p.to_dict() for p in players]

    def get_player(self, player_id: str) -> dict:
        return self._get(player_id).to_dict()

    def count_existing(self, player_ids: List[str]) -> int:
        """Batched existence check: how many distinct ids resolve."""
        return Player.query.filter(Player.id.in_(list(set(player_ids)))).count()

    def find_many(self, player_ids: List[str]) -> Dict[str, dict]:
        """Batched lookup: id -> player dict for the ids that exist."""
        if not player_ids:
            return {}
        players = Player.query.filter(Player.id.in_(list(set(player_ids)))).all()
        return {p.id: p.to_dict() for p in players}

    def create_player(self, data: dict) -> dict:
        values = parse_fields(data, self.FIELDS, required=self.REQUIRED)
        self._check_jersey_free(values['jersey_number'])

        player = Player(**values)
        self.db.session.add(player)
        self._commit(values['jersey_number'])

        logger.info(f"Created player {player.id} (#{player.jersey_number} {player.name})")
        return player.to_dict()

    def update_player(self, player_id: str, data: dict) -> dict:
        values = parse_fields(data, self.FIELDS)
        player = self._get(player_id)

        if 'jersey_number' in values:
            self._check_jersey_free(values['jersey_number'], exclude_id=player.id)

        for column, value in values.items():
            setattr(player, column, value)
        self._commit(values.get('jersey_number'))

        logger.info(f"Updated player {player.id}: {sorted(values)}")
        return player.to_dict()

    def delete_player(self, player_id: str):
        player = self._get(player_id)
        self.db.session.delete(player)
        self.db.session.commit()
        logger.info(f"Deleted player {player_id}")
