from .player_store import PlayerStore
from .team_store import TeamStore
from .tournament_store import TournamentStore

__all__ = ['PlayerStore', 'TeamStore', 'TournamentStore']
