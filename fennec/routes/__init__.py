from . import players, teams, tournaments

BLUEPRINTS = [players.bp, teams.bp, tournaments.bp]
