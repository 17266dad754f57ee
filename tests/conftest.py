"""
Pytest configuration and fixtures for the club records service tests.
"""
import os
import sys
import pytest

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

# Set testing environment before importing app
os.environ['FLASK_ENV'] = 'testing'

from fennec.app import create_app
from fennec.models import db


@pytest.fixture(scope='session')
def app():
    """Create application for testing."""
    app = create_app('testing')

    with app.app_context():
        db.create_all()
        yield app
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture(scope='function')
def db_session(app):
    """Clear all tables before each test."""
    db.session.remove()

    for table in reversed(db.metadata.sorted_tables):
        db.session.execute(table.delete())
    db.session.commit()

    yield db.session

    db.session.rollback()


@pytest.fixture
def player_store(app, db_session):
    return app.players


@pytest.fixture
def team_store(app, db_session):
    return app.teams


@pytest.fixture
def tournament_store(app, db_session):
    return app.tournaments


def player_data(jersey_number: int, **overrides) -> dict:
    data = {
        'name': f'Player {jersey_number}',
        'position': 'Midfielder',
        'age': 24,
        'nationality': 'Algeria',
        'jerseyNumber': jersey_number,
    }
    data.update(overrides)
    return data


@pytest.fixture
def sample_players(player_store):
    """Create three players with jersey numbers 7, 1 and 10 (in that order)."""
    return [
        player_store.create_player(player_data(7, name='Riyad', position='Winger')),
        player_store.create_player(player_data(1, name='Rais', position='Goalkeeper')),
        player_store.create_player(player_data(10, name='Yacine', position='Forward')),
    ]


@pytest.fixture
def sample_team(team_store, sample_players):
    """Create a team using the sample players in a non-sorted order."""
    return team_store.create_team({
        'name': 'First XI',
        'formation': '4-3-3',
        'players': [sample_players[2]['id'], sample_players[0]['id'], sample_players[1]['id']],
    })


@pytest.fixture
def sample_tournament(tournament_store, sample_team):
    """Create a tournament with the sample team."""
    return tournament_store.create_tournament({
        'name': 'Desert Cup',
        'startDate': '2025-06-01',
        'endDate': '2025-06-20',
        'location': 'Algiers',
        'teams': [sample_team['id']],
    })


@pytest.fixture
def make_player():
    """Factory for valid player request bodies."""
    return player_data
