"""
Unit tests for PlayerStore.
"""
import pytest
from fennec.errors import DuplicateKey, InvalidIdentifier, NotFound, ValidationError
from fennec.models import Player

MISSING_ID = 'f' * 24


class TestCreatePlayer:

    def test_create_player(self, player_store, make_player):
        player = player_store.create_player(make_player(9, name='Islam'))

        assert len(player['id']) == 24
        assert player['name'] == 'Islam'
        assert player['jerseyNumber'] == 9
        assert player['createdAt'] is not None

    def test_defaults_to_available(self, player_store, make_player):
        player = player_store.create_player(make_player(9))
        assert player['isAvailable'] is True

    def test_explicit_unavailable(self, player_store, make_player):
        player = player_store.create_player(make_player(9, isAvailable=False))
        assert player['isAvailable'] is False

    def test_missing_required_field(self, player_store, make_player):
        data = make_player(9)
        del data['nationality']

        with pytest.raises(ValidationError):
            player_store.create_player(data)
        assert Player.query.count() == 0

    def test_wrong_type(self, player_store, make_player):
        with pytest.raises(ValidationError):
            player_store.create_player(make_player(9, age='twenty'))

    def test_duplicate_jersey_number(self, player_store, make_player):
        original = player_store.create_player(make_player(9, name='Islam'))

        with pytest.raises(DuplicateKey) as exc:
            player_store.create_player(make_player(9, name='Baghdad'))

        assert exc.value.field == 'jerseyNumber'
        assert Player.query.count() == 1
        assert player_store.get_player(original['id'])['name'] == 'Islam'

    def test_unique_constraint_catches_race(self, player_store, make_player, mocker):
        """A duplicate that slips past the pre-check is caught on commit."""
        player_store.create_player(make_player(9, name='Islam'))
        mocker.patch.object(player_store, '_check_jersey_free')

        with pytest.raises(DuplicateKey) as exc:
            player_store.create_player(make_player(9, name='Baghdad'))

        assert exc.value.field == 'jerseyNumber'
        assert Player.query.count() == 1
        assert player_store.list_players()[0]['name'] == 'Islam'

    def test_jersey_numbers_stay_unique(self, player_store, make_player):
        for number in (4, 5, 4, 6, 5):
            try:
                player_store.create_player(make_player(number))
            except DuplicateKey:
                pass

        numbers = [p['jerseyNumber'] for p in player_store.list_players()]
        assert len(numbers) == len(set(numbers)) == 3


class TestGetPlayer:

    def test_get_existing(self, player_store, sample_players):
        found = player_store.get_player(sample_players[0]['id'])
        assert found == sample_players[0]

    def test_get_missing(self, player_store):
        with pytest.raises(NotFound):
            player_store.get_player(MISSING_ID)

    def test_get_malformed_id(self, player_store):
        with pytest.raises(InvalidIdentifier):
            player_store.get_player('nonexistent')


class TestListPlayers:

    def test_sorted_by_jersey_number(self, player_store, sample_players):
        numbers = [p['jerseyNumber'] for p in player_store.list_players()]
        assert numbers == [1, 7, 10]

    def test_empty(self, player_store):
        assert player_store.list_players() == []


class TestUpdatePlayer:

    def test_partial_update(self, player_store, sample_players):
        player = sample_players[0]
        updated = player_store.update_player(player['id'], {'age': 31, 'isAvailable': False})

        assert updated['age'] == 31
        assert updated['isAvailable'] is False
        assert updated['name'] == player['name']
        assert updated['createdAt'] == player['createdAt']

    def test_keep_own_jersey_number(self, player_store, sample_players):
        player = sample_players[0]
        updated = player_store.update_player(player['id'], {'jerseyNumber': player['jerseyNumber']})
        assert updated['jerseyNumber'] == player['jerseyNumber']

    def test_take_other_players_number(self, player_store, sample_players):
        with pytest.raises(DuplicateKey):
            player_store.update_player(sample_players[0]['id'], {'jerseyNumber': 10})
        assert player_store.get_player(sample_players[0]['id'])['jerseyNumber'] == 7

    def test_unique_constraint_catches_race_on_update(self, player_store, sample_players, mocker):
        mocker.patch.object(player_store, '_check_jersey_free')

        with pytest.raises(DuplicateKey):
            player_store.update_player(sample_players[0]['id'], {'jerseyNumber': 10})

        numbers = [p['jerseyNumber'] for p in player_store.list_players()]
        assert numbers == [1, 7, 10]

    def test_update_missing(self, player_store):
        with pytest.raises(NotFound):
            player_store.update_player(MISSING_ID, {'age': 30})

    def test_invalid_value(self, player_store, sample_players):
        with pytest.raises(ValidationError):
            player_store.update_player(sample_players[0]['id'], {'name': ''})

    def test_created_at_not_writable(self, player_store, sample_players):
        player = sample_players[0]
        updated = player_store.update_player(player['id'], {'createdAt': '1999-01-01'})
        assert updated['createdAt'] == player['createdAt']


class TestDeletePlayer:

    def test_delete(self, player_store, sample_players):
        player_store.delete_player(sample_players[0]['id'])

        with pytest.raises(NotFound):
            player_store.get_player(sample_players[0]['id'])
        assert len(player_store.list_players()) == 2

    def test_delete_missing(self, player_store):
        with pytest.raises(NotFound):
            player_store.delete_player(MISSING_ID)


class TestBatchedLookups:

    def test_find_many(self, player_store, sample_players):
        ids = [sample_players[0]['id'], MISSING_ID]
        found = player_store.find_many(ids)
        assert list(found) == [sample_players[0]['id']]

    def test_count_existing_ignores_duplicates(self, player_store, sample_players):
        pid = sample_players[0]['id']
        assert player_store.count_existing([pid, pid, MISSING_ID]) == 1
