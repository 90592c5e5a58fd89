import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from rosterapi.models import Player, PlayerRequest
from rosterapi.store import PlayerNotFoundError, PlayerStore, SquadNumberConflictError, next_id


def _request(squad_number: int, **overrides) -> PlayerRequest:
    data = dict(
        first_name="Test",
        middle_name="",
        last_name=f"Player {squad_number}",
        date_of_birth="1995-01-01T00:00:00.000Z",
        squad_number=squad_number,
        position="Central Midfield",
        abbr_position="CM",
        team="Test FC",
        league="Test League",
        starting11=False,
    )
    data.update(overrides)
    return PlayerRequest(**data)


def _player(player_id: int, squad_number: int) -> Player:
    return _request(squad_number).to_player(player_id)


def _assert_unique(store: PlayerStore) -> None:
    players = store.list_all()
    assert len({p.id for p in players}) == len(players)
    assert len({p.squad_number for p in players}) == len(players)


def test_next_id_empty_and_max():
    assert next_id([]) == 1
    assert next_id([_player(4, 1), _player(2, 2)]) == 5


def test_create_on_empty_store_assigns_id_one():
    store = PlayerStore()
    created = store.create(_request(7))
    assert created.id == 1
    assert store.list_all() == [created]


def test_create_duplicate_squad_number_conflicts_without_appending():
    store = PlayerStore()
    store.create(_request(7))

    with pytest.raises(SquadNumberConflictError) as excinfo:
        store.create(_request(7, first_name="Other"))

    assert excinfo.value.squad_number == 7
    assert excinfo.value.holder_id == 1
    assert len(store) == 1


def test_new_id_exceeds_every_existing_id():
    store = PlayerStore([_player(3, 1), _player(9, 2), _player(5, 3)])
    created = store.create(_request(4))
    assert created.id == 10


def test_new_id_is_max_plus_one_after_delete():
    store = PlayerStore([_player(1, 1), _player(2, 2)])
    store.delete(2)
    assert store.create(_request(3)).id == 2

    store = PlayerStore([_player(1, 1), _player(2, 2)])
    store.delete(1)
    assert store.create(_request(3)).id == 3


def test_list_all_keeps_insertion_order_and_is_a_copy():
    store = PlayerStore([_player(5, 10), _player(1, 11)])
    store.create(_request(12))

    listing = store.list_all()
    assert [p.id for p in listing] == [5, 1, 6]

    listing.clear()
    assert len(store) == 3


def test_get_by_id_and_squad_number():
    store = PlayerStore([_player(1, 23), _player(2, 10)])
    assert store.get_by_id(2).squad_number == 10
    assert store.get_by_squad_number(23).id == 1

    with pytest.raises(PlayerNotFoundError):
        store.get_by_id(999)
    with pytest.raises(PlayerNotFoundError):
        store.get_by_squad_number(99)


def test_update_keeping_own_squad_number_is_allowed():
    store = PlayerStore([_player(1, 10), _player(2, 11)])
    updated = store.update(1, _request(10, team="Other FC"))

    assert updated.id == 1
    assert updated.team == "Other FC"
    assert store.get_by_id(1) == updated


def test_update_into_another_players_squad_number_conflicts():
    store = PlayerStore([_player(1, 10), _player(2, 11)])
    before = store.list_all()

    with pytest.raises(SquadNumberConflictError):
        store.update(1, _request(11))

    assert store.list_all() == before


def test_update_missing_player_is_not_found():
    store = PlayerStore([_player(1, 10)])
    with pytest.raises(PlayerNotFoundError):
        store.update(2, _request(10))


def test_update_and_delete_preserve_order_of_other_players():
    store = PlayerStore([_player(1, 1), _player(2, 2), _player(3, 3), _player(4, 4)])

    store.update(2, _request(20))
    assert [p.id for p in store.list_all()] == [1, 2, 3, 4]

    store.delete(3)
    assert [p.id for p in store.list_all()] == [1, 2, 4]


def test_delete_twice_reports_not_found_second_time():
    store = PlayerStore([_player(1, 1)])
    store.delete(1)
    with pytest.raises(PlayerNotFoundError):
        store.delete(1)
    assert len(store) == 0


def test_initial_players_must_be_unique():
    with pytest.raises(ValueError):
        PlayerStore([_player(1, 1), _player(1, 2)])
    with pytest.raises(ValueError):
        PlayerStore([_player(1, 1), _player(2, 1)])


def test_mixed_operations_keep_ids_and_squad_numbers_unique():
    store = PlayerStore()
    for number in range(1, 8):
        store.create(_request(number))
        _assert_unique(store)

    for number in (3, 4, 5):
        with pytest.raises(SquadNumberConflictError):
            store.create(_request(number))
    store.delete(4)
    store.update(2, _request(4))
    store.create(_request(2))
    with pytest.raises(SquadNumberConflictError):
        store.update(1, _request(2))
    _assert_unique(store)


def test_concurrent_creates_with_same_squad_number_admit_one():
    store = PlayerStore()
    barrier = threading.Barrier(16)

    def attempt(_: int) -> bool:
        barrier.wait()
        try:
            store.create(_request(9))
        except SquadNumberConflictError:
            return False
        return True

    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(attempt, range(16)))

    assert results.count(True) == 1
    assert len(store) == 1


def test_concurrent_creates_with_distinct_squad_numbers_get_distinct_ids():
    store = PlayerStore()

    with ThreadPoolExecutor(max_workers=8) as pool:
        created = list(pool.map(lambda n: store.create(_request(n)), range(1, 65)))

    assert sorted(p.id for p in created) == list(range(1, 65))
    _assert_unique(store)
