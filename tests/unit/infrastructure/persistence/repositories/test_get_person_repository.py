"""Tests for get_person_repository() / reset_person_repository()."""

import threading
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock, patch

from src.infrastructure.persistence.repositories import (
    SqlPersonRepository,
    get_person_repository,
    reset_person_repository,
)


def test_returns_sql_person_repository(connections):
    assert isinstance(get_person_repository(connections), SqlPersonRepository)


def test_returns_same_instance_on_every_call(connections):
    assert get_person_repository(connections) is get_person_repository(connections)


def test_reset_forces_a_new_instance(connections):
    first = get_person_repository(connections)
    reset_person_repository()
    assert get_person_repository(connections) is not first


def test_first_call_ensures_schema_once():
    with patch.object(SqlPersonRepository, "ensure_schema") as ensure:
        get_person_repository(MagicMock())
        get_person_repository(MagicMock())
    ensure.assert_called_once()


def test_reset_reruns_schema_detection():
    with patch.object(SqlPersonRepository, "ensure_schema") as ensure:
        get_person_repository(MagicMock())
        reset_person_repository()
        get_person_repository(MagicMock())
    assert ensure.call_count == 2


def test_concurrent_first_access_shares_one_instance():
    barrier = threading.Barrier(8)

    def _get(_):
        barrier.wait()
        return get_person_repository(MagicMock())

    with patch.object(SqlPersonRepository, "ensure_schema") as ensure:
        with ThreadPoolExecutor(max_workers=8) as pool:
            instances = list(pool.map(_get, range(8)))
    assert len({id(repo) for repo in instances}) == 1
    ensure.assert_called_once()


def test_defaults_to_engine_from_settings():
    engine = MagicMock()
    with patch(
        "src.infrastructure.persistence.repositories.get_engine", return_value=engine
    ), patch.object(SqlPersonRepository, "ensure_schema"):
        repo = get_person_repository()
    assert repo._connections.engine is engine


def test_instance_is_not_cached_when_schema_cannot_be_ensured():
    with patch.object(SqlPersonRepository, "ensure_schema", return_value=False) as ensure:
        first = get_person_repository(MagicMock())
        second = get_person_repository(MagicMock())
    assert first is not second
    assert ensure.call_count == 2


def test_retry_after_failed_schema_ensure_caches_instance():
    with patch.object(SqlPersonRepository, "ensure_schema", side_effect=[False, True]):
        get_person_repository(MagicMock())
        recovered = get_person_repository(MagicMock())
    assert get_person_repository(MagicMock()) is recovered
