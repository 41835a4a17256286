"""
Tests for the whisky repositories.
"""

from unittest.mock import MagicMock

import pytest
import redis

from whisky_api.entities import WhiskyEntity
from whisky_api.exceptions import WhiskyStorageError
from whisky_api.repositories import InMemoryWhiskyRepository, RedisWhiskyRepository


def test_memory_insert_and_get():
    repo = InMemoryWhiskyRepository()

    whisky_id = repo.insert("Talisker", None)

    assert whisky_id == 1
    assert repo.get(whisky_id) == WhiskyEntity(id=1, name="Talisker", origin=None)
    assert repo.count() == 1


def test_memory_replace_and_remove():
    repo = InMemoryWhiskyRepository()
    whisky_id = repo.insert("Talisker", "Scotland")

    assert repo.replace(WhiskyEntity(id=whisky_id, name="Oban", origin="Highlands")) is True
    assert repo.replace(WhiskyEntity(id=99, name="Oban", origin="Highlands")) is False
    assert repo.get(99) is None

    assert repo.remove(whisky_id) is True
    assert repo.remove(whisky_id) is False
    assert repo.list_all() == []


@pytest.fixture
def redis_client():
    client = MagicMock()
    client.pipeline.return_value = MagicMock()
    return client


@pytest.fixture
def repo(redis_client):
    return RedisWhiskyRepository(redis_client=redis_client, key_prefix="test")


def test_redis_insert(repo, redis_client):
    redis_client.incr.return_value = 7
    pipe = redis_client.pipeline.return_value

    assert repo.insert("Talisker", None) == 7

    redis_client.incr.assert_called_once_with("test:seq")
    pipe.hset.assert_called_once_with("test:7", mapping={"id": "7", "name": "Talisker"})
    pipe.zadd.assert_called_once_with("test:ids", {"7": 7})
    pipe.execute.assert_called_once()


def test_redis_get(repo, redis_client):
    redis_client.hgetall.return_value = {"id": "3", "name": "Oban", "origin": "Scotland"}

    assert repo.get(3) == WhiskyEntity(id=3, name="Oban", origin="Scotland")
    redis_client.hgetall.assert_called_once_with("test:3")


def test_redis_get_missing(repo, redis_client):
    redis_client.hgetall.return_value = {}
    assert repo.get(3) is None


def test_redis_list_all_in_id_order(repo, redis_client):
    redis_client.zrange.return_value = ["1", "2"]
    redis_client.pipeline.return_value.execute.return_value = [
        {"id": "1", "name": "A"},
        {},
    ]

    assert repo.list_all() == [WhiskyEntity(id=1, name="A", origin=None)]


def test_redis_remove(repo, redis_client):
    pipe = redis_client.pipeline.return_value
    pipe.execute.return_value = [0, 0]

    assert repo.remove(5) is False
    pipe.delete.assert_called_once_with("test:5")
    pipe.zrem.assert_called_once_with("test:ids", "5")


def test_redis_error_becomes_storage_error(repo, redis_client):
    redis_client.hgetall.side_effect = redis.ConnectionError("refused")

    with pytest.raises(WhiskyStorageError) as exc_info:
        repo.get(1)

    assert exc_info.value.operation == "get"


@pytest.fixture
def transaction_pipe(redis_client):
    """Pipeline driven by a stand-in for redis-py's Redis.transaction().

    Like the real one, it WATCHes the keys, runs the callable, executes
    the queued commands and starts over on WatchError.
    """
    pipe = MagicMock()

    def transaction(func, *watches, value_from_callable=False):
        while True:
            try:
                pipe.watch(*watches)
                value = func(pipe)
                result = pipe.execute()
                return value if value_from_callable else result
            except redis.WatchError:
                continue

    redis_client.transaction.side_effect = transaction
    return pipe


def test_redis_replace(repo, transaction_pipe):
    transaction_pipe.exists.return_value = 1

    assert repo.replace(WhiskyEntity(id=3, name="Oban", origin=None)) is True

    transaction_pipe.watch.assert_called_once_with("test:3")
    transaction_pipe.multi.assert_called_once()
    transaction_pipe.delete.assert_called_once_with("test:3")
    transaction_pipe.hset.assert_called_once_with("test:3", mapping={"id": "3", "name": "Oban"})


def test_redis_replace_missing_writes_nothing(repo, transaction_pipe):
    transaction_pipe.exists.return_value = 0

    assert repo.replace(WhiskyEntity(id=3, name="Oban", origin=None)) is False

    transaction_pipe.exists.assert_called_once_with("test:3")
    transaction_pipe.multi.assert_not_called()
    transaction_pipe.delete.assert_not_called()
    transaction_pipe.hset.assert_not_called()


def test_redis_replace_retries_after_concurrent_remove(repo, redis_client, transaction_pipe):
    # First attempt sees the hash, then a remove() touches the key before EXEC.
    transaction_pipe.exists.side_effect = [1, 0]
    transaction_pipe.execute.side_effect = [redis.WatchError(), []]

    assert repo.replace(WhiskyEntity(id=3, name="Oban", origin=None)) is False

    assert transaction_pipe.watch.call_count == 2
    assert transaction_pipe.multi.call_count == 1
    redis_client.pipeline.assert_not_called()


def test_redis_replace_error_becomes_storage_error(repo, redis_client):
    redis_client.transaction.side_effect = redis.ConnectionError("refused")

    with pytest.raises(WhiskyStorageError) as exc_info:
        repo.replace(WhiskyEntity(id=3, name="Oban", origin=None))

    assert exc_info.value.operation == "replace"
