"""Redis implementation of WhiskyStore.

Each whisky is a Redis hash at ``<prefix>:<id>``. Identifiers come from
``INCR <prefix>:seq`` and are indexed in the sorted set ``<prefix>:ids``
so list_all() returns whiskies in id order without scanning the keyspace.
"""

import redis

from whisky_api.config import get_redis_client, settings
from whisky_api.entities import WhiskyEntity
from whisky_api.exceptions import WhiskyStorageError


class RedisWhiskyRepository:
    """Redis implementation of the WhiskyStore protocol.

    This class satisfies the WhiskyStore protocol through structural
    typing - no explicit inheritance needed.

    A None name or origin is stored by leaving the hash field out.
    Any redis.RedisError is re-raised as WhiskyStorageError.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        key_prefix: str | None = None,
    ) -> None:
        """Initialize the Redis whisky repository.

        Args:
            redis_client: Redis client instance (decode_responses=True). If None, creates default.
            key_prefix: Namespace for all keys. Defaults to settings.redis_key_prefix.
        """
        self._client = redis_client or get_redis_client()
        self._prefix = key_prefix or settings.redis_key_prefix

    @property
    def seq_key(self) -> str:
        return f"{self._prefix}:seq"

    @property
    def ids_key(self) -> str:
        return f"{self._prefix}:ids"

    def _key(self, whisky_id: int) -> str:
        return f"{self._prefix}:{whisky_id}"

    @staticmethod
    def _to_mapping(whisky_id: int, name: str | None, origin: str | None) -> dict[str, str]:
        mapping = {"id": str(whisky_id)}
        if name is not None:
            mapping["name"] = name
        if origin is not None:
            mapping["origin"] = origin
        return mapping

    @staticmethod
    def _from_mapping(data: dict[str, str]) -> WhiskyEntity | None:
        if not data:
            return None
        return WhiskyEntity(
            id=int(data["id"]),
            name=data.get("name"),
            origin=data.get("origin"),
        )

    def insert(self, name: str | None, origin: str | None) -> int:
        """Store a new whisky under the next id from the sequence."""
        try:
            whisky_id = int(self._client.incr(self.seq_key))
            pipe = self._client.pipeline()
            pipe.hset(self._key(whisky_id), mapping=self._to_mapping(whisky_id, name, origin))
            pipe.zadd(self.ids_key, {str(whisky_id): whisky_id})
            pipe.execute()
        except redis.RedisError as e:
            raise WhiskyStorageError("insert", e) from e
        return whisky_id

    def replace(self, whisky: WhiskyEntity) -> bool:
        """Overwrite an existing whisky hash; missing ids are left alone.

        The existence check and the overwrite run in one WATCH/MULTI
        transaction on the hash key. A remove() that lands in between aborts
        the transaction and redis-py retries it, so a removed whisky is never
        written back.
        """
        if whisky.id is None:
            raise ValueError("Cannot replace a whisky without an id")

        key = self._key(whisky.id)
        mapping = self._to_mapping(whisky.id, whisky.name, whisky.origin)

        def overwrite(pipe: redis.client.Pipeline) -> bool:
            if not pipe.exists(key):
                return False
            pipe.multi()
            pipe.delete(key)
            pipe.hset(key, mapping=mapping)
            return True

        try:
            return self._client.transaction(overwrite, key, value_from_callable=True)
        except redis.RedisError as e:
            raise WhiskyStorageError("replace", e) from e

    def get(self, whisky_id: int) -> WhiskyEntity | None:
        try:
            data = self._client.hgetall(self._key(whisky_id))
        except redis.RedisError as e:
            raise WhiskyStorageError("get", e) from e
        return self._from_mapping(data)  # type: ignore[arg-type]

    def list_all(self) -> list[WhiskyEntity]:
        try:
            ids = self._client.zrange(self.ids_key, 0, -1)
            pipe = self._client.pipeline()
            for whisky_id in ids:  # type: ignore[union-attr]
                pipe.hgetall(self._key(int(whisky_id)))
            rows = pipe.execute() if ids else []
        except redis.RedisError as e:
            raise WhiskyStorageError("list_all", e) from e

        whiskies = []
        for row in rows:
            whisky = self._from_mapping(row)
            if whisky is not None:
                whiskies.append(whisky)
        return whiskies

    def remove(self, whisky_id: int) -> bool:
        try:
            pipe = self._client.pipeline()
            pipe.delete(self._key(whisky_id))
            pipe.zrem(self.ids_key, str(whisky_id))
            deleted, _ = pipe.execute()
        except redis.RedisError as e:
            raise WhiskyStorageError("remove", e) from e
        return deleted > 0

    def count(self) -> int:
        try:
            return int(self._client.zcard(self.ids_key))  # type: ignore[arg-type]
        except redis.RedisError as e:
            raise WhiskyStorageError("count", e) from e
