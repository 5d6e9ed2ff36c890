import json
import logging
from typing import Any, Optional

from redis.asyncio import Redis
from redis.exceptions import RedisError

from app.core.config import settings

logger = logging.getLogger(__name__)

_redis: Optional[Redis] = None


def get_redis() -> Redis:
    global _redis
    if _redis is None:
        _redis = Redis.from_url(settings.REDIS_URL, decode_responses=True)
    return _redis


async def cache_json_get(key: str) -> Optional[Any]:
    try:
        val = await get_redis().get(key)
    except (RedisError, OSError) as e:
        logger.warning("cache get failed key=%s reason=%s", key, e)
        return None
    return json.loads(val) if val else None


async def cache_json_set(key: str, data: Any, ttl: int) -> None:
    try:
        await get_redis().set(key, json.dumps(data, default=str), ex=ttl)
    except (RedisError, OSError) as e:
        logger.warning("cache set failed key=%s reason=%s", key, e)
