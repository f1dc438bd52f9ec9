from shortcuts.dao.redis.mixins import RedisClientMixin
from shortcuts.dao.redis.shortcut_redis_dao import ShortcutRedisDAO


__all__ = [
    'RedisClientMixin',
    'ShortcutRedisDAO',
]
