"""
Per-query memoization of generated statements.

CREATE, DROP and SELECT-all statements depend only on immutable entity
metadata and the query's dialect, so a Query may keep them in its own
cachetools LRUCache, one per statement kind, keyed by the entity.

The caches are plain instance state with no locking: a Query with caching
enabled belongs to one thread.
"""
import functools
import logging

import cachetools

logger = logging.getLogger(__name__)


def statement_caches(names, maxsize: int) -> dict[str, cachetools.LRUCache]:
    """Create one LRU cache per statement kind.

    Args:
        names: Statement kinds to cache
        maxsize: Maximum entries in each cache

    Returns
        Dict mapping statement kind to its LRUCache
    """
    return {name: cachetools.LRUCache(maxsize=maxsize) for name in names}


def cacheable_statement(cache_name: str):
    """Decorator for caching statements that depend only on entity metadata.

    Wraps a method with signature `(self, entity)` on an object holding a
    `caches` dict (empty when caching is off). Entities that cannot be
    hashed, e.g. with an unhashable host type, bypass the cache so the
    generator reports the real mapping error.

    Args:
        cache_name: Key of the cache in `self.caches`
    """
    def decorator(method):
        @functools.wraps(method)
        def wrapper(self, entity):
            cache = self.caches.get(cache_name)
            if cache is None:
                return method(self, entity)

            try:
                result = cache[entity]
                logger.debug(f'Cache hit for {method.__name__}({entity.table_name})')
                return result
            except KeyError:
                logger.debug(f'Cache miss for {method.__name__}({entity.table_name})')
            except TypeError:
                logger.debug(f'Uncacheable entity for {method.__name__}({entity.table_name})')
                return method(self, entity)

            result = method(self, entity)
            cache[entity] = result
            return result

        return wrapper
    return decorator
