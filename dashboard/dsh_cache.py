from django.core.cache import cache

from .services import AdminStats

CACHE_VERSION = 1
CACHE_TTL = 5 * 60  # 5 minutes


def _cache_key():
    return f"admin_stats:v{CACHE_VERSION}"


def get_cached_stats():
    """
    Returns the admin dashboard stats from cache (or recomputes and caches).
    """
    key = _cache_key()
    stats = cache.get(key)
    if stats is None:
        stats = AdminStats.collect()
        cache.set(key, stats, CACHE_TTL)
    return stats


def invalidate_stats():
    cache.delete(_cache_key())
