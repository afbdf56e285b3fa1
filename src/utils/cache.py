from cachetools import TTLCache

# session id -> {"image": GenerationView, "scripts": GenerationView}
# idle sessions expire after `ttl` seconds
def make_session_cache(ttl: int = 60 * 60, maxsize: int = 1024) -> TTLCache:
    return TTLCache(maxsize=maxsize, ttl=ttl)
