from .bounded import BoundedTTLCache, CacheEntry, Clock

__all__ = ["BoundedTTLCache", "CacheEntry", "Clock"]
