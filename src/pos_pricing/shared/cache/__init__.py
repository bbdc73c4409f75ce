from .price_lru_cache import PriceLruCache

__all__ = ["PriceLruCache"]
