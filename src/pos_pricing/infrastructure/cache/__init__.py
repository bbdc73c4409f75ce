from .cached_price_facade import CachedPriceResolutionFacade

__all__ = ["CachedPriceResolutionFacade"]
