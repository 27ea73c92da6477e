"""Text transform toolkit: tool registry, search and rate limiting."""

from .config import RateLimitConfig, RateLimits, SearchConfig, Settings

__version__ = "1.0.0"

__all__ = ["RateLimitConfig", "RateLimits", "SearchConfig", "Settings", "__version__"]
