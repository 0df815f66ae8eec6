"""In-memory, process-lifetime services backing the application flow."""

from .conversation import ConversationTracker
from .rate_limiter import Allowed, Denied, RateLimiter

__all__ = ["ConversationTracker", "RateLimiter", "Allowed", "Denied"]
