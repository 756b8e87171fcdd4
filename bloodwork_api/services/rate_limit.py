from limits import parse
from limits.storage import MemoryStorage, Storage
from limits.strategies import FixedWindowRateLimiter

from bloodwork_api.services.errors import RateLimitExceededError


class UploadRateLimiter:
    """Fixed-window request counter keyed by user id.

    Counters live in a ``limits`` storage whose increments are atomic, so one
    limiter can be shared by every worker thread of the app.
    """

    namespace = "bloodwork-upload"

    def __init__(self, rate: str = "100/minute", storage: Storage | None = None):
        self.rate = parse(rate)
        self.storage = storage or MemoryStorage()
        self._limiter = FixedWindowRateLimiter(self.storage)

    def check(self, user_id: str) -> None:
        if not self._limiter.hit(self.rate, self.namespace, user_id):
            raise RateLimitExceededError()

    def reset(self) -> None:
        self.storage.reset()
