import pytest

from bloodwork_api.services.errors import RateLimitExceededError
from bloodwork_api.services.rate_limit import UploadRateLimiter


def test_limit_is_enforced_per_user():
    limiter = UploadRateLimiter("2/minute")

    limiter.check("user-1")
    limiter.check("user-1")
    with pytest.raises(RateLimitExceededError):
        limiter.check("user-1")

    limiter.check("user-2")


def test_reset_clears_counters():
    limiter = UploadRateLimiter("1/minute")
    limiter.check("user-1")

    limiter.reset()

    limiter.check("user-1")
