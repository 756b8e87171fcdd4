from fastapi import Request

from bloodwork_api.services.rate_limit import UploadRateLimiter


def get_upload_limiter(request: Request) -> UploadRateLimiter:
    return request.app.state.upload_limiter
