from fastapi import Depends, Request

from .config import Settings, get_settings
from .errors import ApiError


async def require_api_key(request: Request, settings: Settings = Depends(get_settings)) -> None:
    """Reject the request unless the API key header matches the configured secret."""
    provided = request.headers.get(settings.api_key_header)
    if not provided or not settings.api_key or provided != settings.api_key:
        raise ApiError.unauthorized()
