from fastapi import Request

from tinylinks.core.context import AppContext


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def public_base_url(request: Request) -> str:
    """Origin used to build short URLs: BASE_URL if configured, else the request's scheme + host."""
    configured = get_context(request).settings.BASE_URL
    return (configured or str(request.base_url)).rstrip("/")
