"""Favicon service URL builder."""

from urllib.parse import urlencode

from ..constants import DEFAULT_FAVICON_SERVICE_URL, DEFAULT_FAVICON_SIZE


def build_icon_url(
    domain: str,
    size: int = DEFAULT_FAVICON_SIZE,
    service_url: str = DEFAULT_FAVICON_SERVICE_URL,
) -> str:
    """
    Build the favicon image URL for a canonical domain.

    No request is made; the address is consumed directly as image source.

    Args:
        domain: Canonical domain (e.g. 'github.com')
        size: Square icon size in pixels
        service_url: Base URL of the favicon-by-domain service

    Returns:
        Fully-qualified icon URL
    """
    query = urlencode({"domain": domain, "sz": size}, safe=".-:")
    return f"{service_url}?{query}"
