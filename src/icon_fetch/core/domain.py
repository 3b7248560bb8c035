"""Domain normalization.

Turns whatever the user typed (``https://www.GitHub.com/foo``) into the
canonical domain used as history key and icon lookup input (``github.com``).
The only validation is the presence of a dot; TLDs and IDN are not checked.
"""

import logging
import re

from ..exceptions import InvalidDomainError

logger = logging.getLogger(__name__)

_SCHEME_PATTERN = re.compile(r"^https?://", re.IGNORECASE)
_WWW_PREFIX = "www."


def _clean_once(value: str) -> str:
    """Run one trim/lowercase/strip/truncate pass."""
    value = value.strip().lower()
    value = _SCHEME_PATTERN.sub("", value, count=1)
    if value.startswith(_WWW_PREFIX):
        value = value[len(_WWW_PREFIX) :]
    return value.split("/", 1)[0]


def normalize_domain(raw_input: str) -> str:
    """
    Normalize user input to a canonical domain.

    The cleaning pass repeats until the value is stable, so the result is a
    fixed point: normalizing it again returns it unchanged.

    Args:
        raw_input: Address as typed by the user

    Returns:
        Canonical domain (lowercase, no scheme, no leading www., no path)

    Raises:
        InvalidDomainError: If the result is empty or contains no dot
    """
    domain = raw_input
    while True:
        cleaned = _clean_once(domain)
        if cleaned == domain:
            break
        domain = cleaned

    if not domain or "." not in domain:
        logger.debug(f"Rejected domain input: {raw_input!r}")
        raise InvalidDomainError(raw_input)

    return domain
