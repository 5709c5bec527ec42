"""Domain name rules and address disambiguation.

A domain is ``<name>.oct`` where *name* is 3-32 ASCII letters, digits, or
hyphens and never starts or ends with a hyphen. Registration and resolution
both validate through this module so they reject the same inputs.

INVARIANT: Every function here is pure and total. No I/O.
"""

from __future__ import annotations

import re

DOMAIN_SUFFIX = ".oct"
ADDRESS_PREFIX = "oct"

MIN_NAME_LENGTH = 3
MAX_NAME_LENGTH = 32

# Addresses are strictly longer than 40 characters.
MIN_ADDRESS_LENGTH = 41

REGISTRATION_TAG = "register_domain"

INVALID_FORMAT_MESSAGE = "Invalid domain format. Use only letters, numbers, and hyphens."

NAME_PATTERN: re.Pattern[str] = re.compile(r"^[a-zA-Z0-9]([a-zA-Z0-9-]*[a-zA-Z0-9])?$")


def strip_suffix(domain: str) -> str:
    """Return the name part of *domain* (``"alice.oct"`` -> ``"alice"``)."""
    if domain.endswith(DOMAIN_SUFFIX):
        return domain[: -len(DOMAIN_SUFFIX)]
    return domain


def is_valid_domain_format(domain: str) -> bool:
    """Check whether *domain* is a syntactically valid ``.oct`` domain.

    Examples:
        >>> is_valid_domain_format("alice.oct")
        True
        >>> is_valid_domain_format("ab.oct")
        False
        >>> is_valid_domain_format("-abc.oct")
        False
        >>> is_valid_domain_format("alice.com")
        False
    """
    if not isinstance(domain, str) or not domain.endswith(DOMAIN_SUFFIX):
        return False

    name = strip_suffix(domain)
    if not MIN_NAME_LENGTH <= len(name) <= MAX_NAME_LENGTH:
        return False
    # fullmatch: a trailing newline must not slip past ``$``
    return NAME_PATTERN.fullmatch(name) is not None


def is_oct_domain(value: str) -> bool:
    """True iff *value* carries the ``.oct`` suffix and is well formed.

    ``"ab.oct"`` looks like a domain but is not one.
    """
    return isinstance(value, str) and value.endswith(DOMAIN_SUFFIX) and is_valid_domain_format(value)


def is_address_like(value: str) -> bool:
    """Syntactic address check: ``oct`` prefix and more than 40 characters.

    Does not validate checksum or encoding; addresses are opaque here.
    """
    return (
        isinstance(value, str)
        and value.startswith(ADDRESS_PREFIX)
        and len(value) >= MIN_ADDRESS_LENGTH
    )


def registration_message(domain: str) -> str:
    """Build the message tag attached to a registration transaction.

    The domain is embedded verbatim; length and encoding limits on the
    message channel belong to the ledger.
    """
    return f"{REGISTRATION_TAG}:{domain}"
