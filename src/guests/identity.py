"""Guest identity derivation.

Guests never sign in. A guest is recognised by a pseudo email address built
from the name they type, so the same person coming back with different casing
or spacing lands on the same record. Two different people sharing a name will
share a record too.
"""

from src.config.settings import settings
from src.guests.dtos import InvalidGuestNameError


def derive_guest_email(name: str, domain: str | None = None) -> str:
    """Derive the per-event dedup key for a guest name.

    "Jane  Smith" and " jane smith" both become "jane.smith@guest.local".
    """
    parts = name.lower().split()
    if not parts:
        raise InvalidGuestNameError(name)
    return f"{'.'.join(parts)}@{domain or settings.guest_email_domain}"
