"""
Identifier generation for stored records.

Ids have the form ``<prefix>_<epoch milliseconds>_<9 base36 chars>``,
e.g. ``order_1760870400000_k3j9x0a2b``.  The millisecond part keeps ids
roughly time ordered; the random suffix separates records created in
the same millisecond.
"""

import secrets
import string
import time


_ALPHABET = string.digits + string.ascii_lowercase
SUFFIX_LENGTH = 9


def generate_id(prefix: str) -> str:
    millis = int(time.time() * 1000)
    suffix = "".join(secrets.choice(_ALPHABET) for _ in range(SUFFIX_LENGTH))
    return f"{prefix}_{millis}_{suffix}"
