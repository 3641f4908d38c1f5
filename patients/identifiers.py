"""
Generators for the two identifier spaces a patient can be looked up by.

Permanent ids are 12 decimal digits: the last 8 digits of the current
millisecond timestamp followed by a 4 digit random segment. Two ids can
only collide when generated within the same millisecond window (modulo
10**8 ms, about 27.8 hours) and drawing the same random segment, i.e.
roughly 1 in 10**4 for ids minted in the same millisecond.

Temporary token values are 8 characters drawn uniformly from A-Z0-9,
a keyspace of 36**8 (about 2.8e12).

Neither generator guarantees uniqueness. The database constraints on
``Patient.permanent_id`` and on active ``TemporaryToken.token`` values
are authoritative; callers regenerate on conflict.

The spaces are disjoint by length, so a query string can never be both
a permanent id and a token value.
"""
import secrets
import string
import time

PERMANENT_ID_LENGTH = 12
TIMESTAMP_DIGITS = 8
RANDOM_DIGITS = PERMANENT_ID_LENGTH - TIMESTAMP_DIGITS

TOKEN_ALPHABET = string.ascii_uppercase + string.digits
TOKEN_LENGTH = 8


def generate_permanent_id(timestamp_ms=None):
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    timestamp_part = str(timestamp_ms)[-TIMESTAMP_DIGITS:].zfill(TIMESTAMP_DIGITS)
    random_part = str(secrets.randbelow(10 ** RANDOM_DIGITS)).zfill(RANDOM_DIGITS)
    return timestamp_part + random_part


def generate_token_value():
    return ''.join(secrets.choice(TOKEN_ALPHABET) for _ in range(TOKEN_LENGTH))


def is_permanent_id_format(value):
    return len(value) == PERMANENT_ID_LENGTH and value.isdigit()


def is_token_format(value):
    return len(value) == TOKEN_LENGTH and all(ch in TOKEN_ALPHABET for ch in value)
