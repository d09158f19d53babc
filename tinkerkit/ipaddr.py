"""Classifying strings as IPv4 addresses, IPv6 addresses or neither."""

from __future__ import annotations

import string

NEITHER = "Neither"
IPV4 = "IPv4"
IPV6 = "IPv6"

_ALLOWED_PREFIX = set("abcdef:." + string.digits)


def _parses(part: str, alphabet: str) -> bool:
    """Accept an optional leading '+' followed by at least one digit of ``alphabet``."""
    digits = part[1:] if part.startswith("+") else part
    return bool(digits) and all(ch in alphabet for ch in digits)


def validate_v4(query_ip: str) -> str:
    """Return ``"IPv4"`` if the string is a dotted quad, else ``"Neither"``."""
    parts = query_ip.split(".")
    for part in parts:
        if not 1 <= len(part.encode()) <= 3:
            return NEITHER
        if len(part) != 1 and part[0] == "0":
            return NEITHER
        if not _parses(part, string.digits):
            return NEITHER
        if int(part) > 255:
            return NEITHER
    return IPV4 if len(parts) == 4 else NEITHER


def validate_v6(query_ip: str) -> str:
    """Return ``"IPv6"`` if the string is eight hex groups, else ``"Neither"``."""
    parts = query_ip.split(":")
    for part in parts:
        if not 1 <= len(part.encode()) <= 4:
            return NEITHER
        if not _parses(part, string.hexdigits):
            return NEITHER
    return IPV6 if len(parts) == 8 else NEITHER


def valid_ip_address(query_ip: str) -> str:
    """Guess the address family from the first five characters and validate it."""
    if not 7 <= len(query_ip.encode()) <= 40:
        return NEITHER

    guess = NEITHER
    for ch in query_ip[:5]:
        if ch.lower() not in _ALLOWED_PREFIX:
            return NEITHER
        if ch == ".":
            guess = IPV4
        elif ch in "abcdef:":
            guess = IPV6

    if guess == IPV4:
        return validate_v4(query_ip)
    if guess == IPV6:
        return validate_v6(query_ip)
    return NEITHER