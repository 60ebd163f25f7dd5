"""Syntactic checks for endpoint host names and IP literals."""

from __future__ import annotations

import ipaddress

MAX_DOMAIN_LENGTH = 255

# Unicode White_Space, without the \x1c-\x1f separators that str.strip() also drops.
_WHITESPACE = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)
_EDGE_CHARACTERS = frozenset("-_.")
_INVALID_DOMAIN_CHARACTERS = frozenset("`~!@#$%^&*()+={}[]|\\\"';:><?/")


def is_valid_domain(host: str) -> bool:
    """
    Return True when host looks like a usable domain name.

    The check is deliberately permissive (RFC 1035 label rules are not
    enforced); anything it lets through is left for the remote service to
    reject. Length is counted in UTF-8 bytes.
    """

    host = host.strip(_WHITESPACE)
    if not host or len(host.encode("utf-8", "surrogatepass")) > MAX_DOMAIN_LENGTH:
        return False
    if host[0] in _EDGE_CHARACTERS or host[-1] in _EDGE_CHARACTERS:
        return False
    return not any(char in _INVALID_DOMAIN_CHARACTERS for char in host)


def is_valid_ip(ip: str) -> bool:
    """Return True when ip is an IPv4 or IPv6 address literal."""

    # ipaddress accepts scoped IPv6 ("fe80::1%eth0"), bare literals only here.
    if "%" in ip:
        return False
    try:
        ipaddress.ip_address(ip)
    except ValueError:
        return False
    return True


def is_valid_host(host: str) -> bool:
    return is_valid_ip(host) or is_valid_domain(host)
