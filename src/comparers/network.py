"""
Ordering for IP networks in CIDR notation.

Line format: ``<address>/<prefix-length>``.  Host bits may be set
(``9876::fe01:1234:0/24`` is accepted as written).  Networks are ordered by
base address exactly like addresses, then larger networks (shorter prefix)
first, so ``1.1.1.0/24`` comes before ``1.1.1.0/28``.
"""
from __future__ import annotations

import ipaddress
import logging
import re

from comparers.ip import IPAddress, compare_ip_addresses
from core.errors import InvalidNetworkError
from core.interfaces import IComparer, Ordering

logger = logging.getLogger(__name__)

_NETWORK_RE = re.compile(r"\A(?P<address>[^/]+)/(?P<prefix_len>[0-9]{1,3})\Z")


def parse_network(text: str) -> tuple[IPAddress, int]:
    """Parse *text* into ``(address, prefix_len)``.  Raises ``InvalidNetworkError``."""
    match = _NETWORK_RE.match(text)
    if match is None:
        raise InvalidNetworkError(text, "expected <address>/<prefix-length>")

    try:
        address = ipaddress.ip_address(match.group("address"))
    except ValueError as exc:
        raise InvalidNetworkError(text, str(exc)) from exc

    prefix_len = int(match.group("prefix_len"))
    if prefix_len > address.max_prefixlen:
        raise InvalidNetworkError(
            text,
            f"prefix length {prefix_len} is larger than {address.max_prefixlen}",
        )
    return address, prefix_len


class NetworkComparer(IComparer):
    """Orders lines holding one IPv4 or IPv6 network each."""
    __slots__ = ()

    def compare(self, str1: str, str2: str) -> Ordering:
        addr1, prefix_len1 = parse_network(str1)
        addr2, prefix_len2 = parse_network(str2)

        ordering = compare_ip_addresses(addr1, addr2)
        if ordering is Ordering.EQUAL:
            ordering = Ordering.of(prefix_len1, prefix_len2)
        logger.debug("NetworkComparer comparing `%s` <=> `%s`: %s", str1, str2, ordering.name)
        return ordering
