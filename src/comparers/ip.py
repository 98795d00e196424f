"""
Ordering for IP addresses.

A line containing a ``.`` is parsed as IPv4, anything else as IPv6.  IPv4
addresses always sort before IPv6 addresses; within a family addresses are
ordered as the integers they represent.
"""
from __future__ import annotations

import ipaddress
import logging
from typing import Union

from core.errors import InvalidAddressError
from core.interfaces import IComparer, Ordering

logger = logging.getLogger(__name__)

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

_IPV4_MAPPED_PREFIX = b"\x00" * 10 + b"\xff\xff"


def parse_ip_address(text: str) -> IPAddress:
    """Parse *text* as an IP address.  Raises ``InvalidAddressError``."""
    try:
        if "." in text:
            return ipaddress.IPv4Address(text)
        return ipaddress.IPv6Address(text)
    except ValueError as exc:
        raise InvalidAddressError(text, str(exc)) from exc


def octets_for_ip_address(address: IPAddress) -> bytes:
    """16-byte big-endian form; IPv4 addresses are IPv4-mapped."""
    if address.version == 4:
        return _IPV4_MAPPED_PREFIX + address.packed
    return address.packed


def compare_ip_addresses(ip1: IPAddress, ip2: IPAddress) -> Ordering:
    if ip1.version != ip2.version:
        return Ordering.LESS if ip1.version == 4 else Ordering.GREATER
    return Ordering.of(octets_for_ip_address(ip1), octets_for_ip_address(ip2))


class IpComparer(IComparer):
    """Orders lines holding one IPv4 or IPv6 address each."""
    __slots__ = ()

    def compare(self, str1: str, str2: str) -> Ordering:
        ip1 = parse_ip_address(str1)
        ip2 = parse_ip_address(str2)
        ordering = compare_ip_addresses(ip1, ip2)
        logger.debug("IpComparer comparing `%s` <=> `%s`: %s", ip1, ip2, ordering.name)
        return ordering
