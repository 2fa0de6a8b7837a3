"""
Netmask and route name helpers.
"""
import ipaddress
from typing import Optional

DEFAULT_ROUTE = "default"
IPV4_DEFAULT_NETMASK = "0.0.0.0"


def address_family(address: str) -> int:
    """Infer the address family (4 or 6) from the literal syntax of an address."""
    return 6 if ":" in address else 4


def _parse_netmask(netmask: str, family: Optional[int] = None):
    if family is None:
        family = address_family(netmask)
    if address_family(netmask) != family:
        raise ValueError(f"netmask {netmask!r} is not an IPv{family} mask")
    try:
        if family == 6:
            return ipaddress.IPv6Address(netmask)
        return ipaddress.IPv4Address(netmask)
    except ipaddress.AddressValueError as e:
        raise ValueError(f"unrecognized netmask {netmask!r}: {e}")


def netmask_to_prefix(netmask: str, family: Optional[int] = None) -> int:
    """
    Convert a dotted-quad or colon-form netmask to a prefix length.

    Args:
        netmask: Mask such as "255.255.255.0" or "ffff:ffff::"
        family: Expected address family; inferred from the mask when omitted

    Returns:
        Number of leading one-bits in the mask

    Raises:
        ValueError: Unrecognized syntax, wrong family, or non-contiguous mask
    """
    mask = _parse_netmask(netmask, family)
    bits = mask.max_prefixlen
    value = int(mask)
    inverted = ~value & ((1 << bits) - 1)
    # A valid mask is ones followed by zeros, so its complement is 2**n - 1
    if inverted & (inverted + 1):
        raise ValueError(f"netmask {netmask!r} is not contiguous")
    return bits - inverted.bit_length()


def normalize_default_netmask(netmask: str) -> str:
    """
    Canonical mask text for a default route. Never raises.

    Anything without a colon becomes "0.0.0.0"; colon-form masks are
    compressed when they parse and kept as written otherwise.
    """
    if address_family(netmask) == 4:
        return IPV4_DEFAULT_NETMASK
    try:
        return ipaddress.IPv6Address(netmask).compressed
    except ipaddress.AddressValueError:
        return netmask


def derive_route_name(network: str, netmask: str) -> str:
    """Name a route "default" or "<network>/<prefix>"."""
    if network == DEFAULT_ROUTE:
        return DEFAULT_ROUTE
    prefix = netmask_to_prefix(netmask, address_family(network))
    return f"{network}/{prefix}"
