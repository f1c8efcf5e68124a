"""Link validation before any network access.

Only http/https links with a hostname are accepted. When private-host
blocking is enabled, links that resolve to loopback, private, link-local or
cloud metadata addresses are refused.
"""

from __future__ import annotations

import ipaddress
import socket
from urllib.parse import urlparse

from renamr.errors import BlockedHostError

_BLOCKED_HOSTNAMES = {"localhost", "localhost.localdomain"}

# Cloud metadata and special IPs that may bypass is_private checks
_BLOCKED_IPS = {
    ipaddress.ip_address("169.254.169.254"),
    ipaddress.ip_address("0.0.0.0"),
}


def _is_blocked(addr: ipaddress.IPv4Address | ipaddress.IPv6Address) -> bool:
    return (
        addr in _BLOCKED_IPS
        or addr.is_private
        or addr.is_loopback
        or addr.is_reserved
        or addr.is_link_local
    )


def validate_link(url: str, block_private: bool = False) -> str:
    """Return the link unchanged if it may be fetched.

    Raises ValueError if the link is malformed or not http(s).
    Raises BlockedHostError if block_private is set and the host is internal.
    """
    parsed = urlparse(url)

    if parsed.scheme not in ("http", "https"):
        raise ValueError(f"Unsupported URL scheme: {parsed.scheme!r}")

    hostname = parsed.hostname
    if not hostname:
        raise ValueError(f"No hostname in URL: {url!r}")

    if not block_private:
        return url

    if hostname.lower() in _BLOCKED_HOSTNAMES:
        raise BlockedHostError(url, f"blocked internal hostname {hostname!r}")

    try:
        addr = ipaddress.ip_address(hostname)
    except ValueError:
        addr = None

    if addr is not None:
        if _is_blocked(addr):
            raise BlockedHostError(url, f"blocked private/internal IP {addr}")
        return url

    try:
        results = socket.getaddrinfo(hostname, None, socket.AF_UNSPEC, socket.SOCK_STREAM)
    except socket.gaierror as exc:
        raise ValueError(f"Cannot resolve hostname {hostname!r}: {exc}") from exc

    for _family, _type, _proto, _canonname, sockaddr in results:
        resolved = ipaddress.ip_address(sockaddr[0])
        if _is_blocked(resolved):
            raise BlockedHostError(url, f"{hostname!r} resolves to blocked address {resolved}")

    return url
