"""Library for splitting a uri authority into its parts.

The authority has already been matched by the grammar, so the only thing
left to check here is that an explicit port fits in 16 bits.
"""

from __future__ import annotations

from dataclasses import dataclass

from urivalue.const import MAX_PORT
from urivalue.exceptions import UriParseError

_USER_INFO_SEP = "@"
_PORT_SEP = ":"
_IP_LITERAL_END = "]"


@dataclass(frozen=True)
class ParsedAuthority:
    """The parts of an authority: [user-info "@"] host [":" port]."""

    user_info: str
    host: str
    port: int | None


def split_authority(authority: str) -> ParsedAuthority:
    """Split a raw authority into user-info, host and explicit port."""
    user_info = ""
    host_port = authority
    if (pos := authority.find(_USER_INFO_SEP)) != -1:
        user_info = authority[:pos]
        host_port = authority[pos + 1 :]

    # An IP-literal host contains colons, so look for the port after it
    host_end = 0
    if host_port.startswith("["):
        host_end = host_port.find(_IP_LITERAL_END) + 1
    if (pos := host_port.find(_PORT_SEP, host_end)) == -1:
        return ParsedAuthority(user_info=user_info, host=host_port, port=None)

    host = host_port[:pos]
    port_text = host_port[pos + 1 :]
    if not port_text:
        return ParsedAuthority(user_info=user_info, host=host, port=None)
    if not (port_text.isascii() and port_text.isdigit()) or (port := int(port_text)) > MAX_PORT:
        raise UriParseError(
            f"Invalid port '{port_text}' in authority '{authority}'",
            uri=authority,
        )
    return ParsedAuthority(user_info=user_info, host=host, port=port)
