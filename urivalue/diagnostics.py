"""Library for diagnostics or debugging information about uris."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .uri import Uri

__all__ = [
    "redact_uri",
]

REDACT = "***"


def redact_uri(uri: Uri) -> str:
    """Return the uri as a string with any user-info password redacted.

    The pyparsing debug trace enabled by DEBUG logging on
    `urivalue.parsing.grammar` prints the unredacted input to stdout.
    """
    user, sep, _ = uri.user_info.partition(":")
    if not sep:
        return str(uri)
    return str(uri.with_user_info(user, REDACT))
