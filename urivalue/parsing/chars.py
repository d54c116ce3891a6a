"""Character sets used in rfc3986.

This file defines the character sets used by pyparsing to tokenize
uri strings, intended to be used by the grammar parsing code. Percent
encoded octets are not decoded or checked, so a bare "%" is accepted
anywhere an encoded octet may appear.
"""

from __future__ import annotations

import re

from pyparsing import alphanums, alphas, hexnums, nums

UNRESERVED = alphanums + "-._~"
SUB_DELIMS = "!$&'()*+,;="
PCT_ENCODED = "%"

SCHEME_CHAR = alphanums + "+-."
USER_INFO_CHAR = UNRESERVED + PCT_ENCODED + SUB_DELIMS + ":"
REG_NAME_CHAR = UNRESERVED + PCT_ENCODED + SUB_DELIMS
PCHAR = UNRESERVED + PCT_ENCODED + SUB_DELIMS + ":@"
PATH_CHAR = PCHAR + "/"
QUERY_CHAR = PCHAR + "/?"
# A fragment is everything after the first "#", including any other "#"
FRAGMENT_CHAR = QUERY_CHAR + "#"


def char_class(chars: str) -> str:
    """Return a regular expression character class matching any of the chars."""
    return "[" + "".join(re.escape(char) for char in sorted(set(chars))) + "]"


SCHEME_RE = f"[{alphas}]{char_class(SCHEME_CHAR)}*"
PATH_RE = f"/{char_class(PATH_CHAR)}*"
QUERY_RE = f"{char_class(QUERY_CHAR)}+"
FRAGMENT_RE = f"{char_class(FRAGMENT_CHAR)}+"
IP_LITERAL_RE = (
    r"\["
    f"(?:{char_class(hexnums + ':.')}+"
    f"|[vV]{char_class(hexnums)}+\\.{char_class(UNRESERVED + SUB_DELIMS + ':')}+)"
    r"\]"
)
PORT_CHAR = nums
