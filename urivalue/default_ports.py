"""Default ports implied by a uri scheme.

Only "http" and "https" have a default port out of the box. Additional
schemes can be given a default port for the duration of a context:

```python
from urivalue.default_ports import enable_default_ports
from urivalue.uri import Uri

with enable_default_ports({"ws": 80, "wss": 443}):
    assert Uri.parse("wss://example.com/socket").port == 443
```

The default port is only ever reported by `Uri.port` and is never written
out when a uri is serialized.
"""

from __future__ import annotations

from collections.abc import Generator, Mapping
import contextlib
import contextvars
import logging
from types import MappingProxyType

from .const import MAX_PORT, MIN_PORT
from .exceptions import InvalidPortError

__all__ = [
    "DEFAULT_PORTS",
    "default_port",
    "enable_default_ports",
]

_LOGGER = logging.getLogger(__name__)

DEFAULT_PORTS: Mapping[str, int] = MappingProxyType({"http": 80, "https": 443})

_extra_default_ports: contextvars.ContextVar[Mapping[str, int]] = (
    contextvars.ContextVar("extra_default_ports", default=MappingProxyType({}))
)


def validate_port(port: object) -> int:
    """Return the port if it is an integer in the 16 bit unsigned range."""
    if isinstance(port, bool) or not isinstance(port, int):
        raise InvalidPortError(port)
    if not MIN_PORT <= port <= MAX_PORT:
        raise InvalidPortError(port)
    return port


@contextlib.contextmanager
def enable_default_ports(ports: Mapping[str, int]) -> Generator[None]:
    """Context manager that adds scheme default ports for the current context.

    Scheme names are case insensitive. The built-in "http" and "https"
    defaults can't be replaced.
    """
    extra = dict(_extra_default_ports.get())
    for scheme, port in ports.items():
        scheme = scheme.lower()
        if scheme in DEFAULT_PORTS:
            raise ValueError(f"Default port for scheme '{scheme}' is built in")
        extra[scheme] = validate_port(port)
    _LOGGER.debug("Enabling default ports %s", extra)
    token = _extra_default_ports.set(MappingProxyType(extra))
    try:
        yield
    finally:
        _extra_default_ports.reset(token)


def default_port(scheme: str) -> int | None:
    """Return the default port for the scheme, or None if it has none."""
    if (port := DEFAULT_PORTS.get(scheme)) is not None:
        return port
    return _extra_default_ports.get().get(scheme)
