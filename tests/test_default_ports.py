"""Tests for scheme default ports."""

import asyncio

import pytest

from urivalue.default_ports import DEFAULT_PORTS, default_port, enable_default_ports
from urivalue.exceptions import InvalidPortError
from urivalue.uri import Uri


def test_builtin_default_ports() -> None:
    """Test only http and https have a default port."""
    assert default_port("http") == 80
    assert default_port("https") == 443
    assert default_port("ws") is None
    assert default_port("") is None
    assert dict(DEFAULT_PORTS) == {"http": 80, "https": 443}


def test_enable_default_ports() -> None:
    """Test default ports enabled for the duration of a context."""
    uri = Uri.parse("wss://example.com/socket")
    assert uri.port is None

    with enable_default_ports({"WS": 80, "wss": 443}):
        assert uri.port == 443
        assert Uri.parse("ws://example.com/").port == 80
        assert str(uri) == "wss://example.com/socket"
        with enable_default_ports({"ftp": 21}):
            assert default_port("ftp") == 21
            assert default_port("wss") == 443
        assert default_port("ftp") is None

    assert uri.port is None
    assert default_port("ws") is None


def test_explicit_port_wins() -> None:
    """Test an explicit port is used over an enabled default port."""
    with enable_default_ports({"ws": 80}):
        assert Uri.parse("ws://example.com:8080/").port == 8080


def test_builtin_default_port_not_replaced() -> None:
    """Test the http and https default ports can't be changed."""
    with pytest.raises(ValueError, match="built in"):
        with enable_default_ports({"HTTP": 8080}):
            pass
    assert default_port("http") == 80


@pytest.mark.parametrize("port", [-1, 65536, "21", None])
def test_invalid_default_port(port: object) -> None:
    """Test default ports are checked like explicit ports."""
    with pytest.raises(InvalidPortError):
        with enable_default_ports({"ftp": port}):  # type: ignore[dict-item]
            pass
    assert default_port("ftp") is None


def test_default_ports_per_task() -> None:
    """Test enabled default ports do not leak into other asyncio tasks."""

    async def port_for(scheme: str, ports: dict[str, int]) -> int | None:
        with enable_default_ports(ports):
            await asyncio.sleep(0)
            return default_port(scheme)

    async def run() -> list[int | None]:
        return list(
            await asyncio.gather(
                port_for("ftp", {"ftp": 21}),
                port_for("ftp", {"ftp": 2121}),
                port_for("ftp", {}),
            )
        )

    assert asyncio.run(run()) == [21, 2121, None]
