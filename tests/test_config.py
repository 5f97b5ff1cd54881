"""Tests for settings loaded from the WOLGATE_ environment."""

from wolgate.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("WOLGATE_ROUTE_COMMAND", raising=False)
    monkeypatch.delenv("WOLGATE_DEFAULT_REMOTE", raising=False)
    s = Settings(_env_file=None)
    assert s.default_remote == "255.255.255.255:9"
    assert s.route_argv == ["ip", "route", "show", "proto", "kernel", "dev"]


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("WOLGATE_ROUTE_COMMAND", "/usr/sbin/ip -4 route show dev")
    monkeypatch.setenv("WOLGATE_DEFAULT_REMOTE", "192.168.1.255:7")
    monkeypatch.setenv("WOLGATE_LOG_LEVEL", "debug")
    s = Settings(_env_file=None)
    assert s.route_argv == ["/usr/sbin/ip", "-4", "route", "show", "dev"]
    assert s.default_remote == "192.168.1.255:7"
    assert s.log_level == "DEBUG"


def test_unprefixed_env_is_ignored(monkeypatch):
    monkeypatch.setenv("ROUTE_COMMAND", "route -n")
    monkeypatch.delenv("WOLGATE_ROUTE_COMMAND", raising=False)
    assert Settings(_env_file=None).route_command == "ip route show proto kernel dev"
