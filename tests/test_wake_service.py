"""Tests for the serial wake loop."""

import logging
from unittest.mock import MagicMock, call, patch

from wolgate.services.wake_service import wake_targets
from wolgate.utils.addr import resolve_udp_addr


def test_wakes_each_target_in_order():
    sender = MagicMock()
    remote = resolve_udp_addr("127.0.0.1:9")

    results = wake_targets(
        ["AA:BB:CC:DD:EE:FF", "11-22-33-44-55-66"], password=b"\x01" * 6, remote=remote, sender=sender,
    )

    assert [r.ok for r in results] == [True, True]
    assert [r.mac for r in results] == ["aa:bb:cc:dd:ee:ff", "11:22:33:44:55:66"]
    assert sender.call_args_list == [
        call("aa:bb:cc:dd:ee:ff", b"\x01" * 6, None, remote),
        call("11:22:33:44:55:66", b"\x01" * 6, None, remote),
    ]


def test_bad_mac_is_skipped(caplog):
    sender = MagicMock()

    results = wake_targets(["not-a-mac", "aa:bb:cc:dd:ee:ff"], sender=sender)

    assert not results[0].ok
    assert results[0].mac is None
    assert "could not parse 'not-a-mac' as a valid MAC address" in results[0].error
    assert results[1].ok
    sender.assert_called_once()
    assert "could not parse 'not-a-mac'" in caplog.text


def test_send_error_continues():
    sender = MagicMock(side_effect=[OSError("Network is unreachable"), None])

    results = wake_targets(["aa:bb:cc:dd:ee:ff", "11:22:33:44:55:66"], sender=sender)

    assert not results[0].ok
    assert results[0].error == "error attempting to wake aa:bb:cc:dd:ee:ff: Network is unreachable"
    assert results[1].ok


def test_default_sender_is_send_wol(caplog):
    caplog.set_level(logging.INFO)
    with patch("wolgate.services.wake_service.send_wol") as mock_wol:
        results = wake_targets(["aa:bb:cc:dd:ee:ff"])

    assert results[0].ok
    mock_wol.assert_called_once_with("aa:bb:cc:dd:ee:ff", None, None, None)
    assert "sent wake packet to 'aa:bb:cc:dd:ee:ff'" in caplog.text
