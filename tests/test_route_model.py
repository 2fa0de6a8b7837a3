"""
Tests for the route record model and package settings.
"""
import logging
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from netroutes import ABSENT, RouteRecord
from netroutes.core.config import Settings
from netroutes.core.logging_config import setup_logging


def test_build_derives_name():
    record = RouteRecord.build("172.17.67.0", "255.255.255.0", "172.18.6.2", "vlan200", "table 200")

    assert record.name == "172.17.67.0/24"
    assert record.options == "table 200"
    assert record.has_options


def test_build_rejects_unknown_mask():
    with pytest.raises(ValueError):
        RouteRecord.build("172.17.67.0", "bogus", "172.18.6.2", "vlan200")


def test_records_are_immutable():
    record = RouteRecord.build("10.0.0.0", "255.0.0.0", "10.1.1.1", "eth1")

    with pytest.raises(ValidationError):
        record.gateway = "10.2.2.2"


def test_none_options_become_absent():
    record = RouteRecord(name="default", network="default", netmask="0.0.0.0",
                         gateway="10.1.1.1", interface="eth0", options=None)

    assert record.options is ABSENT


def test_empty_options_are_kept_but_not_present():
    """Test that an empty options string is distinct from absent options."""
    record = RouteRecord.build("10.0.0.0", "255.0.0.0", "10.1.1.1", "eth1", "")

    assert record.options == ""
    assert record.options is not ABSENT
    assert not record.has_options
    assert record.to_dict()["options"] == ""


def test_from_route_copies_route_like_objects():
    stub = SimpleNamespace(
        name="172.28.45.0",
        network="172.28.45.0",
        netmask="255.255.255.0",
        gateway="172.18.6.2",
        interface="eth0",
        options=ABSENT,
    )

    record = RouteRecord.from_route(stub)

    assert record.name == "172.28.45.0/24"
    assert record.options is ABSENT
    assert record.to_dict() == {
        "name": "172.28.45.0/24",
        "network": "172.28.45.0",
        "netmask": "255.255.255.0",
        "gateway": "172.18.6.2",
        "interface": "eth0",
    }


@pytest.mark.parametrize("value,expected", [
    ("\n", "\n"),
    ("\\n", "\n"),
    ("\\r\\n", "\r\n"),
    ("CRLF", "\r\n"),
])
def test_settings_line_terminator(value, expected):
    assert Settings(LINE_TERMINATOR=value).LINE_TERMINATOR == expected


def test_settings_reject_unknown_terminator():
    with pytest.raises(ValidationError):
        Settings(LINE_TERMINATOR=";")


def test_setup_logging_is_idempotent():
    logger = setup_logging("netroutes.test_setup")
    handlers = list(logger.handlers)

    assert setup_logging("netroutes.test_setup") is logger
    assert logger.handlers == handlers
    assert any(isinstance(h, logging.StreamHandler) for h in handlers)


def test_name_must_match_network_and_netmask():
    """Test that a hand-built record cannot carry a name that parsing would not give it."""
    with pytest.raises(ValidationError):
        RouteRecord(name="bogus", network="10.0.0.0", netmask="255.0.0.0",
                    gateway="10.1.1.1", interface="eth1")


def test_name_is_derived_when_omitted():
    record = RouteRecord(network="10.0.0.0", netmask="255.0.0.0", gateway="10.1.1.1", interface="eth1")

    assert record.name == "10.0.0.0/8"
    assert RouteRecord(network="default", netmask="0.0.0.0", gateway="10.1.1.1",
                       interface="eth1").name == "default"


def test_name_is_kept_without_netmask():
    record = RouteRecord(name="10.0.0.0", network="10.0.0.0", gateway="10.1.1.1", interface="eth1")

    assert record.name == "10.0.0.0"
