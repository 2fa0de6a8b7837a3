"""
Pytest configuration and fixtures.
"""
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

import pytest

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def fixture_data(name: str) -> str:
    """Read a routes file from tests/fixtures."""
    return (FIXTURE_DIR / name).read_text()


@pytest.fixture
def simple_routes():
    return fixture_data("simple_routes")


@pytest.fixture
def advanced_routes():
    return fixture_data("advanced_routes")


@pytest.fixture(scope="function", autouse=True)
def lf_terminator():
    """Pin the line terminator so tests do not depend on the environment."""
    with patch("netroutes.core.config.settings.LINE_TERMINATOR", "\n"):
        yield


@pytest.fixture
def route_stubs():
    """
    Route-like stand-ins for whatever resource objects a caller formats.

    Returns a factory so each test can pick its options value.
    """
    def make(options="table 200"):
        return [
            SimpleNamespace(
                name="172.17.67.0",
                network="172.17.67.0",
                netmask="255.255.255.0",
                gateway="172.18.6.2",
                interface="vlan200",
                options=options,
            ),
            SimpleNamespace(
                name="172.28.45.0",
                network="172.28.45.0",
                netmask="255.255.255.0",
                gateway="172.18.6.2",
                interface="eth0",
                options=options,
            ),
        ]
    return make
