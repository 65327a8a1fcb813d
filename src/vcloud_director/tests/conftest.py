"""
Pytest configuration and fixtures for all tests.
"""

import os
import sys
import pytest

# Ensure vcloud_director is importable without installation
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from vcloud_director.client.api_client import VCDClient
from vcloud_director.tests.fixtures import FAKE_HREF, FAKE_PASSWORD, FakeVCD


def make_client(fake: FakeVCD, org: str = "System", api_version: str = "37.0", is_tm: bool = False) -> VCDClient:
    client = VCDClient(
        href=FAKE_HREF,
        api_version=api_version,
        is_tm=is_tm,
        task_poll_interval=0,
        task_timeout=5,
        transport=fake.transport())
    client.login("administrator", FAKE_PASSWORD, org)
    return client


@pytest.fixture
def fake_vcd():
    """In-memory Cloud Director supporting API versions up to 37.0."""
    return FakeVCD()


@pytest.fixture
def client(fake_vcd):
    """Client logged in as system administrator."""
    vcd_client = make_client(fake_vcd)
    try:
        yield vcd_client
    finally:
        vcd_client.close()


@pytest.fixture
def tenant_client(fake_vcd):
    """Client logged in to a tenant organization."""
    vcd_client = make_client(fake_vcd, org="tenant1")
    try:
        yield vcd_client
    finally:
        vcd_client.close()


@pytest.fixture
def tm_vcd():
    return FakeVCD(max_version="40.0")


@pytest.fixture
def tm_client(tm_vcd):
    """System administrator client of a Tenant Manager site."""
    vcd_client = make_client(tm_vcd, api_version="40.0", is_tm=True)
    try:
        yield vcd_client
    finally:
        vcd_client.close()
