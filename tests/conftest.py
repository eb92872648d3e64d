"""
Pytest fixtures for the ppc_rpc tests.
"""
import pytest

from ppc_rpc.rpc.ppc import PPCClient
from tests.helpers import FakeSession, TEST_URL


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def client(session):
    return PPCClient(TEST_URL, session=session)
