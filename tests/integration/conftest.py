"""Shared fixtures for integration tests (live network)."""

import pytest

from medical_sources.data_sources.fda import FDAClient
from medical_sources.data_sources.pubmed import PubMedClient
from medical_sources.data_sources.rxnorm import RxNormClient
from medical_sources.data_sources.world_bank import WorldBankClient


@pytest.fixture
async def fda_client():
    """Create and tear down an FDAClient."""
    c = FDAClient()
    yield c
    await c.close()


@pytest.fixture
async def pubmed_client():
    """Create and tear down a PubMedClient."""
    c = PubMedClient()
    yield c
    await c.close()


@pytest.fixture
async def world_bank_client():
    c = WorldBankClient()
    yield c
    await c.close()


@pytest.fixture
async def rxnorm_client():
    c = RxNormClient()
    yield c
    await c.close()
