"""Standalone script to hit openFDA label and event endpoints and dump raw responses."""

import asyncio
import json
import logging
import sys

import aiohttp

from medical_sources.config import get_settings
from medical_sources.constants import OPENFDA_EVENT_PATH, OPENFDA_LABEL_PATH

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DRUG_NAME = "metformin"


async def get_labels(session: aiohttp.ClientSession, base_url: str, drug_name: str, limit: int = 2) -> dict:
    params = {"search": f'openfda.generic_name:"{drug_name}"', "limit": limit}
    async with session.get(base_url + OPENFDA_LABEL_PATH, params=params) as resp:
        logger.info("get_labels status: %s", resp.status)
        return await resp.json()


async def get_serious_events(session: aiohttp.ClientSession, base_url: str, drug_name: str, limit: int = 2) -> dict:
    """Same expression get_serious_adverse_events builds."""
    params = {
        "search": f'serious:1 AND patient.drug.medicinalproduct:"{drug_name}"',
        "limit": limit,
    }
    async with session.get(base_url + OPENFDA_EVENT_PATH, params=params) as resp:
        logger.info("get_serious_events status: %s", resp.status)
        return await resp.json()


async def main(drug_name: str) -> None:
    settings = get_settings()
    async with aiohttp.ClientSession(headers={"User-Agent": settings.user_agent}) as session:
        logger.info("--- labels for '%s' ---", drug_name)
        print(json.dumps(await get_labels(session, settings.openfda_base_url, drug_name), indent=2))

        logger.info("--- serious events for '%s' ---", drug_name)
        print(json.dumps(await get_serious_events(session, settings.openfda_base_url, drug_name), indent=2))


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else DRUG_NAME))
