"""Unit tests for WorldBankClient and indicator code resolution."""

from unittest.mock import AsyncMock, patch

import pytest

from medical_sources.data_sources.base_client import DataSourceError
from medical_sources.data_sources.world_bank import (
    WorldBankClient,
    resolve_indicator_code,
)


@pytest.mark.parametrize(
    "indicator,expected",
    [
        ("Life expectancy", "SP.DYN.LE00.IN"),
        ("life expectancy at birth, total", "SP.DYN.LE00.IN"),
        ("Female life expectancy", "SP.DYN.LE00.FE.IN"),
        ("Infant mortality rate", "SP.DYN.IMRT.IN"),
        ("Mortality rate", "SP.DYN.IMRT.IN"),
        ("Birth rate", "SP.DYN.CBRT.IN"),
        ("Crude death rate", "SP.DYN.CDRT.IN"),
        ("Population growth", "SP.POP.GROW"),
        ("SP.DYN.LE00.IN", "SP.DYN.LE00.IN"),
        ("sh.xpd.chex.gd.zs", "SH.XPD.CHEX.GD.ZS"),
        ("happiness index", None),
        ("", None),
    ],
)
def test_resolve_indicator_code(indicator, expected):
    assert resolve_indicator_code(indicator) == expected


SAMPLE_RESPONSE = [
    {"page": 1, "pages": 1, "per_page": 3, "total": 3},
    [
        {
            "indicator": {"id": "SP.DYN.LE00.IN", "value": "Life expectancy at birth, total (years)"},
            "country": {"id": "US", "value": "United States"},
            "countryiso3code": "USA",
            "date": "2022",
            "value": 77.43,
            "unit": "",
            "obs_status": "",
            "decimal": 1,
        },
        {
            "indicator": {"id": "SP.DYN.LE00.IN", "value": "Life expectancy at birth, total (years)"},
            "country": {"id": "US", "value": "United States"},
            "countryiso3code": "USA",
            "date": "2023",
            "value": None,
            "unit": "",
        },
        {
            "indicator": {"id": "SP.DYN.LE00.IN", "value": "Life expectancy at birth, total (years)"},
            "country": {"id": "US", "value": "United States"},
            "countryiso3code": "USA",
            "date": "2021",
            "value": 76.33,
            "unit": "",
        },
    ],
]


@pytest.mark.asyncio
class TestGetHealthIndicators:

    async def test_parses_points_and_drops_nulls(self):
        client = WorldBankClient()

        with patch.object(
            client, "_get_json", new=AsyncMock(return_value=SAMPLE_RESPONSE)
        ) as mock_get:
            points = await client.get_health_indicators("Life expectancy", "USA", limit=3)

        url, params = mock_get.await_args.args
        assert url == "https://api.worldbank.org/v2/country/USA/indicator/SP.DYN.LE00.IN"
        assert params == {"format": "json", "per_page": 3}

        assert [p.year for p in points] == [2022, 2021]
        first = points[0]
        assert first.country == "United States"
        assert first.country_code == "USA"
        assert first.indicator_code == "SP.DYN.LE00.IN"
        assert first.value == 77.43
        assert first.source == "World Bank"
        assert all(p.value is not None for p in points)

    async def test_all_countries_when_none_given(self):
        client = WorldBankClient()

        with patch.object(
            client, "_get_json", new=AsyncMock(return_value=SAMPLE_RESPONSE)
        ) as mock_get:
            await client.get_health_indicators("Birth rate")

        assert "/country/all/indicator/SP.DYN.CBRT.IN" in mock_get.await_args.args[0]

    async def test_unknown_indicator_makes_no_request(self):
        client = WorldBankClient()

        with patch.object(client, "_get_json", new=AsyncMock()) as mock_get:
            assert await client.get_health_indicators("happiness index") == []

        mock_get.assert_not_awaited()

    async def test_error_message_reply_returns_empty(self):
        client = WorldBankClient()
        reply = [{"message": [{"id": "120", "key": "Invalid value"}]}]

        with patch.object(client, "_get_json", new=AsyncMock(return_value=reply)):
            assert await client.get_health_indicators("Life expectancy", "XXX") == []

    async def test_request_failure_returns_empty(self):
        client = WorldBankClient()

        with patch.object(
            client,
            "_get_json",
            new=AsyncMock(side_effect=DataSourceError("world_bank", "HTTP 502", 502)),
        ):
            assert await client.get_health_indicators("Life expectancy") == []
