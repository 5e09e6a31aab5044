import csv
import random

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

import main
from geomatch.errors import SearchFailedError
from geomatch.models import Coordinate
from geomatch.sources import ProviderSource, SyntheticProviderSource

QUERIES_CSV = """lat,lng,radius,services
41.9028,12.4964,,Plumbing
45.4642,9.19,,
41.9028,12.4964,20,"Cleaning,Painting"
"""


class FlakySource(ProviderSource):
    """Synthetic Rome directory that fails for any search north of latitude 45."""

    name = "flaky"

    def __init__(self):
        self.inner = SyntheticProviderSource(rng=random.Random(0))

    async def search(self, origin, radius=None, categories=None):
        if origin.lat > 45:
            raise SearchFailedError("Failed to get service providers in range")
        return await self.inner.search(origin, radius, categories)


@pytest.mark.asyncio
async def test_process_query_turns_failed_search_into_no_rows():
    query = {"origin": Coordinate(45.4642, 9.19), "radius": None, "categories": None}
    assert await main.process_query(FlakySource(), query) == []


@pytest.mark.asyncio
async def test_main_writes_ranked_rows_and_survives_failed_query(tmp_path):
    input_path = tmp_path / "searches.csv"
    output_path = tmp_path / "matches.csv"
    input_path.write_text(QUERIES_CSV)

    registry = MagicMock()
    registry.close = AsyncMock()

    with patch("main.INPUT_CSV", str(input_path)), \
         patch("main.OUTPUT_CSV", str(output_path)), \
         patch("main.get_provider_source", return_value=FlakySource()), \
         patch("main.RegistryClient", return_value=registry):
        await main.main()

    with open(output_path, newline="") as f:
        rows = list(csv.DictReader(f))

    assert rows
    assert {r["query"] for r in rows} == {"0", "2"}

    first = [r for r in rows if r["query"] == "0"]
    assert [r["id"] for r in first] == ["cg-5", "151"]

    for query in ("0", "2"):
        ranked = [r for r in rows if r["query"] == query]
        assert [int(r["rank"]) for r in ranked] == list(range(1, len(ranked) + 1))
        distances = [float(r["distance_km"]) for r in ranked]
        assert distances == sorted(distances)

    registry.close.assert_awaited_once()
