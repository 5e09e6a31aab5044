import asyncio
import copy
import random
from typing import Any, Dict, Iterable, List, Optional, Sequence

from geomatch.config import SYNTHETIC_LATENCY_SECONDS
from geomatch.matchers.matching_orchestrator import match_provider_records
from geomatch.models import Coordinate, MatchCandidate
from geomatch.sources.base import ProviderSource
from geomatch.sources.fixtures import ROME_PROVIDERS


class SyntheticProviderSource(ProviderSource):
    """
    Searches an in-memory fixture of provider records.

    Records use the registry's wire format, so the fixture goes through exactly
    the same matching pipeline as live registry responses. Rating, review count
    and price are random display values unless the fixture supplies them.
    """

    name = "synthetic"

    def __init__(
        self,
        records: Optional[Sequence[Dict[str, Any]]] = None,
        rng: Optional[random.Random] = None,
        latency: float = SYNTHETIC_LATENCY_SECONDS,
    ):
        self.records = tuple(copy.deepcopy(dict(r)) for r in (ROME_PROVIDERS if records is None else records))
        self.rng = rng or random.Random()
        self.latency = latency

    async def search(
        self,
        origin: Coordinate,
        radius: Optional[float] = None,
        categories: Optional[Iterable[str]] = None,
    ) -> List[MatchCandidate]:
        if self.latency > 0:
            await asyncio.sleep(self.latency)
        return match_provider_records(origin, self.records, radius, categories, self.rng)
