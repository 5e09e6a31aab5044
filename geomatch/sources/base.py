from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from geomatch.models import Coordinate, MatchCandidate


class ProviderSource(ABC):
    """Anything that can answer a client-seeks-providers search."""

    name = "base"

    @abstractmethod
    async def search(
        self,
        origin: Coordinate,
        radius: Optional[float] = None,
        categories: Optional[Iterable[str]] = None,
    ) -> List[MatchCandidate]:
        """Return the providers around `origin` that qualify, nearest first."""
