"""Interchangeable provider sources behind one search contract."""
from typing import Optional

from geomatch.config import DATA_SOURCE, PROVIDERS_CSV
from geomatch.records import load_provider_records_from_csv
from geomatch.sources.base import ProviderSource
from geomatch.sources.live_source import LiveProviderSource
from geomatch.sources.synthetic_source import SyntheticProviderSource

__all__ = ["ProviderSource", "LiveProviderSource", "SyntheticProviderSource", "get_provider_source"]


def get_provider_source(name: Optional[str] = None) -> ProviderSource:
    """
    Return the provider source selected by `name` (defaults to DATA_SOURCE).

    "live" queries the remote registry; "synthetic" searches the fixture in
    PROVIDERS_CSV when set, otherwise the built-in Rome directory.
    """
    name = (name or DATA_SOURCE).strip().lower()
    if name == "live":
        return LiveProviderSource()
    if name == "synthetic":
        records = load_provider_records_from_csv(PROVIDERS_CSV) if PROVIDERS_CSV else None
        return SyntheticProviderSource(records=records)
    raise ValueError(f"Unknown data source '{name}'. Expected 'live' or 'synthetic'.")
