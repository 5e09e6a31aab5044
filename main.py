import os
import asyncio
import csv
import sys
from typing import Any, Dict, List
from loguru import logger

from geomatch.models import MatchCandidate
from geomatch.records import load_search_queries_from_csv
from geomatch.errors import SearchFailedError
from geomatch.sources import ProviderSource, get_provider_source
from geomatch.config import INPUT_CSV, OUTPUT_CSV, BATCH_SIZE, LOG_LEVEL
from geomatch.clients import RegistryClient

OUTPUT_HEADER = [
    "query", "rank", "id", "name", "distance_km", "services",
    "service_radius_km", "rating", "reviews", "price",
]


def batch_iter(queries: List[Dict[str, Any]], batch_size: int):
    """
    Yield index and query slices of size `batch_size` for batched processing.
    """
    n = len(queries)
    for i in range(0, n, batch_size):
        yield i, queries[i:i+batch_size]


async def process_query(source: ProviderSource, query: Dict[str, Any]) -> List[MatchCandidate]:
    """
    Run a single search query against the configured provider source.

    A failed live search (already logged by the source) yields no rows so the
    rest of the batch still completes.
    """
    try:
        return await source.search(query["origin"], query["radius"], query["categories"])
    except SearchFailedError:
        return []


def candidate_row(query_idx: int, rank: int, candidate: MatchCandidate) -> list:
    data = candidate.to_dict()
    return [
        query_idx,
        rank,
        data["id"],
        data["display_name"],
        data["distance_km"],
        ",".join(data["services"]),
        data["service_radius_km"],
        f"{data['rating']:.1f}",
        data["reviews"],
        data["price"],
    ]


async def main():
    """
    Orchestrate the batch search pipeline.

    - Loads search queries from the input CSV.
    - Runs each batch concurrently against the configured provider source.
    - Writes ranked matches incrementally to the output CSV.
    """
    # Initialize logs
    logger.remove()  # Remove default handler
    logger.add(sys.stderr, level=LOG_LEVEL, format="<green>{time:HH:mm:ss}</green> | <level>{message}</level>")

    queries = load_search_queries_from_csv(INPUT_CSV)
    source = get_provider_source()
    logger.info(f"Loaded {len(queries)} queries, using '{source.name}' provider source")

    # Initialize output file
    output_path = OUTPUT_CSV
    if os.path.exists(output_path):
        os.remove(output_path)
    with open(output_path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(OUTPUT_HEADER)

    try:
        for start_idx, batch in batch_iter(queries, BATCH_SIZE):
            logger.info(f"Processing queries {start_idx}..{start_idx + len(batch) - 1}")

            results = await asyncio.gather(*[process_query(source, q) for q in batch])

            with open(output_path, "a", newline="") as f:
                writer = csv.writer(f)
                for offset, candidates in enumerate(results):
                    for rank, candidate in enumerate(candidates, start=1):
                        writer.writerow(candidate_row(start_idx + offset, rank, candidate))
    finally:
        # Cleanup: close the registry session to prevent unclosed connector warnings
        await RegistryClient().close()


if __name__ == "__main__":
    asyncio.run(main())
