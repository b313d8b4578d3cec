from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .country import Country
from .population import DEFAULT_BUCKETS, PopulationBuckets


def filter_countries(
    records: Sequence[Country],
    query: str,
    bucket: str,
    buckets: PopulationBuckets = DEFAULT_BUCKETS,
) -> Tuple[Country, ...]:
    """
    Reduce the full record list to the rows matching the current search.

    - name: case-insensitive substring match on Country.name ("" matches all)
    - population: strictly below the bucket threshold, unless the bucket is
      the unfiltered label. A population equal to the threshold is excluded.

    Input order is preserved.

    :raises UnknownBucketError: if bucket is not one of the table's labels
    """
    needle = (query or "").casefold()

    if buckets.is_unfiltered(bucket):
        limit: Optional[int] = None
    else:
        limit = buckets.threshold(bucket)

    return tuple(
        country
        for country in records
        if needle in country.name.casefold()
        and (limit is None or country.population < limit)
    )


class MemoizedFilter:
    """
    Caches the last filter result keyed on (records, query, bucket).

    Records are compared by value (Country is frozen), so an equal list
    rebuilt from the view-state store reuses the previous result. The
    identity check short-circuits the common in-process case.
    """

    def __init__(self, buckets: PopulationBuckets = DEFAULT_BUCKETS):
        self._buckets = buckets
        # ((records, query, bucket), result), swapped in one assignment
        self._cache: Optional[Tuple[Tuple[Tuple[Country, ...], str, str], Tuple[Country, ...]]] = None
        self.computations = 0

    def __call__(self, records: Sequence[Country], query: str, bucket: str) -> Tuple[Country, ...]:
        cache = self._cache
        if cache is not None:
            (cached_records, cached_query, cached_bucket), cached_result = cache
            if (
                query == cached_query
                and bucket == cached_bucket
                and (records is cached_records or tuple(records) == cached_records)
            ):
                return cached_result

        records = tuple(records)
        result = filter_countries(records, query, bucket, self._buckets)
        self._cache = ((records, query, bucket), result)
        self.computations += 1
        return result
