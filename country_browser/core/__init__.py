"""
Core domain layer: country records, population buckets, the filter
pipeline and the view state aggregate
"""

from .country import Country
from .exceptions import CountryBrowserError, FetchError, UnknownBucketError, ConfigError
from .filter_pipeline import MemoizedFilter, filter_countries
from .population import DEFAULT_BUCKETS, UNFILTERED_LABEL, PopulationBuckets
from .view_state import Status, ViewState

__all__ = [
    "Country",
    "CountryBrowserError",
    "FetchError",
    "UnknownBucketError",
    "ConfigError",
    "MemoizedFilter",
    "filter_countries",
    "DEFAULT_BUCKETS",
    "UNFILTERED_LABEL",
    "PopulationBuckets",
    "Status",
    "ViewState",
]
