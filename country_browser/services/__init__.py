"""
Service layer: fetching country data and driving the view state.
"""

from .country_fetcher import CountryFetcher, FetchResult
from .view_state_controller import ViewStateController

__all__ = ["CountryFetcher", "FetchResult", "ViewStateController"]
