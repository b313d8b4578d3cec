from dataclasses import dataclass, field
from typing import Optional, Tuple

from country_browser.config import AppSettings
from country_browser.core.filter_pipeline import MemoizedFilter
from country_browser.core.population import DEFAULT_BUCKETS, PopulationBuckets
from country_browser.core.view_state import ViewState
from country_browser.services.country_fetcher import CountryFetcher
from country_browser.services.view_state_controller import ViewStateController
from country_browser.ui.columns import DEFAULT_COLUMNS, ColumnDef


@dataclass
class AppConfig:
    """
    Shared services for the Dash app: settings, the fetcher, the bucket table,
    the column definitions and the filter cache shared by all callbacks.
    Passed into layout + callback registration instead of module-level globals.
    """
    settings: AppSettings
    fetcher: CountryFetcher
    buckets: PopulationBuckets = DEFAULT_BUCKETS
    columns: Tuple[ColumnDef, ...] = field(default=DEFAULT_COLUMNS)
    row_filter: Optional[MemoizedFilter] = None

    def __post_init__(self) -> None:
        if self.row_filter is None:
            self.row_filter = MemoizedFilter(self.buckets)

    def controller_for(self, state: ViewState) -> ViewStateController:
        return ViewStateController(
            self.fetcher, self.buckets, state=state, row_filter=self.row_filter
        )
