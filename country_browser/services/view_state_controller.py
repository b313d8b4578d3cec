from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from country_browser.core.country import Country
from country_browser.core.filter_pipeline import MemoizedFilter
from country_browser.core.population import DEFAULT_BUCKETS, PopulationBuckets
from country_browser.core.view_state import Status, ViewState
from country_browser.services.country_fetcher import CountryFetcher

logger = logging.getLogger(__name__)

StateListener = Callable[[ViewState], None]


class ViewStateController:
    """
    Owns the ViewState and applies every transition to it.

    Operations:
    - set_query / set_bucket / clear: change the filter inputs only
    - refresh: loading -> idle with new records, or loading -> error with the
      previous records kept

    Fetch failures stop here: they become status=error + last_error and are
    never raised to the caller. Overlapping refreshes are not guarded; the
    last one to resolve wins.
    """

    def __init__(
        self,
        fetcher: CountryFetcher,
        buckets: PopulationBuckets = DEFAULT_BUCKETS,
        state: Optional[ViewState] = None,
        row_filter: Optional[MemoizedFilter] = None,
    ):
        self._fetcher = fetcher
        self._buckets = buckets
        self._state = state if state is not None else ViewState(bucket=buckets.unfiltered_label)
        self._filter = row_filter if row_filter is not None else MemoizedFilter(buckets)
        self._listeners: List[StateListener] = []

    @property
    def state(self) -> ViewState:
        return self._state

    def subscribe(self, listener: StateListener) -> None:
        """Call `listener` with the new state after every transition."""
        self._listeners.append(listener)

    def set_query(self, text: str) -> ViewState:
        return self._apply(self._state.evolve(query=text or ""))

    def set_bucket(self, label: str) -> ViewState:
        """
        :raises UnknownBucketError: if label is not one of the fixed buckets
        """
        self._buckets.validate(label)
        return self._apply(self._state.evolve(bucket=label))

    def clear(self) -> ViewState:
        return self._apply(
            self._state.evolve(query="", bucket=self._buckets.unfiltered_label)
        )

    def refresh(self) -> ViewState:
        self._apply(self._state.evolve(status=Status.LOADING, last_error=None))

        result = self._fetcher.fetch()

        if result.ok:
            return self._apply(
                self._state.evolve(
                    records=result.countries,
                    status=Status.IDLE,
                    has_fetched=True,
                )
            )

        logger.error(
            "refresh_failed",
            extra={"error": str(result.error), "n_stale_records": len(self._state.records)},
        )
        return self._apply(
            self._state.evolve(status=Status.ERROR, last_error=result.error)
        )

    def filtered(self) -> Tuple[Country, ...]:
        """Rows matching the current query and bucket, in fetch order."""
        st = self._state
        return self._filter(st.records, st.query, st.bucket)

    def _apply(self, new_state: ViewState) -> ViewState:
        if new_state == self._state:
            return self._state
        self._state = new_state
        for listener in self._listeners:
            listener(new_state)
        return new_state
