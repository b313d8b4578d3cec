from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from country_browser.core.country import Country
from country_browser.core.population import PopulationBuckets
from country_browser.core.view_state import ViewState
from country_browser.ui.columns import DEFAULT_COLUMNS, ColumnDef

logger = logging.getLogger(__name__)


def bucket_dropdown_options(buckets: PopulationBuckets) -> List[dict]:
    return [{"label": label, "value": label} for label in buckets.labels]


def try_parse_view_state(data: object) -> Optional[ViewState]:
    if not isinstance(data, dict) or not data:
        return None
    try:
        return ViewState.from_dict(data)
    except Exception:
        logger.exception("Invalid view-state: %r", data)
        return None


def countries_frame(
    countries: Sequence[Country],
    columns: Tuple[ColumnDef, ...] = DEFAULT_COLUMNS,
) -> pd.DataFrame:
    """
    Tabular copy of the given rows, one column per ColumnDef (header as
    column name). Image columns export their URI.
    """
    headers = [col.header for col in columns]
    records = [[col.value(c) for col in columns] for c in countries]
    return pd.DataFrame.from_records(records, columns=headers)
