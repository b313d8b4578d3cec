from __future__ import annotations

__all__ = ["IDs"]


class IDs:
    class Store:
        VIEW_STATE = "view-state"

    class Control:
        # Filter controls
        CONTROLS_CONTAINER = "controls-container"
        SEARCH_INPUT = "search-input"
        BUCKET_SELECT = "bucket-select"
        CLEAR_BTN = "clear-btn"

        # Data loading
        REFRESH_BTN = "show-all-btn"

        # Table + downloads
        TABLE_CONTAINER = "country-table-container"
        DOWNLOAD_CSV = "download-csv"
        DOWNLOAD_CSV_BTN = "download-csv-btn"
