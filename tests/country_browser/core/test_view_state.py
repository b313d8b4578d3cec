from __future__ import annotations

import pytest

from country_browser.core.country import Country
from country_browser.core.exceptions import FetchError
from country_browser.core.population import UNFILTERED_LABEL
from country_browser.core.view_state import Status, ViewState


def test_defaults():
    st = ViewState()

    assert st.records == ()
    assert st.query == ""
    assert st.bucket == UNFILTERED_LABEL
    assert st.status is Status.IDLE
    assert st.last_error is None
    assert st.has_fetched is False


def test_loading_state_cannot_hold_error():
    with pytest.raises(ValueError):
        ViewState(status=Status.LOADING, last_error=FetchError("boom"))


def test_to_from_dict_roundtrip_keeps_error_message():
    st = ViewState(
        records=(Country(name="Fiji", population=900_000),),
        query="fi",
        bucket="<1 Million",
        status=Status.ERROR,
        last_error=FetchError("Network Error"),
        has_fetched=True,
    )

    rebuilt = ViewState.from_dict(st.to_dict())

    assert rebuilt.records == st.records
    assert rebuilt.query == "fi"
    assert rebuilt.bucket == "<1 Million"
    assert rebuilt.status is Status.ERROR
    assert isinstance(rebuilt.last_error, FetchError)
    assert rebuilt.error_message == "Network Error"
    assert rebuilt.has_fetched is True


def test_from_dict_drops_error_when_loading():
    rebuilt = ViewState.from_dict({"status": "loading", "last_error": "stale"})
    assert rebuilt.status is Status.LOADING
    assert rebuilt.last_error is None
