"""Daily Box Office Dashboard.

Streamlit app that fetches the KOBIS daily box-office ranking for a chosen
date and shows it as a table next to a bar chart of admissions.
"""

import streamlit as st
from dotenv import load_dotenv

from boxoffice.config import AppConfig, load_config
from boxoffice.dates import default_target_date, normalize_date, to_input_value
from boxoffice.fetch import begin_fetch, complete_fetch
from boxoffice.kobis import KobisClient
from boxoffice.state import RankingStore
from boxoffice.utils.logger import setup_logging
from boxoffice.views import (
    PAGE_TITLE,
    PageView,
    build_bar_chart,
    build_page,
    to_table_frame,
)

STORE_KEY = "ranking_store"
PENDING_KEY = "pending_request"
DATE_INPUT_KEY = "target_date_input"

BRAND_CSS = """
<style>
h1, h2, h3 {
    color: #205C50 !important;
}

[data-testid="stDataFrame"] {
    border: 1px solid #84BEA1;
}
</style>
"""


@st.cache_resource
def bootstrap() -> tuple[AppConfig, KobisClient]:
    """Load config and set up logging once per server process."""
    load_dotenv()
    config = load_config()
    setup_logging(config.log_level)
    return config, KobisClient(config.kobis)


def get_store() -> RankingStore:
    if STORE_KEY not in st.session_state:
        default = normalize_date(default_target_date())
        st.session_state[STORE_KEY] = RankingStore(default)
    return st.session_state[STORE_KEY]


def request_fetch(target_date: str) -> None:
    """Mark the store loading now; the network call runs later in this rerun."""
    store = get_store()
    request_id = begin_fetch(store, target_date)
    st.session_state[PENDING_KEY] = (request_id, target_date)


def on_date_change() -> None:
    picked = st.session_state.get(DATE_INPUT_KEY)
    if picked is None:
        return
    request_fetch(normalize_date(picked))


def on_retry() -> None:
    request_fetch(get_store().state.target_date)


def render_status(view: PageView) -> None:
    if view.show_loading:
        st.caption("⏳ 불러오는 중...")


def render_error(view: PageView) -> None:
    st.error(f"박스오피스 정보를 불러오지 못했습니다: {view.error.describe()}")
    st.button("다시 시도", on_click=on_retry)


def render_ranking(view: PageView) -> None:
    col1, col2 = st.columns(2)
    with col1:
        st.dataframe(to_table_frame(view.rows), hide_index=True, width="stretch")
    with col2:
        st.plotly_chart(build_bar_chart(view.series), width="stretch")


def main() -> None:
    """Entry point for the Streamlit dashboard."""
    st.set_page_config(page_title="박스오피스 순위", page_icon="🎬", layout="wide")
    st.markdown(BRAND_CSS, unsafe_allow_html=True)

    try:
        _, client = bootstrap()
    except ValueError as e:
        st.error(f"Configuration error: {e}")
        st.stop()

    store = get_store()
    if store.state.request_id == 0 and PENDING_KEY not in st.session_state:
        request_fetch(store.state.target_date)

    st.title(PAGE_TITLE)
    st.date_input(
        "조회 날짜",
        value=to_input_value(store.state.target_date),
        key=DATE_INPUT_KEY,
        on_change=on_date_change,
    )

    view = build_page(store.state)
    render_status(view)
    if view.show_error:
        render_error(view)
    else:
        render_ranking(view)

    pending = st.session_state.pop(PENDING_KEY, None)
    if pending is not None:
        request_id, target_date = pending
        with st.spinner("박스오피스 순위를 불러오는 중..."):
            complete_fetch(store, client, request_id, target_date)
        st.rerun()


if __name__ == "__main__":
    main()
