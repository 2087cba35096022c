"""View models for the ranking page: table rows, chart series and status panels.

Everything here is a pure function of RequestState / RankingResult so the page
script only has to hand the results to Streamlit.
"""

import functools
from dataclasses import dataclass, field
from typing import NamedTuple, Optional

import pandas as pd
import plotly.graph_objects as go

from boxoffice.models import ErrorInfo, RankingResult
from boxoffice.state import RequestState

PAGE_TITLE = "영화진흥위원회 박스오피스 순위"
TABLE_COLUMNS = ["순위", "영화제목", "관객수", "개봉일"]
CHART_LEGEND = "관람객 수"
BAR_COLOR = "#205C50"


class TableRow(NamedTuple):
    rank: int
    movie_title: str
    admission_count: str
    open_date: str


@dataclass(frozen=True)
class ChartSeries:
    labels: tuple[str, ...] = ()
    values: tuple[int, ...] = ()

    def __len__(self) -> int:
        return len(self.labels)


@dataclass(frozen=True)
class PageView:
    show_loading: bool
    error: Optional[ErrorInfo] = None
    rows: list[TableRow] = field(default_factory=list)
    series: ChartSeries = field(default_factory=ChartSeries)

    @property
    def show_error(self) -> bool:
        return self.error is not None


def format_count(value: int) -> str:
    return f"{value:,}"


def table_rows(result: Optional[RankingResult]) -> list[TableRow]:
    if result is None:
        return []
    return [
        TableRow(
            rank=entry.rank,
            movie_title=entry.movie_title,
            admission_count=format_count(entry.admission_count),
            open_date=entry.open_date,
        )
        for entry in result.entries
    ]


def to_table_frame(rows: list[TableRow]) -> pd.DataFrame:
    return pd.DataFrame([tuple(row) for row in rows], columns=TABLE_COLUMNS)


@functools.lru_cache(maxsize=32)
def derive_series(result: Optional[RankingResult]) -> ChartSeries:
    """Split a ranking into parallel (titles, admission counts) sequences.

    Keeps the ranking's order. Memoized on the result's value, so rerenders
    that only toggle loading reuse the same series.
    """
    if result is None:
        return ChartSeries()
    return ChartSeries(
        labels=tuple(entry.movie_title for entry in result.entries),
        values=tuple(entry.admission_count for entry in result.entries),
    )


def build_bar_chart(series: ChartSeries, legend: str = CHART_LEGEND) -> go.Figure:
    """One bar per (title, count) pair, in a single named series."""
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=list(series.labels),
        y=list(series.values),
        name=legend,
        marker=dict(color=BAR_COLOR),
    ))
    fig.update_layout(
        showlegend=True,
        xaxis_title="영화제목",
        yaxis_title=legend,
        margin=dict(t=30),
    )
    return fig


def build_page(state: RequestState) -> PageView:
    """Decide what the page shows for a given state.

    An error replaces the table and chart entirely. The loading indicator
    never hides data that is already there.
    """
    if state.error is not None:
        return PageView(show_loading=state.loading, error=state.error)
    return PageView(
        show_loading=state.loading,
        rows=table_rows(state.data),
        series=derive_series(state.data),
    )
