"""Streamlit cashflow overview entry point."""

import streamlit as st
import altair as alt

from investcalc.domain.models import CashflowOverview, EnrichedCashflow
from investcalc.infrastructure.container import build_services


def _fetch_overview() -> CashflowOverview:
    """Fetch enriched cashflows from the configured stores."""
    services = build_services()
    return services.overview.execute()


@st.cache_data(show_spinner=False)
def _load_overview(schema_version: int = 1) -> CashflowOverview:
    """Cached wrapper around _fetch_overview for Streamlit sessions."""
    _ = schema_version
    return _fetch_overview()


def _format_amount(value: int, currency_code: str) -> str:
    """Format whole currency amounts for display."""
    symbol = "€" if currency_code == "EUR" else currency_code
    return f"{value:,} {symbol}".rstrip()


def _prepare_bar_chart_data(
    items: list[EnrichedCashflow],
) -> list[dict[str, object]]:
    """Return one chart row per cashflow."""
    return [
        {
            "cashflow": item.name,
            "monthly": item.display_cashflow_monthly,
            "direction": (
                "positive" if item.display_cashflow_monthly >= 0
                else "negative"
            ),
        }
        for item in items
    ]


def _render_cashflow_table(
    items: list[EnrichedCashflow],
    currency_code: str,
) -> None:
    st.subheader("Cashflows")
    data = [
        {
            "Name": item.name,
            "Investment": item.investment_name,
            "Credit": item.credit_name,
            "Monthly": _format_amount(
                item.display_cashflow_monthly,
                currency_code or item.currency,
            ),
            "Yearly": _format_amount(
                item.display_cashflow_yearly,
                currency_code or item.currency,
            ),
            "Yield %": f"{item.yield_pct:.2f}",
        }
        for item in items
    ]
    st.dataframe(data, width="stretch", hide_index=True)


def _render_cashflow_chart(items: list[EnrichedCashflow]) -> None:
    """Render a bar chart of monthly cashflow per entry."""
    data = _prepare_bar_chart_data(items)
    chart = alt.Chart(alt.Data(values=data)).mark_bar().encode(
        x=alt.X("cashflow:N", sort=None, title=None),
        y=alt.Y("monthly:Q", title="Monthly cashflow"),
        color=alt.Color(
            "direction:N",
            scale=alt.Scale(
                domain=["positive", "negative"],
                range=["#2e7d32", "#c62828"],
            ),
            legend=None,
        ),
        tooltip=[
            alt.Tooltip("cashflow:N"),
            alt.Tooltip("monthly:Q"),
        ],
    ).properties(height=320)
    st.altair_chart(chart, use_container_width=True)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Investment Cashflows", layout="wide")
    st.title("Investment Cashflows")

    overview = _load_overview(schema_version=1)
    if not overview.items:
        st.info("No cashflows stored yet.")
        return

    totals = overview.totals
    monthly_col, yearly_col, count_col = st.columns(3)
    monthly_col.metric(
        "Monthly total",
        _format_amount(totals.monthly, totals.currency),
    )
    yearly_col.metric(
        "Yearly total",
        _format_amount(totals.yearly, totals.currency),
    )
    count_col.metric(
        "Positive / negative",
        f"{totals.positive_count} / {totals.negative_count}",
    )
    _render_cashflow_chart(overview.items)
    _render_cashflow_table(overview.items, totals.currency)


if __name__ == "__main__":  # pragma: no cover
    main()
