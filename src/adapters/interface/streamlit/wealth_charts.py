"""Wealth chart presentation logic for the Streamlit UI.

This module contains pure transformations from ``WealthChart`` and
``AccountPerformancePoint`` values to Altair-ready records and charts.

The UI is responsible for:
    - loading the state and running the use cases (no IO here),
    - passing the resulting charts to ``st.altair_chart``.

Accounts are stacked in display order, one colour per account, with the
monthly total written above each bar.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

import altair as alt

from src.domain.constants import CURRENCY_SYMBOLS, MONTH_NAMES
from src.domain.models import AccountPerformancePoint, WealthChart

POSITIVE_COLOR = "#10b981"
NEGATIVE_COLOR = "#ef4444"
BALANCE_COLOR = "#3b82f6"


def currency_symbol(currency_code: str) -> str:
    """Return the display symbol of a currency, ``$`` when unknown."""
    return CURRENCY_SYMBOLS.get(currency_code, "$")


def format_currency(value: Decimal, currency_code: str) -> str:
    """Format a balance with its symbol and no decimals."""
    return f"{currency_symbol(currency_code)}{value:,.0f}"


def format_month_tick(month: str) -> str:
    """Format a ``YYYY-MM`` key as ``Jan '24``."""
    year, _, month_number = month.partition("-")
    try:
        name = MONTH_NAMES[int(month_number) - 1]
    except (ValueError, IndexError):
        return month
    return f"{name} '{year[-2:]}"


def account_color(index: int) -> str:
    """Return the colour of the account at ``index`` in display order."""
    return f"hsl({(index * 50) % 360}, 70%, 50%)"


def build_stacked_records(chart: WealthChart) -> list[dict[str, str | float | int]]:
    """Return one long-form record per (month, account) pair.

    Args:
        chart: Aggregated wealth chart.

    Returns:
        list[dict]: Records with month, label, account, order and amount.
    """
    records: list[dict[str, str | float | int]] = []
    for row in chart.rows:
        for order, name in enumerate(chart.account_names):
            amount = row.values.get(name, Decimal("0"))
            records.append(
                {
                    "month": row.month,
                    "month_label": format_month_tick(row.month),
                    "account": name,
                    "order": order,
                    "amount": float(amount),
                    "amount_label": format_currency(
                        amount,
                        chart.base_currency,
                    ),
                }
            )
    return records


def build_total_records(chart: WealthChart) -> list[dict[str, str | float]]:
    """Return one record per month holding the formatted total."""
    return [
        {
            "month": row.month,
            "month_label": format_month_tick(row.month),
            "total": float(row.total),
            "total_label": format_currency(row.total, chart.base_currency),
        }
        for row in chart.rows
    ]


def build_wealth_chart(chart: WealthChart, height: int = 400) -> alt.LayerChart:
    """Render the stacked wealth overview.

    Args:
        chart: Aggregated wealth chart with at least one row.
        height: Chart height in pixels.

    Returns:
        alt.LayerChart: Stacked bars with total labels on top.
    """
    month_sort = [format_month_tick(row.month) for row in chart.rows]
    colors = [account_color(index) for index in range(len(chart.account_names))]
    bars = alt.Chart(alt.Data(values=build_stacked_records(chart))).mark_bar(
        size=40,
    ).encode(
        x=alt.X("month_label:N", sort=month_sort, title=None),
        y=alt.Y("amount:Q", stack="zero", title=chart.base_currency),
        color=alt.Color(
            "account:N",
            scale=alt.Scale(domain=list(chart.account_names), range=colors),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        order=alt.Order("order:Q"),
        tooltip=[
            alt.Tooltip("month:N", title="Date"),
            alt.Tooltip("account:N"),
            alt.Tooltip("amount_label:N", title="Value"),
        ],
    )
    totals = alt.Chart(alt.Data(values=build_total_records(chart))).mark_text(
        dy=-8,
        fontSize=10,
        fontWeight="bold",
    ).encode(
        x=alt.X("month_label:N", sort=month_sort),
        y=alt.Y("total:Q"),
        text="total_label:N",
    )
    return alt.layer(bars, totals).properties(height=height)


def build_performance_records(
    points: Sequence[AccountPerformancePoint],
    currency_code: str,
) -> list[dict[str, str | float]]:
    """Return ending balance and change records for one account."""
    return [
        {
            "month": point.month,
            "month_label": format_month_tick(point.month),
            "ending": float(point.ending),
            "ending_label": format_currency(point.ending, currency_code),
            "change": float(point.change),
            "change_label": format_currency(point.change, currency_code),
            "direction": "gain" if point.change >= 0 else "loss",
        }
        for point in points
    ]


def build_ending_balance_chart(
    points: Sequence[AccountPerformancePoint],
    currency_code: str,
    height: int = 320,
) -> alt.Chart:
    """Render the monthly ending balance bars of one account."""
    records = build_performance_records(points, currency_code)
    month_sort = [record["month_label"] for record in records]
    return alt.Chart(alt.Data(values=records)).mark_bar(
        color=BALANCE_COLOR,
    ).encode(
        x=alt.X("month_label:N", sort=month_sort, title=None),
        y=alt.Y("ending:Q", title="Ending Balance"),
        tooltip=[
            alt.Tooltip("month:N", title="Date"),
            alt.Tooltip("ending_label:N", title="Ending Balance"),
        ],
    ).properties(height=height)


def build_change_chart(
    points: Sequence[AccountPerformancePoint],
    currency_code: str,
    height: int = 320,
) -> alt.Chart:
    """Render the monthly profit/loss bars of one account."""
    records = build_performance_records(points, currency_code)
    month_sort = [record["month_label"] for record in records]
    return alt.Chart(alt.Data(values=records)).mark_bar().encode(
        x=alt.X("month_label:N", sort=month_sort, title=None),
        y=alt.Y("change:Q", title="Change"),
        color=alt.Color(
            "direction:N",
            scale=alt.Scale(
                domain=["gain", "loss"],
                range=[POSITIVE_COLOR, NEGATIVE_COLOR],
            ),
            legend=None,
        ),
        tooltip=[
            alt.Tooltip("month:N", title="Date"),
            alt.Tooltip("change_label:N", title="Change"),
        ],
    ).properties(height=height)


__all__ = [
    "currency_symbol",
    "format_currency",
    "format_month_tick",
    "account_color",
    "build_stacked_records",
    "build_total_records",
    "build_wealth_chart",
    "build_performance_records",
    "build_ending_balance_chart",
    "build_change_chart",
]
