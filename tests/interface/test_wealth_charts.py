"""Tests for the wealth chart presentation module."""

from decimal import Decimal

import altair as alt

from src.adapters.interface.streamlit.wealth_charts import (
    account_color,
    build_change_chart,
    build_performance_records,
    build_stacked_records,
    build_total_records,
    build_wealth_chart,
    currency_symbol,
    format_currency,
    format_month_tick,
)
from src.domain.models import (
    AccountPerformancePoint,
    WealthChart,
    WealthSnapshotRow,
)


def _chart() -> WealthChart:
    return WealthChart(
        base_currency="EUR",
        account_names=("Broker", "Savings"),
        rows=(
            WealthSnapshotRow(
                month="2024-01",
                values={"Broker": Decimal("1000"), "Savings": Decimal("250.4")},
                total=Decimal("1250.4"),
            ),
            WealthSnapshotRow(
                month="2024-02",
                values={"Broker": Decimal("1100"), "Savings": Decimal("0")},
                total=Decimal("1100"),
            ),
        ),
    )


def test_formatting_helpers():
    assert currency_symbol("EUR") == "€"
    assert currency_symbol("XYZ") == "$"
    assert format_currency(Decimal("1234.6"), "USD") == "$1,235"
    assert format_month_tick("2024-01") == "Jan '24"
    assert format_month_tick("garbage") == "garbage"
    assert account_color(0) == "hsl(0, 70%, 50%)"
    assert account_color(8) == "hsl(40, 70%, 50%)"


def test_stacked_records_follow_account_order():
    records = build_stacked_records(_chart())

    assert [(r["month"], r["account"], r["order"]) for r in records] == [
        ("2024-01", "Broker", 0),
        ("2024-01", "Savings", 1),
        ("2024-02", "Broker", 0),
        ("2024-02", "Savings", 1),
    ]
    assert records[1]["amount"] == 250.4
    assert records[1]["amount_label"] == "€250"


def test_total_records_hold_formatted_totals():
    records = build_total_records(_chart())

    assert [r["total_label"] for r in records] == ["€1,250", "€1,100"]
    assert records[0]["month_label"] == "Jan '24"


def test_performance_records_mark_gains_and_losses():
    points = [
        AccountPerformancePoint("2024-01", Decimal("100"), Decimal("20")),
        AccountPerformancePoint("2024-02", Decimal("90"), Decimal("-10")),
    ]

    records = build_performance_records(points, "GBP")

    assert [r["direction"] for r in records] == ["gain", "loss"]
    assert records[1]["change_label"] == "£-10"


def test_charts_build_altair_objects():
    points = [AccountPerformancePoint("2024-01", Decimal("5"), Decimal("5"))]

    assert isinstance(build_wealth_chart(_chart()), alt.LayerChart)
    assert isinstance(build_change_chart(points, "USD"), alt.Chart)
