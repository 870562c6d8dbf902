import pandas as pd
import pytest

from finfamily.engine import aggregate_period, project, projection_frame


def test_quarterly_sums_flows_and_keeps_last_running_total(reference_state):
    monthly = projection_frame(project(reference_state))

    quarterly = aggregate_period(monthly, freq="q")

    assert list(quarterly["period"]) == ["Q1", "Q2", "Q3", "Q4"]
    assert quarterly["income"].iloc[0] == pytest.approx(monthly["income"].iloc[:3].sum())
    assert quarterly["cumulative_cash"].iloc[1] == pytest.approx(monthly["cumulative_cash"].iloc[5])
    assert quarterly["expenses"].sum() == pytest.approx(monthly["expenses"].sum())


def test_yearly_collapses_to_one_row(reference_state):
    monthly = projection_frame(project(reference_state))

    yearly = aggregate_period(monthly, freq="Y")

    assert len(yearly) == 1
    assert yearly["period"].iloc[0] == "Year"
    assert yearly["cumulative_tax"].iloc[0] == pytest.approx(monthly["cumulative_tax"].iloc[-1])


def test_monthly_passthrough_adds_period_labels(reference_state):
    monthly = projection_frame(project(reference_state))

    result = aggregate_period(monthly)

    assert list(result["period"]) == list(monthly["month"])


def test_unknown_frequency_is_rejected(reference_state):
    monthly = projection_frame(project(reference_state))

    with pytest.raises(ValueError):
        aggregate_period(monthly, freq="W")


def test_missing_columns_raise_key_error():
    with pytest.raises(KeyError):
        aggregate_period(pd.DataFrame([{"income": 1.0}]), freq="Q")


def test_empty_frame_is_returned_as_is():
    empty = pd.DataFrame()

    assert aggregate_period(empty, freq="Q").empty
