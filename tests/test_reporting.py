"""Tests for the breakdown table and driver insights."""

import pandas as pd
import pytest

from src.cost_engine.calculator import compute_totals
from src.cost_engine.models import BlockName, CostConfig
from src.reporting.breakdown import BREAKDOWN_COLUMNS, breakdown_frame, summary_metrics
from src.reporting.insights import BASE_INSIGHT, driver_insight, top_driver_insights


# ── Breakdown frame ──────────────────────────────────────────────────

class TestBreakdownFrame:
    def test_one_row_per_block(self, default_inputs, config):
        df = breakdown_frame(compute_totals(default_inputs, config))
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == BREAKDOWN_COLUMNS
        assert list(df["block"]) == [name.value for name in BlockName]

    def test_without_risk_sums_to_base_cost(self, default_inputs, config):
        result = compute_totals(default_inputs, config)
        df = breakdown_frame(result, include_risk=False)
        assert len(df) == len(BlockName) - 1
        assert df["total"].sum() == pytest.approx(result.base_cost)
        assert df["percentage"].sum() == pytest.approx(100)

    def test_total_column_matches_parts(self, default_inputs, config):
        df = breakdown_frame(compute_totals(default_inputs, config))
        assert (df["total"] - (df["time_cost"] + df["direct_cost"])).abs().max() < 1e-9

    def test_labels(self, empty_inputs, config):
        df = breakdown_frame(compute_totals(empty_inputs, config))
        labels = dict(zip(df["block"], df["label"]))
        assert labels["interviews"] == "Interviews"
        assert labels["expected_risk"] == "Expected risk cost"


# ── Summary metrics ──────────────────────────────────────────────────

class TestSummaryMetrics:
    def test_relates_cost_to_salary(self, default_inputs, config):
        result = compute_totals(default_inputs, config)
        metrics = summary_metrics(result)
        gross = result.normalized_hire_pay.monthly_gross
        assert metrics["total_cost"] == result.total_cost
        assert metrics["months_of_salary_equivalent"] == pytest.approx(result.total_cost / gross)
        assert metrics["cost_as_percent_of_annual_salary"] == pytest.approx(
            result.total_cost / (gross * 12) * 100
        )

    def test_zero_salary(self, default_inputs):
        result = compute_totals(default_inputs, CostConfig(average_wage=0))
        metrics = summary_metrics(result)
        assert metrics["months_of_salary_equivalent"] == 0
        assert metrics["cost_as_percent_of_annual_salary"] == 0


# ── Insights ─────────────────────────────────────────────────────────

class TestDriverInsight:
    def test_time_based_block(self):
        assert "time spent" in driver_insight(BlockName.STRATEGY_PREP)

    def test_cost_based_block(self):
        assert "service volume" in driver_insight(BlockName.OTHER_SERVICES)

    def test_mixed_block(self):
        assert "both time and direct costs" in driver_insight(BlockName.INTERVIEWS)

    @pytest.mark.parametrize(
        "block, fragment",
        [
            (BlockName.ONBOARDING, "lost productivity"),
            (BlockName.VACANCY, "unfilled position"),
            (BlockName.EXPECTED_RISK, "risk-weighted"),
        ],
    )
    def test_special_blocks(self, block, fragment):
        insight = driver_insight(block)
        assert insight.startswith(BASE_INSIGHT)
        assert fragment in insight

    def test_top_driver_insights(self, default_inputs, config):
        result = compute_totals(default_inputs, config)
        insights = top_driver_insights(result)
        assert [i["block"] for i in insights] == [d.block.value for d in result.top_drivers]
        assert all(i["insight"] for i in insights)
