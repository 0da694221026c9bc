# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for the chronological projection.
"""

import pandas as pd
import pytest

from loanshare import (
    HouseholdTerms,
    InflationPolicy,
    LoanTerms,
    NotConvergedError,
    SolverSettings,
    individual_share,
    project_schedule,
    solve_starting_payment,
)


@pytest.fixture
def projection(loan, coupled_policy, mortgage_payment, household):
    return project_schedule(loan, coupled_policy, mortgage_payment, household)


class TestProjectSchedule:
    """Test the month-by-month series."""

    def test_one_point_per_month_in_order(self, projection, loan):
        assert len(projection.series) == loan.term_months
        assert [p.month for p in projection.series] == list(range(loan.term_months))

    def test_ends_fully_amortized(self, projection):
        assert abs(projection.final_balance) < 0.01
        assert projection.final_balance == projection.series[-1].balance

    def test_starts_from_solved_payment(self, projection, loan, coupled_policy, mortgage_payment):
        solved = solve_starting_payment(loan, coupled_policy, mortgage_payment).unwrap()
        assert projection.starting_payment == solved
        assert projection.series[0].monthly_payment == solved

    def test_total_payment_is_sum_of_series(self, projection):
        expected = sum(p.monthly_payment for p in projection.series)
        assert projection.total_payment == pytest.approx(expected, rel=1e-12)

    def test_total_payment_covers_principal_and_interest(self, projection, loan):
        assert projection.total_payment > loan.principal

    def test_shares_use_updated_payment(self, projection, household, mortgage_payment):
        for point in (projection.series[0], projection.series[12], projection.series[-1]):
            expected = individual_share(point.monthly_payment, point.month, household, mortgage_payment)
            assert point.per_person_share == pytest.approx(expected)

    def test_first_escalation_lands_at_month_twelve(self, projection):
        payments = [p.monthly_payment for p in projection.series]
        assert payments[11] == payments[0]
        assert payments[12] > payments[11]

    def test_idempotent(self, loan, coupled_policy, mortgage_payment, household):
        first = project_schedule(loan, coupled_policy, mortgage_payment, household)
        second = project_schedule(loan, coupled_policy, mortgage_payment, household)
        assert len(first.series) == len(second.series)
        assert first == second


class TestInflationCoupling:
    """Escalation ratios at every year boundary."""

    def test_coupled_combined_payment_grows_at_inflation(
        self, projection, mortgage_payment
    ):
        payments = [p.monthly_payment for p in projection.series]
        for month in range(12, len(payments), 12):
            ratio = (payments[month] + mortgage_payment) / (payments[month - 1] + mortgage_payment)
            assert ratio == pytest.approx(1.02, rel=1e-12)

    def test_uncoupled_payment_grows_at_inflation(
        self, loan, uncoupled_policy, mortgage_payment, household
    ):
        result = project_schedule(loan, uncoupled_policy, mortgage_payment, household)
        payments = [p.monthly_payment for p in result.series]
        for month in range(12, len(payments), 12):
            assert payments[month] / payments[month - 1] == pytest.approx(1.02, rel=1e-12)


class TestProjectionErrors:
    def test_not_converged_raises(self, loan, coupled_policy, mortgage_payment, household):
        with pytest.raises(NotConvergedError):
            project_schedule(
                loan, coupled_policy, mortgage_payment, household, SolverSettings(max_iterations=1)
            )


class TestToDataFrame:
    """Test tabulation of the series."""

    def test_indexed_by_month(self, projection):
        df = projection.to_dataframe()
        assert list(df.columns) == ["Year", "Balance", "Payment", "Per Person Share"]
        assert df.index.name == "Month"
        assert len(df) == 360
        assert df["Year"].iloc[-1] == 29

    def test_indexed_by_calendar_month(self, projection):
        df = projection.to_dataframe(start_date=pd.Period("2024-01", freq="M"))
        assert isinstance(df.index, pd.PeriodIndex)
        assert df.index[0] == pd.Period("2024-01", freq="M")
        assert df.index[-1] == pd.Period("2053-12", freq="M")
        assert "Month" not in df.columns

    def test_values_match_series(self, projection):
        df = projection.to_dataframe()
        assert df["Payment"].sum() == pytest.approx(projection.total_payment)
        assert df["Balance"].iloc[0] == projection.series[0].balance


class TestShortLoan:
    def test_single_year_loan_never_escalates(self):
        loan = LoanTerms(principal=12_000, annual_interest_rate_percent=6, term_years=1)
        policy = InflationPolicy(annual_inflation_rate_percent=10, couple_to_mortgage_payment=True)
        result = project_schedule(loan, policy, 500, HouseholdTerms(num_people=2))

        assert len(result.series) == 12
        assert result.starting_payment == pytest.approx(loan.monthly_payment, abs=1e-4)
        assert all(p.monthly_payment == result.starting_payment for p in result.series)


class TestMortgagePaymentDomain:
    """Any real mortgage payment flows through solver and projection alike."""

    def test_negative_mortgage_payment(self):
        loan = LoanTerms(principal=10_000, annual_interest_rate_percent=5, term_years=2)
        policy = InflationPolicy(annual_inflation_rate_percent=2, couple_to_mortgage_payment=True)

        result = project_schedule(loan, policy, -100.0, HouseholdTerms(num_people=2))

        assert result.mortgage_payment == -100.0
        assert len(result.series) == 24
        assert abs(result.final_balance) < 0.01
        # (p + M) grows 2% at the year boundary with M = -100
        assert result.series[12].monthly_payment - 100 == pytest.approx(
            (result.series[11].monthly_payment - 100) * 1.02
        )


class TestPresolvedStartingPayment:
    """A starting payment solved by the caller is projected without searching again."""

    def test_skips_search(self, loan, coupled_policy, mortgage_payment, household, monkeypatch):
        solved = solve_starting_payment(loan, coupled_policy, mortgage_payment).unwrap()

        def fail(*args, **kwargs):
            raise AssertionError("starting payment search should not run")

        monkeypatch.setattr("loanshare.projection.projector.solve_starting_payment", fail)
        result = project_schedule(
            loan, coupled_policy, mortgage_payment, household, starting_payment=solved
        )

        assert result.starting_payment == solved
        assert abs(result.final_balance) < 0.01

    def test_matches_self_solved_projection(self, loan, coupled_policy, mortgage_payment, household):
        solved = solve_starting_payment(loan, coupled_policy, mortgage_payment).unwrap()
        presolved = project_schedule(
            loan, coupled_policy, mortgage_payment, household, starting_payment=solved
        )
        assert presolved == project_schedule(loan, coupled_policy, mortgage_payment, household)
