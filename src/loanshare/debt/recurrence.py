# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Month-by-month balance recurrence for an escalating-payment loan.

Each month interest accrues on the outstanding balance, the payment is
escalated at completed-year boundaries, and the payment is then deducted.
States must be produced in increasing month order since every state
depends on the one before it.
"""

from __future__ import annotations

from typing import Iterator

from ..core.primitives import Model
from .terms import InflationPolicy, LoanTerms


class RecurrenceState(Model):
    """Balance and current monthly payment carried from one month to the next."""

    balance: float
    monthly_payment: float


def is_escalation_month(month: int) -> bool:
    """True on the first month of every year after the first."""
    return month > 0 and month % 12 == 0


def advance(
    state: RecurrenceState,
    month: int,
    loan: LoanTerms,
    policy: InflationPolicy,
    mortgage_payment: float,
) -> RecurrenceState:
    """
    Advance the loan by one month.

    Order of operations:
    1. Accrue interest at the loan's own monthly rate
    2. On escalation months, grow the payment by the inflation policy
       (add-inflate-subtract around the mortgage payment when coupled)
    3. Deduct the payment from the balance

    Args:
        state: State at the end of the previous month
        month: Zero-based index of the month being simulated
        loan: Loan whose rate drives interest accrual
        policy: Escalation rule for the payment
        mortgage_payment: Fixed mortgage payment used when coupled

    Returns:
        New state at the end of ``month``
    """
    balance = state.balance * (1 + loan.monthly_rate)
    payment = state.monthly_payment

    if is_escalation_month(month):
        if policy.couple_to_mortgage_payment:
            payment += mortgage_payment
        payment *= policy.growth_factor
        if policy.couple_to_mortgage_payment:
            payment -= mortgage_payment

    balance -= payment
    return RecurrenceState(balance=balance, monthly_payment=payment)


def simulate_term(
    loan: LoanTerms,
    policy: InflationPolicy,
    mortgage_payment: float,
    starting_payment: float,
) -> Iterator[RecurrenceState]:
    """Yield the end-of-month state for every month of the loan term, in order."""
    state = RecurrenceState(balance=loan.principal, monthly_payment=starting_payment)
    for month in range(loan.term_months):
        state = advance(state, month, loan, policy, mortgage_payment)
        yield state


def final_balance(
    loan: LoanTerms,
    policy: InflationPolicy,
    mortgage_payment: float,
    starting_payment: float,
) -> float:
    """Balance left after the last month of the term."""
    state = None
    for state in simulate_term(loan, policy, mortgage_payment, starting_payment):
        pass
    return state.balance
