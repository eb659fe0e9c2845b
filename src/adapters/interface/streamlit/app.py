"""Streamlit page showing bank account balances."""

import asyncio
from collections.abc import Sequence

import altair as alt
import streamlit as st

from src.adapters.formatting import format_currency
from src.application.use_cases.balance_view import BalanceView
from src.application.use_cases.select_active_company import (
    SelectActiveCompanyUseCase,
)
from src.domain.models import BalanceSnapshot, Company
from src.infrastructure.container import (
    build_balance_view,
    build_select_active_company_use_case,
)
from src.infrastructure.settings import BalanceSettings

_VIEW_KEY = "balance_view"


def _fetch_companies() -> list[Company]:
    """Fetch the companies available for selection."""
    return build_select_active_company_use_case().available_companies()


@st.cache_data(ttl=300, show_spinner=False)
def _load_companies() -> list[Company]:
    """Cached wrapper around _fetch_companies for Streamlit sessions."""
    return _fetch_companies()


def _get_selector() -> SelectActiveCompanyUseCase:
    """Return the active company use case."""
    return build_select_active_company_use_case()


def _get_view() -> BalanceView:
    """Return the balance view kept in the user session."""
    if _VIEW_KEY not in st.session_state:
        st.session_state[_VIEW_KEY] = build_balance_view()
    return st.session_state[_VIEW_KEY]


def _run(coroutine):
    """Run a view coroutine from the synchronous Streamlit script."""
    return asyncio.run(coroutine)


def _choose_company(
    companies: Sequence[Company],
    selector: SelectActiveCompanyUseCase,
) -> Company:
    """Render the company selector and persist changes."""
    options = list(companies)
    active = selector.execute(options)
    company = st.sidebar.selectbox(
        "Company",
        options=options,
        index=options.index(active),
        format_func=lambda item: item.name,
    )
    if company.id != active.id:
        selector.select(company)
    return company


def _build_table(
    snapshot: BalanceSnapshot,
    currency_code: str,
) -> list[dict[str, str]]:
    """Return table rows for the balances of a snapshot."""
    return [
        {
            "Account": balance.account.name,
            "Bank": balance.account.bank or "-",
            "Opening": format_currency(balance.opening_balance, currency_code),
            "Revenue": format_currency(balance.total_revenue, currency_code),
            "Expense": format_currency(balance.total_expense, currency_code),
            "Current": format_currency(balance.current_balance, currency_code),
        }
        for balance in snapshot.balances
    ]


def _render_balances_chart(snapshot: BalanceSnapshot) -> None:
    """Render a bar chart of current balances per account."""
    if not snapshot.balances:
        return
    data = [
        {
            "account": balance.account.name,
            "balance": float(balance.current_balance),
        }
        for balance in snapshot.balances
    ]
    chart = (
        alt.Chart(alt.Data(values=data))
        .mark_bar()
        .encode(
            x=alt.X("account:N", title="Account", sort=None),
            y=alt.Y("balance:Q", title="Current balance"),
            color=alt.condition(
                "datum.balance < 0",
                alt.value("#d62728"),
                alt.value("#2ca02c"),
            ),
            tooltip=["account:N", alt.Tooltip("balance:Q", format=",.2f")],
        )
    )
    st.altair_chart(chart, use_container_width=True)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Account Balances", layout="wide")
    st.title("Account Balances")

    settings = BalanceSettings.from_env()
    companies = _load_companies()
    if not companies:
        st.warning("No companies available.")
        return

    company = _choose_company(companies, _get_selector())
    view = _get_view()
    snapshot = _run(view.select_company(company.id))
    if st.sidebar.button("Refresh"):
        snapshot = _run(view.refresh())

    if view.last_error is not None:
        st.error(f"Could not refresh balances: {view.last_error}")
    if view.is_loading:
        st.info("Loading balances...")

    currency_code = settings.currency_code
    st.metric("Total balance", format_currency(snapshot.total, currency_code))
    if not snapshot.balances:
        st.caption("No bank accounts registered for this company.")
        return
    st.caption(f"{len(snapshot.balances)} bank accounts")
    st.dataframe(
        _build_table(snapshot, currency_code),
        use_container_width=True,
        hide_index=True,
    )
    _render_balances_chart(snapshot)


if __name__ == "__main__":  # pragma: no cover
    main()
