"""Streamlit dashboard entry point."""

from dataclasses import dataclass
from datetime import date

import streamlit as st

from src.application.state_store import WealthStateStore
from src.application.use_cases.build_wealth_chart import (
    BuildWealthChartUseCase,
)
from src.application.use_cases.get_account_performance import (
    GetAccountPerformanceUseCase,
)
from src.application.use_cases.load_rate_table import LoadRateTableUseCase
from src.application.use_cases.manage_accounts import ManageAccountsUseCase
from src.application.use_cases.sync_wealth_document import (
    SyncWealthDocumentUseCase,
)
from src.adapters.interface.streamlit.wealth_charts import (
    build_change_chart,
    build_ending_balance_chart,
    build_wealth_chart,
    currency_symbol,
)
from src.domain.constants import MONTH_NAMES, SUPPORTED_CURRENCIES
from src.domain.errors import WealthError
from src.domain.models import Account, WealthState
from src.domain.services.normalization import build_month_key
from src.infrastructure.container import (
    build_account_store,
    build_document_sync,
    build_rate_provider,
    build_state_store,
)
from src.infrastructure.settings import WealthSettings

PAGES = ("Home", "Accounts", "Account details")
SESSION_KEY = "wealth_session"


@dataclass
class DashboardSession:
    """Per-browser-session wiring of the dashboard."""

    settings: WealthSettings
    store: WealthStateStore
    sync: SyncWealthDocumentUseCase
    manage: ManageAccountsUseCase


@st.cache_resource(show_spinner=False)
def _shared_account_store():
    """Account store shared by every session of the server process."""
    return build_account_store(WealthSettings.from_env())


def _create_session() -> DashboardSession:
    """Wire a new session and read the stored document."""
    settings = WealthSettings.from_env()
    store = build_state_store(settings)
    sync = build_document_sync(store, _shared_account_store(), settings)
    sync.start()
    return DashboardSession(
        settings=settings,
        store=store,
        sync=sync,
        manage=ManageAccountsUseCase(store),
    )


def _get_session() -> DashboardSession:
    """Return the session wiring, creating it on first use."""
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = _create_session()
    return st.session_state[SESSION_KEY]


def _ensure_rates(session: DashboardSession) -> None:
    """Fetch the rate table once per session."""
    if session.store.state.rates is not None:
        return
    with st.spinner("Fetching exchange rates..."):
        LoadRateTableUseCase(
            build_rate_provider(session.settings),
            session.store,
        ).execute()


def _handle_add_account(
    manage: ManageAccountsUseCase,
    name: str,
    currency: str,
) -> str | None:
    """Add an account and return the error message to show, if any."""
    try:
        manage.add_account(name, currency)
    except WealthError as exc:
        return str(exc)
    return None


def _handle_save_entry(
    manage: ManageAccountsUseCase,
    account_name: str,
    year: int,
    month_number: int,
    opening: str,
    ending: str,
) -> str | None:
    """Save a monthly entry and return the error message to show, if any."""
    if not str(opening).strip() or not str(ending).strip():
        return "Please fill in both opening and ending balances."
    try:
        manage.save_monthly_entry(
            account_name,
            build_month_key(year, month_number),
            opening,
            ending,
        )
    except WealthError as exc:
        return str(exc)
    return None


def _year_options(today: date) -> list[int]:
    """Return the selectable years around the current one."""
    return [today.year - 2 + offset for offset in range(5)]


def _open_details(name: str) -> None:
    st.session_state["selected_account"] = name
    st.session_state["page"] = "Account details"


def _render_home(state: WealthState) -> None:
    """Render the consolidated wealth overview."""
    st.subheader("Wealth Overview")
    st.caption(
        "Consolidated wealth across all accounts, converted to "
        f"{state.base_currency}."
    )
    chart = BuildWealthChartUseCase().execute(state)
    if chart.is_loading:
        st.info("Fetching exchange rates...")
        return
    if chart.is_empty:
        st.info("Add some accounts and monthly data to see the chart here.")
        return
    st.altair_chart(build_wealth_chart(chart), width="stretch")


def _render_monthly_form(session: DashboardSession, account: Account) -> None:
    """Render the add/update form and entry list of one account."""
    st.subheader(f"Edit Monthly Data for {account.name}")
    if st.button("Back to accounts"):
        session.manage.stop_editing()
        st.rerun()

    today = date.today()
    years = _year_options(today)
    with st.form("monthly-entry", clear_on_submit=True):
        month_col, year_col, opening_col, ending_col = st.columns(4)
        month_number = month_col.selectbox(
            "Month",
            options=list(range(1, 13)),
            format_func=lambda value: MONTH_NAMES[value - 1],
        )
        year = year_col.selectbox(
            "Year",
            options=years,
            index=years.index(today.year),
        )
        opening = opening_col.text_input(
            f"Opening ({account.currency})",
            placeholder="e.g., 50000",
        )
        ending = ending_col.text_input(
            f"Ending ({account.currency})",
            placeholder="e.g., 55000",
        )
        submitted = st.form_submit_button("Add/Update Month")
    if submitted:
        error = _handle_save_entry(
            session.manage,
            account.name,
            year,
            month_number,
            opening,
            ending,
        )
        if error:
            st.error(error)
        else:
            st.rerun()

    st.markdown(f"#### Data for {account.name}")
    if not account.monthly_data:
        st.caption("No data has been entered for this account yet.")
        return
    symbol = currency_symbol(account.currency)
    data = [
        {
            "Month": entry.month,
            "Open": f"{symbol}{entry.opening:,}",
            "End": f"{symbol}{entry.ending:,}",
        }
        for entry in account.monthly_data
    ]
    st.dataframe(data, width="stretch", hide_index=True)


def _render_accounts(session: DashboardSession, state: WealthState) -> None:
    """Render the account list and the add account form."""
    editing = (
        state.find_account(state.editing_account)
        if state.editing_account
        else None
    )
    if editing is not None:
        _render_monthly_form(session, editing)
        return

    st.subheader("Manage Accounts")
    name_col, currency_col, button_col = st.columns([3, 1, 1])
    name = name_col.text_input(
        "Account Name",
        placeholder="e.g., Vanguard, eToro",
    )
    currency = currency_col.selectbox("Currency", SUPPORTED_CURRENCIES)
    if button_col.button("Add Account"):
        error = _handle_add_account(session.manage, name, currency)
        if error:
            st.error(error)
        else:
            st.rerun()

    if not state.accounts:
        st.info("No accounts yet. Add one above.")
        return
    for account in state.accounts:
        info_col, details_col, edit_col, remove_col = st.columns([4, 1, 1, 1])
        info_col.markdown(f"**{account.name}** ({account.currency})")
        details_col.button(
            "View Details",
            key=f"details-{account.name}",
            on_click=_open_details,
            args=(account.name,),
        )
        if edit_col.button("Edit Data", key=f"edit-{account.name}"):
            session.manage.start_editing(account.name)
            st.rerun()
        if remove_col.button("Remove", key=f"remove-{account.name}"):
            session.manage.remove_account(account.name)
            st.rerun()


def _render_account_details(state: WealthState) -> None:
    """Render ending balance and monthly change charts of one account."""
    names = [account.name for account in state.accounts]
    if not names:
        st.info("No accounts yet. Add one on the Accounts page.")
        return
    selected = st.session_state.get("selected_account")
    index = names.index(selected) if selected in names else 0
    name = st.selectbox("Account", names, index=index)
    account = state.find_account(name)
    st.subheader(f"Performance for {account.name}")
    points = GetAccountPerformanceUseCase().execute(state, account.name)
    if not points:
        st.info(
            'Enter data for this account on the "Accounts" page to see its '
            "performance charts here."
        )
        return
    st.markdown("#### Monthly Ending Balance")
    st.altair_chart(
        build_ending_balance_chart(points, account.currency),
        width="stretch",
    )
    st.markdown("#### Monthly Change (Profit/Loss)")
    st.altair_chart(
        build_change_chart(points, account.currency),
        width="stretch",
    )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Wealth Dashboard", layout="wide")
    st.title("Wealth Dashboard")

    session = _get_session()
    session.sync.refresh()
    _ensure_rates(session)

    page = st.sidebar.radio("Page", PAGES, key="page")
    state = session.store.state
    base_currency = st.sidebar.selectbox(
        "Base Currency",
        SUPPORTED_CURRENCIES,
        index=SUPPORTED_CURRENCIES.index(state.base_currency)
        if state.base_currency in SUPPORTED_CURRENCIES
        else 0,
    )
    if base_currency != state.base_currency:
        session.manage.set_base_currency(base_currency)
        state = session.store.state
    st.sidebar.caption(f"User: {session.settings.user_id}")

    if page == "Home":
        _render_home(state)
    elif page == "Accounts":
        _render_accounts(session, state)
    else:
        _render_account_details(state)


if __name__ == "__main__":  # pragma: no cover
    main()
