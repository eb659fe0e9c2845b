"""Tests for the Streamlit app module."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.adapters.interface.streamlit import app
from src.application.use_cases.balance_view import BalanceView
from src.domain.models import BankAccount, Company, LedgerTransaction


class _Repository:
    def __init__(self, data):
        self.data = data

    def fetch_accounts(self, company_id):
        return self.data.get(company_id, [])

    def fetch_paid_transactions(self, company_id):
        return self.data.get(company_id, [])


def _build_view() -> BalanceView:
    accounts = _Repository(
        {
            "acme": [
                BankAccount(
                    id="a1",
                    company_id="acme",
                    name="Caixa",
                    bank="Itaú",
                    opening_balance=Decimal("100"),
                ),
                BankAccount(
                    id="a2",
                    company_id="acme",
                    name="Cartão",
                    opening_balance=Decimal("0"),
                ),
            ]
        }
    )
    transactions = _Repository(
        {
            "acme": [
                LedgerTransaction(
                    id="t1",
                    company_id="acme",
                    account_id="a2",
                    kind="expense",
                    amount=Decimal("40"),
                    status="paid",
                )
            ]
        }
    )
    return BalanceView(accounts, transactions, logger=MagicMock())


class _FakeSidebar:
    def __init__(self, choice_index: int = 0, refresh: bool = False):
        self.choice_index = choice_index
        self.refresh = refresh
        self.selectbox_kwargs = None

    def selectbox(self, label, **kwargs):
        self.selectbox_kwargs = kwargs
        return kwargs["options"][self.choice_index]

    def button(self, label):
        return self.refresh


class _FakeStreamlit:
    def __init__(self, sidebar: _FakeSidebar | None = None) -> None:
        self.session_state: dict = {}
        self.sidebar = sidebar or _FakeSidebar()
        self.config_called = False
        self.title_called = False
        self.captions: list[str] = []
        self.warnings: list[str] = []
        self.errors: list[str] = []
        self.metrics: list[tuple[str, str]] = []
        self.dataframe_payload = None
        self.charts: list = []

    def set_page_config(self, **kwargs):
        self.config_called = True

    def title(self, text: str):
        self.title_called = True

    def caption(self, text: str):
        self.captions.append(text)

    def warning(self, text: str):
        self.warnings.append(text)

    def error(self, text: str):
        self.errors.append(text)

    def info(self, text: str):
        pass

    def metric(self, label: str, value: str):
        self.metrics.append((label, value))

    def dataframe(self, data, **kwargs):
        self.dataframe_payload = (data, kwargs)

    def altair_chart(self, chart, **kwargs):
        self.charts.append(chart)


def _patch_app(monkeypatch, fake_st, companies, selector=None, view=None):
    selector = selector or MagicMock()
    if companies:
        selector.execute.return_value = companies[0]
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_companies", lambda: companies)
    monkeypatch.setattr(app, "_get_selector", lambda: selector)
    fake_st.session_state[app._VIEW_KEY] = view or _build_view()
    monkeypatch.setattr(
        app.BalanceSettings,
        "from_env",
        classmethod(lambda cls: app.BalanceSettings()),
    )
    return selector


def test_fetch_companies_invokes_use_case(monkeypatch):
    """_fetch_companies should delegate to the selection use case."""
    companies = [Company(id="1", name="Alpha")]
    use_case = MagicMock()
    use_case.available_companies.return_value = companies
    monkeypatch.setattr(
        app,
        "build_select_active_company_use_case",
        lambda: use_case,
    )

    assert app._fetch_companies() == companies


def test_load_companies_uses_fetch(monkeypatch):
    """The cached loader should delegate to _fetch_companies."""
    companies = [Company(id="cached", name="Cached")]
    monkeypatch.setattr(app, "_fetch_companies", lambda: companies)
    app._load_companies.clear()

    assert app._load_companies() == companies


def test_get_view_is_kept_in_session(monkeypatch):
    fake_st = _FakeStreamlit()
    built = []
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(
        app,
        "build_balance_view",
        lambda: built.append(1) or "view",
    )

    assert app._get_view() == "view"
    assert app._get_view() == "view"
    assert built == [1]


def test_main_displays_balances(monkeypatch):
    """main should render the total, the table and the chart."""
    fake_st = _FakeStreamlit()
    companies = [Company(id="acme", name="Acme")]
    _patch_app(monkeypatch, fake_st, companies)

    app.main()

    assert fake_st.config_called
    assert fake_st.title_called
    assert fake_st.warnings == []
    assert fake_st.errors == []
    assert fake_st.metrics == [("Total balance", "R$ 60,00")]
    table_data, kwargs = fake_st.dataframe_payload
    assert [row["Account"] for row in table_data] == ["Caixa", "Cartão"]
    assert table_data[0]["Bank"] == "Itaú"
    assert table_data[1]["Current"] == "R$ -40,00"
    assert kwargs["use_container_width"] is True
    assert kwargs["hide_index"] is True
    assert len(fake_st.charts) == 1


def test_main_persists_new_selection(monkeypatch):
    """Choosing another company in the sidebar saves the choice."""
    fake_st = _FakeStreamlit(_FakeSidebar(choice_index=1))
    companies = [
        Company(id="globex", name="Globex"),
        Company(id="acme", name="Acme"),
    ]
    selector = _patch_app(monkeypatch, fake_st, companies)

    app.main()

    selector.select.assert_called_once_with(companies[1])
    assert fake_st.sidebar.selectbox_kwargs["index"] == 0
    assert fake_st.metrics == [("Total balance", "R$ 60,00")]


def test_main_shows_error_when_fetch_fails(monkeypatch):
    fake_st = _FakeStreamlit()
    companies = [Company(id="acme", name="Acme")]
    view = _build_view()

    def _boom(company_id):
        raise RuntimeError("db down")

    view._accounts_repository.fetch_accounts = _boom
    _patch_app(monkeypatch, fake_st, companies, view=view)

    app.main()

    assert fake_st.errors == ["Could not refresh balances: db down"]
    assert fake_st.metrics == [("Total balance", "R$ 0,00")]
    assert fake_st.dataframe_payload is None


def test_main_warns_when_no_companies(monkeypatch):
    """main should warn the user when there are no companies."""
    fake_st = _FakeStreamlit()
    _patch_app(monkeypatch, fake_st, [])

    app.main()

    assert fake_st.warnings == ["No companies available."]
    assert fake_st.metrics == []
