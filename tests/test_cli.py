"""Tests for the demo console output."""

from decimal import Decimal

import cli
from rebalancer.models import RebalanceAction


class TestDemoPortfolio:
    def test_demo_total(self):
        portfolio = cli.build_demo_portfolio()
        assert portfolio.total_value() == Decimal("4000")

    def test_demo_actions(self):
        actions = cli.build_demo_portfolio().rebalance()
        assert [(a.ticker, a.action) for a in actions] == [("META", "SELL"), ("APPL", "BUY")]


class TestTables:
    def test_holdings_table_rows(self):
        table = cli.holdings_table(cli.build_demo_portfolio(), "Current holdings")
        # one row per holding plus the total row
        assert table.row_count == 3

    def test_actions_table_rows(self):
        actions = [
            RebalanceAction("META", "SELL", Decimal("4.67"), Decimal("1400")),
            RebalanceAction("APPL", "BUY", Decimal("7"), Decimal("1400")),
        ]
        assert cli.actions_table(actions).row_count == 3

    def test_drift_style(self):
        assert cli.drift_style(Decimal("0.01")) == "green"
        assert cli.drift_style(Decimal("-0.0199")) == "green"
        assert cli.drift_style(Decimal("0.02")) == "red"
        assert cli.drift_style(Decimal("0.35")) == "red"
        assert cli.drift_style(Decimal("-0.02")) == "blue"
        assert cli.drift_style(Decimal("-0.35")) == "blue"


class TestOutput:
    def test_balanced_message(self, capsys):
        cli.display_rebalance_results([])
        assert "no trades needed" in capsys.readouterr().out

    def test_main_prints_actions(self, capsys):
        cli.main()
        out = capsys.readouterr().out
        assert "SELL" in out
        assert "BUY" in out
        assert "META" in out
