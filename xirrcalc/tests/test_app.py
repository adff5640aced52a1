"""Tests for the command line application."""

import pytest

from xirrcalc.app import main, parse_args


def run(capsys, *argv):
    with pytest.raises(SystemExit) as exc_info:
        main(list(argv))
    out, err = capsys.readouterr()
    return exc_info.value.code, out, err


class TestApp:
    """Tests for the xirrcalc command."""

    def test_rate(self, capsys):
        code, out, _ = run(capsys, "2010-01-01=-1000", "2011-01-01=1100")

        assert code == 0
        assert "XIRR:" in out
        assert "10.0000%" in out

    def test_days_per_year_convention(self, capsys):
        code, out, _ = run(capsys, "2010-01-01=-1000", "2011-01-01=900", "--days-per-year", "actual_360")

        assert code == 0
        assert "-9.87" in out

    def test_probe(self, capsys):
        code, out, _ = run(capsys, "2010-01-01=-1000", "2011-01-01=1000", "--probe", "0.1")

        assert code == 0
        assert "Present value at 0.1: -100" in out
        assert "Derivative at 0.1: -1000" in out
        assert "XIRR" not in out

    def test_verbose(self, capsys):
        code, out, _ = run(capsys, "2010-01-01=-1000", "2011-01-01=1100", "-v")

        assert code == 0
        assert "Transactions: 2" in out
        assert "Date range: 2010-01-01 to 2011-01-01" in out

    def test_invalid_transactions(self, capsys):
        code, _, err = run(capsys, "2010-01-01=-1000", "2010-01-01=1100")

        assert code == 1
        assert "same day" in err

    def test_solver_failure(self, capsys):
        code, _, err = run(capsys, "2010-01-01=-1000", "2011-01-01=1100", "--guess", "-1")

        assert code == 1
        assert "zero-valued derivative" in err

    def test_invalid_option_value(self, capsys):
        code, _, err = run(capsys, "2010-01-01=-1000", "2011-01-01=1100", "--tolerance", "0")

        assert code == 1
        assert "tolerance" in err

    def test_infinite_days_per_year(self, capsys):
        code, _, err = run(capsys, "2010-01-01=-1000", "2011-01-01=1100", "--days-per-year", "inf")

        assert code == 1
        assert "days_per_year" in err

    @pytest.mark.parametrize("argument", ["2010-01-01", "=100", "2010-01-01=abc", "yesterday-ish=5"])
    def test_bad_transaction_argument(self, capsys, argument):
        code, _, err = run(capsys, "2011-01-01=1100", argument)

        assert code == 2
        assert "DATE=AMOUNT" in err or "invalid transaction" in err

    def test_parse_args(self):
        args = parse_args(["2010-01-01=-1000", "2011-01-01=1100", "-d", "360", "-g", "0.2",
                           "--guess-strategy", "sign_of_total", "-n", "50"])

        assert len(args.transactions) == 2
        assert args.transactions[0].amount == -1000.0
        assert args.days_per_year == 360.0
        assert args.guess == 0.2
        assert args.max_iterations == 50
        assert args.tolerance is None
