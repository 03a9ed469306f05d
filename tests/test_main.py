"""Tests for the command line entry point"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import io

import pytest
from rich.console import Console

from main import build_parser, build_context, run
from mahc.core.context import Wind


def run_cli(*argv):
    """Helper: run the CLI and capture what it printed."""
    buf = io.StringIO()
    console = Console(file=buf, width=120)
    code = run(list(argv), console=console)
    return code, buf.getvalue()


class TestCalculatorMode:
    def test_payment_table(self):
        code, out = run_cli("-m", "4", "30", "-b", "3")
        assert code == 0
        assert "Dealer: 12500 (4200)" in out
        assert "non-dealer: 8600 (2300/4200)" in out

    def test_kiriage(self):
        code, out = run_cli("-m", "4", "30", "--kiriage")
        assert code == 0
        assert "Dealer: 12000 (4000)" in out

    def test_no_han(self):
        code, out = run_cli("-m", "0", "30")
        assert code == 1
        assert "No han provided" in out

    def test_no_fu(self):
        code, out = run_cli("-m", "3", "0")
        assert code == 1
        assert "No fu provided" in out


class TestHandMode:
    def test_haneman(self):
        code, out = run_cli("--tiles", "rrrd", "EEEw", "234p", "234p", "11p", "-w", "1p")
        assert code == 0
        assert "Haneman 跳満" in out
        assert "18000" in out
        assert "Iipeikou" in out

    def test_tsumo_flags(self):
        code, out = run_cli("--tiles", "234m", "567m", "345p", "678s", "99s",
                            "-w", "4m", "-s", "s", "-t", "-r")
        assert code == 0
        assert "Riichi" in out
        assert "Pinfu" in out

    def test_not_winning(self):
        code, out = run_cli("--tiles", "123m", "456m", "789m", "135p", "11s", "-w", "1s")
        assert code == 1
        assert "Not a winning hand" in out

    def test_no_yaku(self):
        code, out = run_cli("--tiles", "123mo", "456p", "789s", "234s", "99m",
                            "-w", "9m", "-s", "s")
        assert code == 1
        assert "Valid shape but no yaku" in out

    def test_bad_suit(self):
        code, out = run_cli("--tiles", "hhho", "123m", "456m", "789m", "11p", "-w", "1p")
        assert code == 1
        assert "Invalid suit found" in out

    def test_bad_context(self):
        code, out = run_cli("--tiles", "234m", "567m", "345p", "678s", "99s",
                            "-w", "4m", "--ippatsu")
        assert code == 1
        assert "Cannot ippatsu without riichi" in out


class TestArguments:
    def test_missing_input(self):
        with pytest.raises(SystemExit):
            run([], console=Console(file=io.StringIO()))

    def test_context_from_flags(self):
        args = build_parser().parse_args(
            ["--tiles", "11p", "-w", "1p", "-s", "w", "-p", "s", "-d", "Nw",
             "--indicators", "-b", "2", "-t"])
        win = build_context(args)
        assert win.seat_wind == Wind.WEST
        assert win.round_wind == Wind.SOUTH
        assert win.is_tsumo
        assert win.honba == 2
        assert [t.index34 for t in win.dora_tiles] == [27]
