"""
Test suite for the command line interface
"""

import sys
import os

# Add the parent directory to the path so we can import interface
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from interface import cli


class TestClassifyCommand:

    def test_prints_label(self, capsys):
        assert cli.main(["classify", "Th", "Jh", "Qh", "Kh", "Ah"]) == 0
        assert capsys.readouterr().out.strip() == "Royal flush"

    def test_wrong_card_count(self, capsys):
        assert cli.main(["classify", "Th", "Jh"]) == 2
        assert "exactly 5 cards" in capsys.readouterr().err

    def test_bad_card(self, capsys):
        assert cli.main(["classify", "Th", "Jh", "Qh", "Kh", "Xh"]) == 2
        assert "error:" in capsys.readouterr().err


class TestWinnerCommand:

    def test_prints_winning_hand(self, capsys):
        code = cli.main(["winner", "2s 5c 7h Td Kh", "4s 4c 9h 9d Kh", "Th Jh Qh Kh Ah"])
        assert code == 0
        assert capsys.readouterr().out.strip() == "Hand 3 wins: Th Jh Qh Kh Ah (Royal flush)"

    def test_invalid_hand(self, capsys):
        assert cli.main(["winner", "2s 5c"]) == 2


class TestDemoCommand:

    def test_sample_match_ups(self, capsys):
        assert cli.main(["demo"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert lines == [
            "high_card vs two_pair vs royal_flush vs straight: Royal flush",
            "high_card vs straight_flush vs straight vs flush: Straight flush",
        ]

    def test_all_samples_match_their_names(self):
        from hand_ranking import Category, Hand

        for name, text in cli.SAMPLE_HANDS.items():
            assert Hand.from_string(text).category == Category[name.upper()], name

    def test_all_flag(self, capsys):
        assert cli.main(["demo", "--all"]) == 0
        out = capsys.readouterr().out
        assert "Four of a kind" in out
        assert len(out.strip().splitlines()) == len(cli.SAMPLE_HANDS) + len(cli.DEMO_MATCHES)


class TestServeCommand:

    def test_runs_uvicorn_with_config(self, monkeypatch):
        import uvicorn

        calls = []
        monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
        assert cli.main(["serve", "--port", "9123"]) == 0
        assert calls[0][0] == "interface.api:app"
        assert calls[0][1]["port"] == 9123
        assert calls[0][1]["host"] == cli.API_CONFIG["host"]

    def test_explicit_zero_port_and_empty_host(self, monkeypatch):
        """Falsy command line values still override the config"""
        import uvicorn

        calls = []
        monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append(kwargs))
        assert cli.main(["serve", "--port", "0", "--host", ""]) == 0
        assert calls[0]["port"] == 0
        assert calls[0]["host"] == ""
