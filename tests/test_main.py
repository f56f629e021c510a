"""
Command-line handling of the entry point.
"""
from main import parse_args
from tictactoe_score import config


def test_defaults():
    args, qt_args = parse_args([])
    assert args.log_level == config.DEFAULT_LOG_LEVEL
    assert not args.light
    assert qt_args == []


def test_own_options_are_parsed():
    args, qt_args = parse_args(["--log-level", "DEBUG", "--light"])
    assert args.log_level == "DEBUG"
    assert args.light
    assert qt_args == []


def test_qt_options_are_passed_through():
    args, qt_args = parse_args(["--log-level", "INFO", "-platform", "offscreen"])
    assert args.log_level == "INFO"
    assert qt_args == ["-platform", "offscreen"]


def test_qt_style_option_is_kept():
    args, qt_args = parse_args(["-style", "windows"])
    assert args.log_level == config.DEFAULT_LOG_LEVEL
    assert qt_args == ["-style", "windows"]
