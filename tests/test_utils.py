import pytest
import structlog

from slot_machine.utils import configure_logging


def test_logs_go_to_stderr(capsys):
    configure_logging("INFO")
    structlog.get_logger("test").info("round_resolved", winnings=50)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "round_resolved" in captured.err


def test_level_filters(capsys):
    configure_logging("WARNING")
    structlog.get_logger("test").info("hidden")
    assert "hidden" not in capsys.readouterr().err


def test_unknown_level():
    with pytest.raises(ValueError):
        configure_logging("LOUD")
