import pytest

from slot_machine.prompts import Prompter, SessionAborted, parse_number


def test_parse_number():
    assert parse_number(" 12.5 ") == 12.5
    assert parse_number("abc") is None
    assert parse_number("") is None
    assert parse_number("nan") is None
    assert parse_number("inf") is None


def test_deposit_retries_until_positive(script):
    s = script("abc", "0", "-3", "100")
    assert Prompter(s.ask, s.say).deposit() == 100
    assert s.output == ["Invalid deposit, Try again!"] * 3
    assert s.prompts == ["Enter a deposit amount: "] * 4


def test_lines_bounds(script):
    s = script("0", "4", "2.5", "x", "3")
    assert Prompter(s.ask, s.say).lines(3) == 3
    assert s.output.count("Invalid number of lines, Try again!") == 4
    assert s.prompts[0] == "Enter number of lines to bet between 1 and 3 : "


def test_lines_lower_boundary(script):
    s = script("1")
    result = Prompter(s.ask, s.say).lines(3)
    assert result == 1
    assert isinstance(result, int)


def test_bet_capped_by_balance(script):
    s = script("20", "16.67", "16")
    assert Prompter(s.ask, s.say).bet(50, 3) == 16
    assert s.output == ["Invalid bet, Try again!"] * 2


def test_bet_accepts_exact_limit(script):
    s = script("-1", "0", "10")
    assert Prompter(s.ask, s.say).bet(30, 3) == 10
    assert len(s.output) == 2


def test_play_again(script):
    s = script("y", "Y", "n")
    p = Prompter(s.ask, s.say)
    assert p.play_again() is True
    assert p.play_again() is False
    assert p.play_again() is False


def test_eof_aborts(script):
    s = script()
    with pytest.raises(SessionAborted):
        Prompter(s.ask, s.say).deposit()


def test_interrupt_aborts():
    def ask(prompt):
        raise KeyboardInterrupt

    with pytest.raises(SessionAborted):
        Prompter(ask, lambda text: None).read("> ")
