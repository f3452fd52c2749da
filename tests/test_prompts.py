# tests/test_prompts.py
import pytest
from gradebook.prompts import Prompter
from gradebook.errors import InputExhaustedError

def make_prompter(answers, max_attempts=None):
    """Prompter с заготовленными ответами; вывод собирается в список."""
    sequence = iter(answers)
    shown = []
    labels = []

    def fake_input(label):
        labels.append(label)
        try:
            return next(sequence)
        except StopIteration:
            raise EOFError

    return Prompter(fake_input, shown.append, max_attempts), shown, labels

def test_prompt_int_accepts_valid_value():
    prompter, shown, labels = make_prompter(["42"])
    assert prompter.prompt_int("Number: ") == 42
    assert shown == []
    assert labels == ["Number: "]

def test_prompt_int_strips_whitespace():
    prompter, _, _ = make_prompter(["  7 "])
    assert prompter.prompt_int("N: ", 1, 10) == 7

def test_prompt_int_reprompts_on_garbage():
    prompter, shown, labels = make_prompter(["abc", "", "3.5", "-8"])
    assert prompter.prompt_int("N: ") == -8
    assert shown == ["Invalid input! Please try again."] * 3
    assert len(labels) == 4

def test_prompt_int_reprompts_out_of_range():
    prompter, shown, _ = make_prompter(["-1", "101", "100"])
    assert prompter.prompt_int("Grade: ", 0, 100) == 100
    assert shown == ["Invalid input. Please enter a value between 0 and 100."] * 2

def test_prompt_int_accepts_only_ascii_digits():
    prompter, shown, _ = make_prompter(["1_0", "\u0663", "+12"])
    assert prompter.prompt_int("N: ", 1, 100) == 12
    assert len(shown) == 2

def test_prompt_int_rejects_values_beyond_int_bounds():
    prompter, shown, _ = make_prompter([str(2**31), "5"])
    assert prompter.prompt_int("N: ") == 5
    assert len(shown) == 1

def test_prompt_int_eof_raises():
    prompter, _, _ = make_prompter(["x"])
    with pytest.raises(InputExhaustedError):
        prompter.prompt_int("N: ", 1, 5)

def test_prompt_int_bounded_attempts():
    prompter, shown, _ = make_prompter(["a", "b", "c", "4"], max_attempts=3)
    with pytest.raises(InputExhaustedError):
        prompter.prompt_int("N: ", 1, 5)
    assert len(shown) == 3

def test_prompt_line_returns_raw_text():
    prompter, _, _ = make_prompter(["  Mary Jane  ", ""])
    assert prompter.prompt_line("Name: ") == "  Mary Jane  "
    assert prompter.prompt_line("Name: ") == ""

def test_prompt_line_eof_raises():
    prompter, _, _ = make_prompter([])
    with pytest.raises(InputExhaustedError):
        prompter.prompt_line("Name: ")
