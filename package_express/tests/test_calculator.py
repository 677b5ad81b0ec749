"""
Unit Tests for the Interactive Calculator

Console input and output are replaced by injected callables.

Run with: pytest package_express/tests/test_calculator.py -v
"""

import io

import pytest

from package_express.request import ShippingRequest
from package_express.scripts.calculator import (
    INVALID_NUMBER,
    WELCOME,
    InputClosedError,
    collect_request,
    get_positive_number,
    main,
    parse_positive_number,
)


# =============================================================================
# FIXTURES
# =============================================================================

class Console:
    """Scripted console: replays answers and records written lines."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.lines = []

    def read(self) -> str:
        if not self.answers:
            raise EOFError
        answer = self.answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer

    def write(self, line: str) -> None:
        self.lines.append(line)


PROMPTS = [
    "Please enter the package weight:",
    "Please enter the package width:",
    "Please enter the package height:",
    "Please enter the package length:",
]


# =============================================================================
# INPUT PARSING
# =============================================================================

class TestParsePositiveNumber:
    """Tests for parse_positive_number."""

    @pytest.mark.parametrize("text,expected", [
        ("3", 3.0),
        ("0.25", 0.25),
        ("  4.5  ", 4.5),
        ("1e2", 100.0),
    ])
    def test_valid(self, text, expected):
        assert parse_positive_number(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", ["", "abc", "-5", "0", "-0.0", "nan", "inf", "1,5", "1_000", "2_5.0"])
    def test_invalid(self, text):
        assert parse_positive_number(text) is None


class TestGetPositiveNumber:
    """Tests for the re-prompting input loop."""

    def test_first_answer_valid(self):
        console = Console("7")
        assert get_positive_number("Weight?", console.read, console.write) == 7.0
        assert console.lines == ["Weight?"]

    def test_reprompts_until_valid(self):
        """'-5', 'abc', '3' -> returns 3 after two re-prompts."""
        console = Console("-5", "abc", "3")
        value = get_positive_number("Weight?", console.read, console.write)

        assert value == 3.0
        assert console.lines == [
            "Weight?", INVALID_NUMBER,
            "Weight?", INVALID_NUMBER,
            "Weight?",
        ]

    def test_no_attempt_limit(self):
        """Any number of bad answers is tolerated."""
        console = Console(*(["x"] * 100), "1")
        assert get_positive_number("Weight?", console.read, console.write) == 1.0
        assert console.lines.count(INVALID_NUMBER) == 100

    def test_end_of_input(self):
        """Input ending before a valid number raises InputClosedError."""
        console = Console("abc")
        with pytest.raises(InputClosedError):
            get_positive_number("Weight?", console.read, console.write)

    def test_end_of_input_is_eof_error(self):
        assert issubclass(InputClosedError, EOFError)


class TestCollectRequest:
    """Tests for collect_request."""

    def test_prompt_order(self):
        """Weight, width, height, length, in that order."""
        console = Console("10", "2", "3", "4")
        request = collect_request(console.read, console.write)

        assert request == ShippingRequest(weight=10.0, width=2.0, height=3.0, length=4.0)
        assert console.lines == PROMPTS

    def test_retry_within_field(self):
        """A bad answer re-asks the same field only."""
        console = Console("10", "zero", "2", "3", "4")
        request = collect_request(console.read, console.write)

        assert request.width == 2.0
        assert console.lines == [
            PROMPTS[0],
            PROMPTS[1], INVALID_NUMBER, PROMPTS[1],
            PROMPTS[2],
            PROMPTS[3],
        ]


# =============================================================================
# MAIN
# =============================================================================

class TestMain:
    """Tests for the CLI entry point."""

    def test_quote(self):
        console = Console("10", "2", "2", "2")
        code = main([], console.read, console.write)

        assert code == 0
        assert console.lines == [WELCOME] + PROMPTS + [
            "Your estimated total for shipping this package is: $0.80",
            "Thank you!",
        ]

    def test_too_heavy(self):
        console = Console("60", "1", "1", "1")
        assert main([], console.read, console.write) == 0
        assert console.lines[-1] == "Package too heavy to be shipped via Package Express. Have a good day."

    def test_too_large(self):
        console = Console("1", "20", "20", "20")
        assert main([], console.read, console.write) == 0
        assert console.lines[-1] == "Package too big to be shipped via Package Express."

    def test_all_dimensions_asked_even_when_too_heavy(self):
        """Every field is collected before evaluation."""
        console = Console("60", "1", "1", "1")
        main([], console.read, console.write)
        assert console.lines[1:5] == PROMPTS

    def test_max_weight_override(self):
        console = Console("60", "1", "1", "1")
        assert main(["--max-weight", "70"], console.read, console.write) == 0
        assert console.lines[-2] == "Your estimated total for shipping this package is: $0.60"

    def test_max_dimensions_override(self):
        console = Console("1", "20", "20", "20")
        assert main(["--max-dimensions", "60"], console.read, console.write) == 0
        assert console.lines[-2] == "Your estimated total for shipping this package is: $80.00"

    def test_price_divisor_override(self):
        console = Console("10", "2", "2", "2")
        assert main(["--price-divisor", "50"], console.read, console.write) == 0
        assert console.lines[-2] == "Your estimated total for shipping this package is: $1.60"

    def test_invalid_override_rejected(self):
        """Non-positive overrides are argparse errors."""
        with pytest.raises(SystemExit) as exc:
            main(["--max-weight", "0"], Console().read, Console().write)
        assert exc.value.code == 2

    def test_end_of_input_reported(self):
        console = Console("10", "2")
        code = main([], console.read, console.write)

        assert code == 1
        assert console.lines[-1] == (
            "An error occurred: input ended before a valid positive number was entered"
        )

    def test_unexpected_error_reported(self):
        console = Console("10", RuntimeError("console unavailable"))
        code = main([], console.read, console.write)

        assert code == 1
        assert console.lines[-1] == "An error occurred: console unavailable"

    def test_keyboard_interrupt(self):
        console = Console(KeyboardInterrupt())
        code = main([], console.read, console.write)

        assert code == 130
        assert console.lines[-1] == "\nCancelled."

    def test_default_console(self, monkeypatch, capsys):
        """Without injected callables, input() and print() are used."""
        monkeypatch.setattr("sys.stdin", io.StringIO("10\n2\n2\n2\n"))

        assert main([]) == 0
        out = capsys.readouterr().out
        assert out.startswith(WELCOME + "\n")
        assert out.endswith(
            "Your estimated total for shipping this package is: $0.80\nThank you!\n"
        )
