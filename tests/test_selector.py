import pytest

from conftest import FakeConsole
from webhook_agent.session.selector import Mode, choose_mode


@pytest.mark.parametrize(
    "answer, expected",
    [
        ("1", Mode.CHAT),
        ("chat", Mode.CHAT),
        (" CHAT ", Mode.CHAT),
        ("2", Mode.AUTO),
        ("auto", Mode.AUTO),
    ],
)
def test_valid_choices(answer, expected):
    console = FakeConsole([answer])

    assert choose_mode(console) is expected
    assert console.prompts == ["\nChoose a mode (enter number or name): "]


def test_invalid_choice_reprompts():
    console = FakeConsole(["3", "", "auto"])

    assert choose_mode(console) is Mode.AUTO
    assert len(console.prompts) == 3
    assert console.lines.count("Invalid choice. Please try again.") == 2


def test_end_of_input_propagates():
    with pytest.raises(EOFError):
        choose_mode(FakeConsole())
