import pytest

from slot_machine.utils import configure_logging


@pytest.fixture(autouse=True)
def quiet_logs():
    configure_logging("WARNING")


class Script:
    """Feeds canned answers to a Prompter and records what was asked."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.prompts = []
        self.output = []

    def ask(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def say(self, text):
        self.output.append(text)


@pytest.fixture
def script():
    return Script
