from typing import Iterable, List, Tuple

import httpx
import pytest


class FakePrompter:
    """Scripted stand-in for the console prompter."""

    def __init__(self, answers: Iterable[str] = (), confirm: bool = False):
        self.answers = list(answers)
        self.confirm_answer = confirm
        self.questions: List[Tuple[str, bool]] = []
        self.messages: List[str] = []

    def ask(self, question: str, password: bool = False) -> str:
        self.questions.append((question, password))
        return self.answers.pop(0)

    def confirm(self, question: str, default: bool = False) -> bool:
        self.questions.append((question, False))
        return self.confirm_answer

    def status(self, message: str, style: str = "cyan") -> None:
        self.messages.append(message)


def make_client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


@pytest.fixture
def prompter():
    return FakePrompter()
