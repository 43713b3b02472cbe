"""Pytest fixtures for the vending session (in-memory catalog, scripted console)."""

from typing import Iterable, List

import pytest

from vending_demo.console import Console
from vending_demo.session import VendingSession
from vending_demo.store import Catalog


class ScriptedConsole(Console):
    """Console fed from a list of answers; everything shown is kept in `lines`."""

    def __init__(self, answers: Iterable[str]):
        self.answers = list(answers)
        self.prompts: List[str] = []
        self.lines: List[str] = []
        super().__init__(input_fn=self._next_answer, output_fn=self.lines.append)

    def _next_answer(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError("script exhausted")
        return self.answers.pop(0)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


@pytest.fixture
def catalog() -> Catalog:
    catalog = Catalog()
    catalog.initialize()
    return catalog


@pytest.fixture
def session(catalog) -> VendingSession:
    return VendingSession(catalog)


@pytest.fixture
def purchasing_session(session) -> VendingSession:
    session.insert_money(200)  # £2.00
    session.finish_inserting()
    return session


@pytest.fixture
def scripted():
    return ScriptedConsole
