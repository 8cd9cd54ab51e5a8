"""Shared fixtures for complexity_gate tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from complexity_gate.models import ComplexityRule


class FakeProvider:
    """Returns scripted replies in call order; exceptions are raised."""

    def __init__(self, *replies: str | Exception) -> None:
        self.replies = list(replies)
        self.prompts: list[str] = []
        self.closed = False

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    async def close(self) -> None:
        self.closed = True


def reply(count: int, explanation: str, rule: str) -> str:
    return json.dumps({"count": count, "explanation": explanation, "rule": rule})


SAMPLE_CODE = "for (i=0;i<10;i++) { if(x) {} }"

SAMPLE_RULES = [
    {"description": "loops", "hint": "for/while loops"},
    {"description": "conditionals", "hint": "if statements"},
]


@pytest.fixture
def rules() -> list[ComplexityRule]:
    return [ComplexityRule(**r) for r in SAMPLE_RULES]


@pytest.fixture
def code_file(tmp_path: Path) -> Path:
    path = tmp_path / "sample.c"
    path.write_text(SAMPLE_CODE, encoding="utf-8")
    return path


@pytest.fixture
def rules_file(tmp_path: Path) -> Path:
    path = tmp_path / "rules.json"
    path.write_text(json.dumps(SAMPLE_RULES), encoding="utf-8")
    return path
