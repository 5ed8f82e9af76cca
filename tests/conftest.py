# tests/conftest.py
import asyncio
import random
from typing import List, Optional

import pytest

from endless_translating.grammar.languagetool import NO_ISSUES_MESSAGE

SAMPLE_TSV = "\n".join(
    [
        "1\tHello.\t101\tこんにちは。",
        "2\tI am a student.\t102\t私は学生です。",
        "3\tIt's raining today.\t103\t今日は雨です。",
        "4\tWhere is the station?\t104\t駅はどこですか。",
    ]
)


class StubGrammarChecker:
    """Records every sentence and answers with fixed lines."""

    def __init__(self, lines: Optional[List[str]] = None) -> None:
        self.lines = lines or [NO_ISSUES_MESSAGE]
        self.calls: List[str] = []

    async def check(self, sentence: str) -> List[str]:
        self.calls.append(sentence)
        return list(self.lines)


class GatedGrammarChecker(StubGrammarChecker):
    """Blocks inside `check` until `release` is set."""

    def __init__(self, lines: Optional[List[str]] = None) -> None:
        super().__init__(lines)
        self.release = asyncio.Event()

    async def check(self, sentence: str) -> List[str]:
        self.calls.append(sentence)
        await self.release.wait()
        return list(self.lines)


class RaisingGrammarChecker(StubGrammarChecker):
    """Fails every check with the given exception."""

    def __init__(self, error: Exception) -> None:
        super().__init__()
        self.error = error

    async def check(self, sentence: str) -> List[str]:
        self.calls.append(sentence)
        raise self.error


@pytest.fixture
def sample_tsv():
    return SAMPLE_TSV


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def grammar_checker():
    return StubGrammarChecker(lines=["1. Possible typo → Suggestion: Hello"])


@pytest.fixture
def gated_checker():
    return GatedGrammarChecker()


@pytest.fixture
def raising_checker():
    return RaisingGrammarChecker(RuntimeError("grammar service exploded"))
