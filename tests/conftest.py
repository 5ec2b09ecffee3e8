from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture()
def fixtures_dir() -> Path:
    return Path(__file__).parent / "data"


@pytest.fixture()
def sample_vtt(fixtures_dir) -> Path:
    return fixtures_dir / "sample.vtt"


@pytest.fixture()
def expected_srt(fixtures_dir) -> str:
    return (fixtures_dir / "sample.srt").read_text(encoding="utf-8")


@pytest.fixture()
def scripted_input():
    """Build an ``input`` replacement that replays canned answers and records prompts."""

    def _factory(*answers: str):
        prompts: list[str] = []
        remaining = list(answers)

        def _fake(prompt: str) -> str:
            prompts.append(prompt)
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        _fake.prompts = prompts
        return _fake

    return _factory
