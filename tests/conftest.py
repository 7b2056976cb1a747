"""Pytest configuration and shared fixtures for the diff workbench tests."""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable

import pytest

from textdiff.tui.commands import Edit, NextFocus, Resize
from textdiff.tui.workbench import Workbench


# Terminal size used by the UI tests
TERMINAL_SIZE = (80, 24)

# Pairs exercised by the reconstruction and determinism tests
TEXT_PAIRS = [
    ("", ""),
    ("", "abc"),
    ("abc", ""),
    ("Hello", "Hello"),
    ("Hello", "Hello Go bro "),
    ("abc", "axc"),
    ("kitten", "sitting"),
    ("ABCABBA", "CBABAC"),
    ("line one\nline two\n", "line one\nline 2\nline three\n"),
    ("日本語テスト", "日本語のテスト 🎉"),
    ("  leading", "trailing  "),
]


@pytest.fixture
def workbench() -> Workbench:
    """Return a freshly created workbench (0x0 viewport)."""
    return Workbench()


@pytest.fixture
def sized_workbench() -> Workbench:
    """Return a workbench sized to an 80x24 terminal."""
    bench = Workbench()
    bench.dispatch(Resize(*TERMINAL_SIZE))
    return bench


def fill_inputs(bench: Workbench, left: str, right: str) -> None:
    """Helper to type text into both input panes, leaving focus on pane 1."""
    while bench.focus != 0:
        bench.dispatch(NextFocus())
    bench.dispatch(Edit(0, left))
    bench.dispatch(NextFocus())
    bench.dispatch(Edit(1, right))


async def type_text(pilot: Any, text: str) -> None:
    """Helper to type text key by key into the focused widget."""
    keys = ["space" if char == " " else char for char in text]
    await pilot.press(*keys)
    await pilot.pause()


def run_async(scenario: Callable[[], Awaitable[Any]]) -> Any:
    """Helper to run an async UI scenario from a plain test."""
    return asyncio.run(scenario())
