from __future__ import annotations

import io
from dataclasses import dataclass

import pytest

from src.payroll_system.payroll_system.container import Container, build_container


@dataclass(frozen=True)
class Session:
    exit_code: int
    output: str
    container: Container


@pytest.fixture
def run_session():
    """Feed `text` to a fresh menu loop and capture everything it prints."""

    def _run(text: str) -> Session:
        out = io.StringIO()
        container = build_container(stdin=io.StringIO(text), stdout=out)
        exit_code = container.menu_controller.run()
        return Session(exit_code=exit_code, output=out.getvalue(), container=container)

    return _run
