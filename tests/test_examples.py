"""Run every example script and compare its output with the ``# =>`` markers."""

import re
import runpy
from pathlib import Path

import pytest

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"
_EXPECTED_OUTPUT = re.compile(r"#\s*=>\s*(.+)$")


def _example_scripts() -> list[Path]:
    return sorted(EXAMPLES_DIR.glob("ex_*/*.py"))


def _expected_lines(script: Path) -> list[str]:
    expected: list[str] = []
    for line in script.read_text(encoding="utf-8").splitlines():
        match = _EXPECTED_OUTPUT.search(line)
        if match is not None:
            expected.append(match.group(1).strip())
    return expected


@pytest.mark.parametrize("script", _example_scripts(), ids=lambda script: script.parent.name)
def test_example_output(script: Path, capsys: pytest.CaptureFixture[str]) -> None:
    runpy.run_path(str(script), run_name="__main__")

    assert capsys.readouterr().out.splitlines() == _expected_lines(script)
