from dataclasses import dataclass
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).resolve().parents[2] / "fixtures"


@dataclass(frozen=True)
class ExplanationFixture:
    name: str
    command: str
    markup: str
    expected: str


def _fixture_number(path: Path) -> int:
    return int(path.stem.split("-")[1])


def discover_fixtures() -> list[ExplanationFixture]:
    """Pairs command-N.html pages with their command and expected report."""
    fixtures = []
    for html_path in sorted(FIXTURES_DIR.glob("command-*.html"), key=_fixture_number):
        stem = html_path.stem
        fixtures.append(
            ExplanationFixture(
                name=stem,
                command=(FIXTURES_DIR / f"{stem}.txt").read_text().strip(),
                markup=html_path.read_text(),
                expected=(FIXTURES_DIR / f"{stem}.expected.txt").read_text().strip(),
            )
        )
    return fixtures


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    if "explanation_fixture" in metafunc.fixturenames:
        fixtures = discover_fixtures()
        metafunc.parametrize(
            "explanation_fixture", fixtures, ids=[f.name for f in fixtures]
        )


@pytest.fixture
def simple_markup() -> str:
    return (FIXTURES_DIR / "command-1.html").read_text()
