"""Pytest configuration and fixtures."""

import os
from pathlib import Path

import pytest

from farce.config import FarceSettings, reset_settings, set_settings

TITLE_PAGE = (
    "Title: Big Fish\n"
    "Credit: written by\n"
    "Author: John August\n"
    "Source: based on the novel by Daniel Wallace\n"
    "Notes:\t\n"
    "\tFINAL PRODUCTION DRAFT\n"
    "\tincludes post-production dialogue \n"
    "\tand omitted scenes\n"
    "\n"
)

ELEMENTS = """FRED
_Hey_ there Toby

TOBY
Hello! It's **nice** to see you!

FRED
Wish *I* could say the same

=====

INT. Somewhere in Europe

"""


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Give every test default settings, unaffected by the environment."""
    for var in [k for k in os.environ if k.startswith("FARCE_")]:
        monkeypatch.delenv(var)
    reset_settings()
    set_settings(FarceSettings(_env_file=None))
    yield
    reset_settings()


@pytest.fixture
def title_page():
    """Title page from the Big Fish screenplay."""
    return TITLE_PAGE


@pytest.fixture
def elements_text():
    """Three speeches, a page break and a scene heading."""
    return ELEMENTS


@pytest.fixture
def sample_fountain():
    """A complete screenplay with title page and body."""
    return f"{TITLE_PAGE}\n\n{ELEMENTS}"


@pytest.fixture
def fountain_file(tmp_path, sample_fountain) -> Path:
    """The sample screenplay written to a temporary file."""
    path = tmp_path / "big_fish.fountain"
    path.write_text(sample_fountain, encoding="utf-8")
    return path
