"""Pytest configuration and shared fixtures for the org2tg test suite."""

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def sample_org() -> str:
    """Provide a small Org document touching every exported element.

    Returns
    -------
    str
        Org source text.

    """
    return """#+TITLE: Release notes
#+AUTHOR: Jane Doe

Intro paragraph with a [[https://example.com][link]].

* TODO [#A] Version 1.0 :release:
:PROPERTIES:
:CUSTOM_ID: v1
:END:

The /first/ stable release.

#+BEGIN_SRC python -n
def add(a, b):
    return a + b
#+END_SRC

** Table
| name | value |
|------+-------|
| x    | 1.5   |

* Links
See [[#v1][the release]] and [[*Table]].
"""


@pytest.fixture
def sample_org_file(tmp_path: Path, sample_org: str) -> Path:
    """Write the sample document to a temporary .org file.

    Returns
    -------
    Path
        Path of the written file.

    """
    path = tmp_path / "notes.org"
    path.write_text(sample_org, encoding="utf-8")
    return path
