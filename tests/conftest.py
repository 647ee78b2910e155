"""Global pytest fixtures and hooks for MANGOS."""

from pathlib import Path

import pytest

TESTS_ROOT = Path(__file__).parent.resolve()
FOLDER_MARKERS = {"unit": pytest.mark.unit, "e2e": pytest.mark.e2e}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config,  # pylint: disable=unused-argument
    items: list[pytest.Item],
) -> None:
    """Mark every item with the name of its top-level test folder."""
    for item in items:
        path = item.path.resolve()
        if TESTS_ROOT not in path.parents:
            continue
        folder = path.relative_to(TESTS_ROOT).parts[0]
        mark = FOLDER_MARKERS.get(folder)
        if mark and not any(m.name == mark.name for m in item.iter_markers()):
            item.add_marker(mark)


@pytest.fixture
def word_list() -> list[str]:
    """A mutable list of words, fresh for every test."""
    return ["alpha", "beta", "gamma", "delta", "epsilon"]
