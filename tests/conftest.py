"""Shared fixtures for knf tests."""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from knf import global_config
from knf.settings import reset_settings

CONFIG_DATA = """
    [formating]
test1:      1
            test2:2

\t\ttest3: 3

[string]
  test1: test
  test2: true
  test3: 4500
  test4: !$%^&
  test5: long long long long text for test
  test6:

[boolean]
  test1: true
  test2: false
  test3: 0
  test4: 1
  test5:
  test6: example for test

[integer]
  test1: 1
  test2: -5
  test3: 10000000
  test4: A
  test5: 0xFF
  test6: 123.4
  test7: 123.456789
  test8: 0xZZYY
  test9: ABCD

[file-mode]
  test1: 644
  test2: 0644
  test3: 0
  test4: ABC
  test5: true

[comment]
  test1: 100
  # test2: 100

[macro]
  test1: 100
  test2: {macro:test1}.50
  test3: Value is {macro:test2}
  test4: "{macro:test3}"
  test5: {ABC}
  test6: {}

[k]
  t: 1
"""

MALFORMED_DATA = """
  test1: 123
  test2: 111
"""


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_path(temp_dir: Path) -> Path:
    """Write the reference configuration file."""
    return create_test_file(temp_dir, "knf-config-test.knf", CONFIG_DATA)


@pytest.fixture
def empty_config_path(temp_dir: Path) -> Path:
    return create_test_file(temp_dir, "knf-config-test-empty.knf", "")


@pytest.fixture
def malformed_config_path(temp_dir: Path) -> Path:
    return create_test_file(temp_dir, "knf-config-test-malf.knf", MALFORMED_DATA)


@pytest.fixture(autouse=True)
def clean_globals():
    """Make sure no global config or settings leak between tests."""
    global_config.reset_global()
    reset_settings()
    yield
    global_config.reset_global()
    reset_settings()


def create_test_file(directory: Path, filename: str, content: str) -> Path:
    """Create a test file with given content."""
    file_path = directory / filename
    file_path.write_text(content, encoding="utf-8")
    return file_path
