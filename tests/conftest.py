from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.env_builder import EnvBuilder

SAMPLE_ENV = """
# ++ one ++
# TEST_A=1
# TEST_B=1

# ++ two ++
# TEST_A=2
# TEST_B=2

# ++ three ++
TEST_A=3
TEST_B=3
"""


@pytest.fixture
def env_builder(tmp_path: Path) -> EnvBuilder:
    """Provide a reusable env project rooted at the pytest tmp_path."""
    return EnvBuilder(tmp_path)


@pytest.fixture
def sample_project(env_builder: EnvBuilder) -> EnvBuilder:
    """An env project holding three sections with ``three`` active."""
    env_builder.write({".env": SAMPLE_ENV})
    return env_builder
