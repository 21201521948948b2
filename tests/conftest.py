import pytest

from scribl.runtime_context import EvalContext
from scribl.types.environment import Environment


# Every test gets a fresh root scope and a fresh diagnostics log, with the
# depth limit pinned so tests do not depend on SCRIBL_MAX_DEPTH.


@pytest.fixture
def env():
    """Empty root environment."""
    return Environment()


@pytest.fixture
def ctx():
    return EvalContext(max_depth=256)
