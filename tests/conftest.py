from typing import List

import pytest

from cookiedecoder import Skip

pytest_plugins = ("pytester",)


@pytest.fixture
def skips() -> List[Skip]:
    """Collects every skip reported to a diagnostic sink."""
    return []
