import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

# Ensure the project root is importable when pytest starts from any directory
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def console():
    """Console writing to an in-memory buffer, no colours or wrapping."""
    return Console(
        file=io.StringIO(), highlight=False, soft_wrap=True, color_system=None
    )
