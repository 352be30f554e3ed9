# Tests configuration for BugDoc
import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from bugdoc.records import BugRecord


@pytest.fixture
def record_a():
    """Bug with one cause line and two fix lines."""
    return BugRecord(number=1, title="A", cause_lines=["c1"], fix_lines=["f1", "f2"])


@pytest.fixture
def record_b():
    """Bug with no cause lines."""
    return BugRecord(number=2, title="B", cause_lines=[], fix_lines=["f3"])


@pytest.fixture
def two_records(record_a, record_b):
    return [record_a, record_b]


@pytest.fixture
def ordered_record():
    """Multi-step narrative where line order matters."""
    return BugRecord(
        number=7,
        title="Ordering",
        cause_lines=["step 3", "step 1", "", "step 2", "    indented code"],
        fix_lines=["z", "a", "m"],
    )
