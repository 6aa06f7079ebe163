import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from gedcom_tree.utils import mock_file_path  # noqa: E402


@pytest.fixture
def family_path() -> Path:
    return mock_file_path("family.ged")


@pytest.fixture
def family_text(family_path: Path) -> str:
    return family_path.read_text(encoding="utf-8")
