"""
Tests for the Alembic revision files that carry data.
"""
import importlib.util
from pathlib import Path

from app.db import seed

VERSIONS = Path(__file__).resolve().parent.parent / "migrations" / "versions"


def _load(filename):
    spec = importlib.util.spec_from_file_location(filename[:-3], VERSIONS / filename)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestSeedRevision:
    def test_revision_chain(self):
        rev = _load("0002_seed_reference_data.py")
        assert rev.revision == "0002"
        assert rev.down_revision == "0001"

    def test_revision_does_not_import_app_code(self):
        source = (VERSIONS / "0002_seed_reference_data.py").read_text()
        assert "from app" not in source
        assert "import app" not in source

    def test_frozen_rows_match_seed_module(self):
        rev = _load("0002_seed_reference_data.py")
        assert rev.USER_ROWS == seed.user_rows()
        assert rev.MOVEMENT_ROWS == seed.movement_rows()
        assert rev.PERSONAL_RECORD_ROWS == seed.personal_record_rows()
