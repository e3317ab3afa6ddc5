import os
import tempfile

import pytest

# The app modules build an app at import time; keep their logs and db out of the repo.
_TMP = tempfile.mkdtemp(prefix="todolist-tests-")
os.environ.setdefault("LOG_DIR", os.path.join(_TMP, "logs"))
os.environ.setdefault("DB_PATH", os.path.join(_TMP, "import.db"))


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path, monkeypatch):
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("DB_PATH", str(tmp_path / "items.db"))
    monkeypatch.delenv("ITEMS_STORE", raising=False)
    monkeypatch.delenv("RENDER_API_URL", raising=False)
    monkeypatch.delenv("RENDER_API_KEY", raising=False)
