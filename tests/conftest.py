import pytest

from lllcheck.lib.logger import reset_session


@pytest.fixture(autouse=True)
def clean_env(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("LLLCHECK_LOG_DIR", raising=False)
    monkeypatch.delenv("LLLCHECK_VERBOSE", raising=False)
    reset_session()
    yield home
    reset_session()


@pytest.fixture
def write_file(tmp_path):
    def _write(name, content, encoding="utf-8"):
        path = tmp_path / name
        with open(path, "w", encoding=encoding, newline="") as f:
            f.write(content)
        return str(path)
    return _write
