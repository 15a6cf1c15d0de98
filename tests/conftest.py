"""Shared pytest fixtures for docdiff tests."""

import pytest

# Env vars read by docdiff.config.load_config() and the config loader
_DOCDIFF_ENV_VARS = (
    "DOCDIFF_HEAD_LABEL",
    "DOCDIFF_BASE_LABEL",
    "DOCDIFF_MAX_LINES",
    "DOCDIFF_MAX_PARALLEL",
    "DOCDIFF_RENDER_MARKDOWN",
    "DOCDIFF_DEBUG",
    "DOCDIFF_CONFIG",
    "LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Remove docdiff env vars and run from an empty directory.

    Keeps a developer's own shell settings, .env file or .docdiff/ config
    from leaking into config resolution.
    """
    for key in _DOCDIFF_ENV_VARS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    return tmp_path


@pytest.fixture
def write_doc(tmp_path):
    """Factory fixture writing a document under tmp_path and returning its path."""

    def _write(name: str, content: str, encoding: str = "utf-8"):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode(encoding))
        return path

    return _write
