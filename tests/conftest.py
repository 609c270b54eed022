# tests/conftest.py
import json
import shutil
from pathlib import Path

import pytest
import yaml


def _write_config(path: Path, data) -> Path:
    """Write *data* to *path*: YAML or JSON by suffix, raw text for strings."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(data, str):
        path.write_text(data, encoding="utf-8")
    elif path.suffix == ".json":
        path.write_text(json.dumps(data), encoding="utf-8")
    else:
        with path.open("w", encoding="utf-8") as fh:
            yaml.safe_dump(data, fh)
    return path


@pytest.fixture(autouse=True)
def isolate_fs(tmp_path: Path, monkeypatch):
    """Prevent tests from reading the real ~/.config or touching project files."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    yield
    # cleanup
    shutil.rmtree(tmp_path, ignore_errors=True)


@pytest.fixture
def base_dir(tmp_path: Path) -> Path:
    """
    A base directory with a ``data`` scope holding:

    * ``config.json``      -> {"test": "Hello World!"}
    * ``unsupported.cfg``  -> YAML text behind an unknown extension
    * ``conf.d/{a,b,c}.yml`` each defining one key
    """
    base = tmp_path / "site"
    scope = base / "data"
    _write_config(scope / "config.json", {"test": "Hello World!"})
    _write_config(scope / "unsupported.cfg", "with_default_parser: it works\n")
    # written out of order so the loader has to sort them
    for name in ("c", "a", "b"):
        _write_config(scope / "conf.d" / f"{name}.yml", {name: name})
    return base


@pytest.fixture
def defaults() -> dict:
    return {
        "default_a": "This is default a",
        "test": "This should not be returned",
    }


@pytest.fixture
def write_config():
    return _write_config
