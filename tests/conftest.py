import pytest


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    # keep a real ~/.gotpasswd/config.json out of the tests
    monkeypatch.setenv("GOTPASSWD_CONFIG", str(tmp_path / "missing-config.json"))
