import pytest

import quadroots


@pytest.fixture()
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture()
def record():
    yield quadroots.data.build_record(2, -7, "2", "5")
