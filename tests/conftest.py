import os

import pytest

from exprcalc._version import version
from exprcalc.utils import conf


def pytest_report_header(config):
    return f"exprcalc {version}"


@pytest.fixture
def fresh_conf(monkeypatch, tmp_path):
    """conf reloaded without the user's config files; restored afterwards"""
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("EXPRCALC_"):
            monkeypatch.delenv(key)

    def reload(*config_files):
        conf.reload([str(path) for path in config_files])
        return conf

    reload()
    yield reload
    conf.reload()
