from contextlib import chdir
from pathlib import Path

import pytest

from fatum.config import Config, load_config, split_section
from fatum.errors import HelpfulUserError, InputError


def test_split_section():
    assert split_section("settings.toml") == (Path("settings.toml"), None)
    assert split_section("pyproject.toml[tool.fatum]") == (Path("pyproject.toml"), "tool.fatum")


def test_defaults(tmp_path):
    with chdir(tmp_path):
        assert load_config() == Config()


def test_fatum_toml(tmp_path):
    with chdir(tmp_path):
        Path("fatum.toml").write_text('locale = "sv_SE"\nlow_data_mode = true\n')
        cfg = load_config()
    assert cfg.locale == "sv_SE"
    assert cfg.low_data_mode
    assert cfg.date == Config().date


def test_pyproject_section(tmp_path):
    with chdir(tmp_path):
        Path("pyproject.toml").write_text('[project]\nname = "x"\n')
        assert load_config() == Config()

        Path("pyproject.toml").write_text('[tool.fatum]\ndate = "2019-07-15"\n')
        assert load_config().date == "2019-07-15"


def test_explicit_file(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text('{"app": {"exchange_rates_url": "http://localhost:8000"}}')
    cfg = load_config(f"{path}[app]")
    assert cfg.exchange_rates_url == "http://localhost:8000"

    with pytest.raises(HelpfulUserError):
        load_config(str(tmp_path / "missing.toml"))

    path.write_text('{"low_data_mode": "yes"}')
    with pytest.raises(InputError):
        load_config(str(path))
