import yaml
import pytest
from lasersvg.config import ConfigManager, getflag


def test_defaults_without_file(tmp_path):
    mgr = ConfigManager(tmp_path / "config.yaml")
    assert mgr.driver.bed_width == 250.0
    assert mgr.driver.svg_outdir == ""


def test_save_and_load(tmp_path):
    path = tmp_path / "sub" / "config.yaml"
    mgr = ConfigManager(path)
    mgr.driver.apply_settings({"bed_width": 400.0, "rotary_axis": True})
    mgr.save()

    data = yaml.safe_load(path.read_text())
    assert data["driver"]["bed_width"] == 400.0

    loaded = ConfigManager(path)
    assert loaded.driver.bed_width == 400.0
    assert loaded.driver.is_rotary_axis_supported()


def test_unknown_settings_are_ignored(tmp_path, caplog):
    path = tmp_path / "config.yaml"
    path.write_text(
        yaml.safe_dump({"driver": {"bed_height": 123, "laser_color": "red"}})
    )
    mgr = ConfigManager(path)
    assert mgr.driver.bed_height == 123.0
    assert "laser_color" in caplog.text


def test_empty_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert ConfigManager(path).driver.bed_height == 280.0


@pytest.mark.parametrize(
    "value, expected", [("1", True), ("true", True), ("no", False)]
)
def test_getflag(monkeypatch, value, expected):
    monkeypatch.setenv("LASERSVG_TEST_FLAG", value)
    assert getflag("LASERSVG_TEST_FLAG") is expected


def test_getflag_default(monkeypatch):
    monkeypatch.delenv("LASERSVG_TEST_FLAG", raising=False)
    assert getflag("LASERSVG_TEST_FLAG", default=True) is True
