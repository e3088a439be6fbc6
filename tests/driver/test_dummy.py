import io
import re
import pytest
from lasersvg.core.job import Job, VectorPart, RasterPart
from lasersvg.core.property import (
    PowerSpeedFocusProperty,
    PowerSpeedFocusFrequencyProperty,
)
from lasersvg.driver.driver import IllegalJobError, EstimationError
from lasersvg.driver.dummy import DummyDriver
from lasersvg.render.output import SVG_FILENAME, VIEWER_FILENAME
from lasersvg.varset import ValidationError


@pytest.fixture
def driver() -> DummyDriver:
    return DummyDriver()


@pytest.fixture
def job() -> Job:
    part = VectorPart(dpi=500)
    part.set_property(PowerSpeedFocusFrequencyProperty())
    part.move_to(0, 0)
    part.line_to(500, 0)
    part.line_to(500, 500)
    raster = RasterPart(dpi=500, settings=PowerSpeedFocusProperty())
    return Job(title="test", parts=[part, raster])


def test_default_settings(driver: DummyDriver):
    assert driver.bed_width == 250.0
    assert driver.bed_height == 280.0
    assert driver.svg_outdir == ""
    assert driver.fake_runtime == -1
    assert not driver.is_rotary_axis_supported()
    assert driver.get_resolutions() == [500.0]


def test_property_keys(driver: DummyDriver):
    assert driver.get_property_keys() == [
        "Laserbed width",
        "Laserbed height",
        "Fake estimated run-time in seconds (-1 to disable)",
        "SVG Debug output directory (set empty to disable)",
        "Rotary Axis supported",
    ]


def test_get_set_property(driver: DummyDriver):
    driver.set_property("Laserbed width", 300.0)
    driver.set_property(
        "Fake estimated run-time in seconds (-1 to disable)", "42"
    )
    driver.set_property("Rotary Axis supported", True)
    assert driver.get_property("Laserbed width") == 300.0
    assert driver.bed_width == 300.0
    assert driver.fake_runtime == 42
    assert driver.is_rotary_axis_supported()


def test_unknown_property(driver: DummyDriver):
    assert driver.get_property("Laser color") is None
    driver.set_property("Laser color", "red")
    assert "Laser color" not in driver.get_property_keys()


def test_invalid_bed_size(driver: DummyDriver):
    with pytest.raises(ValidationError):
        driver.bed_width = 0


def test_save_job(driver: DummyDriver, job: Job):
    stream = io.BytesIO()
    driver.save_job(stream, job)
    svg = stream.getvalue().decode("utf-8")
    assert svg.startswith("<?xml")
    assert 'width="250.0mm"' in svg
    assert "M 0.0,0.0 25.4,0.0 25.4,25.4 " in svg
    assert 'id="lasersvg-part2-RasterPart"' in svg


def test_save_job_rejects_illegal_job(driver: DummyDriver):
    part = VectorPart(dpi=500)
    part.set_property(PowerSpeedFocusProperty())
    stream = io.BytesIO()
    with pytest.raises(IllegalJobError):
        driver.save_job(stream, Job(parts=[part]))
    assert stream.getvalue() == b""


def test_send_job_writes_debug_output(driver, job, tmp_path):
    driver.apply_settings({"svg_outdir": str(tmp_path)})
    progress_log, tasks, messages = [], [], []
    driver.progress_changed.connect(
        lambda sender, progress: progress_log.append(progress), weak=False
    )
    driver.task_changed.connect(
        lambda sender, task: tasks.append(task), weak=False
    )
    driver.log_received.connect(
        lambda sender, message: messages.append(message), weak=False
    )

    driver.send_job(job)

    assert progress_log == [0, 100]
    assert tasks == ["checking job", "sending", "sent."]
    assert "end of job." in messages
    assert any(m.startswith("Rotary engrave enabled: False") for m in messages)
    assert "LINETO \t500.0, \t500.0" in messages
    assert (tmp_path / SVG_FILENAME).exists()
    assert (tmp_path / VIEWER_FILENAME).exists()


def test_send_job_without_outdir(driver, job, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    driver.send_job(job)
    assert list(tmp_path.iterdir()) == []


def test_send_job_survives_write_errors(driver, job, tmp_path):
    driver.apply_settings({"svg_outdir": str(tmp_path / "missing")})
    progress_log = []
    driver.progress_changed.connect(
        lambda sender, progress: progress_log.append(progress), weak=False
    )
    driver.send_job(job)
    assert progress_log == [0, 100]
    assert not (tmp_path / "missing").exists()


def test_send_job_applies_start_point(driver, job, tmp_path):
    driver.apply_settings({"svg_outdir": str(tmp_path)})
    job.start_point = (25.4, 0.0)
    driver.send_job(job)
    assert job.start_point == (0.0, 0.0)
    svg = (tmp_path / SVG_FILENAME).read_text()
    match = re.search(r'd="M ([^"]*)"', svg)
    vertices = [float(v) for v in re.split(r"[ ,]", match.group(1).strip())]
    assert vertices == pytest.approx([-25.4, 0, 0, 0, 0, 25.4])


def test_check_job_resolution(driver: DummyDriver):
    with pytest.raises(IllegalJobError, match="Resolution"):
        driver.send_job(Job(parts=[VectorPart(dpi=300)]))


def test_check_job_rotary(driver: DummyDriver, job: Job):
    job.rotary_axis_enabled = True
    with pytest.raises(IllegalJobError, match="rotary"):
        driver.check_job(job)
    driver.apply_settings({"rotary_axis": True})
    driver.check_job(job)


def test_estimate_job_duration(driver: DummyDriver, job: Job):
    assert not driver.can_estimate_job_duration()
    with pytest.raises(EstimationError):
        driver.estimate_job_duration(job)
    driver.apply_settings({"fake_runtime": 120})
    assert driver.can_estimate_job_duration()
    assert driver.estimate_job_duration(job) == 120


def test_clone(driver: DummyDriver):
    driver.apply_settings({
        "bed_width": 100.0,
        "bed_height": 200.0,
        "fake_runtime": 5,
        "svg_outdir": "/tmp/out",
        "rotary_axis": True,
    })
    clone = driver.clone()
    assert clone is not driver
    assert clone.get_settings() == driver.get_settings()
    clone.bed_width = 50.0
    assert driver.bed_width == 100.0


def test_job_to_svg_uses_fresh_encoder(driver: DummyDriver, job: Job):
    first = driver.job_to_svg(job)
    second = driver.job_to_svg(job)
    assert first is not second
    assert second.part_count == 2
