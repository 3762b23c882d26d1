import pytest
from typer.testing import CliRunner

from voyager_overlay.cli import app, conflicting_options
from voyager_overlay.utils.errors import ConflictingOptionsError


def test_help_lists_options():
    result = CliRunner().invoke(app, ["--help"])
    assert result.exit_code == 0
    for option in ("--cut", "--print", "--all", "--hp", "--sm", "--output"):
        assert option in result.output


def test_writes_requested_output(tmp_path):
    out_path = tmp_path / "cut.pdf"
    result = CliRunner().invoke(app, ["--cut", "--hp", "-o", str(out_path)])
    assert result.exit_code == 0, result.output
    assert out_path.read_bytes().startswith(b"%PDF")


def test_default_name_from_device_and_mode(tmp_path, monkeypatch):
    monkeypatch.setenv("VOYAGER_OVERLAY_OUTPUT_DIR", str(tmp_path))
    result = CliRunner().invoke(app, ["--print", "--sm"])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "dm1xl-overlay-print.pdf").exists()


def test_default_device_is_hp(tmp_path, monkeypatch):
    monkeypatch.setenv("VOYAGER_OVERLAY_OUTPUT_DIR", str(tmp_path))
    result = CliRunner().invoke(app, ["-a"])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "voyager-overlay-all.pdf").exists()


def test_conflicting_modes_exit_without_output(tmp_path, monkeypatch):
    monkeypatch.setenv("VOYAGER_OVERLAY_OUTPUT_DIR", str(tmp_path))
    result = CliRunner().invoke(app, ["--cut", "--print"])
    assert result.exit_code == 1
    assert "Conflicting options" in result.output
    assert list(tmp_path.iterdir()) == []


def test_conflicting_devices(tmp_path, monkeypatch):
    monkeypatch.setenv("VOYAGER_OVERLAY_OUTPUT_DIR", str(tmp_path))
    result = CliRunner().invoke(app, ["--all", "--hp", "--sm"])
    assert result.exit_code == 1
    assert list(tmp_path.iterdir()) == []


def test_mode_is_required():
    result = CliRunner().invoke(app, ["--hp"])
    assert result.exit_code == 1
    assert "No option in group set" in result.output


def test_conflicting_options_helper():
    assert conflicting_options({"hp": False, "sm": True}, ["hp", "sm"]) == "sm"
    assert conflicting_options({}, ["hp", "sm"]) is None
    with pytest.raises(ConflictingOptionsError):
        conflicting_options({"hp": True, "sm": True}, ["hp", "sm"])
    with pytest.raises(ConflictingOptionsError):
        conflicting_options({}, ["cut", "print", "all"], required=True)
