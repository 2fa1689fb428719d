"""Unit tests for CLI functionality."""

import numpy as np
import pytest
from click.testing import CliRunner
from PIL import Image


def _write_image(path, width=40, height=20, mode="RGBA"):
    rng = np.random.default_rng(0)
    channels = {"RGBA": 4, "RGB": 3}[mode]
    data = rng.integers(0, 256, size=(height, width, channels), dtype=np.uint8)
    Image.fromarray(data).save(path)
    return path


class TestCLIResizeCommands:
    """Test CLI resize, fit and thumbnail commands."""

    @pytest.fixture
    def runner(self):
        """Provide Click test runner."""
        return CliRunner()

    @pytest.mark.unit
    def test_help(self, runner):
        """Ensure resize CLI commands show help text."""
        from pyfastresample.cli.resize_commands import fit_image, resize_image, thumbnail_image

        res = runner.invoke(resize_image, ["--help"])
        assert res.exit_code == 0
        assert "Resize INPUT_IMAGE" in res.output
        assert "lanczos" in res.output

        res = runner.invoke(fit_image, ["--help"])
        assert res.exit_code == 0
        assert "Shrink INPUT_IMAGE" in res.output

        res = runner.invoke(thumbnail_image, ["--help"])
        assert res.exit_code == 0
        assert "Scale and crop INPUT_IMAGE" in res.output

    @pytest.mark.unit
    def test_resize_requires_args(self, runner):
        from pyfastresample.cli.resize_commands import resize_image

        result = runner.invoke(resize_image, [])
        assert result.exit_code != 0

    @pytest.mark.unit
    def test_resize_keeps_aspect(self, runner, tmp_path):
        from pyfastresample.cli.resize_commands import resize_image

        src = _write_image(tmp_path / "in.png")
        out = tmp_path / "out.png"
        result = runner.invoke(resize_image, [str(src), str(out), "--width", "10", "--filter", "catmull_rom"])
        assert result.exit_code == 0, result.output
        with Image.open(out) as img:
            assert img.size == (10, 5)
            assert img.mode == "RGBA"

    @pytest.mark.unit
    def test_resize_to_jpeg_drops_alpha(self, runner, tmp_path):
        from pyfastresample.cli.resize_commands import resize_image

        src = _write_image(tmp_path / "in.png")
        out = tmp_path / "out.jpg"
        result = runner.invoke(resize_image, [str(src), str(out), "-H", "8", "-v"])
        assert result.exit_code == 0, result.output
        assert "Wrote 16x8 image" in result.output
        with Image.open(out) as img:
            assert img.mode == "RGB"
            assert img.size == (16, 8)

    @pytest.mark.unit
    def test_resize_invalid_size_reports_error(self, runner, tmp_path):
        from pyfastresample.cli.resize_commands import resize_image

        src = _write_image(tmp_path / "in.png")
        result = runner.invoke(resize_image, [str(src), str(tmp_path / "out.png")])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert not (tmp_path / "out.png").exists()

    @pytest.mark.unit
    def test_unknown_filter_rejected(self, runner, tmp_path):
        from pyfastresample.cli.resize_commands import resize_image

        src = _write_image(tmp_path / "in.png")
        result = runner.invoke(resize_image, [str(src), str(tmp_path / "o.png"), "-W", "4", "-f", "sharpest"])
        assert result.exit_code == 2

    @pytest.mark.unit
    def test_fit_and_thumbnail(self, runner, tmp_path):
        from pyfastresample.cli.resize_commands import fit_image, thumbnail_image

        src = _write_image(tmp_path / "in.png", mode="RGB")

        fitted = tmp_path / "fit.png"
        result = runner.invoke(fit_image, [str(src), str(fitted), "10", "10", "--workers", "2"])
        assert result.exit_code == 0, result.output
        with Image.open(fitted) as img:
            assert img.size == (10, 5)

        thumb = tmp_path / "thumb.png"
        result = runner.invoke(thumbnail_image, [str(src), str(thumb), "12", "12", "--anchor", "left"])
        assert result.exit_code == 0, result.output
        with Image.open(thumb) as img:
            assert img.size == (12, 12)


class TestCLIFilterCommands:
    """Test CLI blur and sharpen commands."""

    @pytest.fixture
    def runner(self):
        return CliRunner()

    @pytest.mark.unit
    def test_help(self, runner):
        from pyfastresample.cli.filter_commands import blur_image, sharpen_image

        res_blur = runner.invoke(blur_image, ["--help"])
        assert res_blur.exit_code == 0
        assert "Blur INPUT_IMAGE" in res_blur.output

        res_sharp = runner.invoke(sharpen_image, ["--help"])
        assert res_sharp.exit_code == 0
        assert "Sharpen INPUT_IMAGE" in res_sharp.output

    @pytest.mark.unit
    @pytest.mark.parametrize("command", ["blur_image", "sharpen_image"])
    def test_preserves_size(self, runner, tmp_path, command):
        from pyfastresample.cli import filter_commands

        src = _write_image(tmp_path / "in.png", width=13, height=7)
        out = tmp_path / "out.png"
        result = runner.invoke(getattr(filter_commands, command), [str(src), str(out), "--sigma", "1.5"])
        assert result.exit_code == 0, result.output
        with Image.open(out) as img:
            assert img.size == (13, 7)

    @pytest.mark.unit
    def test_negative_sigma_reports_error(self, runner, tmp_path):
        from pyfastresample.cli.filter_commands import blur_image

        src = _write_image(tmp_path / "in.png")
        result = runner.invoke(blur_image, [str(src), str(tmp_path / "out.png"), "--sigma=-1"])
        assert result.exit_code == 1
        assert "sigma" in result.output

    @pytest.mark.unit
    def test_unreadable_input_reports_error(self, runner, tmp_path):
        from pyfastresample.cli.filter_commands import sharpen_image

        bogus = tmp_path / "not_an_image.png"
        bogus.write_text("plain text")
        result = runner.invoke(sharpen_image, [str(bogus), str(tmp_path / "out.png")])
        assert result.exit_code == 1
        assert "Error:" in result.output
