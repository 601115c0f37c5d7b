"""Tests for the command line interface."""

import json

import pytest
from PIL import Image

from tdesktop_theme_generator.cli import main

from .conftest import banded_array


@pytest.fixture
def image_path(tmp_path):
    path = tmp_path / "sunset.png"
    Image.fromarray(banded_array([(230, 90, 30), (40, 60, 160)])).save(path)
    return path


class TestImageMode:
    def test_single_mode(self, image_path, tmp_path, capsys):
        out = tmp_path / "out"
        assert main([str(image_path), "-o", str(out), "--mode", "light"]) == 0

        assert (out / "sunset.tdesktop-theme").read_text(encoding="utf-8").startswith("// sunset\n")
        assert (out / "palette-light.json").exists()
        assert (out / "readability_report-light.txt").exists()
        assert "Exported:" in capsys.readouterr().out

    def test_both_modes(self, image_path, tmp_path):
        out = tmp_path / "both"
        assert main([str(image_path), "-o", str(out), "--name", "Dusk"]) == 0
        assert (out / "dusk-light.tdesktop-theme").exists()
        assert (out / "dusk-dark.tdesktop-theme").exists()
        data = json.loads((out / "palette-dark.json").read_text(encoding="utf-8"))
        assert data["_mode"] == "dark"
        assert data["_source"] == "sunset.png"

    def test_defaults_to_image_directory(self, image_path):
        assert main([str(image_path), "--mode", "dark", "--colors", "2"]) == 0
        assert (image_path.parent / "sunset.tdesktop-theme").exists()

    def test_unreadable_image(self, tmp_path, capsys):
        bad = tmp_path / "bad.png"
        bad.write_bytes(b"nope")
        assert main([str(bad), "-o", str(tmp_path)]) == 1
        assert "Error:" in capsys.readouterr().err


class TestPaletteMode:
    def test_from_palette(self, image_path, tmp_path):
        first = tmp_path / "first"
        main([str(image_path), "-o", str(first), "--mode", "dark"])

        second = tmp_path / "second"
        palette = first / "palette-dark.json"
        assert main(["--from-palette", str(palette), "--name", "Again", "-o", str(second)]) == 0
        content = (second / "again.tdesktop-theme").read_text(encoding="utf-8")
        assert "// Mode: dark" in content

    def test_broken_palette(self, tmp_path, capsys):
        palette = tmp_path / "p.json"
        palette.write_text("[]", encoding="utf-8")
        assert main(["--from-palette", str(palette), "--name", "X"]) == 1
        assert "Error:" in capsys.readouterr().err


class TestArguments:
    @pytest.mark.parametrize(
        "argv",
        [
            [],
            ["--from-palette", "p.json"],
            ["img.png", "--from-palette", "p.json", "--name", "x"],
            ["img.png", "--colors", "0"],
            ["img.png", "--mode", "sepia"],
        ],
    )
    def test_usage_errors(self, argv):
        with pytest.raises(SystemExit) as excinfo:
            main(argv)
        assert excinfo.value.code == 2
