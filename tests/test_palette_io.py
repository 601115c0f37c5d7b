"""Tests for palette JSON export and loading."""

import json

import pytest

from tdesktop_theme_generator.errors import ErrorCode, PaletteLoadError
from tdesktop_theme_generator.export import export_json
from tdesktop_theme_generator.extraction import ExtractedColor
from tdesktop_theme_generator.palette import load_palette_from_json, map_colors


@pytest.fixture
def extracted():
    return [ExtractedColor.from_rgb((200, 40, 40)), ExtractedColor.from_rgb((40, 120, 200))]


class TestExportJson:
    def test_writes_roles_and_metadata(self, tmp_path, extracted):
        roles = map_colors(extracted, "dark")
        path = tmp_path / "palette-dark.json"
        export_json(roles, path, extracted_colors=extracted, source_file="pic.png",
                    theme_name="Pic", mode="dark")

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["primary"] == f"#{roles.primary}"
        assert data["_mode"] == "dark"
        assert data["_source"] == "pic.png"
        assert data["_theme_name"] == "Pic"
        assert [c["hex"] for c in data["_extracted"]] == ["#c82828", "#2878c8"]

    def test_round_trip(self, tmp_path, extracted):
        roles = map_colors(extracted, "light")
        path = tmp_path / "palette.json"
        export_json(roles, path, mode="light")
        loaded, mode = load_palette_from_json(path)
        assert loaded == roles
        assert mode == "light"


class TestLoadPalette:
    def write(self, tmp_path, data):
        path = tmp_path / "palette.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    def test_mode_is_optional(self, tmp_path):
        roles = map_colors([], "light")
        _, mode = load_palette_from_json(self.write(tmp_path, roles.to_dict()))
        assert mode is None

    def test_missing_role(self, tmp_path):
        data = map_colors([], "light").to_dict()
        del data["accent"]
        with pytest.raises(PaletteLoadError) as excinfo:
            load_palette_from_json(self.write(tmp_path, data))
        assert excinfo.value.code is ErrorCode.PALETTE_INVALID
        assert excinfo.value.details["missing"] == "accent"

    def test_bad_color(self, tmp_path):
        data = map_colors([], "light").to_dict()
        data["primary"] = "#nothex"
        with pytest.raises(PaletteLoadError):
            load_palette_from_json(self.write(tmp_path, data))

    def test_bad_mode(self, tmp_path):
        data = {**map_colors([], "light").to_dict(), "_mode": "sepia"}
        with pytest.raises(PaletteLoadError):
            load_palette_from_json(self.write(tmp_path, data))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(PaletteLoadError):
            load_palette_from_json(path)

    def test_not_an_object(self, tmp_path):
        with pytest.raises(PaletteLoadError):
            load_palette_from_json(self.write(tmp_path, ["primary"]))

    def test_missing_file(self, tmp_path):
        with pytest.raises(PaletteLoadError):
            load_palette_from_json(tmp_path / "nope.json")
