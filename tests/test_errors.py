"""Tests for tdesktop_theme_generator.errors."""

from tdesktop_theme_generator.errors import (
    ERROR_MESSAGES,
    CanvasError,
    ErrorCode,
    ExtractionFailure,
    ImageDecodeError,
    ThemeGeneratorError,
    format_error_for_user,
)


class TestThemeGeneratorError:
    def test_defaults_from_code(self):
        err = ThemeGeneratorError(ErrorCode.IMAGE_LOAD_ERROR)
        assert err.message == ERROR_MESSAGES[ErrorCode.IMAGE_LOAD_ERROR]
        assert err.suggestion

    def test_subclass_codes(self):
        assert ImageDecodeError().code is ErrorCode.IMAGE_LOAD_ERROR
        assert CanvasError().code is ErrorCode.CANVAS_ERROR
        assert ExtractionFailure().code is ErrorCode.COLOR_EXTRACTION_FAILED
        assert isinstance(ExtractionFailure(), ThemeGeneratorError)

    def test_str_includes_details(self):
        err = CanvasError(details={"size": "0x0"})
        assert str(err).endswith("(size=0x0)")

    def test_custom_message(self):
        assert str(ThemeGeneratorError(message="custom")) == "custom"

    def test_to_dict(self):
        data = ExtractionFailure(details={"reason": "empty"}).to_dict()
        assert data["code"] == "COLOR_EXTRACTION_FAILED"
        assert data["details"] == {"reason": "empty"}
        assert set(data) == {"code", "message", "details", "suggestion"}


class TestFormatErrorForUser:
    def test_known_error(self):
        text = format_error_for_user(ImageDecodeError())
        assert ERROR_MESSAGES[ErrorCode.IMAGE_LOAD_ERROR] in text
        assert "PNG" in text

    def test_unknown_error(self):
        text = format_error_for_user(RuntimeError("boom"))
        assert text == ERROR_MESSAGES[ErrorCode.UNKNOWN_ERROR]
