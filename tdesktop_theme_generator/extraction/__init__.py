from .extractor import ColorExtractor, ExtractedColor

__all__ = ["ColorExtractor", "ExtractedColor"]
