"""Dominant color extraction from a decoded image surface."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from PIL import Image
from sklearn.cluster import KMeans

from ..color import color_distance, perceived_brightness, rgb_to_hex, vibrancy
from ..config import ExtractionOptions
from ..errors import CanvasError, ExtractionFailure, ImageDecodeError

logger = logging.getLogger(__name__)

# Pixels below this alpha are treated as transparent and never sampled
MIN_ALPHA = 128
# The quantizer skips pixels brighter than this on every channel
WHITE_THRESHOLD = 250
# Fallback sampler drops candidates closer than this to a kept color
DEDUP_DISTANCE = 30
SAMPLES_PER_COLOR = 100

GRAYSCALE_MAX_CHANNEL_DIFF = 20
SINGLE_COLOR_MAX_DISTANCE = 50


@dataclass(frozen=True)
class ExtractedColor:
    rgb: tuple[int, int, int]
    hex: str
    vibrancy: float
    brightness: float

    @classmethod
    def from_rgb(cls, rgb):
        rgb = tuple(int(c) for c in rgb)
        return cls(
            rgb=rgb,
            hex=rgb_to_hex(*rgb),
            vibrancy=vibrancy(rgb),
            brightness=perceived_brightness(rgb),
        )


def resized_dimensions(width, height, max_size):
    """Fit (width, height) inside max_size on the long edge, never upscaling."""
    if width <= max_size and height <= max_size:
        return width, height

    aspect_ratio = width / height
    if width > height:
        return max_size, max(1, int(round(max_size / aspect_ratio)))
    return max(1, int(round(max_size * aspect_ratio))), max_size


class ColorExtractor:
    """Extracts dominant colors from images, ranked by vibrancy.

    The image is downscaled, quantized with k-means and every resulting color is
    scored. When quantization fails or yields nothing the raw pixel buffer is
    sampled directly instead.
    """

    def __init__(self, options=None):
        self.options = options or ExtractionOptions()

    def extract(self, image, options=None):
        """Return the dominant colors of ``image`` sorted by descending vibrancy.

        Args:
            image: A PIL image or an (H, W, 3|4) uint8 numpy array
            options: Overrides the extractor's ExtractionOptions for this call

        Raises:
            ImageDecodeError: the surface cannot be read
            CanvasError: pixel access failed
            ExtractionFailure: no color could be found at all
        """
        options = options or self.options
        pixels = self._pixel_buffer(image, options.max_size)

        try:
            palette = self._quantize(pixels, options)
        except Exception as exc:
            logger.warning("Quantization failed, sampling pixels instead: %s", exc)
            palette = []

        if not palette:
            logger.debug("Quantizer returned no colors, using fallback sampler")
            palette = self._sample_pixels(pixels, options.color_count)

        if not palette:
            raise ExtractionFailure(details={"reason": "no opaque pixels"})

        colors = [ExtractedColor.from_rgb(rgb) for rgb in palette]
        return sorted(colors, key=lambda c: c.vibrancy, reverse=True)

    def average_brightness(self, image):
        """Mean perceptual brightness (0-255) of the opaque pixels."""
        pixels = self._pixel_buffer(image, self.options.max_size)
        # Every 4th pixel
        sample = pixels[::4]
        sample = sample[sample[:, 3] >= MIN_ALPHA]
        if len(sample) == 0:
            return 0.0
        rgb = sample[:, :3].astype(np.float64)
        return float((0.299 * rgb[:, 0] + 0.587 * rgb[:, 1] + 0.114 * rgb[:, 2]).mean())

    def is_grayscale(self, image):
        for color in self.extract(image):
            r, g, b = color.rgb
            if max(abs(r - g), abs(g - b), abs(r - b)) >= GRAYSCALE_MAX_CHANNEL_DIFF:
                return False
        return True

    def is_single_color(self, image):
        colors = self.extract(image)
        if len(colors) <= 1:
            return True
        first = colors[0].rgb
        return all(color_distance(first, c.rgb) < SINGLE_COLOR_MAX_DISTANCE for c in colors)

    def _pixel_buffer(self, image, max_size):
        """Decode, downscale and flatten the image into an (N, 4) RGBA array."""
        surface = self._to_image(image)

        try:
            width, height = surface.size
            target = resized_dimensions(width, height, max_size)
            if target != (width, height):
                logger.debug("Resizing %dx%d -> %dx%d", width, height, *target)
                surface = surface.resize(target, Image.Resampling.BILINEAR)
        except (OSError, ValueError) as exc:
            raise ImageDecodeError(details={"original": str(exc)}) from exc

        try:
            pixels = np.asarray(surface.convert("RGBA"), dtype=np.uint8)
        except (OSError, ValueError) as exc:
            raise CanvasError(details={"original": str(exc)}) from exc

        return pixels.reshape(-1, 4)

    def _to_image(self, image):
        if isinstance(image, np.ndarray):
            if image.ndim != 3 or image.shape[2] not in (3, 4) or image.size == 0:
                raise ImageDecodeError(details={"shape": image.shape})
            try:
                return Image.fromarray(image.astype(np.uint8))
            except (TypeError, ValueError) as exc:
                raise ImageDecodeError(details={"original": str(exc)}) from exc

        if not isinstance(image, Image.Image):
            raise ImageDecodeError(details={"type": type(image).__name__})

        try:
            image.load()
        except (OSError, ValueError) as exc:
            raise ImageDecodeError(details={"original": str(exc)}) from exc
        if image.width == 0 or image.height == 0:
            raise ImageDecodeError(details={"size": image.size})
        return image

    def _quantize(self, pixels, options):
        """Cluster sampled pixels; clusters are returned most populous first."""
        sample = pixels[:: options.quality]
        opaque = sample[:, 3] >= MIN_ALPHA
        not_white = ~np.all(sample[:, :3] > WHITE_THRESHOLD, axis=1)
        rgb = sample[opaque & not_white][:, :3]

        if len(rgb) == 0:
            return []

        n_colors = min(options.color_count, len(np.unique(rgb, axis=0)))
        kmeans = KMeans(n_clusters=n_colors, random_state=42, n_init=10)
        labels = kmeans.fit_predict(rgb.astype(np.float64))

        counts = np.bincount(labels, minlength=n_colors)
        order = np.argsort(-counts, kind="stable")

        palette = []
        for index in order:
            center = np.clip(np.rint(kmeans.cluster_centers_[index]), 0, 255)
            palette.append(tuple(int(c) for c in center))
        return palette

    def _sample_pixels(self, pixels, color_count):
        """Walk the buffer at a fixed stride, keeping distinct opaque colors.

        Best-effort only: images with patterns aligned to the stride can hide
        colors from the sampler.
        """
        data = pixels.reshape(-1)
        step = max(1, len(data) // (color_count * 4 * SAMPLES_PER_COLOR))

        colors = []
        for i in range(0, len(data), step * 4):
            if len(colors) >= color_count:
                break
            r, g, b, a = (int(v) for v in data[i : i + 4])
            if a < MIN_ALPHA:
                continue
            color = (r, g, b)
            if not any(color_distance(c, color) < DEDUP_DISTANCE for c in colors):
                colors.append(color)
        return colors
