import json
import logging

from ..config import validate_mode
from ..errors import PaletteLoadError
from .mapper import ROLE_NAMES, SemanticThemeColors

logger = logging.getLogger(__name__)


def load_palette_from_json(json_path):
    """Load semantic theme colors from a palette JSON file.

    Args:
        json_path: Path to a palette JSON file written by ``export_json``

    Returns:
        tuple: (SemanticThemeColors, mode string or None when not recorded)
    """
    try:
        with open(json_path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise PaletteLoadError(details={"path": str(json_path), "original": str(exc)}) from exc

    if not isinstance(data, dict):
        raise PaletteLoadError(details={"path": str(json_path), "reason": "not an object"})

    roles = {}
    mode = None

    for key, value in data.items():
        # Skip metadata keys
        if key.startswith("_"):
            if key == "_mode":
                mode = value
            continue

        if key in ROLE_NAMES and isinstance(value, str):
            roles[key] = value

    missing = [name for name in ROLE_NAMES if name not in roles]
    if missing:
        raise PaletteLoadError(details={"path": str(json_path), "missing": ", ".join(missing)})

    try:
        colors = SemanticThemeColors.from_dict(roles)
        if mode is not None:
            validate_mode(mode)
    except ValueError as exc:
        raise PaletteLoadError(details={"path": str(json_path), "original": str(exc)}) from exc

    logger.debug("Loaded palette from %s (mode=%s)", json_path, mode)
    return colors, mode
