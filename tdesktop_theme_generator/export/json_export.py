import json


def export_json(
    roles,
    filepath,
    extracted_colors=None,
    source_file=None,
    theme_name=None,
    mode="light",
):
    """Export semantic roles as JSON, with extraction results as metadata.

    Args:
        roles: SemanticThemeColors to export
        filepath: Output file path
        extracted_colors: Optional ExtractedColor list the roles came from
        source_file: Source image/palette filename for metadata
        theme_name: Theme name the palette was generated for
        mode: "light" or "dark"
    """
    data = {name: f"#{value}" for name, value in roles.to_dict().items()}

    data["_mode"] = mode

    if extracted_colors:
        data["_extracted"] = [
            {
                "hex": f"#{color.hex}",
                "vibrancy": round(color.vibrancy, 3),
                "brightness": round(color.brightness, 1),
            }
            for color in extracted_colors
        ]

    data["_note"] = (
        "Semantic roles: primary/accent come from the image, "
        "backgrounds and text tiers are fixed per mode"
    )

    if source_file:
        data["_source"] = source_file

    if theme_name:
        data["_theme_name"] = theme_name

    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
