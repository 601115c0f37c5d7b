import argparse
import logging
import os
import sys

from .config import THEME_MODES, GeneratorOptions
from .errors import ThemeGeneratorError, format_error_for_user
from .export import export_json, generate_readability_report, print_palette
from .imaging import load_image
from .palette import load_palette_from_json
from .pipeline import ThemeGenerator


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate desktop chat themes from images or palette JSON files"
    )
    parser.add_argument(
        "image_path",
        nargs="?",
        default=None,
        help="Path to the source image",
    )
    parser.add_argument(
        "--output", "-o",
        metavar="DIR",
        default=None,
        help="Output directory (default: same as input file)",
    )
    parser.add_argument(
        "--from-palette",
        metavar="JSON",
        help="Load semantic colors from an existing palette JSON file instead of an image",
    )
    parser.add_argument(
        "--name",
        help="Theme name (required with --from-palette, otherwise derived from filename)",
    )
    parser.add_argument(
        "--mode",
        choices=THEME_MODES + ("both",),
        default="both",
        help="Theme variant(s) to generate (default: both)",
    )
    parser.add_argument("--colors", type=int, default=8, help="Number of colors to extract")
    parser.add_argument("--quality", type=int, default=10, help="Sample every Nth pixel")
    parser.add_argument(
        "--max-size",
        type=int,
        default=400,
        help="Downscale the image to this size on its long edge before extracting",
    )
    parser.add_argument(
        "--aaa",
        action="store_true",
        help="Repair text contrast to WCAG AAA (7:1) instead of AA (4.5:1)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log pipeline details")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Validate arguments
    if args.from_palette:
        if args.image_path:
            parser.error("Cannot use both image_path and --from-palette")
        if not args.name:
            parser.error("--name is required when using --from-palette")
        run = _run_from_palette
    elif args.image_path:
        run = _run_from_image
    else:
        parser.error("Either image_path or --from-palette is required")

    for flag in ("colors", "quality", "max_size"):
        if getattr(args, flag) < 1:
            parser.error(f"--{flag.replace('_', '-')} must be at least 1")

    try:
        run(args)
    except ThemeGeneratorError as exc:
        print(f"Error: {format_error_for_user(exc)}", file=sys.stderr)
        return 1
    return 0


def _options(args, mode, theme_name):
    return GeneratorOptions(
        color_count=args.colors,
        quality=args.quality,
        max_size=args.max_size,
        mode=mode,
        theme_name=theme_name,
        level="AAA" if args.aaa else "AA",
    )


def _modes(mode):
    return THEME_MODES if mode == "both" else (mode,)


def _run_from_palette(args):
    """Generate a theme from an existing palette JSON file."""
    palette_path = args.from_palette
    output_dir = args.output or os.path.dirname(palette_path) or "."
    theme_name = args.name

    os.makedirs(output_dir, exist_ok=True)

    print(f"Loading palette: {palette_path}")

    roles, palette_mode = load_palette_from_json(palette_path)
    # The palette's structural colors belong to the mode it was exported for
    mode = palette_mode or ("light" if args.mode == "both" else args.mode)

    print(f"Theme type: {mode}")

    generator = ThemeGenerator(_options(args, mode, theme_name))
    theme = generator.build_from_roles(roles)
    written = _write_outputs(
        theme,
        roles,
        output_dir,
        source_file=os.path.basename(palette_path),
    )
    _print_summary(written)


def _run_from_image(args):
    """Generate one theme per requested mode from an image file."""
    image_path = args.image_path
    output_dir = args.output or os.path.dirname(image_path) or "."
    theme_name = args.name or os.path.splitext(os.path.basename(image_path))[0]

    os.makedirs(output_dir, exist_ok=True)

    print(f"Analyzing: {image_path}")
    image = load_image(image_path)

    modes = _modes(args.mode)
    written = []
    for mode in modes:
        # Both variants share a file name stem, so suffix them with the mode
        name = f"{theme_name} {mode.title()}" if len(modes) > 1 else theme_name
        result = ThemeGenerator(_options(args, mode, name)).run(image)
        written.extend(
            _write_outputs(
                result.theme,
                result.roles,
                output_dir,
                extracted_colors=result.colors,
                source_file=os.path.basename(image_path),
            )
        )
    _print_summary(written)


def _write_outputs(theme, roles, output_dir, extracted_colors=None, source_file=None):
    mode = theme.mode

    print_palette(roles, mode)
    report, issues = generate_readability_report(theme)
    print("\n" + report)

    theme_path = os.path.join(output_dir, theme.filename)
    palette_json_path = os.path.join(output_dir, f"palette-{mode}.json")
    report_path = os.path.join(output_dir, f"readability_report-{mode}.txt")

    with open(theme_path, "w", encoding="utf-8") as f:
        f.write(theme.content)

    export_json(
        roles,
        palette_json_path,
        extracted_colors=extracted_colors,
        source_file=source_file,
        theme_name=theme.name,
        mode=mode,
    )

    with open(report_path, "w", encoding="utf-8") as f:
        f.write(report)

    for problem in theme.warnings():
        print(f"Warning: {format_error_for_user(problem)}")

    return [theme_path, palette_json_path, report_path]


def _print_summary(written):
    print("\n" + "=" * 60)
    print("Exported:")
    for path in written:
        print(f"  - {path}")
    print("=" * 60)


if __name__ == "__main__":
    sys.exit(main())
