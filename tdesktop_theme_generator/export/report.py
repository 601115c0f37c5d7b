from ..contrast import TEXT_PAIRS, contrast_ratio
from ..contrast.wcag import AA_NORMAL


def generate_readability_report(theme):
    """Generate a readability and validation report for a generated theme.

    Returns:
        tuple: (report text, list of (key, hex, achieved ratio, target ratio))
    """
    properties = theme.properties
    validation = theme.validation

    report = []
    report.append("=" * 70)
    report.append("READABILITY REPORT")
    report.append("=" * 70)
    report.append(f"Theme: {theme.name} ({theme.mode.upper()})")
    report.append(f"Background:       #{properties['windowBg']}")
    report.append(f"Active:           #{properties['windowBgActive']}")
    report.append("")

    issues = []

    report.append("\nTEXT CONTRAST")
    report.append("-" * 50)
    for pair in TEXT_PAIRS:
        fg = properties.get(pair.foreground)
        bg = properties.get(pair.background)
        if not fg or not bg:
            continue
        ratio = contrast_ratio(fg, bg)
        result = theme.contrast_results.get(pair.foreground)
        target = result.target_ratio if result else AA_NORMAL

        status = "✓" if ratio >= target - 0.01 else "✗ FAIL"
        if status != "✓":
            issues.append((pair.foreground, fg, ratio, target))
        adjusted = " (adjusted)" if result and result.was_adjusted else ""

        report.append(
            f"  {pair.foreground:20} #{fg[:6]} on #{bg[:6]}  {ratio:5.2f}:1  {status}{adjusted}"
        )

    summary = validation.summary
    report.append("\nVALIDATION")
    report.append("-" * 50)
    report.append(f"  Score:     {validation.score}/100 ({'valid' if validation.valid else 'INVALID'})")
    report.append(
        f"  Coverage:  {summary.present_properties}/{summary.total_properties} "
        f"({summary.coverage:.1f}%)"
    )
    report.append(
        f"  Issues:    {len(validation.errors)} errors, {len(validation.warnings)} warnings, "
        f"{len(validation.info)} info"
    )
    for issue in validation.errors:
        report.append(f"  - {issue}")

    report.append("\n" + "=" * 70)
    if issues:
        report.append(f"ISSUES FOUND: {len(issues)}")
        for key, hex_val, achieved, required in issues:
            report.append(f"  - {key}: #{hex_val} has {achieved:.1f}:1, needs {required}:1")
    else:
        report.append("ALL TEXT COLORS PASS CONTRAST REQUIREMENTS ✓")
    report.append("=" * 70)

    return "\n".join(report), issues


def print_palette(roles, mode):
    """Print semantic roles grouped by purpose"""
    print("\n" + "=" * 60)
    print(f"SEMANTIC COLORS ({mode.upper()} THEME)")
    print("=" * 60)

    categories = [
        ("BRAND", ["primary", "primary_light", "primary_dark", "accent", "accent_light"]),
        ("BACKGROUNDS", ["background", "background_secondary", "background_tertiary"]),
        ("TEXT", ["text_primary", "text_secondary", "text_muted", "text_on_primary"]),
        ("STATUS", ["online", "offline"]),
    ]

    values = roles.to_dict()
    for cat_name, keys in categories:
        print(f"\n{cat_name}:")
        for key in keys:
            print(f"  {key:22} #{values[key]}")
