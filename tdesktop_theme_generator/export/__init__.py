from .json_export import export_json
from .report import generate_readability_report, print_palette

__all__ = ["export_json", "generate_readability_report", "print_palette"]
