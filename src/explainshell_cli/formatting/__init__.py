from .formatter import HelpGroup, build_help_groups, format_explanation

__all__ = [
    "HelpGroup",
    "build_help_groups",
    "format_explanation",
]
