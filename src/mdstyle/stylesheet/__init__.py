from mdstyle.stylesheet.parser import find_block_end, parse_declarations, parse_stylesheet
from mdstyle.stylesheet.model import Declaration, StyleRule, StyleSheet

__all__ = [
    "parse_stylesheet",
    "parse_declarations",
    "find_block_end",
    "StyleSheet",
    "StyleRule",
    "Declaration",
]
