from css_audit.errors import ParseError
from css_audit.parser.builder import parse_stylesheet

__all__ = ["ParseError", "parse_stylesheet"]
