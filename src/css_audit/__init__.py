"""css-audit: report which selectors use each CSS custom property."""

__version__ = "0.3.0"

from css_audit.audit import audit_paths, audit_sources, load_stylesheet  # noqa: E402
from css_audit.config import AuditConfig  # noqa: E402
from css_audit.model.usage import PropertyUsage, UsageIndex  # noqa: E402

__all__ = [
    "__version__",
    "AuditConfig",
    "PropertyUsage",
    "UsageIndex",
    "audit_paths",
    "audit_sources",
    "load_stylesheet",
]
