"""memberaccess - explicit visibility checks for TypeScript class members."""
from __future__ import annotations

from memberaccess.constants import __version__
from memberaccess.diagnostics import Diagnostic, Replacement
from memberaccess.options import WarningReporter
from memberaccess.runner import analyze

__all__ = ["Diagnostic", "Replacement", "WarningReporter", "__version__", "analyze"]
