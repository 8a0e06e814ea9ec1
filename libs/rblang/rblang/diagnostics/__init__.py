"""Diagnostics for the rblang front end: locations, severities, collector."""

from rblang.diagnostics.collector import DiagnosticCollector
from rblang.diagnostics.diagnostic import Diagnostic
from rblang.diagnostics.location import SourceLocation
from rblang.diagnostics.severity import DiagnosticSeverity

__all__ = ["SourceLocation", "DiagnosticSeverity", "Diagnostic", "DiagnosticCollector"]
