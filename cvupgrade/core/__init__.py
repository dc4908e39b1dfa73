"""Core business logic."""

from .advisor import UpgradeAdvisor
from .reporter import StatusReporter, format_text_report, render_report

__all__ = ["UpgradeAdvisor", "StatusReporter", "format_text_report", "render_report"]
