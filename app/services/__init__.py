#!/usr/bin/env python3
"""
Package app.services
"""

from .report_service import ReportService

__all__ = ["ReportService"]
