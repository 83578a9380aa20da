# ==============================================
# EXPORT (Text documents)
# ==============================================
#
# Modules:
# --------
# - formatter.py  → Export document + statistics report rendering
#
# ==============================================

from .formatter import render_export, render_statistics, parse_total_records

__all__ = ["render_export", "render_statistics", "parse_total_records"]
