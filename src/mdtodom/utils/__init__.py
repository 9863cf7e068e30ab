#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtodom/utils/__init__.py
"""Utility modules for mdtodom."""
