"""Shared constants for the Textual UI."""

from __future__ import annotations

BRAND_COLOR = "#7C5CFF"
