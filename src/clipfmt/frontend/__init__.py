"""Textual frontend for clipfmt."""
