"""Core domain package for clipfmt.

Core contains the rewrite rules, the size guard, and the paste controller
without any Textual or clipboard-specific code, keeping the business logic
portable across hosts.
"""
