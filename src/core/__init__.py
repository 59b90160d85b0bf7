"""Converter core: domain types, session service and configuration.

Nothing here prints; the CLI owns the console.
"""
