"""Domain types of the converter.

What lives here:
- The `Base` numeral codec, the error hierarchy and the pydantic models.
- Nothing in this package knows about the console, the CLI or settings.
"""
