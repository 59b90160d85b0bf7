"""Command-line layer: Typer commands and Rich rendering."""
