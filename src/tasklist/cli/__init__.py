"""Command-line layer: entrypoint, bootstrap, commands and output formatting."""
