"""Command-line interface for icontree."""
