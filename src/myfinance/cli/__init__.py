"""Command-line interface for myfinance."""
