"""Command-line interface for ledgepro."""
