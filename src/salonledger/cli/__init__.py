"""Command-line interface for salonledger."""
