"""Domain layer for salonledger application."""
