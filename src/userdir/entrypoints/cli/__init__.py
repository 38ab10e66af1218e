"""Click command-line interface for USERDIR."""
