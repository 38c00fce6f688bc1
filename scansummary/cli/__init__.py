"""Command implementations for the scansummary CLI."""
