"""Summary exporters."""
