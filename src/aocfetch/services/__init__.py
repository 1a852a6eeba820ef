"""Date and argument services."""
