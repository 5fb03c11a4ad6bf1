"""Home page carousel."""
