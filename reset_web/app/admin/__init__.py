"""Admin console: list screens, forms, slide ordering and the auth gate."""
