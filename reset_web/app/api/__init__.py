"""HTTP routes of the web front."""
