"""Per-resource state containers backed by the gateway client."""
