"""FastAPI web front, state containers and admin screens."""
