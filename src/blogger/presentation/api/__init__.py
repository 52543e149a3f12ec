"""FastAPI HTTP surface for the blogger auth core."""
