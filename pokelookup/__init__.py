"""Pokemon lookup widget served with FastAPI."""
