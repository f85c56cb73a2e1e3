"""FastAPI application for the Cars API."""
