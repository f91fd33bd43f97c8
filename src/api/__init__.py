"""HTTP API layer (FastAPI app, dependencies, routes, schemas)."""
