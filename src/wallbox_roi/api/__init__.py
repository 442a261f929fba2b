"""HTTP API — FastAPI server and result narratives."""
