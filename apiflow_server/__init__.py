"""Design server - FastAPI service persisting named API flow designs."""
