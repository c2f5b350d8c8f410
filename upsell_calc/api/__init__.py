"""FastAPI service for the upsell calculator."""
