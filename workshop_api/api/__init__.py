"""FastAPI application, routers, schemas, and services."""
