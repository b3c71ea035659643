"""HTTP layer: FastAPI routers around the resource handlers."""
