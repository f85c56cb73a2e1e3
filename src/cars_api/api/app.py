from typing import Any

from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware

from cars_api.api.dependencies import HandlerDep, lifespan
from cars_api.config import get_settings
from cars_api.dto import HealthCheckResponse
from cars_api.log import log_event

API_TITLE = "Cars API"
API_VERSION = "0.1.0"
API_DESCRIPTION = "CRUD over cars with shared-secret API keys and a classic-car reclassification rule"


def create_app() -> FastAPI:
    """Build the FastAPI application with all routes registered."""
    app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=API_VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        allow_headers=["Content-Type", "x-api-key"],
    )

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception) -> Response:
        # Body-less on purpose: backend details never reach the client.
        log_event("unhandled_error", "ERROR", exception=exc, method=request.method, path=request.url.path)
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": API_TITLE,
            "version": API_VERSION,
            "description": API_DESCRIPTION,
            "endpoints": {
                "cars": "/cars",
                "validate": "/cars/validate",
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health", response_model=HealthCheckResponse)
    async def health() -> HealthCheckResponse:
        """Liveness check; does not touch the secret store or the database."""
        return HealthCheckResponse(status="healthy")

    @app.post("/cars", status_code=status.HTTP_201_CREATED)
    async def create_car(request: Request, handler: HandlerDep) -> Response:
        """Create a car; the server assigns its id."""
        return await handler.create_car(request)

    @app.get("/cars")
    async def list_cars(request: Request, handler: HandlerDep) -> Response:
        """List every car."""
        return await handler.list_cars(request)

    @app.patch("/cars/validate")
    async def validate_classics(request: Request, handler: HandlerDep) -> Response:
        """Mark cars older than the classic threshold as classic."""
        return await handler.validate_classics(request)

    @app.put("/cars/{car_id}")
    async def update_car(car_id: str, request: Request, handler: HandlerDep) -> Response:
        """Replace every mutable field of a car."""
        return await handler.update_car(request, car_id)

    @app.delete("/cars/{car_id}")
    async def delete_car(car_id: str, request: Request, handler: HandlerDep) -> Response:
        """Delete a car."""
        return await handler.delete_car(request, car_id)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "cars_api.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
