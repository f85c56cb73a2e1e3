"""HTTP handlers for Car operations.

Handlers convert between DTOs (API contracts) and service/repository calls.
They handle HTTP concerns like status codes, validation, and error handling.
"""

from collections.abc import Callable
from datetime import datetime
from uuid import UUID

from fastapi import Request, Response, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from cars_api.dto import (
    CarPayload,
    CarResponse,
    ClassicValidationResponse,
    DeleteResponse,
    ErrorResponse,
    parse_car_payload,
)
from cars_api.entities import CarEntity
from cars_api.exceptions import MalformedInput, PersistenceError
from cars_api.log import log_event
from cars_api.protocols import CarStore
from cars_api.services import Authorizer, classic_threshold_year, utc_now, validate


class CarHandler:
    """HTTP handlers for the five Car operations.

    Every operation follows the same pipeline:
    1. Authorize (401 with an empty body on failure, nothing else runs)
    2. Deserialize and validate the body where there is one (400)
    3. Run the repository call in the threadpool (500 with an empty body on failure)
    4. Map the result to a response (404 when an id-targeted mutation matched nothing)

    Example:
        ```python
        handler = CarHandler(authorizer=authorizer, repository=repository)

        @app.post("/cars")
        async def create_car(request: Request) -> Response:
            return await handler.create_car(request)
        ```
    """

    def __init__(
        self,
        authorizer: Authorizer,
        repository: CarStore,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize the car handler.

        Args:
            authorizer: API key check run before every operation (required).
            repository: Car persistence backend (required).
            clock: Source of the current UTC time, for the classic rule.
        """
        self._authorizer = authorizer
        self._repository = repository
        self._clock = clock

    async def create_car(self, request: Request) -> Response:
        """Handle POST /cars requests."""
        operation = "create_car"
        log_event("create_car_triggered", operation=operation)

        if not await self._authorize(request, operation):
            return _unauthorized()

        payload, rejection = await self._read_payload(request, operation)
        if rejection is not None:
            return rejection

        # isClassic is never taken from the body on create.
        car = payload.to_entity(keep_classic=False)
        try:
            created, rows = await run_in_threadpool(self._repository.insert, car)
        except PersistenceError as e:
            log_event("database_error", "ERROR", exception=e, operation=operation)
            return _server_error()

        log_event("create_car_completed", operation=operation, car_id=str(created.id), rows=rows)
        return JSONResponse(
            status_code=status.HTTP_201_CREATED,
            content=_car_json(created),
            headers={"Location": f"/cars/{created.id}"},
        )

    async def list_cars(self, request: Request) -> Response:
        """Handle GET /cars requests."""
        operation = "list_cars"
        log_event("list_cars_triggered", operation=operation)

        if not await self._authorize(request, operation):
            return _unauthorized()

        try:
            found = await run_in_threadpool(self._repository.list_all)
        except PersistenceError as e:
            log_event("database_error", "ERROR", exception=e, operation=operation)
            return _server_error()

        log_event("list_cars_completed", operation=operation, count=len(found))
        return JSONResponse(content=[_car_json(car) for car in found])

    async def update_car(self, request: Request, raw_id: str) -> Response:
        """Handle PUT /cars/{id} requests.

        The id in the path wins over any id in the body.
        """
        operation = "update_car"
        log_event("update_car_triggered", operation=operation, car_id=raw_id)

        if not await self._authorize(request, operation, car_id=raw_id):
            return _unauthorized()

        car_id = _parse_id(raw_id)
        if car_id is None:
            return _not_found(operation, raw_id)

        payload, rejection = await self._read_payload(request, operation, car_id=raw_id)
        if rejection is not None:
            return rejection

        car = payload.to_entity(car_id=car_id)
        try:
            rows = await run_in_threadpool(self._repository.update_by_id, car_id, car)
        except PersistenceError as e:
            log_event("database_error", "ERROR", exception=e, operation=operation, car_id=raw_id)
            return _server_error()

        if rows == 0:
            return _not_found(operation, raw_id)

        log_event("update_car_completed", operation=operation, car_id=str(car_id), rows=rows)
        return JSONResponse(content=_car_json(car))

    async def delete_car(self, request: Request, raw_id: str) -> Response:
        """Handle DELETE /cars/{id} requests."""
        operation = "delete_car"
        log_event("delete_car_triggered", operation=operation, car_id=raw_id)

        if not await self._authorize(request, operation, car_id=raw_id):
            return _unauthorized()

        car_id = _parse_id(raw_id)
        if car_id is None:
            return _not_found(operation, raw_id)

        try:
            rows = await run_in_threadpool(self._repository.delete_by_id, car_id)
        except PersistenceError as e:
            log_event("database_error", "ERROR", exception=e, operation=operation, car_id=raw_id)
            return _server_error()

        if rows == 0:
            return _not_found(operation, raw_id)

        log_event("delete_car_completed", operation=operation, car_id=str(car_id), rows=rows)
        return JSONResponse(content=DeleteResponse().model_dump())

    async def validate_classics(self, request: Request) -> Response:
        """Handle PATCH /cars/validate requests.

        Marks every car more than CLASSIC_AGE_YEARS old as classic. The
        threshold is recomputed from the clock on every call.
        """
        operation = "validate_classics"
        log_event("validate_classics_triggered", operation=operation)

        if not await self._authorize(request, operation):
            return _unauthorized()

        threshold = classic_threshold_year(self._clock())
        log_event("validate_classics_threshold", operation=operation, threshold_year=threshold)

        try:
            updated = await run_in_threadpool(self._repository.bulk_mark_classic, threshold)
        except PersistenceError as e:
            log_event("database_error", "ERROR", exception=e, operation=operation)
            return _server_error()

        result = ClassicValidationResponse(
            updated_count=updated,
            timestamp=self._clock().isoformat(),
        )
        log_event(
            "validate_classics_completed",
            operation=operation,
            updated_count=updated,
            timestamp=result.timestamp,
        )
        return JSONResponse(content=result.model_dump(by_alias=True))

    async def _authorize(self, request: Request, operation: str, **fields: str) -> bool:
        authorized = await run_in_threadpool(self._authorizer.is_authorized, request.headers)
        if not authorized:
            log_event(
                "unauthorized",
                "WARNING",
                operation=operation,
                method=request.method,
                path=request.url.path,
                **fields,
            )
        return authorized

    async def _read_payload(
        self, request: Request, operation: str, **fields: str
    ) -> tuple[CarPayload | None, Response | None]:
        """Deserialize and validate the body.

        Returns:
            (payload, None) when the body is acceptable, otherwise
            (None, 400 response)
        """
        try:
            payload = parse_car_payload(await request.body())
        except MalformedInput as e:
            log_event("invalid_json", "WARNING", operation=operation, reason=str(e), **fields)
            return None, _bad_request("Invalid JSON")

        ok, message = validate(payload)
        if not ok:
            log_event("validation_failed", "WARNING", operation=operation, reason=message, **fields)
            return None, _bad_request(message or "Invalid body")

        return payload, None


def _parse_id(raw_id: str) -> UUID | None:
    try:
        return UUID(raw_id)
    except ValueError:
        return None


def _car_json(car: CarEntity) -> dict:
    return CarResponse.from_entity(car).model_dump(mode="json", by_alias=True)


def _unauthorized() -> Response:
    return Response(status_code=status.HTTP_401_UNAUTHORIZED)


def _server_error() -> Response:
    return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def _bad_request(message: str) -> Response:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error=message).model_dump(),
    )


def _not_found(operation: str, raw_id: str) -> Response:
    log_event("not_found", "WARNING", operation=operation, car_id=raw_id)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=ErrorResponse(error="Not found").model_dump(),
    )
