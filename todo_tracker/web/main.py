"""
HTTP interface: REST endpoints over an in-memory todo store
"""

from contextlib import asynccontextmanager
from typing import List, Optional
from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from todo_tracker.models.response import ErrorResponse, ResultResponse
from todo_tracker.models.task import Todo, TodoCreate, TodoUpdate
from todo_tracker.services.memory_store import MemoryStore
from todo_tracker.utils.logger import logger
from todo_tracker.utils.error_handler import (
    NotFoundError,
    TodoError,
    ValidationError,
    handle_error,
)
from todo_tracker.config.settings import settings


def _status_for(error: TodoError) -> int:
    if isinstance(error, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(error, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def get_store(request: Request) -> MemoryStore:
    """Store attached to the application that received the request"""
    return request.app.state.store


def create_app(store: Optional[MemoryStore] = None) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        store: Todo store shared by all requests (a new empty one if omitted)

    Returns:
        Configured application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"[Startup] Todo service ready with {app.state.store.count()} todos")
        yield
        logger.info("[Shutdown] Todo service stopped")

    app = FastAPI(title="Todo Tracker", lifespan=lifespan)
    app.state.store = store if store is not None else MemoryStore()

    @app.exception_handler(TodoError)
    async def todo_error_handler(request: Request, exc: TodoError):
        error_response = handle_error(exc)
        return JSONResponse(status_code=_status_for(exc), content=error_response.model_dump())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.info(f"Invalid request {request.method} {request.url.path}: {exc.errors()}")
        error_response = ErrorResponse(message="Invalid input", error_code="invalid_input")
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error_response.model_dump())

    # Plain `def` handlers run in the worker thread pool; the store lock
    # serializes their access to the collection.

    @app.get("/todos", response_model=List[Todo])
    def get_todos(store: MemoryStore = Depends(get_store)):
        """List all todos"""
        return store.list()

    @app.post("/todos", response_model=Todo, status_code=status.HTTP_201_CREATED)
    def add_todo(body: TodoCreate, store: MemoryStore = Depends(get_store)):
        """Create a todo"""
        todo = store.add(body.title)
        logger.info(f"Created todo {todo.id}")
        return todo

    @app.put("/todos/{todo_id}", response_model=ResultResponse)
    def update_todo(todo_id: int, body: TodoUpdate, store: MemoryStore = Depends(get_store)):
        """Set completion status"""
        store.update(todo_id, body.completed)
        return ResultResponse(result="updated")

    @app.delete("/todos/{todo_id}", response_model=ResultResponse)
    def delete_todo(todo_id: int, store: MemoryStore = Depends(get_store)):
        """Delete a todo"""
        store.delete(todo_id)
        return ResultResponse(result="deleted")

    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        return {"status": "ok"}

    return app


def run() -> None:
    """Serve the API with uvicorn"""
    import uvicorn

    settings.validate()
    uvicorn.run(create_app(), host=settings.WEB_HOST, port=settings.WEB_PORT)


if __name__ == "__main__":
    run()
