from contextlib import asynccontextmanager

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware

from bookstore_api.authors import router as authors_router
from bookstore_api.books import router as books_router
from bookstore_api.core import config, db, errors
from bookstore_api.users import router as users_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process, injected into routes through db.get_pool.
    app.state.pool = await db.create_pool()
    try:
        yield
    finally:
        await db.close_pool(app.state.pool)
        app.state.pool = None


def create_app() -> FastAPI:
    app = FastAPI(title="bookstore-api", lifespan=lifespan)

    # Allow local frontend dev server to call this API from the browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    errors.register_error_handlers(app)

    app.include_router(authors_router.router, tags=["authors"])
    app.include_router(books_router.router, tags=["books"])
    app.include_router(users_router.router, tags=["users"])

    @app.get("/health_check")
    def health_check() -> Response:
        return Response(status_code=200)

    return app


app = create_app()
