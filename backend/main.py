import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from backend.core import config
from backend.core.errors import StorageError
from backend.core.middleware import CORSHeadersMiddleware, JSONContentTypeMiddleware
from backend.database import build_session_factory, create_db_engine, ensure_users_schema
from backend.routes import user_routes

logger = logging.getLogger(__name__)


async def storage_error_handler(request: Request, exc: StorageError) -> PlainTextResponse:
    logger.warning('%s %s failed: %s', request.method, request.url.path, exc)
    return PlainTextResponse(str(exc), status_code=500)


def create_app(engine: Engine | None = None) -> FastAPI:
    if engine is None:
        config.validate_runtime_config()
        engine = create_db_engine(config.DATABASE_URL, echo=config.SQL_ECHO)

    app = FastAPI(title='User API', redirect_slashes=False)
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    # added innermost first: CORS wraps the content-type layer
    app.add_middleware(JSONContentTypeMiddleware)
    app.add_middleware(
        CORSHeadersMiddleware,
        allow_origin=config.CORS_ALLOW_ORIGIN,
        allow_methods=config.CORS_ALLOW_METHODS,
        allow_headers=config.CORS_ALLOW_HEADERS,
    )

    app.add_exception_handler(StorageError, storage_error_handler)

    @app.on_event('startup')
    def initialize_database() -> None:
        try:
            ensure_users_schema(engine)
        except SQLAlchemyError:
            logger.exception('Database initialization failed. Check DATABASE_URL.')
            raise

    @app.get('/')
    def root():
        return {'status': 'User API Running'}

    app.include_router(user_routes.router, prefix='/api/users')

    return app


app = create_app()
