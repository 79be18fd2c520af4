import logging
from collections.abc import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker


Base = declarative_base()

logger = logging.getLogger(__name__)


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    connect_args = {}
    if database_url.startswith('sqlite'):
        connect_args['check_same_thread'] = False

    return create_engine(database_url, echo=echo, connect_args=connect_args)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )


def ensure_users_schema(engine: Engine) -> None:
    """Create the users table when it does not exist yet."""
    from backend.models.user import User

    with engine.connect():
        logger.info('Database connected')

    Base.metadata.create_all(bind=engine, tables=[User.__table__])
    logger.info('Users table ready')


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
