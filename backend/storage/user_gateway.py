"""Storage gateway translating user operations into SQL statements."""

from fastapi import Depends
from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.core.errors import StorageError, UserNotFoundError
from backend.database import get_db
from backend.models.user import User


def _driver_message(exc: SQLAlchemyError) -> str:
    original = getattr(exc, 'orig', None)
    return str(original if original is not None else exc)


INT32_MIN = -2**31
INT32_MAX = 2**31 - 1


def coerce_user_id(raw_id: int | str) -> int:
    try:
        user_id = int(raw_id)
    except (TypeError, ValueError) as exc:
        raise StorageError(f'invalid input syntax for type integer: "{raw_id}"') from exc

    # users.id is a 32-bit integer column
    if not INT32_MIN <= user_id <= INT32_MAX:
        raise StorageError(f'value "{raw_id}" is out of range for type integer')
    return user_id


class UserGateway:
    """Runs one statement per call against the users table.

    Updates and deletes do not check that a row matched; a missing id is a
    silent no-op. Every SQLAlchemy failure is rolled back and re-raised as
    ``StorageError`` carrying the driver's message.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_users(self) -> list[User]:
        try:
            return list(self.db.scalars(select(User)).all())
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StorageError(_driver_message(exc)) from exc

    def get_user(self, user_id: int | str) -> User:
        user_id = coerce_user_id(user_id)
        try:
            user = self.db.scalars(select(User).where(User.id == user_id)).first()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StorageError(_driver_message(exc)) from exc

        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def create_user(self, name: str, email: str) -> User:
        user = User(name=name, email=email)
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StorageError(_driver_message(exc)) from exc
        return user

    def update_user(self, user_id: int | str, name: str, email: str) -> None:
        user_id = coerce_user_id(user_id)
        self._execute(update(User).where(User.id == user_id).values(name=name, email=email))

    def delete_user(self, user_id: int | str) -> None:
        user_id = coerce_user_id(user_id)
        self._execute(delete(User).where(User.id == user_id))

    def _execute(self, statement) -> None:
        try:
            self.db.execute(statement)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StorageError(_driver_message(exc)) from exc


def get_user_gateway(db: Session = Depends(get_db)) -> UserGateway:
    return UserGateway(db)
