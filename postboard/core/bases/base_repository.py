"""Generic async repository over one SQLModel table."""

import logging
from typing import Any, Callable, Dict, Generic, List, NoReturn, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from postboard.core.exceptions import RepositoryError

T = TypeVar("T", bound=SQLModel)

logger = logging.getLogger(__name__)


class BaseRepository(Generic[T]):
    model: Type[T]

    def __init__(self, get_session: Callable[..., AsyncSession]):
        self.get_session = get_session

    def _handle_db_error(self, error: SQLAlchemyError, operation: str) -> NoReturn:
        """Handle database errors and raise appropriate exceptions."""
        logger.error("%s.%s failed: %s", self.model.__name__, operation, error)
        if isinstance(error, IntegrityError):
            raise RepositoryError(
                f"Database integrity error during {operation}: {error.orig}"
            ) from error
        raise RepositoryError(f"Database error during {operation}: {error}") from error

    # ----------------- CRUD ----------------- #
    async def create(self, obj_in: Union[Dict[str, Any], BaseModel]) -> T:
        """Insert a new row and return it with generated columns filled in."""
        if isinstance(obj_in, BaseModel):
            obj_in = obj_in.model_dump()

        async with self.get_session() as db:
            try:
                obj = self.model(**obj_in)
                db.add(obj)
                await db.commit()
                await db.refresh(obj)
                return obj
            except SQLAlchemyError as e:
                await db.rollback()
                self._handle_db_error(e, "create")

    async def find_all(self) -> List[T]:
        """Every row, in whatever order the database returns them."""
        async with self.get_session() as db:
            try:
                result = await db.exec(select(self.model))
                return list(result.all())
            except SQLAlchemyError as e:
                self._handle_db_error(e, "find_all")

    async def find_by_id(self, item_id: Any) -> Optional[T]:
        """The row with this primary key, or None."""
        async with self.get_session() as db:
            try:
                stmt = select(self.model).where(self.model.id == item_id)  # type: ignore
                result = await db.exec(stmt)
                return result.first()
            except SQLAlchemyError as e:
                self._handle_db_error(e, "find_by_id")
