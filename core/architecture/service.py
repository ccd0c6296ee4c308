from typing import Annotated, Callable, Type, TypeVar

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from core.db.core import SessionDep

T = TypeVar("T", bound="AbstractService")


class AbstractService:
    DEPENDENCIES = {"session": SessionDep}

    def __init__(self, session: AsyncSession, **kwargs):
        """
        Initialize the service with an AsyncSession.

        :param session: SQLAlchemy AsyncSession instance, scoped to the request.
        """
        self.session = session

    @classmethod
    def _get_dependency_function(cls: Type[T], session: SessionDep) -> T:
        """
        Internal method to return a class instance as a dependency.

        FastAPI resolves the request session (shared with every other
        dependency of the same request) and hands it to the service.
        """
        return cls(session=session)

    @classmethod
    def get_dependency(cls: Type[T]) -> Callable[..., T]:
        """
        Returns a FastAPI dependency for this service.

        Usage::

            TicketServiceDependency = Annotated[TicketService, TicketService.get_dependency()]
        """
        return Depends(cls._get_dependency_function)
