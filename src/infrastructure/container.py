"""Dependency injection container for the member query service.

Wires the member store, the pagination executor and the query facade.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from application.services.member_query_repository import QueryRepository
from application.services.pagination_executor import PaginationExecutor
from domain.services.predicate_set import PredicateSet
from infrastructure.adapters import InMemoryMemberStore
from infrastructure.database.engine import build_session_factory, build_sync_engine, create_schema
from infrastructure.database.repository import SqlAlchemyMemberStore
from infrastructure.observability.logging_config import get_logger, setup_logging
from infrastructure.settings import AppSettings, get_settings

logger = get_logger(__name__)


class ServiceContainer:
    """Owns the store and service instances for one process.

    With ``use_database=False`` the store is an :class:`InMemoryMemberStore`;
    otherwise an engine is built from the settings, the schema is created
    and a :class:`SqlAlchemyMemberStore` is bound to a fresh session.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        use_database: bool = True,
        configure_logging: bool = False,
    ) -> None:
        self._settings = settings or get_settings()
        if configure_logging:
            setup_logging(self._settings.log_level)

        self.session: Optional[Session] = None
        if use_database:
            self.engine = build_sync_engine(self._settings.database_settings())
            create_schema(self.engine)
            self.session = build_session_factory(self.engine)()
            self.store = SqlAlchemyMemberStore(self.session)
        else:
            self.engine = None
            self.store = InMemoryMemberStore()

        self.predicate_set = PredicateSet()
        self.executor = PaginationExecutor()
        self.query_repository = QueryRepository(
            self.store,
            predicate_set=self.predicate_set,
            executor=self.executor,
        )

        logger.info(
            "ServiceContainer initialized",
            store=type(self.store).__name__,
        )

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def close(self) -> None:
        if self.session is not None:
            self.session.close()
            self.session = None
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None
