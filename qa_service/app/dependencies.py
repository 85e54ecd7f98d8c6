# qa_service/app/dependencies.py

from fastapi import Request

from qa_service.app.config import Settings, get_settings
from qa_service.app.database import make_engine, make_sessionmaker
from qa_service.app.store import InMemoryQuestionStore, QuestionStore, SqlQuestionStore


def build_store(settings: Settings):
    """Return (store, engine); engine is None for the in-memory backend."""
    if settings.store_backend == "memory":
        return InMemoryQuestionStore(), None
    engine = make_engine(
        settings.database_url,
        pool_size=settings.database_pool_size,
        echo=settings.database_echo,
    )
    return SqlQuestionStore(make_sessionmaker(engine)), engine


def get_store(request: Request) -> QuestionStore:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Question store not initialized")
    return store


def settings_dependency() -> Settings:
    return get_settings()
