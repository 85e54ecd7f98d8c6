# qa_service/app/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, PlainTextResponse

from qa_service.app import listing
from qa_service.app.auth import auth_router
from qa_service.app.config import Settings, get_settings
from qa_service.app.database import init_db
from qa_service.app.dependencies import build_store, get_store, settings_dependency
from qa_service.app.error_handlers import register_error_handlers
from qa_service.app.errors import DatabaseQueryError, QuestionNotFound
from qa_service.app.logging_setup import setup_logging
from qa_service.app.rendering import render_listing
from qa_service.app.schemas import (
    AnswerSchema,
    NewAnswer,
    NewQuestion,
    QuestionSchema,
    QuestionUpdate,
)
from qa_service.app.seed import seed_if_empty
from qa_service.app.store import QuestionStore, StoreError, StoreNotFound

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    store, engine = build_store(settings)
    if engine is not None:
        await init_db(engine)
    if settings.seed_questions:
        await seed_if_empty(store)
    app.state.store = store
    logger.info(f"Q&A service started with {settings.store_backend} store")
    yield
    if engine is not None:
        await engine.dispose()
    logger.info("Q&A service shutting down")


app = FastAPI(title="Q&A Service", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type"],
)

register_error_handlers(app)
app.include_router(auth_router, tags=["accounts"])


def check_question_text(title: str, content: str, settings: Settings) -> None:
    if not settings.require_question_text:
        return
    errors = [
        {"loc": ("body", field), "msg": "must not be empty", "type": "value_error"}
        for field, value in (("title", title), ("content", content))
        if not value.strip()
    ]
    if errors:
        raise RequestValidationError(errors)


@app.get("/health")
async def health():
    return {"status": "healthy"}


@app.get("/questions", response_model=list[QuestionSchema])
async def get_questions(request: Request, store: QuestionStore = Depends(get_store)):
    return await listing.list_questions(dict(request.query_params), store)


@app.get("/questions/html", response_class=HTMLResponse)
async def get_questions_html(request: Request, store: QuestionStore = Depends(get_store)):
    listings = await listing.list_questions_with_answers(dict(request.query_params), store)
    return render_listing(listings)


@app.get("/question/{question_id}", response_model=QuestionSchema)
async def get_question(question_id: int, store: QuestionStore = Depends(get_store)):
    try:
        question = await store.get_question(question_id)
    except StoreError:
        raise DatabaseQueryError()
    if question is None:
        return PlainTextResponse("Question not found", status_code=404)
    return question


@app.post("/questions", response_model=QuestionSchema)
async def add_question(
    new_question: NewQuestion,
    store: QuestionStore = Depends(get_store),
    settings: Settings = Depends(settings_dependency),
):
    check_question_text(new_question.title, new_question.content, settings)
    try:
        question = await store.add_question(new_question)
    except StoreError:
        raise DatabaseQueryError()
    logger.info(f"Question {question.id} added", extra={"question_id": question.id})
    return question


@app.put("/questions/{question_id}", response_model=QuestionSchema)
async def update_question(
    question_id: int,
    question: QuestionUpdate,
    store: QuestionStore = Depends(get_store),
    settings: Settings = Depends(settings_dependency),
):
    check_question_text(question.title, question.content, settings)
    try:
        return await store.update_question(question_id, question)
    except StoreNotFound:
        raise QuestionNotFound(question_id)
    except StoreError:
        raise DatabaseQueryError()


@app.delete("/questions/{question_id}", response_class=PlainTextResponse)
async def delete_question(question_id: int, store: QuestionStore = Depends(get_store)):
    try:
        await store.delete_question(question_id)
    except StoreNotFound:
        raise QuestionNotFound(question_id)
    except StoreError:
        raise DatabaseQueryError()
    logger.info(f"Question {question_id} deleted", extra={"question_id": question_id})
    return f"Question {question_id} deleted"


@app.post("/answer", response_model=AnswerSchema)
async def add_answer(new_answer: NewAnswer, store: QuestionStore = Depends(get_store)):
    try:
        return await store.add_answer(new_answer)
    except StoreError:
        raise DatabaseQueryError()
