# qa_service/app/listing.py
"""GET /questions request flow.

Parameters are checked before the store is touched, so a bad window costs
no round trip. Any store failure ends the request as DatabaseQueryError;
there are no partial results.
"""

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from qa_service.app.errors import DatabaseQueryError
from qa_service.app.pagination import Pagination, extract_pagination
from qa_service.app.schemas import AnswerSchema, QuestionSchema
from qa_service.app.store import QuestionStore, StoreError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuestionListing:
    question: QuestionSchema
    answer: Optional[AnswerSchema] = None


def resolve_pagination(params: Mapping[str, str]) -> Pagination:
    if params:
        pagination = extract_pagination(params)
        logger.info(f"Pagination set {pagination}", extra={"pagination": True})
        return pagination
    logger.info("No pagination used", extra={"pagination": False})
    return Pagination()


async def list_questions(params: Mapping[str, str], store: QuestionStore) -> list[QuestionSchema]:
    pagination = resolve_pagination(params)
    try:
        return await store.list_questions(pagination.limit, pagination.offset)
    except StoreError:
        raise DatabaseQueryError()


def pair_answers(questions, answers) -> list[QuestionListing]:
    """First answer per question, in the order the store returned them."""
    first: dict[int, AnswerSchema] = {}
    for answer in answers:
        first.setdefault(answer.question_id, answer)
    return [QuestionListing(q, first.get(q.id)) for q in questions]


async def list_questions_with_answers(
    params: Mapping[str, str], store: QuestionStore,
) -> list[QuestionListing]:
    pagination = resolve_pagination(params)
    try:
        questions = await store.list_questions(pagination.limit, pagination.offset)
        # answers are not paged: an answer window would not line up with the
        # question window, so answers to questions on this page could be missed
        answers = await store.list_answers(None, 0)
    except StoreError:
        raise DatabaseQueryError()
    return pair_answers(questions, answers)
