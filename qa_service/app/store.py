# qa_service/app/store.py
"""Question/answer store: the one seam between request handling and persistence.

Two backends share the QuestionStore contract, a relational one on
SQLAlchemy's asyncio session and a process-lifetime in-memory one behind a
reader/writer lock. Handlers only see StoreError / StoreNotFound; the
underlying driver error is logged here and goes no further.

Listings are ordered by primary key ascending in both backends.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional, Protocol

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from qa_service.app import models
from qa_service.app.rwlock import ReadWriteLock
from qa_service.app.schemas import (
    AccountSchema,
    AnswerSchema,
    NewAnswer,
    NewQuestion,
    QuestionSchema,
    QuestionUpdate,
)

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """The store could not complete the call."""


class StoreNotFound(StoreError):
    """The record addressed by id does not exist."""


class QuestionStore(Protocol):
    async def list_questions(self, limit: Optional[int], offset: int) -> list[QuestionSchema]: ...
    async def list_answers(self, limit: Optional[int], offset: int) -> list[AnswerSchema]: ...
    async def get_question(self, question_id: int) -> Optional[QuestionSchema]: ...
    async def add_question(self, new_question: NewQuestion) -> QuestionSchema: ...
    async def update_question(self, question_id: int, question: QuestionUpdate) -> QuestionSchema: ...
    async def delete_question(self, question_id: int) -> None: ...
    async def delete_answers(self, question_id: int) -> None: ...
    async def add_answer(self, new_answer: NewAnswer) -> AnswerSchema: ...
    async def add_account(self, email: str, password_hash: str) -> AccountSchema: ...
    async def get_account(self, email: str) -> Optional[AccountSchema]: ...
    async def count_questions(self) -> int: ...


# LIMIT/OFFSET bind as signed 64-bit integers
MAX_WINDOW = 2**63 - 1


def _check_window(operation: str, limit: Optional[int], offset: int) -> None:
    """Negative or out-of-range bounds are a store failure, as a database rejects them."""
    for value in (limit, offset):
        if value is not None and not 0 <= value <= MAX_WINDOW:
            logger.error(f"{operation} failed: window limit={limit} offset={offset} out of range")
            raise StoreError(operation)


def _window(items: list, limit: Optional[int], offset: int) -> list:
    if limit is None:
        return items[offset:]
    return items[offset:offset + limit]


class SqlQuestionStore:
    """QuestionStore over a relational database, one session per call."""

    def __init__(self, session_factory: async_sessionmaker):
        self._session_factory = session_factory

    @asynccontextmanager
    async def _session(self, operation: str):
        session: AsyncSession = self._session_factory()
        try:
            yield session
        except StoreError:
            await session.rollback()
            raise
        except (SQLAlchemyError, OverflowError) as e:
            await session.rollback()
            logger.error(f"{operation} failed: {e}")
            raise StoreError(operation) from e
        finally:
            await session.close()

    async def list_questions(self, limit, offset):
        _check_window("list_questions", limit, offset)
        async with self._session("list_questions") as session:
            stmt = select(models.Question).order_by(models.Question.id).offset(offset)
            if limit is not None:
                stmt = stmt.limit(limit)
            result = await session.execute(stmt)
            return [QuestionSchema.model_validate(q) for q in result.scalars().all()]

    async def list_answers(self, limit, offset):
        _check_window("list_answers", limit, offset)
        async with self._session("list_answers") as session:
            stmt = select(models.Answer).order_by(models.Answer.id).offset(offset)
            if limit is not None:
                stmt = stmt.limit(limit)
            result = await session.execute(stmt)
            return [AnswerSchema.model_validate(a) for a in result.scalars().all()]

    async def get_question(self, question_id):
        async with self._session("get_question") as session:
            question = await session.get(models.Question, question_id)
            if question is None:
                return None
            return QuestionSchema.model_validate(question)

    async def add_question(self, new_question):
        async with self._session("add_question") as session:
            question = models.Question(
                title=new_question.title,
                content=new_question.content,
                tags=new_question.tags,
            )
            session.add(question)
            await session.commit()
            await session.refresh(question)
            return QuestionSchema.model_validate(question)

    async def update_question(self, question_id, question):
        async with self._session("update_question") as session:
            existing = await session.get(models.Question, question_id)
            if existing is None:
                raise StoreNotFound(f"question {question_id}")
            existing.title = question.title
            existing.content = question.content
            existing.tags = question.tags
            await session.commit()
            await session.refresh(existing)
            return QuestionSchema.model_validate(existing)

    async def delete_answers(self, question_id):
        async with self._session("delete_answers") as session:
            await session.execute(
                delete(models.Answer).where(models.Answer.question_id == question_id)
            )
            await session.commit()

    async def delete_question(self, question_id):
        # answers go first so a failed question delete never leaves
        # answers pointing at a removed question
        await self.delete_answers(question_id)
        async with self._session("delete_question") as session:
            result = await session.execute(
                delete(models.Question).where(models.Question.id == question_id)
            )
            await session.commit()
            if result.rowcount == 0:
                raise StoreNotFound(f"question {question_id}")

    async def add_answer(self, new_answer):
        async with self._session("add_answer") as session:
            if await session.get(models.Question, new_answer.question_id) is None:
                logger.error(f"add_answer failed: question {new_answer.question_id} missing")
                raise StoreError("add_answer")
            answer = models.Answer(content=new_answer.content, question_id=new_answer.question_id)
            session.add(answer)
            await session.commit()
            await session.refresh(answer)
            return AnswerSchema.model_validate(answer)

    async def add_account(self, email, password_hash):
        async with self._session("add_account") as session:
            account = models.Account(email=email, password=password_hash)
            session.add(account)
            await session.commit()
            await session.refresh(account)
            return AccountSchema.model_validate(account)

    async def get_account(self, email):
        async with self._session("get_account") as session:
            result = await session.execute(
                select(models.Account).where(models.Account.email == email)
            )
            account = result.scalar_one_or_none()
            return AccountSchema.model_validate(account) if account else None

    async def count_questions(self):
        async with self._session("count_questions") as session:
            result = await session.execute(select(func.count()).select_from(models.Question))
            return result.scalar_one()


class InMemoryQuestionStore:
    """QuestionStore kept in process memory for the lifetime of the process."""

    def __init__(self):
        self._lock = ReadWriteLock()
        self._questions: dict[int, QuestionSchema] = {}
        self._answers: dict[int, AnswerSchema] = {}
        self._accounts: dict[str, AccountSchema] = {}
        self._next_question_id = 1
        self._next_answer_id = 1
        self._next_account_id = 1

    async def list_questions(self, limit, offset):
        _check_window("list_questions", limit, offset)
        async with self._lock.read():
            ordered = [self._questions[k].model_copy(deep=True) for k in sorted(self._questions)]
        return _window(ordered, limit, offset)

    async def list_answers(self, limit, offset):
        _check_window("list_answers", limit, offset)
        async with self._lock.read():
            ordered = [self._answers[k].model_copy(deep=True) for k in sorted(self._answers)]
        return _window(ordered, limit, offset)

    async def get_question(self, question_id):
        async with self._lock.read():
            question = self._questions.get(question_id)
            return question.model_copy(deep=True) if question else None

    async def add_question(self, new_question):
        async with self._lock.write():
            question = QuestionSchema(
                id=self._next_question_id,
                title=new_question.title,
                content=new_question.content,
                tags=new_question.tags,
            )
            self._questions[question.id] = question
            self._next_question_id += 1
            return question.model_copy(deep=True)

    async def update_question(self, question_id, question):
        async with self._lock.write():
            if question_id not in self._questions:
                raise StoreNotFound(f"question {question_id}")
            updated = QuestionSchema(
                id=question_id,
                title=question.title,
                content=question.content,
                tags=question.tags,
            )
            self._questions[question_id] = updated
            return updated.model_copy(deep=True)

    async def delete_answers(self, question_id):
        async with self._lock.write():
            for answer_id in [k for k, a in self._answers.items() if a.question_id == question_id]:
                del self._answers[answer_id]

    async def delete_question(self, question_id):
        await self.delete_answers(question_id)
        async with self._lock.write():
            if self._questions.pop(question_id, None) is None:
                raise StoreNotFound(f"question {question_id}")

    async def add_answer(self, new_answer):
        async with self._lock.write():
            if new_answer.question_id not in self._questions:
                logger.error(f"add_answer failed: question {new_answer.question_id} missing")
                raise StoreError("add_answer")
            answer = AnswerSchema(
                id=self._next_answer_id,
                content=new_answer.content,
                question_id=new_answer.question_id,
            )
            self._answers[answer.id] = answer
            self._next_answer_id += 1
            return answer.model_copy(deep=True)

    async def add_account(self, email, password_hash):
        async with self._lock.write():
            if email in self._accounts:
                logger.error(f"add_account failed: {email} already registered")
                raise StoreError("add_account")
            account = AccountSchema(id=self._next_account_id, email=email, password=password_hash)
            self._accounts[email] = account
            self._next_account_id += 1
            return account.model_copy(deep=True)

    async def get_account(self, email):
        async with self._lock.read():
            account = self._accounts.get(email)
            return account.model_copy(deep=True) if account else None

    async def count_questions(self):
        async with self._lock.read():
            return len(self._questions)
