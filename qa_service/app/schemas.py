# qa_service/app/schemas.py

from typing import Optional

from pydantic import BaseModel, ConfigDict


class NewQuestion(BaseModel):
    title: str
    content: str
    tags: Optional[list[str]] = None


class QuestionSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    tags: Optional[list[str]] = None


class QuestionUpdate(BaseModel):
    # the path id is authoritative; a body id is accepted and ignored
    id: Optional[int] = None
    title: str
    content: str
    tags: Optional[list[str]] = None


class NewAnswer(BaseModel):
    content: str
    question_id: int


class AnswerSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    content: str
    question_id: int


class AccountCreate(BaseModel):
    email: str
    password: str


class AccountSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    password: str
