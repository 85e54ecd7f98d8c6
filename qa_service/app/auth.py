# qa_service/app/auth.py

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from passlib.context import CryptContext

from qa_service.app.dependencies import get_store
from qa_service.app.errors import DatabaseQueryError
from qa_service.app.schemas import AccountCreate
from qa_service.app.store import QuestionStore, StoreError

logger = logging.getLogger(__name__)

# argon2 generates a fresh random salt for every hash
pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")

auth_router = APIRouter()


def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password):
    return pwd_context.hash(password)


@auth_router.post("/register", response_class=PlainTextResponse)
async def register(account: AccountCreate, store: QuestionStore = Depends(get_store)):
    hashed_password = get_password_hash(account.password)
    try:
        await store.add_account(account.email, hashed_password)
    except StoreError:
        raise DatabaseQueryError()
    logger.info("Account registered")
    return "Account added"
