# qa_service/app/seed.py

import json
import logging
from pathlib import Path

from qa_service.app.schemas import NewQuestion

logger = logging.getLogger(__name__)

SEED_FILE = Path(__file__).with_name("questions.json")


def load_seed_questions(path: Path = SEED_FILE) -> list[NewQuestion]:
    """Read an id-keyed JSON object of questions, returned in id order.

    Ids in the file only fix the insertion order; the store assigns its own.
    """
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    ordered = sorted(raw.items(), key=lambda item: int(item[0]))
    return [
        NewQuestion(title=q["title"], content=q["content"], tags=q.get("tags"))
        for _, q in ordered
    ]


async def seed_if_empty(store, path: Path = SEED_FILE) -> int:
    if await store.count_questions() > 0:
        return 0
    questions = load_seed_questions(path)
    for question in questions:
        await store.add_question(question)
    logger.info(f"Seeded {len(questions)} questions from {path.name}")
    return len(questions)
