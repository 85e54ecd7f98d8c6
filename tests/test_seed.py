"""Seeding: bundled questions load into an empty store only."""

import json

from qa_service.app.schemas import NewQuestion
from qa_service.app.seed import load_seed_questions, seed_if_empty


def test_bundled_file_loads_in_id_order():
    questions = load_seed_questions()
    assert len(questions) == 4
    assert questions[0].title == "What is the capital of France?"
    assert questions[3].tags is None


def test_keys_sort_numerically(tmp_path):
    path = tmp_path / "questions.json"
    path.write_text(json.dumps({
        "10": {"id": 10, "title": "ten", "content": "c"},
        "2": {"id": 2, "title": "two", "content": "c", "tags": ["t"]},
    }))
    assert [q.title for q in load_seed_questions(path)] == ["two", "ten"]


async def test_seed_fills_empty_store(store):
    inserted = await seed_if_empty(store)
    assert inserted == 4
    titles = [q.title for q in await store.list_questions(None, 0)]
    assert titles == [q.title for q in load_seed_questions()]


async def test_seed_skips_populated_store(store):
    await store.add_question(NewQuestion(title="mine", content="c"))
    assert await seed_if_empty(store) == 0
    assert await store.count_questions() == 1
