"""HTML listing: template output for question/answer pairs."""

from qa_service.app.listing import QuestionListing
from qa_service.app.rendering import NO_ANSWER, render_listing
from qa_service.app.schemas import AnswerSchema, QuestionSchema


def test_unanswered_question_shows_placeholder():
    page = render_listing([QuestionListing(QuestionSchema(id=1, title="T", content="C"))])
    assert NO_ANSWER in page
    assert "No answer provided" in page
    assert "No tags" in page
    assert "Question ID: 1" in page


def test_answer_and_tags_are_rendered():
    listing = QuestionListing(
        QuestionSchema(id=3, title="T", content="C", tags=["a", "b"]),
        AnswerSchema(id=1, content="42", question_id=3),
    )
    page = render_listing([listing])
    assert "Answer: 42" in page
    assert "Tags: a, b" in page
    assert NO_ANSWER not in page


def test_text_is_escaped():
    page = render_listing([QuestionListing(QuestionSchema(id=1, title="<b>x</b>", content="a & b"))])
    assert "<b>x</b>" not in page
    assert "&lt;b&gt;x&lt;/b&gt;" in page
    assert "a &amp; b" in page


def test_questions_keep_their_order():
    page = render_listing([
        QuestionListing(QuestionSchema(id=2, title="second", content="c")),
        QuestionListing(QuestionSchema(id=1, title="first", content="c")),
    ])
    assert page.index("second") < page.index("first")


def test_empty_listing_is_a_complete_page():
    page = render_listing([])
    assert page.startswith("<html>")
    assert "<ul></ul>" in page
