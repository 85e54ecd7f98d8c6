# qa_service/app/rendering.py

from html import escape
from string import Template
from typing import Iterable

from qa_service.app.listing import QuestionListing

NO_ANSWER = "No answer provided"
NO_TAGS = "No tags"

PAGE = Template(
    "<html><head><title>$title</title></head>"
    "<body><h1>$title</h1><ul>$items</ul></body></html>"
)

ITEM = Template(
    "<li><h2>$title</h2><p>$content</p>"
    "<p>Question ID: $id</p><p>Tags: $tags</p>"
    "<p>Answer: $answer</p></li>"
)


def render_item(listing: QuestionListing) -> str:
    question = listing.question
    tags = ", ".join(question.tags) if question.tags else NO_TAGS
    answer = listing.answer.content if listing.answer else NO_ANSWER
    return ITEM.substitute(
        title=escape(question.title),
        content=escape(question.content),
        id=question.id,
        tags=escape(tags),
        answer=escape(answer),
    )


def render_listing(listings: Iterable[QuestionListing], title: str = "Questions") -> str:
    items = "".join(render_item(listing) for listing in listings)
    return PAGE.substitute(title=escape(title), items=items)
