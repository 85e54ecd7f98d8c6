# qa_service/app/errors.py
"""Request-level failures and the HTTP status/body each one maps to.

Every kind answers 400 with a short plain-text body. Store-side detail
(driver messages, constraint names) never reaches the body; it is logged
where the failure happens.
"""


class QAError(Exception):
    kind = "QAError"
    status_code = 400
    body = "Bad Request"

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.body)
        self.detail = detail


class ParseError(QAError):
    """A pagination field was not a base-10 integer."""

    kind = "ParseError"
    body = "Failed to parse integer"

    def __init__(self, field: str, raw: str):
        super().__init__(f"cannot parse {field}={raw!r} as integer")
        self.field = field
        self.raw = raw


class MissingParameters(QAError):
    """Pagination was only partially specified."""

    kind = "MissingParameters"
    body = "Missing parameters"


class QuestionNotFound(QAError):
    kind = "QuestionNotFound"
    body = "Question Not Found"

    def __init__(self, question_id: int):
        super().__init__(f"question {question_id} does not exist")
        self.question_id = question_id


class DatabaseQueryError(QAError):
    kind = "DatabaseQueryError"
    body = "Database Query Error"
