"""Form client helpers: request shapes and error surfacing, requests patched."""

from unittest.mock import MagicMock, patch

import pytest

from frontend import app as client_app


def _response(status_code=200, payload=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    response.text = text
    return response


def test_fetch_questions_unpaged_sends_no_window():
    with patch.object(client_app.requests, "get", return_value=_response(payload=[])) as get:
        assert client_app.fetch_questions(base_url="http://api") == []
    get.assert_called_once_with("http://api/questions", params={}, timeout=client_app.TIMEOUT)


def test_fetch_questions_paged_sends_both_bounds():
    with patch.object(client_app.requests, "get", return_value=_response(payload=[])) as get:
        client_app.fetch_questions(limit=2, offset=1, base_url="http://api")
    assert get.call_args.kwargs["params"] == {"limit": 2, "offset": 1}


def test_fetch_question_error_raises_api_error():
    missing = _response(status_code=404, text="Question not found")
    with patch.object(client_app.requests, "get", return_value=missing):
        with pytest.raises(client_app.ApiError) as exc_info:
            client_app.fetch_question(9, base_url="http://api")
    assert exc_info.value.status_code == 404
    assert exc_info.value.text == "Question not found"


def test_post_question_body():
    created = {"id": 1, "title": "T", "content": "C", "tags": ["a"]}
    with patch.object(client_app.requests, "post", return_value=_response(payload=created)) as post:
        assert client_app.post_question("T", "C", ["a"], base_url="http://api") == created
    assert post.call_args.args == ("http://api/questions",)
    assert post.call_args.kwargs["json"] == {"title": "T", "content": "C", "tags": ["a"]}


def test_post_question_empty_tags_sent_as_null():
    with patch.object(client_app.requests, "post", return_value=_response(payload={})) as post:
        client_app.post_question("T", "C", [], base_url="http://api")
    assert post.call_args.kwargs["json"]["tags"] is None


def test_post_answer_body():
    answer = {"id": 1, "content": "42", "question_id": 1}
    with patch.object(client_app.requests, "post", return_value=_response(payload=answer)) as post:
        assert client_app.post_answer(1, "42", base_url="http://api") == answer
    assert post.call_args.kwargs["json"] == {"content": "42", "question_id": 1}


def test_register_returns_confirmation():
    with patch.object(client_app.requests, "post", return_value=_response(text="Account added")):
        assert client_app.register_account("a@b.c", "pw", base_url="http://api") == "Account added"


def test_parse_tags():
    assert client_app.parse_tags(" a, b ,,c ") == ["a", "b", "c"]
    assert client_app.parse_tags("") == []
