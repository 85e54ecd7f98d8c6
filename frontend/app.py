import os

import requests
import streamlit as st

API_BASE_URL = os.getenv('API_BASE_URL', 'http://localhost:3000')
TIMEOUT = 10


class ApiError(Exception):
    def __init__(self, status_code, text):
        super().__init__(f"{status_code}: {text}")
        self.status_code = status_code
        self.text = text


def _check(response):
    if response.status_code != 200:
        raise ApiError(response.status_code, response.text)
    return response


def fetch_question(question_id, base_url=API_BASE_URL):
    response = requests.get(f"{base_url}/question/{question_id}", timeout=TIMEOUT)
    return _check(response).json()


def fetch_questions(limit=None, offset=0, base_url=API_BASE_URL):
    # the API wants both bounds or neither
    params = {} if limit is None else {"limit": limit, "offset": offset}
    response = requests.get(f"{base_url}/questions", params=params, timeout=TIMEOUT)
    return _check(response).json()


def post_question(title, content, tags=None, base_url=API_BASE_URL):
    response = requests.post(f"{base_url}/questions", json={
        "title": title,
        "content": content,
        "tags": tags or None,
    }, timeout=TIMEOUT)
    return _check(response).json()


def post_answer(question_id, content, base_url=API_BASE_URL):
    response = requests.post(f"{base_url}/answer", json={
        "content": content,
        "question_id": question_id,
    }, timeout=TIMEOUT)
    return _check(response).json()


def register_account(email, password, base_url=API_BASE_URL):
    response = requests.post(f"{base_url}/register", json={
        "email": email,
        "password": password,
    }, timeout=TIMEOUT)
    return _check(response).text


def parse_tags(raw):
    return [tag.strip() for tag in raw.split(",") if tag.strip()]


def show_question(question):
    st.subheader(question["title"])
    st.write(f"{question['content']} Based Question")
    annotation = f"[id: {question['id']}"
    if question.get("tags"):
        annotation += f"; tags: {', '.join(question['tags'])}"
    st.caption(annotation + "]")


def browse_questions():
    st.title("Questions")
    paged = st.checkbox("Page results")
    limit, offset = None, 0
    if paged:
        limit = st.number_input("Limit", min_value=0, value=5, step=1)
        offset = st.number_input("Offset", min_value=0, value=0, step=1)
    if st.button("Load questions"):
        try:
            for question in fetch_questions(limit, offset):
                show_question(question)
        except (ApiError, requests.RequestException) as e:
            st.error(f"Server Error: {e}")


def answer_question():
    st.title("Answer a question")
    question_id = st.number_input("Question ID", min_value=1, step=1)
    if st.button("Give me the question"):
        try:
            st.session_state["question"] = fetch_question(int(question_id))
        except (ApiError, requests.RequestException) as e:
            st.error(f"Server Error: {e}")
    question = st.session_state.get("question")
    if question:
        show_question(question)
        answer_text = st.text_area("Enter your answer here")
        if st.button("Submit Answer"):
            try:
                post_answer(question["id"], answer_text)
                st.success("Answer submitted.")
            except (ApiError, requests.RequestException) as e:
                st.error(f"Server Error: {e}")


def ask_question():
    st.title("Ask a question")
    title = st.text_input("Title")
    content = st.text_input("Category")
    tags = st.text_input("Tags (comma separated)")
    if st.button("Submit question"):
        try:
            created = post_question(title, content, parse_tags(tags))
            st.success(f"Question added. Question ID: {created['id']}")
        except (ApiError, requests.RequestException) as e:
            st.error(f"Server Error: {e}")


def register():
    st.title("Register")
    email = st.text_input("Email")
    password = st.text_input("Password", type="password")
    if st.button("Register"):
        try:
            register_account(email, password)
            st.success("Account added.")
        except (ApiError, requests.RequestException) as e:
            st.error(f"Registration failed: {e}")


def main():
    menu = {
        "Browse questions": browse_questions,
        "Answer a question": answer_question,
        "Ask a question": ask_question,
        "Register": register,
    }
    choice = st.sidebar.selectbox("Menu", list(menu))
    menu[choice]()


if __name__ == '__main__':
    main()
