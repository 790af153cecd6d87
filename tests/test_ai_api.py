import pytest

from app.modules.interview.errors import UpstreamCallError, UpstreamTimeoutError


QUESTIONS_URL = "/api/ai/generate-questions"
EXPLANATION_URL = "/api/ai/generate-explanation"

VALID_BODY = {
    "role": "Frontend Developer",
    "experience": 2,
    "topicsToFocus": "React, CSS",
    "numberOfQuestions": 5,
}


@pytest.mark.parametrize("missing", list(VALID_BODY))
def test_questions_missing_field_is_400_without_generation(client, stub_client, missing):
    body = {k: v for k, v in VALID_BODY.items() if k != missing}

    resp = client.post(QUESTIONS_URL, json=body)

    assert resp.status_code == 400
    assert resp.json()["detail"] == "Missing required fields"
    assert stub_client.calls == 0


@pytest.mark.parametrize(
    "field,value",
    [
        ("role", ""),
        ("topicsToFocus", ""),
        ("numberOfQuestions", 0),
        ("numberOfQuestions", -1),
        ("experience", None),
    ],
)
def test_questions_empty_field_counts_as_missing(client, stub_client, field, value):
    resp = client.post(QUESTIONS_URL, json={**VALID_BODY, field: value})

    assert resp.status_code == 400
    assert stub_client.calls == 0


def test_questions_without_body_is_400(client, stub_client):
    resp = client.post(QUESTIONS_URL)

    assert resp.status_code == 400
    assert stub_client.calls == 0


def test_questions_valid_json_is_returned_as_is(client, stub_client):
    stub_client.text = '[{"question":"Q1","answer":"A1"}]'

    resp = client.post(QUESTIONS_URL, json=VALID_BODY)

    assert resp.status_code == 200
    assert resp.json() == [{"question": "Q1", "answer": "A1"}]
    assert stub_client.calls == 1
    prompt = stub_client.prompts[0]
    assert "Role: Frontend Developer" in prompt
    assert "Candidate Experience: 2 years" in prompt
    assert "Focus Topics: React, CSS" in prompt
    assert "Write 5 interview questions" in prompt


def test_questions_json_of_other_shape_passes_through(client, stub_client):
    stub_client.text = '{"unexpected": true}'

    resp = client.post(QUESTIONS_URL, json=VALID_BODY)

    assert resp.status_code == 200
    assert resp.json() == {"unexpected": True}


def test_questions_non_json_falls_back_to_result(client, stub_client):
    stub_client.text = "not json"

    resp = client.post(QUESTIONS_URL, json=VALID_BODY)

    assert resp.status_code == 200
    assert resp.json() == {"result": "not json"}


@pytest.mark.parametrize(
    "text", ["NaN", "-Infinity", '[{"question":"Q","answer":"A","x":Infinity}]']
)
def test_questions_non_standard_json_constants_fall_back_to_result(client, stub_client, text):
    stub_client.text = text

    resp = client.post(QUESTIONS_URL, json=VALID_BODY)

    assert resp.status_code == 200
    assert resp.json() == {"result": text}


def test_questions_deeply_nested_json_falls_back_to_result(client, stub_client):
    stub_client.text = "[" * 100000 + "]" * 100000

    resp = client.post(QUESTIONS_URL, json=VALID_BODY)

    assert resp.status_code == 200
    assert resp.json() == {"result": stub_client.text}


def test_explanation_overlong_question_is_rejected(client, stub_client):
    resp = client.post(EXPLANATION_URL, json={"question": "x" * 50000})

    assert resp.status_code == 422
    assert stub_client.calls == 0


def test_questions_empty_text_is_500(client, stub_client):
    stub_client.text = ""

    resp = client.post(QUESTIONS_URL, json=VALID_BODY)

    assert resp.status_code == 500
    assert "Empty response" in resp.json()["detail"]


@pytest.mark.parametrize(
    "error", [UpstreamCallError("API key not valid"), UpstreamTimeoutError("timed out")]
)
def test_questions_upstream_error_is_500_with_message(client, stub_client, error):
    stub_client.error = error

    resp = client.post(QUESTIONS_URL, json=VALID_BODY)

    assert resp.status_code == 500
    assert resp.json()["detail"] == f"Failed to generate questions: {error}"


@pytest.mark.parametrize("field", ["role", "experience", "topicsToFocus"])
def test_questions_overlong_field_is_rejected_before_generation(client, stub_client, field):
    resp = client.post(QUESTIONS_URL, json={**VALID_BODY, field: "x" * 50000})

    assert resp.status_code == 422
    assert stub_client.calls == 0


@pytest.mark.parametrize(
    "text",
    ['{"title":"T","explanation":"E"}', "Closures capture variables from the enclosing scope."],
)
def test_explanation_returns_text_verbatim(client, stub_client, text):
    stub_client.text = text

    resp = client.post(EXPLANATION_URL, json={"question": "What is a closure?"})

    assert resp.status_code == 200
    assert resp.json() == {"explanation": text}
    assert '"What is a closure?"' in stub_client.prompts[0]


@pytest.mark.parametrize("body", [{}, {"question": ""}, None])
def test_explanation_missing_question_is_400(client, stub_client, body):
    resp = client.post(EXPLANATION_URL, json=body)

    assert resp.status_code == 400
    assert resp.json()["detail"] == "Missing required fields"
    assert stub_client.calls == 0


def test_explanation_empty_text_is_500(client, stub_client):
    stub_client.text = ""

    resp = client.post(EXPLANATION_URL, json={"question": "Q"})

    assert resp.status_code == 500
    assert resp.json()["detail"].startswith("Failed to generate explanation")


def test_ai_endpoints_require_authentication(anon_client, stub_client):
    assert anon_client.post(QUESTIONS_URL, json=VALID_BODY).status_code == 401
    assert anon_client.post(EXPLANATION_URL, json={"question": "Q"}).status_code == 401
    assert stub_client.calls == 0
