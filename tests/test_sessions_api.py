from tests.conftest import login_as


SESSION_BODY = {
    "role": "Backend Developer",
    "experience": 4,
    "topicsToFocus": "Python, SQL",
    "description": "Prep for onsite",
    "questions": [
        {"question": "What is an index?", "answer": "A lookup structure."},
        {"question": "What is the GIL?", "answer": "A global interpreter lock."},
    ],
}


def create_session(client, **overrides):
    resp = client.post("/api/sessions/create", json={**SESSION_BODY, **overrides})
    assert resp.status_code == 201, resp.text
    return resp.json()["session"]


def test_create_session_with_questions(client, user):
    resp = client.post("/api/sessions/create", json=SESSION_BODY)

    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    session = body["session"]
    assert session["userId"] == user.id
    assert session["role"] == "Backend Developer"
    assert session["experience"] == "4"
    assert session["topicsToFocus"] == "Python, SQL"
    assert [q["question"] for q in session["questions"]] == [
        "What is an index?",
        "What is the GIL?",
    ]
    assert all(q["isPinned"] is False for q in session["questions"])


def test_create_session_requires_role(client):
    resp = client.post("/api/sessions/create", json={**SESSION_BODY, "role": ""})
    assert resp.status_code == 422


def test_my_sessions_newest_first_and_scoped_to_user(app, client, user, other_user):
    first = create_session(client, role="First")
    second = create_session(client, role="Second")
    login_as(app, other_user)
    create_session(client, role="Someone else's")
    login_as(app, user)

    resp = client.get("/api/sessions/my-sessions")

    assert resp.status_code == 200
    assert [s["id"] for s in resp.json()] == [second["id"], first["id"]]
    assert len(resp.json()[0]["questions"]) == 2


def test_get_session_orders_pinned_questions_first(client):
    session = create_session(client)
    second_question = session["questions"][1]
    client.post(f"/api/questions/{second_question['id']}/pin")

    resp = client.get(f"/api/sessions/{session['id']}")

    assert resp.status_code == 200
    questions = resp.json()["session"]["questions"]
    assert questions[0]["id"] == second_question["id"]
    assert questions[0]["isPinned"] is True
    assert questions[1]["isPinned"] is False


def test_get_session_not_found(app, client, other_user):
    assert client.get("/api/sessions/9999").status_code == 404

    session = create_session(client)
    login_as(app, other_user)
    assert client.get(f"/api/sessions/{session['id']}").status_code == 404


def test_delete_session_owner_only(app, client, user, other_user):
    session = create_session(client)

    login_as(app, other_user)
    resp = client.delete(f"/api/sessions/{session['id']}")
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Not authorized to delete this session"

    login_as(app, user)
    resp = client.delete(f"/api/sessions/{session['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Session deleted successfully"}

    assert client.get(f"/api/sessions/{session['id']}").status_code == 404
    question_id = session["questions"][0]["id"]
    assert client.post(f"/api/questions/{question_id}/pin").status_code == 404


def test_delete_missing_session(client):
    assert client.delete("/api/sessions/4242").status_code == 404
