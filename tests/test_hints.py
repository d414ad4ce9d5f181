import pytest
from sqlalchemy import func, select

from conftest import StubTextGenerator
from errors import NotFoundError, ValidationError
from models import ProblemSession, Submission
from services.hints import get_hint


def _make_session(db, text="A pen costs $2.50. How much do 4 pens cost?", answer=10.0, difficulty="easy"):
    s = ProblemSession(problem_text=text, correct_answer=answer, difficulty=difficulty)
    db.add(s)
    db.commit()
    return s.id


def test_three_tiers_do_not_write(db):
    sid = _make_session(db)
    llm = StubTextGenerator(["  Think about multiplication.  ", "Multiply price by count.", "2.50 x 2 = 5.00"])

    hints = [get_hint(db, llm, sid, lvl) for lvl in (1, 2, 3)]

    assert [h.hint for h in hints] == [
        "Think about multiplication.",
        "Multiply price by count.",
        "2.50 x 2 = 5.00",
    ]
    assert [h.hint_level for h in hints] == [1, 2, 3]
    assert all(h.problem_text.startswith("A pen costs") for h in hints)
    assert "Hint Level: 2 of 3" in llm.prompts[1]

    db.expire_all()
    row = db.get(ProblemSession, sid)
    assert row.problem_text.startswith("A pen costs") and row.correct_answer == 10.0
    assert db.scalar(select(func.count()).select_from(ProblemSession)) == 1
    assert db.scalar(select(func.count()).select_from(Submission)) == 0


def test_digit_string_level_accepted(db):
    sid = _make_session(db)
    assert get_hint(db, StubTextGenerator(["ok"]), sid, "2").hint_level == 2


@pytest.mark.parametrize("level", [None, 0, "", 4, -1, "abc", 1.5])
def test_invalid_level(db, level):
    sid = _make_session(db)
    llm = StubTextGenerator()
    with pytest.raises(ValidationError):
        get_hint(db, llm, sid, level)
    assert llm.prompts == []


def test_unknown_session(db):
    llm = StubTextGenerator()
    with pytest.raises(NotFoundError):
        get_hint(db, llm, "no-such-session", 1)
    assert llm.prompts == []


def test_hint_endpoint(client, llm, db):
    sid = _make_session(db)
    llm.default = "What operation joins equal groups?"
    r = client.post("/get-hint", json={"sessionId": sid, "hintLevel": 1})
    assert r.status_code == 200
    assert r.json() == {
        "hint": "What operation joins equal groups?",
        "hintLevel": 1,
        "problemText": "A pen costs $2.50. How much do 4 pens cost?",
    }


def test_hint_endpoint_errors(client, db):
    sid = _make_session(db)
    assert client.post("/get-hint", json={"sessionId": sid}).status_code == 400
    assert client.post("/get-hint", json={"hintLevel": 1}).status_code == 400
    assert client.post("/get-hint", json={"sessionId": sid, "hintLevel": 5}).status_code == 400
    assert client.post("/get-hint", json={"sessionId": "missing", "hintLevel": 1}).status_code == 404


def test_integral_float_level_accepted(db):
    sid = _make_session(db)
    assert get_hint(db, StubTextGenerator(["ok"]), sid, 2.0).hint_level == 2


def test_hint_endpoint_float_level(client, db):
    sid = _make_session(db)
    r = client.post("/get-hint", json={"sessionId": sid, "hintLevel": 3.0})
    assert r.status_code == 200
    assert r.json()["hintLevel"] == 3


def test_hint_endpoint_upstream_failure(client, llm, db):
    from errors import UpstreamError

    sid = _make_session(db)
    llm.replies = [UpstreamError("model down")]
    r = client.post("/get-hint", json={"sessionId": sid, "hintLevel": 1})
    assert r.status_code == 500
    assert r.json()["detail"] == "Failed to generate hint"
