import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from conftest import PROBLEM_REPLY, StubTextGenerator
from errors import NotFoundError, PersistenceError, ValidationError
from models import ProblemSession, Submission
from services.problems import generate_problem
from services.submissions import submit_answer


def _make_session(db, answer=54.0):
    s = ProblemSession(problem_text="How many cookies are left?", correct_answer=answer, difficulty="medium")
    db.add(s)
    db.commit()
    return s.id


def _submission_count(db):
    return db.scalar(select(func.count()).select_from(Submission))


@pytest.mark.parametrize(
    "answer,expected",
    [(54, True), ("54", True), (54.005, True), (54.02, False), (53, False), ("fifty-four", False)],
)
def test_correctness_rule(db, answer, expected):
    sid = _make_session(db)
    out = submit_answer(db, StubTextGenerator(["Nice."]), sid, answer)
    assert out.is_correct is expected
    assert out.correct_answer == 54


def test_submission_is_persisted(db):
    sid = _make_session(db)
    llm = StubTextGenerator(["  Good try! Check your subtraction.  "])
    out = submit_answer(db, llm, sid, "50", hints_used=2)

    assert out.feedback == "Good try! Check your subtraction."
    row = db.scalars(select(Submission)).one()
    assert row.session_id == sid
    assert row.user_answer == 50.0
    assert row.is_correct is False
    assert row.feedback_text == out.feedback
    assert row.hints_used == 2

    prompt = llm.prompts[0]
    assert "Result: INCORRECT" in prompt
    assert "Hints Used: 2" in prompt
    assert "Student's Answer: 50" in prompt


def test_non_numeric_answer_stored_as_null(db):
    sid = _make_session(db)
    out = submit_answer(db, StubTextGenerator(), sid, "no idea")
    assert out.is_correct is False
    assert db.scalars(select(Submission)).one().user_answer is None


def test_evaluator_sees_generated_problem(db):
    gen = generate_problem(db, StubTextGenerator([PROBLEM_REPLY]), "easy")
    llm = StubTextGenerator(["Yes!"])
    out = submit_answer(db, llm, gen.session_id, gen.problem.final_answer)

    assert out.is_correct is True
    assert out.correct_answer == gen.problem.final_answer
    assert gen.problem.problem_text in llm.prompts[0]


def test_multiple_submissions_per_session_allowed(db):
    sid = _make_session(db)
    llm = StubTextGenerator()
    submit_answer(db, llm, sid, 1)
    submit_answer(db, llm, sid, 54)
    assert _submission_count(db) == 2


def test_unknown_session_writes_nothing(db):
    llm = StubTextGenerator()
    with pytest.raises(NotFoundError):
        submit_answer(db, llm, "does-not-exist", 5)
    assert llm.prompts == []
    assert _submission_count(db) == 0


@pytest.mark.parametrize(
    "session_id,answer,hints",
    [(None, 5, 0), ("", 5, 0), ("x", None, 0), ("x", 5, 4), ("x", 5, -1), ("x", 5, "two")],
)
def test_validation(db, session_id, answer, hints):
    with pytest.raises(ValidationError):
        submit_answer(db, StubTextGenerator(), session_id, answer, hints)


def test_hints_used_none_defaults_to_zero(db):
    sid = _make_session(db)
    submit_answer(db, StubTextGenerator(), sid, 54, None)
    assert db.scalars(select(Submission)).one().hints_used == 0


def test_store_failure_discards_feedback(db, monkeypatch):
    sid = _make_session(db)

    def boom():
        raise OperationalError("INSERT", {}, Exception("locked"))

    monkeypatch.setattr(db, "commit", boom)
    llm = StubTextGenerator(["Lovely work"])
    with pytest.raises(PersistenceError):
        submit_answer(db, llm, sid, 54)
    assert len(llm.prompts) == 1
    monkeypatch.undo()
    assert _submission_count(db) == 0


# ---------- endpoint ----------


def test_submit_endpoint(client, llm, db):
    sid = _make_session(db, answer=12.5)
    llm.default = "Well done!"
    r = client.post("/submit-answer", json={"sessionId": sid, "userAnswer": "12.5", "hintsUsed": 1})
    assert r.status_code == 200
    assert r.json() == {"isCorrect": True, "feedback": "Well done!", "correctAnswer": 12.5}


def test_submit_endpoint_errors(client, llm, db):
    sid = _make_session(db)
    assert client.post("/submit-answer", json={"userAnswer": 3}).status_code == 400
    assert client.post("/submit-answer", json={"sessionId": sid}).status_code == 400

    r = client.post("/submit-answer", json={"sessionId": "ghost", "userAnswer": 3})
    assert r.status_code == 404
    assert r.json()["detail"] == "Session not found"
    assert _submission_count(db) == 0


def test_submit_endpoint_upstream_failure(client, llm, db):
    from errors import UpstreamError

    sid = _make_session(db)
    llm.replies = [UpstreamError("timeout")]
    r = client.post("/submit-answer", json={"sessionId": sid, "userAnswer": 54})
    assert r.status_code == 500
    assert r.json()["detail"] == "Failed to process submission"
    assert _submission_count(db) == 0


def test_submit_endpoint_huge_integer_is_scored(client, llm, db):
    sid = _make_session(db)
    r = client.post("/submit-answer", json={"sessionId": sid, "userAnswer": 10**400})
    assert r.status_code == 200
    assert r.json()["isCorrect"] is False
    row = db.scalars(select(Submission)).one()
    assert row.user_answer is None and row.is_correct is False
