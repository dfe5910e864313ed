from campus_calm.conversation.personas import resolve
from campus_calm.conversation.shaper import FALLBACK_REPLY
from campus_calm.llm.openai_client import CompletionError, CompletionTimeout
from campus_calm.llm.prompts import SYSTEM


def say(text, **extra):
    body = {"messages": [{"role": "user", "content": text}]}
    body.update(extra)
    return body

def test_exam_anxiety_suggests_breathing(client):
    r = client.post("/api/chat", json=say("I feel anxious before exams"))
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["suggestions"]["breathingExercise"] is True
    assert data["crisisDetected"] is False
    assert data["crisisLevel"] == "none"
    assert data["content"]

def test_crisis_message_is_flagged(client):
    r = client.post("/api/chat", json=say("I want to end my life"))
    data = r.json()
    assert data["crisisDetected"] is True
    assert data["crisisLevel"] == "critical"

def test_full_history_and_persona_reach_the_model(client, fake_llm):
    body = {
        "messages": [
            {"role": "user", "content": "hey"},
            {"role": "assistant", "content": "Hi! What's up?"},
            {"role": "user", "content": "can't sleep again"},
        ],
        "userContext": {"persona": "humorous", "name": "Sam", "recentMood": "7", "theme": "dark"},
    }
    r = client.post("/api/chat", json=body)
    assert r.status_code == 200
    assert r.json()["suggestions"]["calmingAudio"] is True
    sent = fake_llm.calls[0]["messages"]
    assert sent[0] == {"role": "system", "content": SYSTEM + resolve("humorous")}
    assert sent[1:] == body["messages"]

def test_unknown_persona_is_ignored(client, fake_llm):
    r = client.post("/api/chat", json=say("hello", userContext={"persona": "pirate"}))
    assert r.status_code == 200
    assert fake_llm.calls[0]["messages"][0]["content"] == SYSTEM

def test_null_user_context(client, fake_llm):
    r = client.post("/api/chat", json=say("hello", userContext=None))
    assert r.status_code == 200

def test_empty_reply_uses_fallback(client, fake_llm):
    fake_llm.reply = None
    r = client.post("/api/chat", json=say("hello"))
    assert r.json()["content"] == FALLBACK_REPLY

def test_malformed_requests_are_rejected(client, fake_llm):
    assert client.post("/api/chat", json={}).status_code == 422
    assert client.post("/api/chat", json={"messages": []}).status_code == 422
    assert client.post("/api/chat", json={"messages": [{"role": "system", "content": "x"}]}).status_code == 422
    only_assistant = {"messages": [{"role": "assistant", "content": "hi"}]}
    assert client.post("/api/chat", json=only_assistant).status_code == 422
    assert fake_llm.calls == []

def test_upstream_failure_is_an_error(client, fake_llm):
    fake_llm.error = CompletionError("503 from provider")
    r = client.post("/api/chat", json=say("I want to die"))
    assert r.status_code == 500
    data = r.json()
    assert "988" in data["error"]
    assert "content" not in data

def test_upstream_timeout_is_retryable(client, fake_llm):
    fake_llm.error = CompletionTimeout("slow")
    r = client.post("/api/chat", json=say("hello"))
    assert r.status_code == 504
    assert r.json()["retryable"] is True
