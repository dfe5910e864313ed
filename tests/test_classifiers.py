import pytest

from campus_calm.conversation.classifiers import (
    Message, ClassificationSignals, classify, classify_turn, latest_user_message,
)
from campus_calm.conversation.lexicon import Lexicon, SignalKind, load_lexicon


@pytest.fixture(scope="module")
def lexicon():
    return load_lexicon()


def user(text):
    return Message(role="user", content=text)


def test_bundled_lexicon_has_every_kind(lexicon):
    for kind in SignalKind:
        assert lexicon.for_kind(kind), kind
        assert all(p == p.lower() for p in lexicon.for_kind(kind))

@pytest.mark.parametrize("text", [
    "I want to die",
    "I want to end my life",
    "Sometimes I think about SUICIDE",
    "honestly everyone would be better off dead without me",
])
def test_crisis_phrases_flag(lexicon, text):
    assert classify(SignalKind.CRISIS, text, lexicon) is True

@pytest.mark.parametrize("text", ["I had a great day", "exams went fine", ""])
def test_no_crisis_phrases(lexicon, text):
    assert classify(SignalKind.CRISIS, text, lexicon) is False

def test_missing_text_is_false(lexicon):
    for kind in SignalKind:
        assert classify(kind, None, lexicon) is False

def test_matching_ignores_negation(lexicon):
    # substring containment: negated statements still match
    assert classify(SignalKind.CRISIS, "I'm not going to hurt myself", lexicon) is True
    assert classify(SignalKind.BREATHING, "I'm not anxious at all", lexicon) is True

def test_substring_has_no_word_boundaries():
    lex = Lexicon.from_mapping({"breathing": ["tense"]})
    assert classify(SignalKind.BREATHING, "such an intense week", lex) is True

def test_signals_can_co_occur(lexicon):
    signals = classify_turn([user("I'm so anxious I can't take it anymore, need to relax")], lexicon)
    assert signals.breathing_need is True
    assert signals.calming_audio_need is True
    assert signals.crisis is False

def test_exam_anxiety_suggests_breathing(lexicon):
    signals = classify_turn([user("I feel anxious before exams")], lexicon)
    assert signals == ClassificationSignals(breathing_need=True)

def test_mood_journal_need(lexicon):
    signals = classify_turn([user("My mood has been all up and down lately")], lexicon)
    assert signals.mood_journal_need is True

def test_only_latest_user_message_counts(lexicon):
    history = [
        user("I want to die"),
        Message(role="assistant", content="I'm really glad you told me. Are you safe right now?"),
        user("yes, I had a great day actually"),
    ]
    assert classify_turn(history, lexicon).crisis is False

def test_latest_user_message_skips_assistant_turns():
    history = [user("first"), Message(role="assistant", content="reply")]
    assert latest_user_message(history).content == "first"
    assert latest_user_message([Message(role="assistant", content="hi")]) is None

def test_classification_is_deterministic(lexicon):
    history = [user("stressed and can't sleep, I want to die")]
    first = classify_turn(history, lexicon)
    for _ in range(5):
        assert classify_turn(history, lexicon) == first

def test_substituted_lexicon():
    lex = Lexicon.from_mapping({"crisis": ["Code Red"], "calming_audio": ["rain"]})
    signals = classify_turn([user("code red, put on some rain sounds")], lex)
    assert signals.crisis and signals.calming_audio_need
    assert not signals.breathing_need and not signals.mood_journal_need

def test_load_lexicon_from_file(tmp_path):
    path = tmp_path / "words.yaml"
    path.write_text("crisis:\n  - Mayday\nbreathing: []\n", encoding="utf-8")
    lex = load_lexicon(str(path))
    assert lex.for_kind(SignalKind.CRISIS) == frozenset({"mayday"})
    assert lex.for_kind(SignalKind.MOOD_JOURNAL) == frozenset()

def test_load_lexicon_rejects_unknown_kind(tmp_path):
    path = tmp_path / "words.yaml"
    path.write_text("sadness:\n  - blue\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_lexicon(str(path))

def test_lexicon_rejects_bare_string():
    with pytest.raises(ValueError):
        Lexicon.from_mapping({"crisis": "suicide"})
