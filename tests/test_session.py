import pytest

from wordle_assistant.chooser import FixedIndexChooser, RandomChooser
from wordle_assistant.errors import MalformedFeedback
from wordle_assistant.session import Session, SessionState, report_round, run_session


def make_session(words, index=0):
    session = Session(words, chooser=FixedIndexChooser(index))
    session.start()
    return session


def feed(lines):
    it = iter(lines)
    return lambda: next(it, None)


def test_start_prefers_opener():
    session = make_session(["crane", "audio", "zesty"])
    assert session.guess == "audio"
    assert session.state is SessionState.AWAITING_FEEDBACK
    assert session.candidates == ["crane", "audio", "zesty"]


def test_start_falls_back_to_full_dictionary(small_words):
    session = make_session(small_words)
    assert session.guess == "crane"


def test_start_on_empty_dictionary_is_exhausted():
    session = Session([], chooser=FixedIndexChooser())
    assert session.start() is None
    assert session.state is SessionState.EXHAUSTED
    assert session.finished


def test_single_word_is_always_chosen():
    session = Session(["crane"], chooser=RandomChooser(seed=5))
    assert session.start() == "crane"


def test_rejected_guess_is_removed():
    session = make_session(["zesty", "crane", "cloud"])
    assert session.guess == "zesty"
    assert session.submit("ERROR\n") is SessionState.AWAITING_FEEDBACK
    assert session.candidates == ["crane", "cloud"]
    assert session.guess == "crane"
    assert session.rounds == 0


def test_all_correct_solves_without_pruning(small_words):
    session = make_session(small_words)
    assert session.submit("GGGGG") is SessionState.SOLVED
    assert session.candidates == small_words
    assert session.finished


def test_feedback_prunes_and_rechooses(small_words):
    session = make_session(small_words)
    assert session.submit("G____\n") is SessionState.AWAITING_FEEDBACK
    assert session.candidates == ["cloud"]
    assert session.guess == "cloud"

    assert session.submit("GGGGG") is SessionState.SOLVED
    assert session.rounds == 2
    assert session.history == [("crane", "G____"), ("cloud", "GGGGG")]


def test_long_response_is_truncated(small_words):
    session = make_session(small_words)
    session.submit("G____ and some notes")
    assert session.candidates == ["cloud"]


def test_no_consistent_word_exhausts():
    session = make_session(["crane", "zesty"])
    assert session.submit("_____") is SessionState.EXHAUSTED
    assert session.candidates == []
    assert session.guess is None


def test_malformed_feedback_leaves_session_unchanged(small_words):
    session = make_session(small_words)
    with pytest.raises(MalformedFeedback):
        session.submit("GXG__")
    assert session.state is SessionState.AWAITING_FEEDBACK
    assert session.candidates == small_words
    assert session.guess == "crane"


def test_submit_requires_started_session(small_words):
    session = Session(small_words, chooser=FixedIndexChooser())
    with pytest.raises(RuntimeError):
        session.submit("GGGGG")


def test_start_twice_fails(small_words):
    session = make_session(small_words)
    with pytest.raises(RuntimeError):
        session.start()


def test_report_round_lists_short_candidate_lists(small_words):
    out = []
    report_round(make_session(small_words), out.append, display_limit=10)
    assert out == ["Possibilities: 4", "['crane', 'cloud', 'cigar', 'zesty']"]


def test_report_round_shows_guess_for_long_lists(small_words):
    out = []
    report_round(make_session(small_words), out.append, display_limit=2)
    assert out == ["Possibilities: 4", "Guess: crane."]


def test_run_session_reprompts_on_malformed_feedback(small_words):
    out = []
    session = Session(small_words, chooser=FixedIndexChooser())
    state = run_session(session, feed(["GXG__\n", "G____\n", "GGGGG\n"]), out.append)
    assert state is SessionState.SOLVED
    assert any(line.startswith("Invalid feedback") for line in out)
    assert out[-1] == "Quitting..."
    assert "Possibilities: 1" in out


def test_run_session_reports_exhaustion():
    out = []
    session = Session(["crane", "zesty"], chooser=FixedIndexChooser())
    assert run_session(session, feed(["_____"]), out.append) is SessionState.EXHAUSTED
    assert out[-1] == "Word list exhausted. Quitting..."


def test_run_session_stops_at_end_of_input(small_words):
    session = Session(small_words, chooser=FixedIndexChooser())
    state = run_session(session, feed([]), lambda line: None)
    assert state is SessionState.AWAITING_FEEDBACK
    assert not session.finished


def test_verbose_start_names_chooser(small_words, capsys):
    Session(small_words, chooser=FixedIndexChooser(), verbose=True).start()
    assert "[session] chooser=fixed words=4" in capsys.readouterr().out
