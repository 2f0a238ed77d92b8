"""
Testing save, load and sanitizing of persisted progress.
"""

import json
from types import SimpleNamespace

import pytest

from conftest import DAY, OTHER_DAY, BrokenStorage
from dailyword.exceptions import StateCorrupt
from dailyword.models.game import PersistedState
from dailyword.services.daily_identity import keys
from dailyword.services.session_store import (
    SessionStore, decode_state, encode_state, sanitize_guess
)
from dailyword.storage import BestEffortStorage


def _session(guesses, col=0):
    return SimpleNamespace(guesses=guesses, cursor_row=len(guesses), cursor_col=col)


def test_save_writes_compact_record(storage, backend):
    SessionStore(storage, DAY).save(_session(["slate", "crane"]))

    raw = backend.get(keys(DAY).state_key)
    assert raw == '{"guesses":["slate","crane"],"cursorRow":2,"cursorCol":0}'


def test_load_roundtrip(storage):
    store = SessionStore(storage, DAY)
    store.save(_session(["slate", "crane"]))

    assert store.load() == PersistedState(guesses=["slate", "crane"], cursor_row=2, cursor_col=0)


def test_resave_is_byte_identical(storage, backend):
    store = SessionStore(storage, DAY)
    store.save(_session(["slate", "pious", "crane"]))
    first = backend.get(keys(DAY).state_key)

    loaded = store.load()
    store.save(_session(loaded.guesses, loaded.cursor_col))

    assert backend.get(keys(DAY).state_key) == first


def test_save_sanitizes_guesses(storage, backend):
    SessionStore(storage, DAY).save(_session(["Sl ate", "c-r4ane"]))

    record = json.loads(backend.get(keys(DAY).state_key))
    assert record["guesses"] == ["slate", "crane"]


def test_load_sanitizes_tampered_guesses(storage, backend):
    backend.set(keys(DAY).state_key, json.dumps({
        "guesses": ["S L A T E", "cr@ne", 42, None],
        "cursorRow": 4,
        "cursorCol": 0,
    }))

    assert SessionStore(storage, DAY).load().guesses == ["slate", "crne", "", ""]


def test_load_truncates_to_rows(storage, backend):
    backend.set(keys(DAY).state_key, json.dumps({"guesses": ["slate"] * 9}))

    state = SessionStore(storage, DAY).load()
    assert state.guesses == ["slate"] * 6
    assert state.cursor_row == 6


@pytest.mark.parametrize("raw", [
    None,
    "",
    "{not json",
    "[]",
    "42",
    '{"cursorRow": 1}',
    '{"guesses": "slate"}',
    '{"guesses": {"0": "slate"}}',
])
def test_load_unusable_records_as_absent(storage, backend, raw):
    if raw is not None:
        backend.set(keys(DAY).state_key, raw)

    assert SessionStore(storage, DAY).load() is None


def test_decode_rejects_missing_guess_list():
    with pytest.raises(StateCorrupt):
        decode_state('{"cursorRow": 0}')


def test_decode_bounds_cursor():
    state = decode_state('{"guesses": ["slate"], "cursorRow": 99, "cursorCol": true}')
    assert state.cursor_row == 1
    assert state.cursor_col == 0


def test_encode_state_is_stable():
    state = PersistedState(guesses=["crane"], cursor_row=1, cursor_col=0)
    assert encode_state(state) == encode_state(decode_state(encode_state(state)))


def test_sanitize_guess():
    assert sanitize_guess("CrAnE") == "crane"
    assert sanitize_guess(" c.r a-n e\n") == "crane"
    assert sanitize_guess("crâne") == "crne"
    assert sanitize_guess(None) == ""
    assert sanitize_guess(["crane"]) == ""


def test_played_flag(storage):
    store = SessionStore(storage, DAY)
    assert store.is_played() is False

    store.mark_played()
    assert store.is_played() is True

    store.clear_played()
    assert store.is_played() is False


def test_played_flag_other_values_are_not_played(storage, backend):
    backend.set(keys(DAY).played_key, "yes")
    assert SessionStore(storage, DAY).is_played() is False


def test_days_do_not_share_state(storage):
    SessionStore(storage, DAY).save(_session(["slate"]))
    SessionStore(storage, DAY).mark_played()

    other = SessionStore(storage, OTHER_DAY)
    assert other.load() is None
    assert other.is_played() is False


def test_storage_failures_are_swallowed():
    store = SessionStore(BestEffortStorage(BrokenStorage()), DAY)

    assert store.save(_session(["slate"])) is False
    assert store.load() is None
    assert store.is_played() is False
    assert store.mark_played() is False
    assert store.clear_played() is False
