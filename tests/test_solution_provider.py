"""
Testing solution resolution: live fetch, offline cache and fallback word.
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from conftest import DAY, BrokenStorage, failing_fetcher, fixed_fetcher
from dailyword.exceptions import ProviderUnavailable
from dailyword.models.game import Provenance
from dailyword.services.daily_identity import keys
from dailyword.services.solution_provider import (
    NOTICES, HttpSolutionFetcher, SolutionProvider, extract_solution
)
from dailyword.storage import BestEffortStorage


def test_live_fetch_is_cached(storage, backend):
    provider = SolutionProvider(fixed_fetcher("CRANE"), storage)

    assert provider.resolve(DAY) == ("crane", Provenance.LIVE)
    assert backend.get(keys(DAY).solution_key) == "crane"


def test_failed_fetch_uses_cache(storage, backend):
    backend.set(keys(DAY).solution_key, "plumb")
    provider = SolutionProvider(failing_fetcher, storage)

    assert provider.resolve(DAY) == ("plumb", Provenance.CACHED)


def test_failed_fetch_without_cache_uses_fallback(storage):
    provider = SolutionProvider(failing_fetcher, storage, default_solution="house")

    assert provider.resolve(DAY) == ("house", Provenance.FALLBACK)


def test_default_fallback_word(storage):
    provider = SolutionProvider(failing_fetcher, storage)

    assert provider.resolve(DAY) == ("crane", Provenance.FALLBACK)


def test_cache_from_another_day_is_ignored(storage, backend):
    backend.set(keys("2026-10-17").solution_key, "plumb")
    provider = SolutionProvider(failing_fetcher, storage, default_solution="house")

    assert provider.resolve(DAY) == ("house", Provenance.FALLBACK)


def test_invalid_cached_word_is_ignored(storage, backend):
    backend.set(keys(DAY).solution_key, "no")
    provider = SolutionProvider(failing_fetcher, storage, default_solution="house")

    assert provider.resolve(DAY) == ("house", Provenance.FALLBACK)


def test_invalid_fetched_word_counts_as_failure(storage, backend):
    backend.set(keys(DAY).solution_key, "plumb")
    provider = SolutionProvider(fixed_fetcher("toolong"), storage)

    assert provider.resolve(DAY) == ("plumb", Provenance.CACHED)
    assert backend.get(keys(DAY).solution_key) == "plumb"


def test_live_fetch_survives_broken_storage():
    provider = SolutionProvider(fixed_fetcher("crane"), BestEffortStorage(BrokenStorage()))

    assert provider.resolve(DAY) == ("crane", Provenance.LIVE)


def test_fetcher_called_once_per_resolve(storage):
    fetcher = MagicMock(side_effect=ProviderUnavailable("timeout"))
    provider = SolutionProvider(fetcher, storage)

    provider.resolve(DAY)
    fetcher.assert_called_once_with(DAY)


def test_notices():
    assert NOTICES[Provenance.LIVE] is None
    assert NOTICES[Provenance.CACHED] == "Offline: using cached solution"
    assert NOTICES[Provenance.FALLBACK] == "Offline: using fallback solution"


@pytest.mark.parametrize("payload", [
    {"solution": "CRANE"},
    [{"solution": "crane"}],
    {"id": 1, "solution": " crane ", "print_date": DAY},
])
def test_extract_solution_shapes(payload):
    assert extract_solution(payload) == "crane"


@pytest.mark.parametrize("payload", [
    {},
    [],
    None,
    "crane",
    {"solution": 12345},
    {"solution": "cranes"},
    {"solution": "cr4ne"},
])
def test_extract_solution_rejects_bad_payloads(payload):
    with pytest.raises(ProviderUnavailable):
        extract_solution(payload)


def _response(payload=None, status_error=None, json_error=None):
    response = MagicMock()
    if status_error:
        response.raise_for_status.side_effect = status_error
    if json_error:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@patch('dailyword.services.solution_provider.requests.get')
def test_http_fetcher_success(mock_get):
    mock_get.return_value = _response({"solution": "Crane"})
    fetcher = HttpSolutionFetcher("https://example.test/{day}.json", timeout=2.5)

    assert fetcher(DAY) == "crane"
    mock_get.assert_called_once_with(f"https://example.test/{DAY}.json", timeout=2.5)


@patch('dailyword.services.solution_provider.requests.get')
def test_http_fetcher_bad_status(mock_get):
    mock_get.return_value = _response(status_error=requests.HTTPError("404"))
    fetcher = HttpSolutionFetcher("https://example.test/{day}.json")

    with pytest.raises(ProviderUnavailable):
        fetcher(DAY)


@patch('dailyword.services.solution_provider.requests.get')
def test_http_fetcher_network_error(mock_get):
    mock_get.side_effect = requests.ConnectionError("offline")
    fetcher = HttpSolutionFetcher("https://example.test/{day}.json")

    with pytest.raises(ProviderUnavailable):
        fetcher(DAY)


@patch('dailyword.services.solution_provider.requests.get')
def test_http_fetcher_timeout_falls_back_to_cache(mock_get, storage, backend):
    mock_get.side_effect = requests.Timeout("slow")
    backend.set(keys(DAY).solution_key, "plumb")
    provider = SolutionProvider(HttpSolutionFetcher("https://example.test/{day}.json"), storage)

    assert provider.resolve(DAY) == ("plumb", Provenance.CACHED)
    assert mock_get.call_count == 1


@patch('dailyword.services.solution_provider.requests.get')
def test_http_fetcher_invalid_json(mock_get):
    mock_get.return_value = _response(json_error=ValueError("not json"))
    fetcher = HttpSolutionFetcher("https://example.test/{day}.json")

    with pytest.raises(ProviderUnavailable):
        fetcher(DAY)
