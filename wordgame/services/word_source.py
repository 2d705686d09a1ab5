"""
Word Sources

Where target words come from and how guesses are checked against a
dictionary. The session only depends on the WordSource protocol; the
remote service and the bundled list are interchangeable.
"""

import random
from typing import Iterable, Optional, Protocol, Sequence

import requests

from ..config.game_settings import (
    ANSWER_LENGTH,
    DEFAULT_TARGET_WORD,
    FALLBACK_WORDS,
    WORD_LIST,
    is_well_formed_word,
)
from ..exceptions import WordSourceError
from ..utils.game_logger import game_logger


class WordSource(Protocol):
    def get_target_word(self) -> str:
        """Return the secret word for a new game; raise WordSourceError on failure."""

    def validate(self, word: str) -> bool:
        """Return whether word is accepted; raise WordSourceError on failure."""


class LocalWordSource:
    """
    Word source backed by an in-memory word list.

    Target words are drawn from `words`; guesses are accepted when they
    appear in `words` or in the optional `extra_guesses`.
    """

    def __init__(self, words: Optional[Sequence[str]] = None,
                 extra_guesses: Iterable[str] = (),
                 rng: Optional[random.Random] = None):
        self.words = [word.upper() for word in (words if words is not None else WORD_LIST)]
        if not self.words:
            raise ValueError("Word list cannot be empty")
        self.accepted = set(self.words) | {word.upper() for word in extra_guesses}
        self.rng = rng or random.Random()

    def get_target_word(self) -> str:
        return self.rng.choice(self.words)

    def validate(self, word: str) -> bool:
        return word.upper() in self.accepted


class RemoteWordSource:
    """
    Word source backed by the word-of-the-day HTTP service.

    GET  {base_url}/word-of-the-day  -> {"word": "..."}
    POST {base_url}/validate-word    {"word": "..."} -> {"validWord": bool}
    """

    def __init__(self, base_url: str, timeout: float = 5.0,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.http = session or requests.Session()

    def _request(self, method: str, path: str, **kwargs) -> dict:
        url = f"{self.base_url}/{path}"
        try:
            response = self.http.request(method, url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise WordSourceError(f"{method} {url} failed: {e}") from e
        except ValueError as e:
            raise WordSourceError(f"{method} {url} returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise WordSourceError(f"{method} {url} returned {type(data).__name__}, expected an object")
        return data

    def get_target_word(self) -> str:
        data = self._request('GET', 'word-of-the-day')
        word = data.get('word') or DEFAULT_TARGET_WORD
        if not isinstance(word, str):
            raise WordSourceError(f"Word of the day is not a string: {word!r}")
        return word.upper()

    def validate(self, word: str) -> bool:
        data = self._request('POST', 'validate-word', json={'word': word})
        if 'validWord' not in data:
            raise WordSourceError("Validation response is missing 'validWord'")
        return bool(data['validWord'])


def select_target_word(source: WordSource,
                       answer_length: int = ANSWER_LENGTH,
                       fallback_words: Sequence[str] = FALLBACK_WORDS,
                       rng: Optional[random.Random] = None) -> str:
    """
    Fetch a target word, substituting a fallback when the source fails.

    The returned word is always uppercase and answer_length letters long,
    so sessions never see a word source failure.
    """
    try:
        word = source.get_target_word().upper()
    except WordSourceError as e:
        game_logger.log_warning('target_word_fallback', reason=str(e))
    else:
        if is_well_formed_word(word, answer_length):
            return word
        game_logger.log_warning('target_word_fallback', reason=f"malformed word {word!r}")

    candidates = [w.upper() for w in fallback_words if is_well_formed_word(w.upper(), answer_length)]
    if not candidates:
        raise ValueError(f"No fallback word of length {answer_length} is configured")
    return (rng or random).choice(candidates)
