
from collections import namedtuple
import logging

from wordmap.dictionary import load_word_list
from wordmap.errors import (
    DuplicateWordError,
    EmptyInputError,
    InvalidDictionaryError,
    InvalidInputError,
    UnknownWordError,
    WordOverflowError,
)

logger = logging.getLogger(__name__)


Domain = namedtuple('Domain', ['name', 'max_value'])

INT32 = Domain('int', 2**31 - 1)
INT64 = Domain('long', 2**63 - 1)
BIG = Domain('big', None)

DOMAINS = {d.name: d for d in (INT32, INT64, BIG)}


def get_domain(name):
    try:
        return DOMAINS[name]
    except KeyError:
        raise InvalidInputError(
            'Unknown domain {!r}, expected one of {}'.format(
                name, ', '.join(sorted(DOMAINS))))


def _as_domain(domain):
    if isinstance(domain, str):
        return get_domain(domain)
    return domain


def _check_words(words):
    word_to_index = {}
    for i, w in enumerate(words):
        if not isinstance(w, str) or not w or len(w.split()) != 1 or w != w.strip():
            raise InvalidDictionaryError(
                'Word {} ({!r}) is empty or contains whitespace'.format(i, w))
        if w in word_to_index:
            raise DuplicateWordError(w, word_to_index[w], i)
        word_to_index[w] = i
    return word_to_index


class WordMapper:
    '''
    Maps non-negative integers to and from strings of dictionary words.

    The dictionary size is the radix: the word at position i is the
    digit i, and the most significant word comes first. A mapper holds
    no per-call state, so one instance can be shared between threads.
    '''
    def __init__(self, words):
        self.word_list = tuple(words)
        if not self.word_list:
            raise InvalidDictionaryError('Dictionary must contain at least one word')
        self.word_to_index = _check_words(self.word_list)
        self.radix = len(self.word_list)
        logger.debug('Built word mapper with radix %d', self.radix)

    @classmethod
    def from_file(cls, path):
        return cls(load_word_list(path))

    def __len__(self):
        return self.radix

    def _to_words(self, n: int):
        words = []
        while True:
            n, digit = divmod(n, self.radix)
            words.append(self.word_list[digit])
            if n == 0:
                break
        return reversed(words)

    def _map_word(self, word):
        try:
            return self.word_to_index[word]
        except KeyError:
            raise UnknownWordError(word) from None

    def encode(self, value: int, domain=BIG) -> str:
        domain = _as_domain(domain)
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInputError(
                'Only integers can be mapped, got {!r}'.format(value))
        if value < 0:
            raise InvalidInputError('Negative values are not supported')
        if domain.max_value is not None and value > domain.max_value:
            raise InvalidInputError(
                '{} is out of {} range'.format(value, domain.name))
        if self.radix == 1 and value > 0:
            raise InvalidInputError(
                'A one-word dictionary can only represent zero')
        return ' '.join(self._to_words(value))

    def decode(self, words: str, domain=BIG) -> int:
        domain = _as_domain(domain)
        tokens = words.split()
        if not tokens:
            raise EmptyInputError('No words to decode')
        result = 0
        for token in tokens:
            result = result * self.radix + self._map_word(token)
            if domain.max_value is not None and result > domain.max_value:
                raise WordOverflowError(words, domain)
        return result

    def encode_int(self, value: int) -> str:
        return self.encode(value, INT32)

    def encode_long(self, value: int) -> str:
        return self.encode(value, INT64)

    def encode_big(self, value: int) -> str:
        return self.encode(value, BIG)

    def decode_int(self, words: str) -> int:
        return self.decode(words, INT32)

    def decode_long(self, words: str) -> int:
        return self.decode(words, INT64)

    def decode_big(self, words: str) -> int:
        return self.decode(words, BIG)
