
from functools import lru_cache
from pathlib import Path
from typing import NamedTuple
import logging
import re

from ip3.constants import config

logger = logging.getLogger(__name__)

WORDLIST_SIZE = 2048
ADDRESS_BITS = 32

_OCTET = re.compile(r'0|[1-9][0-9]{0,2}')


class Ip3Error(ValueError):
    '''
    Base for every conversion failure.
    '''


class WordNotFound(Ip3Error):
    def __init__(self, word):
        super().__init__('{!r} not in wordlist'.format(word))
        self.word = word


class MalformedInput(Ip3Error):
    pass


class Ip3(NamedTuple):
    '''
    Three words, low bits of the address first.
    '''
    word1: str
    word2: str
    word3: str

    def __str__(self):
        return '.'.join(self)


def load_word_list(path):
    path = Path(path)
    words = []
    with path.open() as f:
        for line in f:
            words.append(line.rstrip('\n'))
    logger.debug('Loaded %d words from %s', len(words), path)
    return words


class Encoder:
    def __init__(self, *, word_list):
        self.word_list = tuple(word_list)
        self.word_to_index = {w: i for i, w in enumerate(self.word_list)}
        self.word_bits = config.word_bits

        if len(self.word_list) != WORDLIST_SIZE:
            raise ValueError(
                'Wordlist must hold {} words, got {}'.format(
                    WORDLIST_SIZE, len(self.word_list)))
        if len(self.word_to_index) != len(self.word_list):
            raise ValueError('Wordlist contains duplicate words.')
        if not all(self.word_list):
            raise ValueError('Wordlist contains empty words.')

    def word_index(self, word: str) -> int:
        try:
            return self.word_to_index[word]
        except KeyError:
            raise WordNotFound(word) from None

    def is_known_word(self, word: str) -> bool:
        return word in self.word_to_index

    def encode(self, address: int) -> Ip3:
        if not 0 <= address < 2 ** ADDRESS_BITS:
            raise ValueError(
                '{} is not a {}-bit address'.format(address, ADDRESS_BITS))
        indices = []
        for n_bits in self.word_bits:
            indices.append(address & ((1 << n_bits) - 1))
            address >>= n_bits
        return Ip3(*(self.word_list[idx] for idx in indices))

    def decode(self, words) -> int:
        words = tuple(words)
        if len(words) != len(self.word_bits):
            raise MalformedInput(
                'Expected {} words, got {}'.format(
                    len(self.word_bits), len(words)))
        # Membership is checked for all words before any arithmetic.
        for word in words:
            if not self.is_known_word(word):
                raise WordNotFound(word)

        address = 0
        shift = 0
        for word, n_bits in zip(words, self.word_bits):
            # The top bit of an index beyond 1023 falls outside the address
            # when it lands in the 10-bit group.
            address |= (self.word_index(word) & ((1 << n_bits) - 1)) << shift
            shift += n_bits
        return address


@lru_cache(maxsize=None)
def default_encoder():
    return Encoder(word_list=load_word_list(config.wordlist_path))


def word_index(word):
    return default_encoder().word_index(word)


def is_known_word(word):
    return default_encoder().is_known_word(word)


def encode(address):
    return default_encoder().encode(address)


def decode(words):
    return default_encoder().decode(words)


def parse_ipv4(text: str) -> int:
    '''
    Dotted quad to a 32-bit integer.
    '''
    octets = text.split('.')
    if len(octets) != 4:
        raise MalformedInput(
            '{!r} must have 4 dot-separated octets'.format(text))
    address = 0
    for octet in octets:
        if not _OCTET.fullmatch(octet):
            raise MalformedInput(
                '{!r} has a non-numeric octet {!r}'.format(text, octet))
        value = int(octet)
        if value > 255:
            raise MalformedInput(
                '{!r} has an octet out of range: {}'.format(text, value))
        address = (address << 8) | value
    return address


def format_ipv4(address: int) -> str:
    if not 0 <= address < 2 ** ADDRESS_BITS:
        raise ValueError(
            '{} is not a {}-bit address'.format(address, ADDRESS_BITS))
    return '.'.join(str((address >> shift) & 0xFF) for shift in (24, 16, 8, 0))


def parse_ip3(text: str) -> Ip3:
    words = text.split('.')
    if len(words) != 3:
        raise MalformedInput(
            '{!r} must have 3 dot-separated words'.format(text))
    if not all(words):
        raise MalformedInput('{!r} has an empty word'.format(text))
    return Ip3(*words)


def format_ip3(words) -> str:
    words = tuple(words)
    if len(words) != 3:
        raise MalformedInput('Expected 3 words, got {}'.format(len(words)))
    return str(Ip3(*words))


def ipv4_to_ip3(text, encoder=None):
    encoder = encoder or default_encoder()
    return encoder.encode(parse_ipv4(text))


def ip3_to_ipv4(text, encoder=None):
    encoder = encoder or default_encoder()
    return format_ipv4(encoder.decode(parse_ip3(text)))
