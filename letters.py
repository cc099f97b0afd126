from utils import ALPHABET

# accepted before case folding
INPUT_LETTERS = ALPHABET | {ch.upper() for ch in ALPHABET}


class InvalidWordError(ValueError):
    """Raised when a word contains a character outside the working alphabet."""

    def __init__(self, word, char):
        super().__init__(f"Word {word!r} contains {char!r}, which is not an ASCII letter")
        self.word = word
        self.char = char


def normalize_word(word):
    """Lowercase ``word`` and reject anything that is not an ASCII letter."""
    if not isinstance(word, str):
        raise TypeError(f"Words must be strings, got {type(word).__name__}: {word!r}")
    # check before lowercasing: some non-ASCII letters lower to ASCII (K -> k)
    for ch in word:
        if ch not in INPUT_LETTERS:
            raise InvalidWordError(word, ch)
    return word.lower()


def normalize_words(words):
    return [normalize_word(w) for w in words]


def collect_letters(words):
    """
    Map every distinct letter in ``words`` to an in-degree of 0.

    Keys are kept in first-seen order so that diagnostics and the
    ``discovery`` tie-break are reproducible.
    """
    in_degree = {}
    for w in words:
        for ch in w:
            if ch not in in_degree:
                in_degree[ch] = 0
    return in_degree
