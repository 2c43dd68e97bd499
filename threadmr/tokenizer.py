"""
Tokenizer for word counting.
Turns a text record into normalized word tokens.
"""

import string
from typing import List

# Same character set the C locale's ispunct() accepts
_STRIP_PUNCTUATION = str.maketrans('', '', string.punctuation)


def normalize(word: str) -> str:
    """Remove every punctuation character from a word and lowercase it."""
    return word.translate(_STRIP_PUNCTUATION).lower()


def tokenize(text: str, drop_empty: bool = False) -> List[str]:
    """
    Split text on whitespace and normalize each word.

    A word made only of punctuation normalizes to the empty string. It is
    kept as the "" token unless drop_empty is set.

    Args:
        text: Input record
        drop_empty: Skip tokens that are empty after normalization

    Returns:
        List of tokens in input order
    """
    tokens = []
    for word in text.split():
        token = normalize(word)
        if drop_empty and not token:
            continue
        tokens.append(token)
    return tokens
