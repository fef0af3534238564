"""
String hash functions used to derive stable colors from text.

Each function maps a string to a non-negative integer; ``RGB.derive`` and
``OKLCH.derive`` turn that integer into a color. Different functions give
different spreads: ``bkdr`` (the default) is fast and well distributed,
``perceptual`` ignores case and punctuation, ``color_aware`` steers strings
that mention a color word towards that hue.
"""
from __future__ import annotations
import hashlib
import re
import zlib
from collections import Counter
from typing import Callable, Dict

HashFunction = Callable[[str], int]

MASK_32 = 0xFFFFFFFF


def sum_hash(text: str) -> int:
    return sum(ord(ch) for ch in text)


def djb2(text: str) -> int:
    h = 5381
    for byte in text.encode("utf-8"):
        h = (h << 5) + h + byte
    return abs(h)


def bkdr(text: str) -> int:
    h = 0
    for byte in text.encode("utf-8"):
        h = (h * 131 + byte) & MASK_32
    return h


def fnv1a(text: str) -> int:
    h = 2166136261
    for byte in text.encode("utf-8"):
        h = ((h ^ byte) * 16777619) & MASK_32
    return h


def sdbm(text: str) -> int:
    h = 0
    for byte in text.encode("utf-8"):
        h = byte + (h << 6) + (h << 16) - h
    return abs(h)


def java(text: str) -> int:
    h = 0
    for ch in text:
        h = 31 * h + ord(ch)
    return abs(h)


def crc32(text: str) -> int:
    return zlib.crc32(text.encode("utf-8")) & MASK_32


def md5(text: str) -> int:
    return int(hashlib.md5(text.encode("utf-8")).hexdigest()[:8], 16)


def position(text: str) -> int:
    return sum(ord(ch) * (i + 1) ** 2 for i, ch in enumerate(text))


def perceptual(text: str) -> int:
    normalized = re.sub(r"[^a-z0-9]", "", text.lower())
    return sum(ord(ch) ** 2 * count for ch, count in Counter(normalized).items())


# first word found in the text wins (insertion order)
COLOR_WORD_HUES: Dict[str, int] = {
    "red": 0,
    "scarlet": 10,
    "crimson": 5,
    "orange": 30,
    "amber": 45,
    "yellow": 60,
    "gold": 50,
    "green": 120,
    "lime": 90,
    "emerald": 140,
    "cyan": 180,
    "teal": 165,
    "turquoise": 175,
    "blue": 240,
    "navy": 235,
    "azure": 210,
    "purple": 270,
    "violet": 280,
    "indigo": 255,
    "pink": 330,
    "magenta": 300,
    "rose": 345,
    "brown": 25,
    "tan": 35,
    "gray": 0,
    "grey": 0,
    "black": 0,
    "white": 0,
}


def color_aware(text: str) -> int:
    lowered = text.lower()
    hue = next((h for word, h in COLOR_WORD_HUES.items() if word in lowered), None)
    base = djb2(text)
    if hue:
        return hue * 1000 + base % 60 - 30
    return base


def murmur3(text: str) -> int:
    """
    MurmurHash3-style 32-bit hash with seed 0.

    A trailing partial chunk is mixed into the state like a full block, so
    results differ from the reference MurmurHash3_x86_32 for inputs whose
    length is not a multiple of four.
    """
    c1, c2 = 0xCC9E2D51, 0x1B873593
    data = text.encode("utf-8")
    h = 0
    for start in range(0, len(data), 4):
        k = 0
        for i, byte in enumerate(data[start:start + 4]):
            k |= byte << (i * 8)
        k = (k * c1) & MASK_32
        k = ((k << 15) | (k >> 17)) & MASK_32
        k = (k * c2) & MASK_32
        h ^= k
        h = ((h << 13) | (h >> 19)) & MASK_32
        h = (h * 5 + 0xE6546B64) & MASK_32
    h ^= len(data)
    h ^= h >> 16
    h = (h * 0x85EBCA6B) & MASK_32
    h ^= h >> 13
    h = (h * 0xC2B2AE35) & MASK_32
    h ^= h >> 16
    return h


HASH_FUNCTIONS: Dict[str, HashFunction] = {
    "sum": sum_hash,
    "djb2": djb2,
    "bkdr": bkdr,
    "fnv1a": fnv1a,
    "sdbm": sdbm,
    "java": java,
    "crc32": crc32,
    "md5": md5,
    "position": position,
    "perceptual": perceptual,
    "color_aware": color_aware,
    "murmur3": murmur3,
}

DEFAULT_HASH_FUNCTION = "bkdr"


def get_hash_function(name: str | HashFunction) -> HashFunction:
    """Look up a hash function by (case-insensitive) name; callables pass through."""
    if callable(name):
        return name
    try:
        return HASH_FUNCTIONS[str(name).lower()]
    except KeyError:
        raise ValueError(
            f"Unknown hash function: {name!r}. Available: {', '.join(HASH_FUNCTIONS)}"
        ) from None


def hash_string(text: str, name: str | HashFunction = DEFAULT_HASH_FUNCTION) -> int:
    return get_hash_function(name)(text)
