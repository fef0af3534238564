import zlib

import pytest

from tincture.hashing import (
    DEFAULT_HASH_FUNCTION,
    HASH_FUNCTIONS,
    bkdr,
    color_aware,
    djb2,
    get_hash_function,
    hash_string,
    murmur3,
    perceptual,
    sum_hash,
)

TEST_STRINGS = ["", "a", "hello", "Hello World!", "\U0001F308", "test123", "a" * 1000]


def test_all_functions_are_deterministic_and_non_negative():
    for name, fn in HASH_FUNCTIONS.items():
        for text in TEST_STRINGS:
            first = fn(text)
            assert first == fn(text), name
            assert isinstance(first, int), name
            assert first >= 0, name


def test_known_values():
    assert sum_hash("cat") == 312
    assert sum_hash("cat") == sum_hash("act")
    assert djb2("") == 5381
    assert djb2("a") == 5381 * 33 + 97
    assert bkdr("ab") == 97 * 131 + 98
    assert perceptual("aab") == 28422
    assert perceptual("JohnDoe!") == perceptual("johndoe")
    assert HASH_FUNCTIONS["crc32"]("hello") == zlib.crc32(b"hello")
    assert HASH_FUNCTIONS["md5"]("hello") == 0x5D41402A


def test_murmur3_known_values():
    assert murmur3("") == 0
    assert murmur3("hello") == 2988404224
    assert murmur3("a" * 100) != murmur3("a")


def test_thirty_two_bit_functions():
    for name in ("bkdr", "fnv1a", "crc32", "md5", "murmur3"):
        for text in TEST_STRINGS:
            assert HASH_FUNCTIONS[name](text) <= 0xFFFFFFFF, name


def test_color_aware():
    assert color_aware("random_text") == djb2("random_text")
    assert color_aware("green_team") > 100000
    assert 119970 <= color_aware("green_team") < 120030
    # hue 0 words fall back to the plain hash
    assert color_aware("red_apple") == djb2("red_apple")


def test_lookup():
    assert DEFAULT_HASH_FUNCTION == "bkdr"
    assert get_hash_function("BKDR") is bkdr
    assert get_hash_function(len) is len
    assert hash_string("hello") == bkdr("hello")
    assert hash_string("hello", "djb2") == djb2("hello")
    with pytest.raises(ValueError, match="Unknown hash function"):
        get_hash_function("sha512")
