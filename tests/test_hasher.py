import pytest

from humanhash import (
    DEFAULT_WORDLIST,
    HumanHasher,
    HumanHashError,
    InsufficientInputError,
    InvalidConfigurationError,
    InvalidDigestError,
    compress,
    parse_digest,
    segments,
)


def test_humanize_known_digest():
    assert HumanHasher().humanize("60ad8d0d871b6095808297") == "sodium-magnesium-nineteen-hydrogen"


def test_humanize_one_byte_per_word_maps_indices_directly():
    phrase = HumanHasher().humanize("1A2B3C4D")
    assert phrase == "bravo-comet-eighteen-fourteen"
    assert phrase.split("-") == [DEFAULT_WORDLIST[i] for i in (26, 43, 60, 77)]


def test_humanize_is_case_insensitive():
    hasher = HumanHasher()
    assert hasher.humanize("1a2b3c4d") == hasher.humanize("1A2B3C4D")


def test_humanize_is_deterministic():
    digest = "d41d8cd98f00b204e9800998ecf8427e"
    assert HumanHasher().humanize(digest, 6, ".") == HumanHasher().humanize(digest, 6, ".")


@pytest.mark.parametrize("words", [1, 2, 3, 5, 8, 16])
def test_humanize_word_count(words):
    phrase = HumanHasher().humanize("d41d8cd98f00b204e9800998ecf8427e", words=words, separator=" ")
    parts = phrase.split(" ")
    assert len(parts) == words
    assert all(part in DEFAULT_WORDLIST for part in parts)


def test_humanize_custom_separator():
    assert HumanHasher().humanize("1a2b3c4d", separator=", ") == "bravo, comet, eighteen, fourteen"
    assert HumanHasher().humanize("1a2b3c4d", separator="") == "bravocometeighteenfourteen"


def test_humanize_bytes_matches_humanize():
    hasher = HumanHasher()
    data = bytes.fromhex("60ad8d0d871b6095808297")
    assert hasher.humanize_bytes(data) == hasher.humanize(data.hex())


def test_humanize_too_many_words():
    with pytest.raises(InsufficientInputError, match="Fewer input bytes"):
        HumanHasher().humanize("1a2b", words=3)


@pytest.mark.parametrize("digest", ["", "abc", "zz", "0x12", "12 34", "12\n", "1g2h", "１２"])
def test_humanize_invalid_digest(digest):
    with pytest.raises(InvalidDigestError):
        HumanHasher().humanize(digest)


def test_parse_digest():
    assert parse_digest("1A2B3C4D") == bytes([0x1A, 0x2B, 0x3C, 0x4D])
    assert parse_digest("00ff") == b"\x00\xff"


@pytest.mark.parametrize("size", [255, 257, 0])
def test_wordlist_must_have_256_words(size):
    with pytest.raises(InvalidConfigurationError, match="exactly 256"):
        HumanHasher([f"w{i}" for i in range(size)])


def test_wordlist_from_iterable():
    hasher = HumanHasher(f"w{i}" for i in range(256))
    assert hasher.humanize("00ff", words=2) == "w0-w255"


def test_wordlist_from_short_iterable():
    with pytest.raises(InvalidConfigurationError, match="got 3"):
        HumanHasher(iter(["a", "b", "c"]))


def test_wordlist_duplicates_are_accepted():
    hasher = HumanHasher(["same"] * 256)
    assert hasher.humanize("1a2b3c4d") == "same-same-same-same"


def test_custom_wordlist():
    hasher = HumanHasher([f"w{i}" for i in range(256)])
    assert hasher.humanize("00ff7f", words=3) == "w0-w255-w127"


def test_errors_are_value_errors():
    assert issubclass(InvalidDigestError, HumanHashError)
    assert issubclass(HumanHashError, ValueError)
    with pytest.raises(ValueError):
        HumanHasher().humanize("xyz")


def test_compress_identity_when_target_equals_length():
    assert compress(bytes([0x1A, 0x2B]), 2) == bytes([0x1A, 0x2B])
    assert compress([0x1A, 0x2B, 0x3C, 0x4D], 4) == bytes([0x1A, 0x2B, 0x3C, 0x4D])


def test_compress_known_values():
    data = [96, 173, 141, 13, 135, 27, 96, 149, 128, 130, 151]
    assert list(compress(data, 4)) == [205, 128, 156, 96]


def test_compress_single_target_folds_everything():
    assert compress(bytes([0b1100, 0b1010, 0b0001]), 1) == bytes([0b0111])


def test_compress_last_segment_absorbs_remainder():
    data = bytes(range(1, 11))
    assert [len(part) for part in segments(data, 3)] == [3, 3, 4]
    # 1^2^3, 4^5^6 and 7^8^9^10
    assert compress(data, 3) == bytes([0, 7, 12])


def test_compress_fewer_bytes_than_target():
    with pytest.raises(InsufficientInputError):
        compress(bytes([1, 2]), 3)


@pytest.mark.parametrize("target", [0, -1])
def test_compress_target_must_be_positive(target):
    with pytest.raises(InsufficientInputError, match="at least 1"):
        compress(bytes([1, 2]), target)


def test_compress_rejects_values_outside_byte_range():
    with pytest.raises(ValueError):
        compress([1, 256], 1)


@pytest.mark.parametrize("length", [1, 2, 7, 16, 33])
def test_segments_partition_input(length):
    data = bytes(range(length))
    for target in range(1, length + 1):
        parts = segments(data, target)
        assert len(parts) == target
        assert b"".join(parts) == data
        seg_size = length // target
        assert all(len(part) == seg_size for part in parts[:-1])
        assert len(parts[-1]) == seg_size + length % target
