import pytest

from atcrypt.crypto_engine.errors import (
    InvalidCharacter, InvalidChecksum, OddLength, UnsupportedMultibase,
)
from atcrypt.utils import (
    Base16, Base32, Base58, Base64URL, Multibase, MultibaseEncoding,
)

BASE58_BYTES = bytes([0x02, 0x6F, 0x55, 0x60, 0x84, 0xA5,
                      0x75, 0x5E, 0x9C, 0x8B, 0x8F, 0x0B])
BASE64_BYTES = bytes([0x8F, 0x2B, 0x7B, 0x4B, 0x9E, 0xA3, 0x38,
                      0x99, 0x63, 0x49, 0x05, 0x91, 0x10])


class TestBase16:

    def test_encode_lower_and_upper(self) -> None:
        assert Base16.encode(b"\x0a\xff") == "0aff"
        assert Base16.encode_upper(b"\x0a\xff") == "0AFF"

    def test_decode_either_case(self) -> None:
        assert Base16.decode("0aFF") == b"\x0a\xff"

    def test_empty_string_decodes_to_empty_bytes(self) -> None:
        assert Base16.decode("") == b""

    def test_odd_length_rejected(self) -> None:
        with pytest.raises(OddLength):
            Base16.decode("abc")

    def test_invalid_character_rejected(self) -> None:
        with pytest.raises(InvalidCharacter) as excinfo:
            Base16.decode("0g")
        assert excinfo.value.character == "g"


class TestBase32:

    def test_encode_pads_to_block(self) -> None:
        assert Base32.encode(bytes.fromhex("12345678")) == "ci2fm6a="
        assert Base32.encode_upper(bytes.fromhex("12345678")) == "CI2FM6A="

    def test_decode_accepts_padding_and_case(self) -> None:
        assert Base32.decode("ci2fm6a=") == bytes.fromhex("12345678")
        assert Base32.decode("CI2FM6A") == bytes.fromhex("12345678")
        assert Base32.decode("ci2fm6==") == bytes.fromhex("123456")

    def test_invalid_character_returns_none(self) -> None:
        assert Base32.decode("CI@FM6==") is None
        assert Base32.decode("ci=fm6a=") is None

    def test_empty_and_all_padding_return_none(self) -> None:
        assert Base32.decode("") is None
        assert Base32.decode("========") is None


class TestBase58:

    def test_known_vector(self) -> None:
        assert Base58.encode(BASE58_BYTES) == "3fa85f6457174562"
        assert Base58.decode("3fa85f6457174562") == BASE58_BYTES

    def test_leading_zero_bytes_become_ones(self) -> None:
        assert Base58.encode(b"\x00\x00\x01") == "112"
        assert Base58.decode("112") == b"\x00\x00\x01"

    def test_empty_string(self) -> None:
        assert Base58.decode("") == b""

    @pytest.mark.parametrize("text", ["&", "3fa85f0", "abcI", "ab cd"])
    def test_invalid_character(self, text: str) -> None:
        with pytest.raises(InvalidCharacter):
            Base58.decode(text)

    def test_check_round_trip(self) -> None:
        encoded = Base58.encode_check(b"payload", version=0x1C)
        assert Base58.decode_check(encoded) == (0x1C, b"payload")

    def test_check_detects_corruption(self) -> None:
        encoded = Base58.encode_check(b"payload")
        last    = "2" if encoded[-1] != "2" else "3"
        with pytest.raises(InvalidChecksum):
            Base58.decode_check(encoded[:-1] + last)

    def test_check_too_short(self) -> None:
        with pytest.raises(InvalidChecksum):
            Base58.decode_check("1")


class TestBase64URL:

    def test_known_vector_unpadded(self) -> None:
        assert Base64URL.encode(BASE64_BYTES) == "jyt7S56jOJljSQWREA"
        assert Base64URL.decode("jyt7S56jOJljSQWREA") == BASE64_BYTES

    def test_url_alphabet(self) -> None:
        data = BASE64_BYTES + b"\x0f\xfe"
        assert Base64URL.encode_pad(data) == "jyt7S56jOJljSQWREA_-"
        assert Base64URL.decode("jyt7S56jOJljSQWREA_-") == data

    def test_padding_only_accepted_by_padded_variant(self) -> None:
        padded = Base64URL.encode_pad(b"ab")
        assert padded == "YWI="
        assert Base64URL.decode(padded) is None
        assert Base64URL.decode_pad(padded) == b"ab"
        assert Base64URL.decode_pad("YWI") == b"ab"

    def test_empty_string_decodes_to_empty_bytes(self) -> None:
        assert Base64URL.decode("") == b""
        assert Base64URL.decode_pad("") == b""

    @pytest.mark.parametrize("text", ["ab+c", "ab/c", "a", "ab$c"])
    def test_rejects_non_url_alphabet(self, text: str) -> None:
        assert Base64URL.decode(text) is None


class TestMultibase:

    @pytest.mark.parametrize(
        "encoding, expected",
        [
            (MultibaseEncoding.BASE16,       "f68656c6c6f"),
            (MultibaseEncoding.BASE16UPPER,  "F68656C6C6F"),
            (MultibaseEncoding.BASE32,       "bnbswy3dp"),
            (MultibaseEncoding.BASE32UPPER,  "BNBSWY3DP"),
            (MultibaseEncoding.BASE58BTC,    "zCn8eVZg"),
            (MultibaseEncoding.BASE64,       "maGVsbG8"),
            (MultibaseEncoding.BASE64URL,    "uaGVsbG8"),
            (MultibaseEncoding.BASE64URLPAD, "UaGVsbG8="),
        ],
    )
    def test_encode_and_decode(self, encoding, expected: str) -> None:
        assert Multibase.bytes_to_multibase(b"hello", encoding) == expected
        assert Multibase.multibase_to_bytes(expected) == b"hello"

    def test_encoding_by_name(self) -> None:
        assert Multibase.bytes_to_multibase(b"hello", "base58btc") == "zCn8eVZg"

    @pytest.mark.parametrize("text", ["", "xabc", "zI0O", "fabc", "u====", "b"])
    def test_unsupported_or_undecodable(self, text: str) -> None:
        with pytest.raises(UnsupportedMultibase):
            Multibase.multibase_to_bytes(text)
