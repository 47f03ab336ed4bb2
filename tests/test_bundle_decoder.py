"""Tests for core.bundle_decoder.load_parser()."""

import pytest

from core.bundle_decoder import RecordDecoder, load_parser
from core.errors import DecoderConfigError


def test_load_parser_returns_decoder_handle():
    decoder = load_parser("stub_decoder:load_parser")
    assert isinstance(decoder, RecordDecoder)


def test_load_parser_creates_a_new_handle_each_call():
    assert load_parser("stub_decoder:load_parser") is not load_parser("stub_decoder:load_parser")


@pytest.mark.parametrize("spec", [
    "",
    "stub_decoder",
    "stub_decoder:",
    ":load_parser",
])
def test_load_parser_rejects_malformed_spec(spec):
    with pytest.raises(DecoderConfigError):
        load_parser(spec)


def test_load_parser_unknown_module():
    with pytest.raises(DecoderConfigError) as exc:
        load_parser("no_such_decoder_module:load_parser")
    assert "no_such_decoder_module" in str(exc.value)


def test_load_parser_missing_or_non_callable_attribute():
    with pytest.raises(DecoderConfigError):
        load_parser("stub_decoder:does_not_exist")
    with pytest.raises(DecoderConfigError):
        load_parser("stub_decoder:NOT_A_FACTORY")


def test_load_parser_rejects_wrong_return_type():
    with pytest.raises(DecoderConfigError) as exc:
        load_parser("stub_decoder:not_a_decoder")
    assert "RecordDecoder" in str(exc.value)
