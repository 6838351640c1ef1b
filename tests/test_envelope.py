from __future__ import annotations

import pytest

from dog_ceo_envelope import (
    FALLBACK_MESSAGE,
    PayloadShape,
    decode_dynamic,
    decode_fixed,
    project,
)
from dog_ceo_errors import ApiError, DecodeError, ErrorKind


# --- fixed shape -----------------------------------------------------------


def test_decode_fixed_returns_message_on_success() -> None:
    body = '{"message": "https://images.dog.ceo/breeds/hound-afghan/n02088094_1003.jpg", "status": "success"}'
    assert decode_fixed(body) == 'https://images.dog.ceo/breeds/hound-afghan/n02088094_1003.jpg'


def test_decode_fixed_raises_api_error_with_upstream_text() -> None:
    body = '{"status": "error", "message": "Breed not found (main breed does not exist)", "code": 404}'
    with pytest.raises(ApiError) as exc_info:
        decode_fixed(body)
    assert exc_info.value.message == 'Breed not found (main breed does not exist)'
    assert exc_info.value.kind is ErrorKind.API


def test_decode_fixed_missing_message_is_decode_error() -> None:
    with pytest.raises(DecodeError) as exc_info:
        decode_fixed('{"status": "error"}')
    assert exc_info.value.message.startswith(FALLBACK_MESSAGE)


def test_decode_fixed_non_string_message_is_decode_error() -> None:
    with pytest.raises(DecodeError):
        decode_fixed('{"status": "success", "message": ["a", "b"]}')


def test_decode_fixed_malformed_json_reports_parser_detail() -> None:
    with pytest.raises(DecodeError) as exc_info:
        decode_fixed('not json')
    assert exc_info.value.message.startswith(f'{FALLBACK_MESSAGE}: Expecting value')


# --- dynamic shape ---------------------------------------------------------


def test_decode_dynamic_string_array_skips_non_strings() -> None:
    body = '{"status": "success", "message": ["a.jpg", 1, null, {"x": 1}, "b.jpg", ["c"]]}'
    assert decode_dynamic(body, PayloadShape.STRING_ARRAY) == ['a.jpg', 'b.jpg']


def test_decode_dynamic_string_array_keeps_empty_list() -> None:
    body = '{"status": "success", "message": []}'
    assert decode_dynamic(body, PayloadShape.STRING_ARRAY) == []


def test_decode_dynamic_optional_array_empty_is_none() -> None:
    body = '{"status": "success", "message": []}'
    assert decode_dynamic(body, PayloadShape.OPTIONAL_STRING_ARRAY) is None


def test_decode_dynamic_optional_array_with_items() -> None:
    body = '{"status": "success", "message": ["afghan", "basset", 7]}'
    assert decode_dynamic(body, PayloadShape.OPTIONAL_STRING_ARRAY) == ['afghan', 'basset']


def test_decode_dynamic_map_preserves_order_and_absence() -> None:
    body = (
        '{"status": "success", "message": {'
        '"affenpinscher": [], '
        '"bulldog": ["boston", "english", "french"], '
        '"odd": "not an array", '
        '"hound": ["afghan", 3, "basset"]}}'
    )
    result = decode_dynamic(body, PayloadShape.STRING_TO_OPTIONAL_STRING_ARRAY_MAP)

    assert result == {
        'affenpinscher': None,
        'bulldog': ['boston', 'english', 'french'],
        'hound': ['afghan', 'basset'],
    }
    assert list(result) == ['affenpinscher', 'bulldog', 'hound']


def test_decode_dynamic_map_requires_object() -> None:
    body = '{"status": "success", "message": ["bulldog"]}'
    with pytest.raises(DecodeError):
        decode_dynamic(body, PayloadShape.STRING_TO_OPTIONAL_STRING_ARRAY_MAP)


def test_decode_dynamic_array_requires_array() -> None:
    body = '{"status": "success", "message": "https://images.dog.ceo/x.jpg"}'
    with pytest.raises(DecodeError) as exc_info:
        decode_dynamic(body, PayloadShape.STRING_ARRAY)
    assert exc_info.value.message == FALLBACK_MESSAGE


@pytest.mark.parametrize('shape', list(PayloadShape))
def test_decode_dynamic_error_status_uses_upstream_text(shape: PayloadShape) -> None:
    body = '{"status": "error", "message": "Breed not found"}'
    with pytest.raises(ApiError) as exc_info:
        decode_dynamic(body, shape)
    assert exc_info.value.message == 'Breed not found'


@pytest.mark.parametrize(
    'body',
    [
        '{"status": "error"}',
        '{"status": "error", "message": ["x"]}',
        '{"status": "error", "message": null}',
    ],
)
def test_decode_dynamic_error_status_without_text_uses_fallback(body: str) -> None:
    with pytest.raises(ApiError) as exc_info:
        decode_dynamic(body, PayloadShape.STRING_ARRAY)
    assert exc_info.value.message == FALLBACK_MESSAGE


@pytest.mark.parametrize(
    'body',
    [
        '{"message": []}',
        '{"status": 1, "message": []}',
        '{"status": "success"}',
        '["success"]',
    ],
)
def test_decode_dynamic_structural_problems_are_decode_errors(body: str) -> None:
    with pytest.raises(DecodeError):
        decode_dynamic(body, PayloadShape.STRING_ARRAY)


def test_decode_dynamic_malformed_json_reports_parser_detail() -> None:
    with pytest.raises(DecodeError) as exc_info:
        decode_dynamic('not json', PayloadShape.STRING_ARRAY)
    assert 'Expecting value' in exc_info.value.message


def test_project_string() -> None:
    assert project('hello', PayloadShape.STRING) == 'hello'
    with pytest.raises(DecodeError):
        project(['hello'], PayloadShape.STRING)
