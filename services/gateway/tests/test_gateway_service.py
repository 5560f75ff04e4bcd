"""Unit tests for CEP parsing and relaying of weather service answers."""
import httpx
import pytest

from shared.errors import NotFoundError, UpstreamError, ValidationError

from gateway.service.gateway_service import INVALID_WEATHER_RESPONSE, parse_cep, relay

REPORT = {"city": "São Paulo", "temp_C": 28.5, "temp_F": 83.3, "temp_K": 301.65}


@pytest.mark.parametrize(
    ("body", "cep"),
    [
        (b'{"cep": "01001000"}', "01001000"),
        (b'{"cep": "abcdefgh"}', "abcdefgh"),
        (b'{"cep": "01001000", "extra": 1}', "01001000"),
        (b'{"CEP": "01001000"}', "01001000"),
        (b'{"Cep": "01001000"}', "01001000"),
        (b'{"cep": "123", "CEP": "01001000"}', "01001000"),
    ],
)
def test_parse_cep_accepts_eight_characters(body: bytes, cep: str) -> None:
    assert parse_cep(body) == cep


@pytest.mark.parametrize(
    "body",
    [
        b"",
        b"not json",
        b"[]",
        b"null",
        b"{}",
        b'{"cep": 1001000}',
        b'{"CEP": 1001000}',
        b'{"cepx": "01001000"}',
        b'{"cep": "0100100"}',
        b'{"cep": "010010000"}',
    ],
)
def test_parse_cep_rejects(body: bytes) -> None:
    with pytest.raises(ValidationError):
        parse_cep(body)


def test_relay_success_decodes_report() -> None:
    result = relay(httpx.Response(200, json=REPORT))
    assert result.status_code == 200
    assert result.payload is not None
    assert result.payload.model_dump() == REPORT


def test_relay_404_is_not_found_and_drops_body() -> None:
    with pytest.raises(NotFoundError) as exc_info:
        relay(httpx.Response(404, text="something else"))
    assert exc_info.value.message == "can not find zipcode"


@pytest.mark.parametrize("content", [b"", b"{}", b'{"city": "X"}', b"<html>"])
def test_relay_undecodable_success_body_is_500(content: bytes) -> None:
    with pytest.raises(UpstreamError) as exc_info:
        relay(httpx.Response(200, content=content))
    assert exc_info.value.message == INVALID_WEATHER_RESPONSE


@pytest.mark.parametrize(
    ("status_code", "text"),
    [(500, "error fetching temperature"), (422, "invalid zipcode"), (503, "")],
)
def test_relay_passes_other_statuses_through(status_code: int, text: str) -> None:
    result = relay(httpx.Response(status_code, text=text))
    assert result.status_code == status_code
    assert result.payload is None
    assert result.content == text.encode()
