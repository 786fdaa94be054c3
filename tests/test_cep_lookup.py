import pytest
import requests

from cep_weather.errors import NotFoundError, ParseError, TransportError, ValidationError
from cep_weather.services import ViaCepService


def test_resolve_city_returns_locality(fake_fetch):
    fetch = fake_fetch('{"cep": "01001-000", "localidade": "São Paulo", "uf": "SP"}')

    city = ViaCepService(fetch, base_url="https://viacep.test").resolve_city("01001000")

    assert city == "São Paulo"
    assert fetch.calls == [("https://viacep.test/ws/01001000/json/", None)]


@pytest.mark.parametrize("body", ['{"erro": true}', '{"erro": "true"}'])
def test_erro_flag_is_not_found(fake_fetch, body):
    with pytest.raises(NotFoundError):
        ViaCepService(fake_fetch(body)).resolve_city("00000000")


@pytest.mark.parametrize("body", ['{"localidade": ""}', "{}"])
def test_missing_locality_is_not_found(fake_fetch, body):
    with pytest.raises(NotFoundError):
        ViaCepService(fake_fetch(body)).resolve_city("00000000")


@pytest.mark.parametrize(
    "body",
    ["not a valid JSON", "<html>Bad Request</html>", "[]", "null", '{"localidade": 42}'],
)
def test_unexpected_body_is_parse_error(fake_fetch, body):
    with pytest.raises(ParseError):
        ViaCepService(fake_fetch(body)).resolve_city("00000000")


def test_request_failure_is_transport_error(fake_fetch):
    fetch = fake_fetch(exc=requests.ConnectionError("request error"))

    with pytest.raises(TransportError) as exc_info:
        ViaCepService(fetch).resolve_city("00000000")

    assert isinstance(exc_info.value.__cause__, requests.ConnectionError)


def test_timeout_is_transport_error(fake_fetch):
    with pytest.raises(TransportError):
        ViaCepService(fake_fetch(exc=requests.Timeout())).resolve_city("00000000")


@pytest.mark.parametrize("cep", ["123", "0100-1000", ""])
def test_malformed_cep_never_hits_the_network(fake_fetch, cep):
    fetch = fake_fetch('{"localidade": "São Paulo"}')

    with pytest.raises(ValidationError):
        ViaCepService(fetch).resolve_city(cep)
    assert fetch.calls == []
