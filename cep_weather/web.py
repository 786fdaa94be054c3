from typing import Optional

from flask import Flask, Response, current_app, jsonify, request

from .errors import ConfigurationError, WeatherServiceError
from .models import TemperatureResponse
from .services import WeatherClient, WeatherLookup
from .utils import is_valid_cep

INVALID_ZIPCODE = "invalid zipcode"
ZIPCODE_NOT_FOUND = "can not find zipcode"
TEMPERATURE_NOT_FOUND = "can not find temperature"


def _plain(message: str, status: int) -> Response:
    return Response(message, status=status, mimetype="text/plain")


def weather():
    lookup: WeatherLookup = current_app.extensions["weather_lookup"]
    cep = request.args.get("cep", "")

    if not is_valid_cep(cep):
        return _plain(INVALID_ZIPCODE, 422)

    # ------------------------------------------------------------------
    # CEP → city
    # ------------------------------------------------------------------
    try:
        current_app.logger.info("Resolving city for cep %s...", cep)
        city = lookup.resolve_city(cep)
    except WeatherServiceError as exc:
        current_app.logger.warning("City lookup failed for %s: %s", cep, exc)
        return _plain(ZIPCODE_NOT_FOUND, 404)

    # ------------------------------------------------------------------
    # city → current temperature
    # ------------------------------------------------------------------
    try:
        current_app.logger.info("Getting current temperature for %s...", city)
        temp_c = lookup.resolve_temperature(city)
    except ConfigurationError as exc:
        # Still answered as a 404 so clients see the historical behaviour
        current_app.logger.error("Weather lookup misconfigured: %s", exc)
        return _plain(TEMPERATURE_NOT_FOUND, 404)
    except WeatherServiceError as exc:
        current_app.logger.warning("Temperature lookup failed for %s: %s", city, exc)
        return _plain(TEMPERATURE_NOT_FOUND, 404)

    return jsonify(TemperatureResponse.from_celsius(temp_c).to_dict())


def create_app(lookup: Optional[WeatherLookup] = None) -> Flask:
    """Build the Flask app; *lookup* defaults to a real `WeatherClient`."""
    app = Flask(__name__)
    app.extensions["weather_lookup"] = lookup or WeatherClient()
    app.add_url_rule("/weather", view_func=weather, methods=["GET"])
    return app
