import sys
from typing import List, Optional

from .errors import WeatherServiceError
from .models import TemperatureResponse
from .services import WeatherClient, WeatherLookup
from .utils import is_valid_cep
from .web import INVALID_ZIPCODE, TEMPERATURE_NOT_FOUND, ZIPCODE_NOT_FOUND


def main(argv: Optional[List[str]] = None, lookup: Optional[WeatherLookup] = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    lookup = lookup or WeatherClient()

    # ------------------------------------------------------------------
    # 1️⃣ Gather the CEP (argument or prompt)
    # ------------------------------------------------------------------
    cep = args[0].strip() if args else input("Enter CEP (8 digits): ").strip()
    if not is_valid_cep(cep):
        sys.exit(INVALID_ZIPCODE)

    # ------------------------------------------------------------------
    # 2️⃣ CEP → city
    # ------------------------------------------------------------------
    try:
        city = lookup.resolve_city(cep)
    except WeatherServiceError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(ZIPCODE_NOT_FOUND)
    print(f"City: {city}")

    # ------------------------------------------------------------------
    # 3️⃣ City → current temperature, in all three units
    # ------------------------------------------------------------------
    try:
        temp_c = lookup.resolve_temperature(city)
    except WeatherServiceError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(TEMPERATURE_NOT_FOUND)

    reading = TemperatureResponse.from_celsius(temp_c)
    print(
        f"\tCurrent Temperature: {reading.celsius:.1f}°C / "
        f"{reading.fahrenheit:.1f}°F / {reading.kelvin:.1f}K"
    )


if __name__ == "__main__":
    main()
