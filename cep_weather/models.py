from dataclasses import dataclass
from typing import Dict, Union

from .utils.units import c_to_f, c_to_k

Number = Union[int, float]


def _compact(value: float) -> Number:
    # 86.0 -> 86 so the JSON body reads {"temp_F":86}
    return int(value) if float(value).is_integer() else value


@dataclass(frozen=True)
class TemperatureResponse:
    celsius: float
    fahrenheit: float
    kelvin: float

    @classmethod
    def from_celsius(cls, celsius: float) -> "TemperatureResponse":
        return cls(celsius=celsius, fahrenheit=c_to_f(celsius), kelvin=c_to_k(celsius))

    def to_dict(self) -> Dict[str, Number]:
        return {
            "temp_C": _compact(self.celsius),
            "temp_F": _compact(self.fahrenheit),
            "temp_K": _compact(self.kelvin),
        }
