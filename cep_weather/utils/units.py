def c_to_f(celsius: float) -> float:
    """Convert Celsius → Fahrenheit."""
    return celsius * 1.8 + 32


def c_to_k(celsius: float) -> float:
    """Convert Celsius → Kelvin, using a whole 273 offset."""
    return celsius + 273
