"""
utils package – small, pure‑function helpers.

We expose the validation and unit helpers that are used throughout the app.
"""

# Re‑export the helpers for a clean import path
from .validation import is_valid_cep   # noqa: F401
from .units import c_to_f, c_to_k       # noqa: F401

__all__ = [
    "is_valid_cep",
    "c_to_f",
    "c_to_k",
]
