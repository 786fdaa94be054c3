import re
from typing import Optional

_CEP_RE = re.compile(r"[0-9]{8}")


def is_valid_cep(value: Optional[str]) -> bool:
    """True when *value* is exactly eight ASCII digits."""
    if not isinstance(value, str):
        return False
    return _CEP_RE.fullmatch(value) is not None
