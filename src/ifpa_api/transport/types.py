from __future__ import annotations

from dataclasses import dataclass
from typing import Any

Json = dict[str, Any]


@dataclass(frozen=True)
class ApiResponse:
    """
    Decoded JSON body of one API call.

    `raw_text` is the body exactly as received so callers can cache or forward it.
    """

    data: Any
    raw_text: str
    status_code: int = 200

    def __getitem__(self, key: str) -> Any:
        if not isinstance(self.data, dict):
            raise TypeError(f"Response body is not a JSON object, got {type(self.data)}")
        return self.data[key]

    def get(self, key: str, default: Any = None) -> Any:
        if not isinstance(self.data, dict):
            return default
        return self.data.get(key, default)
