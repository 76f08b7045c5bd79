from typing import Any

import orjson


def dumps(payload: Any) -> bytes:
    return orjson.dumps(payload)
