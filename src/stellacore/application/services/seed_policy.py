from __future__ import annotations

import hashlib
import json
from typing import Any, Mapping


DEFAULT_SCENARIO_SEED = 42


def derive_seed(namespace: str, context: Mapping[str, Any]) -> int:
    payload = {"namespace": str(namespace), "context": {str(key): context[key] for key in sorted(context, key=str)}}
    serialized = json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False, default=str)
    digest = hashlib.sha256(serialized.encode("utf-8")).hexdigest()
    return int(digest, 16) % (2**32)


def resolve_seed(raw: Any, *, default: int = DEFAULT_SCENARIO_SEED) -> int:
    """Turn an int-like or free-form seed value into a 32-bit integer seed."""
    if raw is None:
        return int(default)
    if isinstance(raw, bool):
        return int(raw)
    if isinstance(raw, int):
        return raw
    text = str(raw).strip()
    if not text:
        return int(default)
    try:
        return int(text)
    except ValueError:
        return derive_seed("scenario.seed", {"value": text})
