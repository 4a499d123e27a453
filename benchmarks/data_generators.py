"""
Document generators for mjson benchmarks.

Each shape stresses a different part of the pipeline:
- small_object / large_object: typical API payloads, mostly scanning
- mixed_array: every scalar kind interleaved, parser dispatch
- nested_structure: recursion depth in parser and indented renderer
- string_heavy: pass-through escapes and ``\\u`` surrogate pairs
- unsorted_keys: keys arriving in reverse order, key sorting cost

Generation is seeded so runs compare like with like.
"""

import json
import random
import string
from collections.abc import Callable
from typing import Any
from typing import TypeAlias

SEED = 20240115

SIMPLE_ESCAPES = ['\\"', "\\\\", "\\/", "\\b", "\\f", "\\n", "\\r", "\\t"]
ASTRAL_CHARS = "\U0001f604\U0001f607\U0001f47a\U0001f389\U0001f680"

Generator: TypeAlias = Callable[[random.Random], Any]


def _word(rng: random.Random, length: int) -> str:
    return "".join(rng.choices(string.ascii_lowercase, k=length))


def _timestamp(rng: random.Random) -> str:
    return (
        f"2024-{rng.randint(1, 12):02d}-{rng.randint(1, 28):02d}"
        f"T{rng.randint(0, 23):02d}:{rng.randint(0, 59):02d}:00Z"
    )


def _small_object(rng: random.Random) -> Any:
    return {
        "id": rng.randint(1, 99999),
        "name": _word(rng, 8).title(),
        "enabled": rng.random() < 0.5,
        "ratio": round(rng.random(), 4),
        "parent": None,
        "tags": [_word(rng, 5) for _ in range(3)],
    }


def _large_object(rng: random.Random) -> Any:
    return {
        "service": _word(rng, 10),
        "hosts": {
            _word(rng, 6): {
                "address": ".".join(str(rng.randint(1, 254)) for _ in range(4)),
                "port": rng.randint(1024, 65535),
                "healthy": rng.random() < 0.9,
            }
            for _ in range(40)
        },
        "events": [
            {
                "at": _timestamp(rng),
                "level": rng.choice(["debug", "info", "warning", "error"]),
                "latency_ms": round(rng.uniform(0.1, 250.0), 3),
                "message": " ".join(_word(rng, 6) for _ in range(5)),
            }
            for _ in range(120)
        ],
    }


def _mixed_array(rng: random.Random) -> Any:
    makers: list[Generator] = [
        lambda r: r.randint(-10**6, 10**6),
        lambda r: r.uniform(-1e3, 1e3),
        lambda r: _word(r, r.randint(1, 24)),
        lambda r: r.random() < 0.5,
        lambda r: None,
        lambda r: {"k": _word(r, 4), "v": [r.randint(0, 9)] * 3},
    ]
    return [rng.choice(makers)(rng) for _ in range(400)]


def _nested_structure(rng: random.Random) -> Any:
    def node(depth: int) -> Any:
        if depth == 0:
            return [_word(rng, 4), rng.randint(0, 100)]
        return {
            "depth": depth,
            "left": node(depth - 1),
            "right": node(depth - 1),
        }

    return node(9)


def _escaped_text(rng: random.Random, length: int) -> str:
    parts = []
    for _ in range(length):
        if rng.random() < 0.25:
            parts.append(rng.choice(SIMPLE_ESCAPES))
        else:
            parts.append(rng.choice(string.ascii_letters + " "))
    return "".join(parts)


def _string_heavy(rng: random.Random) -> str:
    # Built as text: escapes must reach the lexer as written
    escaped = ",".join(f'"{_escaped_text(rng, 60)}"' for _ in range(150))
    astral = json.dumps(
        ["".join(rng.choices(ASTRAL_CHARS, k=6)) for _ in range(60)]
    )
    return f'{{"escaped":[{escaped}],"astral":{astral}}}'


def _unsorted_keys(rng: random.Random) -> Any:
    keys = sorted({_word(rng, 10) for _ in range(500)}, reverse=True)
    return {
        "columns": {key: rng.randint(0, 1000) for key in keys},
        "rows": [
            {key: rng.random() < 0.5 for key in keys[i : i + 25]}
            for i in range(0, len(keys), 25)
        ],
    }


GENERATORS: dict[str, Generator] = {
    "small_object": _small_object,
    "large_object": _large_object,
    "mixed_array": _mixed_array,
    "nested_structure": _nested_structure,
    "string_heavy": _string_heavy,
    "unsorted_keys": _unsorted_keys,
}

DATA_TYPES = list(GENERATORS)


def generate_test_data(data_type: str) -> str:
    """Returns the JSON text for the named document shape."""
    if data_type not in GENERATORS:
        raise ValueError(f"Unknown data type: {data_type}")

    result = GENERATORS[data_type](random.Random(SEED))
    if isinstance(result, str):
        return result
    return json.dumps(result)
