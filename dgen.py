r'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'

schema-driven record generator for exercising seqy pipelines.
'''

import numpy as np
from faker import Faker
from seqy import Sequence, from_iterable, generate
from typing import Any, Dict, Optional


class Generator:
    """
    interprets a schema:
      - 'word'                          -> faker provider called with no arguments
      - ('pyint', {'max_value': 9})     -> faker provider called with kwargs
      - {'_qen_provider': 'choice', 'from': [...]}  -> numpy rng choice
      - {'_qen_provider': 'literal', 'value': x}    -> x
      - any other dict                  -> record built key by key
      - anything else                   -> returned as-is
    """

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _call_faker(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "choice":
            options = config["from"]
            return options[int(self._rng.integers(len(options)))]
        if provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]
        raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any) -> Any:
        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._resolve_provider(schema)
            return {key: self.create(value) for key, value in schema.items()}

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._call_faker(schema)
            return schema

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._call_faker(schema[0], schema[1])

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Sequence:
        """generate 'count' records up front. the result replays identically."""
        return from_iterable([self._generator.create(self._schema) for _ in range(count)])

    def stream(self) -> Sequence:
        """infinite lazy sequence: a record is generated only when pulled"""
        return generate(lambda: self._generator.create(self._schema))


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
