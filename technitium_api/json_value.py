#
#
#

"""Dynamic JSON values.

The server owns the shape of some fields (record ``rData``, app settings,
arbitrary nested settings). These are decoded into a small sum type instead
of bare ``Any`` so that every value keeps the exact JSON kind it arrived
with:

    JsonNull | JsonBool | JsonNumber | JsonString | JsonArray | JsonObject

Integers stay integers: ``JsonNumber(42)`` renders as ``42``, never
``42.0``.
"""

import json
from typing import Any, Dict, Iterator, List, Tuple, Union

from pydantic_core import core_schema


class JsonValue(object):
    '''Base of the JSON value variants. Use ``from_python`` or ``parse``.'''

    __slots__ = ()

    @classmethod
    def from_python(cls, obj: Any) -> 'JsonValue':
        """Build a value from what ``json.loads`` returns.

        Args:
            obj: None, bool, int, float, str, list/tuple or str-keyed dict,
                nested arbitrarily, or an existing JsonValue

        Returns:
            The matching JsonValue variant

        Raises:
            TypeError: If obj (or anything nested in it) is not JSON data
        """
        if isinstance(obj, JsonValue):
            return obj
        if obj is None:
            return JSON_NULL
        # bool before int, bool is an int subclass
        if isinstance(obj, bool):
            return JsonBool(obj)
        if isinstance(obj, (int, float)):
            return JsonNumber(obj)
        if isinstance(obj, str):
            return JsonString(obj)
        if isinstance(obj, (list, tuple)):
            return JsonArray([cls.from_python(v) for v in obj])
        if isinstance(obj, dict):
            items = {}
            for k, v in obj.items():
                if not isinstance(k, str):
                    raise TypeError(f'JSON object keys must be str, not {k!r}')
                items[k] = cls.from_python(v)
            return JsonObject(items)
        raise TypeError(f'{type(obj).__name__} is not a JSON value')

    @classmethod
    def parse(cls, data: Union[str, bytes]) -> 'JsonValue':
        """Decode JSON text. Raises ``ValueError`` on malformed input."""
        return cls.from_python(json.loads(data))

    @classmethod
    def __get_pydantic_core_schema__(cls, source, handler):
        # lets models declare `r_data: JsonObject` and friends
        def validate(obj):
            try:
                value = JsonValue.from_python(obj)
            except TypeError as e:
                raise ValueError(str(e)) from e
            if not isinstance(value, cls):
                raise ValueError(
                    f'expected {cls.__name__}, got {type(value).__name__}'
                )
            return value

        return core_schema.no_info_plain_validator_function(
            validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda v: v.to_python()
            ),
        )

    def to_python(self) -> Any:
        raise NotImplementedError()

    def dumps(self) -> str:
        return json.dumps(self.to_python(), separators=(',', ':'))

    def __eq__(self, other):
        if not isinstance(other, JsonValue):
            return NotImplemented
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self):
        return hash((type(self).__name__, self._key()))

    def _key(self):
        raise NotImplementedError()


class JsonNull(JsonValue):
    __slots__ = ()

    def to_python(self):
        return None

    def _key(self):
        return None

    def __str__(self):
        return 'null'

    def __repr__(self):
        return 'JsonNull()'


JSON_NULL = JsonNull()


class JsonBool(JsonValue):
    __slots__ = ('value',)

    def __init__(self, value: bool):
        self.value = bool(value)

    def to_python(self):
        return self.value

    def _key(self):
        return self.value

    def __bool__(self):
        return self.value

    def __str__(self):
        return 'true' if self.value else 'false'

    def __repr__(self):
        return f'JsonBool({self.value!r})'


class JsonNumber(JsonValue):
    __slots__ = ('value',)

    def __init__(self, value: Union[int, float]):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f'{value!r} is not a number')
        self.value = value

    @property
    def is_integer(self) -> bool:
        return isinstance(self.value, int)

    def to_python(self):
        return self.value

    def _key(self):
        # 1 and 1.0 are different JSON texts
        return (self.is_integer, self.value)

    def __str__(self):
        return json.dumps(self.value)

    def __repr__(self):
        return f'JsonNumber({self.value!r})'


class JsonString(JsonValue):
    __slots__ = ('value',)

    def __init__(self, value: str):
        self.value = value

    def to_python(self):
        return self.value

    def _key(self):
        return self.value

    def __str__(self):
        return self.value

    def __repr__(self):
        return f'JsonString({self.value!r})'


class JsonArray(JsonValue):
    __slots__ = ('items',)

    def __init__(self, items: List[JsonValue]):
        self.items = tuple(items)

    def to_python(self):
        return [v.to_python() for v in self.items]

    def _key(self):
        return self.items

    def __len__(self):
        return len(self.items)

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __str__(self):
        return ', '.join(str(v) for v in self.items)

    def __repr__(self):
        return f'JsonArray({list(self.items)!r})'


class JsonObject(JsonValue):
    __slots__ = ('members',)

    def __init__(self, members: Dict[str, JsonValue]):
        self.members = dict(members)

    def to_python(self):
        return {k: v.to_python() for k, v in self.members.items()}

    def _key(self):
        return tuple(sorted(self.members.items()))

    def get(self, key: str, default=None):
        return self.members.get(key, default)

    def items(self) -> Iterator[Tuple[str, JsonValue]]:
        return iter(self.members.items())

    def keys(self):
        return self.members.keys()

    def __contains__(self, key):
        return key in self.members

    def __len__(self):
        return len(self.members)

    def __iter__(self) -> Iterator[str]:
        return iter(self.members)

    def __getitem__(self, key: str) -> JsonValue:
        return self.members[key]

    def __str__(self):
        return ', '.join(f'{k}: {v}' for k, v in self.members.items())

    def __repr__(self):
        return f'JsonObject({self.members!r})'
