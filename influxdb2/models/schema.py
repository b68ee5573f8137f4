"""Base class for models that travel as JSON objects."""

from __future__ import annotations

import builtins
import dataclasses
import json
import re
import types
import typing
from collections.abc import Mapping
from enum import Enum
from functools import lru_cache
from typing import Any, ClassVar, ForwardRef, TypeVar, Union, get_args, get_origin

_M = TypeVar("_M", bound="Model")
_NONE_TYPE = type(None)

_ANNOTATION_PART_RE = re.compile(r"""[A-Za-z_][\w.]*|'[^']*'|"[^"]*"|[\[\],|]""")

_BASE_NAMES: dict[str, Any] = {
    "None": _NONE_TYPE,
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "list": list,
    "dict": dict,
    "tuple": tuple,
    "Any": Any,
    "Optional": typing.Optional,
    "Union": Union,
    "List": typing.List,
    "Dict": typing.Dict,
    "typing": typing,
    "builtins": builtins,
}

# Every Model subclass, by class name, so that forward references resolve.
_REGISTRY: dict[str, list[type]] = {}


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


class _AnnotationParser:
    """Turns an annotation written as text into the type it names."""

    def __init__(self, text: str, lookup: typing.Callable[[str], Any]) -> None:
        self._parts = _ANNOTATION_PART_RE.findall(text)
        if "".join(self._parts) != re.sub(r"\s+", "", text):
            raise TypeError(f"cannot read annotation {text!r}")
        self._pos = 0
        self._text = text
        self._lookup = lookup

    def parse(self) -> Any:
        result = self._union()
        if self._peek() is not None:
            raise TypeError(f"cannot read annotation {self._text!r}")
        return result

    def _peek(self) -> str | None:
        return self._parts[self._pos] if self._pos < len(self._parts) else None

    def _next(self) -> str:
        piece = self._peek()
        if piece is None:
            raise TypeError(f"annotation {self._text!r} ends too early")
        self._pos += 1
        return piece

    def _expect(self, piece: str) -> None:
        if self._next() != piece:
            raise TypeError(f"expected {piece!r} in annotation {self._text!r}")

    def _union(self) -> Any:
        parts = [self._primary()]
        while self._peek() == "|":
            self._next()
            parts.append(self._primary())
        return parts[0] if len(parts) == 1 else Union[tuple(parts)]

    def _primary(self) -> Any:
        piece = self._next()
        if piece[0] in "'\"":
            return _AnnotationParser(piece[1:-1], self._lookup).parse()
        if not (piece[0].isalpha() or piece[0] == "_"):
            raise TypeError(f"unexpected {piece!r} in annotation {self._text!r}")
        value = self._lookup(piece)
        if self._peek() != "[":
            return value
        self._next()
        args = [self._union()]
        while self._peek() == ",":
            self._next()
            args.append(self._union())
        self._expect("]")
        if value is Union:
            return Union[tuple(args)]
        return value[args[0]] if len(args) == 1 else value[tuple(args)]


def _namespace(cls: type) -> dict[str, Any]:
    names = dict(_BASE_NAMES)
    for name, classes in _REGISTRY.items():
        same_module = [c for c in classes if c.__module__ == cls.__module__]
        names[name] = (same_module or classes)[-1]
    init = cls.__dict__.get("__init__")
    names.update(getattr(init, "__globals__", {}))
    return names


def _resolve(tp: Any, names: dict[str, Any]) -> Any:
    def lookup(dotted: str) -> Any:
        head, *rest = dotted.split(".")
        if head not in names:
            raise TypeError(f"unknown type name {dotted!r}")
        value = names[head]
        for part in rest:
            value = getattr(value, part)
        return value

    if isinstance(tp, str):
        return _AnnotationParser(tp, lookup).parse()
    if isinstance(tp, ForwardRef):
        return _AnnotationParser(tp.__forward_arg__, lookup).parse()
    origin = get_origin(tp)
    args = get_args(tp)
    if origin is None or not args:
        return tp
    resolved = tuple(_resolve(arg, names) for arg in args)
    if origin in (Union, types.UnionType):
        return Union[resolved]
    if origin in (list, dict):
        return origin[resolved]
    return tp


@lru_cache(maxsize=None)
def _field_types(cls: type) -> dict[str, Any]:
    names = _namespace(cls)
    return {f.name: _resolve(f.type, names) for f in dataclasses.fields(cls)}


def _optional_inner(tp: Any) -> Any:
    """Return X for Optional[X], or None when ``tp`` is not optional."""
    if get_origin(tp) in (Union, types.UnionType):
        args = get_args(tp)
        if _NONE_TYPE in args:
            rest = [arg for arg in args if arg is not _NONE_TYPE]
            if len(rest) != 1:
                raise TypeError(f"unsupported union type: {tp!r}")
            return rest[0]
    return None


def _has_default(f: dataclasses.Field) -> bool:
    return f.default is not dataclasses.MISSING or f.default_factory is not dataclasses.MISSING


def _load(tp: Any, value: Any, where: str) -> Any:
    if tp is Any:
        return value
    inner = _optional_inner(tp)
    if inner is not None:
        return None if value is None else _load(inner, value, where)
    if value is None:
        raise TypeError(f"{where}: null is not allowed")
    origin = get_origin(tp)
    if origin is list:
        (item_type,) = get_args(tp) or (Any,)
        if not isinstance(value, list):
            raise TypeError(f"{where}: expected a list, got {type(value).__name__}")
        return [_load(item_type, item, f"{where}[{i}]") for i, item in enumerate(value)]
    if origin is dict:
        key_type, value_type = get_args(tp) or (Any, Any)
        if not isinstance(value, Mapping):
            raise TypeError(f"{where}: expected an object, got {type(value).__name__}")
        return {
            _load(key_type, key, where): _load(value_type, item, f"{where}.{key}")
            for key, item in value.items()
        }
    if isinstance(tp, type):
        if issubclass(tp, Model):
            return tp.from_dict(value)
        if issubclass(tp, Enum):
            try:
                return tp(value)
            except (ValueError, TypeError):
                raise ValueError(f"{where}: unknown {tp.__name__} variant {value!r}") from None
        if tp is bool:
            if not isinstance(value, bool):
                raise TypeError(f"{where}: expected a bool, got {type(value).__name__}")
            return value
        if tp is int:
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{where}: expected an integer, got {type(value).__name__}")
            return value
        if tp is float:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"{where}: expected a number, got {type(value).__name__}")
            return float(value)
        if tp is str:
            if not isinstance(value, str):
                raise TypeError(f"{where}: expected a string, got {type(value).__name__}")
            return value
    raise TypeError(f"{where}: unsupported field type {tp!r}")


def _dump(value: Any) -> Any:
    if isinstance(value, Model):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_dump(item) for item in value]
    if isinstance(value, Mapping):
        return {key: _dump(item) for key, item in value.items()}
    return value


class Model:
    """Base for dataclass models that convert to and from JSON objects.

    Field metadata controls the wire form:
    ``key`` gives the JSON name; ``keep_none`` writes ``null`` instead of
    leaving a None field out; ``omit_empty`` leaves out an empty list;
    ``required`` makes a field mandatory on input even though it has a default.
    Setting ``camel_case`` on a subclass turns snake_case names into camelCase.
    """

    camel_case: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        _REGISTRY.setdefault(cls.__name__, []).append(cls)

    @classmethod
    def _wire_key(cls, f: dataclasses.Field) -> str:
        key = f.metadata.get("key")
        if key:
            return key
        return _camel(f.name) if cls.camel_case else f.name

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form of this model."""
        out: dict[str, Any] = {}
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if value is None and not f.metadata.get("keep_none"):
                continue
            if f.metadata.get("omit_empty") and not value:
                continue
            out[self._wire_key(f)] = _dump(value)
        return out

    @classmethod
    def from_dict(cls: type[_M], data: Any) -> _M:
        """Build a model from its JSON object form; unknown keys are ignored."""
        if not isinstance(data, Mapping):
            raise TypeError(f"{cls.__name__} expects a JSON object, got {type(data).__name__}")
        hints = _field_types(cls)
        kwargs: dict[str, Any] = {}
        for f in dataclasses.fields(cls):
            if not f.init:
                continue
            key = cls._wire_key(f)
            tp = hints[f.name]
            if key in data:
                kwargs[f.name] = _load(tp, data[key], f"{cls.__name__}.{key}")
            elif _optional_inner(tp) is not None and not f.metadata.get("required"):
                if not _has_default(f):
                    kwargs[f.name] = None
            elif f.metadata.get("required") or not _has_default(f):
                raise ValueError(f"{cls.__name__}: missing field {key!r}")
        return cls(**kwargs)

    def to_json(self) -> str:
        """Return the compact JSON text of this model."""
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)

    @classmethod
    def from_json(cls: type[_M], text: str | bytes) -> _M:
        """Parse JSON text into a model."""
        return cls.from_dict(json.loads(text))