# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Infer Type descriptors from Python type annotations.

Usage::

    @dataclass
    class Order:
        id: int
        lines: list[OrderLine]
        notes: str | None = None

    extractor = TypeExtractor()
    extractor.get_types(Order, "lines")
    # [Type("array", collection=True,
    #       collection_key_type=Type("int"),
    #       collection_value_type=Type("object", class_name="shop.OrderLine"))]
"""

from __future__ import annotations

import collections.abc
import dataclasses
import inspect
import sys
import types
import typing
from typing import Annotated, Any, Union, get_args, get_origin

from pyfoundation.property_info.type import BuiltinType, Type

_SCALARS: dict[Any, BuiltinType] = {
    int: BuiltinType.INT,
    float: BuiltinType.FLOAT,
    str: BuiltinType.STRING,
    bytes: BuiltinType.STRING,
    bool: BuiltinType.BOOL,
}

_LIST_ORIGINS = frozenset(
    {
        list,
        tuple,
        set,
        frozenset,
        collections.abc.Collection,
        collections.abc.Sequence,
        collections.abc.MutableSequence,
        collections.abc.Set,
        collections.abc.MutableSet,
    }
)

_MAP_ORIGINS = frozenset({dict, collections.abc.Mapping, collections.abc.MutableMapping})

_ITERABLE_ORIGINS = frozenset(
    {
        collections.abc.Iterable,
        collections.abc.Iterator,
        collections.abc.Generator,
        collections.abc.AsyncIterable,
        collections.abc.AsyncIterator,
        collections.abc.AsyncGenerator,
    }
)


class TypeExtractor:
    """Builds Type descriptors from annotations resolved with ``typing``.

    Unresolvable hints (``Any``, type variables, unresolved forward
    references, literals) yield no descriptor at all rather than a guess.
    """

    def get_types(self, cls: type, attribute: str) -> list[Type] | None:
        """Return the types of *attribute* on *cls*, or ``None`` if unannotated."""
        try:
            hints = typing.get_type_hints(cls)
        except NameError:
            return self._from_raw_annotation(cls, attribute)
        if attribute not in hints:
            return None
        return self.from_annotation(hints[attribute])

    def _from_raw_annotation(self, cls: type, attribute: str) -> list[Type] | None:
        # Another annotation on cls does not resolve; evaluate this one alone.
        for owner in cls.__mro__:
            annotations = inspect.get_annotations(owner)
            if attribute not in annotations:
                continue
            hint = annotations[attribute]
            if isinstance(hint, str):
                module = sys.modules.get(owner.__module__)
                try:
                    hint = eval(hint, vars(module) if module else {}, dict(vars(owner)))
                except NameError:
                    return []
            return self.from_annotation(hint)
        return None

    def from_annotation(self, hint: Any) -> list[Type]:
        """Return one descriptor per alternative of *hint*."""
        if hint is Any:
            return []
        if hint is None or hint is types.NoneType:
            return [Type(BuiltinType.NULL)]

        origin = get_origin(hint)
        if origin is Annotated:
            return self.from_annotation(get_args(hint)[0])
        if origin is Union or origin is types.UnionType:
            return self._from_union(get_args(hint))

        if origin is None:
            origin = hint
        if not isinstance(origin, type):
            return []
        return [self._from_class(origin, get_args(hint))]

    def _from_union(self, members: tuple[Any, ...]) -> list[Type]:
        nullable = types.NoneType in members
        resolved: list[Type] = []
        for member in members:
            if member is types.NoneType:
                continue
            resolved.extend(self.from_annotation(member))
        if nullable:
            return [dataclasses.replace(t, nullable=True) for t in resolved]
        return resolved

    def _from_class(self, origin: type, args: tuple[Any, ...]) -> Type:
        if origin in _SCALARS:
            return Type(_SCALARS[origin])
        if origin is collections.abc.Callable:
            return Type(BuiltinType.CALLABLE)
        if origin in _MAP_ORIGINS:
            key, value = self._map_args(args)
            return Type(BuiltinType.ARRAY, collection=True, collection_key_type=key, collection_value_type=value)
        if origin in _LIST_ORIGINS:
            return Type(
                BuiltinType.ARRAY,
                collection=True,
                collection_key_type=Type(BuiltinType.INT),
                collection_value_type=self._item_arg(origin, args),
            )
        if origin in _ITERABLE_ORIGINS:
            return Type(
                BuiltinType.ITERABLE,
                collection=True,
                collection_value_type=self._single(args[0]) if args else None,
            )
        if origin is object:
            return Type(BuiltinType.OBJECT)

        class_name = _qualified_name(origin)
        if issubclass(origin, collections.abc.Mapping):
            key, value = self._map_args(args)
            return Type(
                BuiltinType.OBJECT,
                class_name=class_name,
                collection=True,
                collection_key_type=key,
                collection_value_type=value,
            )
        if issubclass(origin, collections.abc.Iterable) and args:
            return Type(
                BuiltinType.OBJECT,
                class_name=class_name,
                collection=True,
                collection_key_type=Type(BuiltinType.INT),
                collection_value_type=self._single(args[0]),
            )
        return Type(BuiltinType.OBJECT, class_name=class_name)

    def _map_args(self, args: tuple[Any, ...]) -> tuple[Type | None, Type | None]:
        if len(args) != 2:
            return None, None
        return self._single(args[0]), self._single(args[1])

    def _item_arg(self, origin: type, args: tuple[Any, ...]) -> Type | None:
        if not args:
            return None
        if origin is tuple:
            # tuple[X, ...] is homogeneous; fixed-shape tuples only when every slot agrees.
            items = [arg for arg in args if arg is not Ellipsis]
            if len(set(items)) != 1:
                return None
            return self._single(items[0])
        return self._single(args[0])

    def _single(self, hint: Any) -> Type | None:
        resolved = self.from_annotation(hint)
        return resolved[0] if len(resolved) == 1 else None


def _qualified_name(cls: type) -> str:
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"
