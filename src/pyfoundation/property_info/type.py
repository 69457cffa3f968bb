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
"""Type value object (immutable)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from pyfoundation.kernel.exceptions import InvalidArgumentException


class BuiltinType(StrEnum):
    """Closed set of builtin kinds a Type can describe."""

    INT = "int"
    FLOAT = "float"
    STRING = "string"
    BOOL = "bool"
    RESOURCE = "resource"
    OBJECT = "object"
    ARRAY = "array"
    CALLABLE = "callable"
    NULL = "null"
    ITERABLE = "iterable"


BUILTIN_TYPES: tuple[str, ...] = tuple(member.value for member in BuiltinType)


@dataclass(frozen=True)
class Type:
    """Describes one resolved type, optionally shaped as a collection.

    ``class_name`` is only meaningful when ``builtin_type`` is ``object``;
    ``collection_key_type`` and ``collection_value_type`` only when
    ``collection`` is true. Neither rule is enforced.
    """

    builtin_type: str
    nullable: bool = False
    class_name: str | None = None
    collection: bool = False
    collection_key_type: Type | None = None
    collection_value_type: Type | None = None

    def __post_init__(self) -> None:
        """Validate the builtin kind and normalize it to a plain string."""
        if self.builtin_type not in BUILTIN_TYPES:
            raise InvalidArgumentException(
                f'"{self.builtin_type}" is not a valid builtin type.',
                code="TYPE_BUILTIN_INVALID",
                context={"builtin_type": self.builtin_type},
            )
        object.__setattr__(self, "builtin_type", str(self.builtin_type))
