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
"""Tests for the Type value object."""

from __future__ import annotations

import dataclasses

import pytest

from pyfoundation.kernel.exceptions import InvalidArgumentException
from pyfoundation.property_info.type import BUILTIN_TYPES, BuiltinType, Type


class TestTypeConstruction:
    def test_defaults(self):
        t = Type("int")
        assert t.builtin_type == "int"
        assert t.nullable is False
        assert t.class_name is None
        assert t.collection is False
        assert t.collection_key_type is None
        assert t.collection_value_type is None

    @pytest.mark.parametrize("kind", BUILTIN_TYPES)
    def test_every_builtin_type_is_accepted(self, kind):
        assert Type(kind).builtin_type == kind

    def test_builtin_set_is_closed(self):
        assert set(BUILTIN_TYPES) == {
            "int", "float", "string", "bool", "resource",
            "object", "array", "null", "callable", "iterable",
        }

    def test_enum_member_is_stored_as_plain_string(self):
        t = Type(BuiltinType.STRING)
        assert t.builtin_type == "string"
        assert type(t.builtin_type) is str

    @pytest.mark.parametrize("kind", ["notatype", "str", "INT", "", "list", "mixed"])
    def test_invalid_builtin_type(self, kind):
        with pytest.raises(InvalidArgumentException, match="is not a valid builtin type") as exc_info:
            Type(kind)
        assert exc_info.value.code == "TYPE_BUILTIN_INVALID"
        assert exc_info.value.context == {"builtin_type": kind}

    def test_class_name_on_non_object_is_accepted(self):
        t = Type("int", class_name="app.models.User")
        assert t.class_name == "app.models.User"

    def test_nested_collection_types_returned_unchanged(self):
        key = Type("string")
        value = Type("array", collection=True, collection_key_type=Type("int"), collection_value_type=Type("float"))
        t = Type("array", nullable=True, collection=True, collection_key_type=key, collection_value_type=value)

        assert t.collection is True
        assert t.nullable is True
        assert t.collection_key_type is key
        assert t.collection_value_type is value
        assert t.collection_value_type.collection_value_type == Type("float")

    def test_object_with_class_name(self):
        t = Type("object", nullable=True, class_name="datetime.datetime")
        assert t.builtin_type == "object"
        assert t.class_name == "datetime.datetime"


class TestTypeImmutability:
    def test_fields_cannot_be_reassigned(self):
        t = Type("int")
        with pytest.raises(dataclasses.FrozenInstanceError):
            t.nullable = True  # type: ignore[misc]

    def test_equal_descriptors_compare_and_hash_equal(self):
        a = Type("array", collection=True, collection_value_type=Type("int"))
        b = Type("array", collection=True, collection_value_type=Type("int"))
        assert a == b
        assert hash(a) == hash(b)
