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
"""Tests for Config loading, env overrides, placeholders and binding."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pytest

from pyfoundation.config.properties.session import SessionProperties
from pyfoundation.core.config import Config, config_properties


class TestConfigGet:
    def test_get_nested_value(self):
        config = Config({"pyfoundation": {"session": {"prefix": "app"}}})
        assert config.get("pyfoundation.session.prefix") == "app"

    def test_get_with_default(self):
        assert Config({}).get("missing.key", "default") == "default"

    def test_get_through_scalar_returns_default(self):
        config = Config({"a": 1})
        assert config.get("a.b", "fallback") == "fallback"

    def test_env_var_override(self, monkeypatch):
        monkeypatch.setenv("PYFOUNDATION_SESSION_PREFIX", "env-prefix")
        config = Config({"pyfoundation": {"session": {"prefix": "file-prefix"}}})
        assert config.get("pyfoundation.session.prefix") == "env-prefix"

    def test_dashed_keys_map_to_env(self, monkeypatch):
        monkeypatch.setenv("PYFOUNDATION_SESSION_REDIS_URL", "redis://env:6379/1")
        assert Config({}).get("pyfoundation.session.redis-url") == "redis://env:6379/1"

    def test_get_section(self):
        config = Config({"pyfoundation": {"session": {"prefix": "p", "expiretime": 5}}})
        assert config.get_section("pyfoundation.session") == {"prefix": "p", "expiretime": 5}
        assert config.get_section("pyfoundation.missing") == {}

    def test_to_dict_is_a_copy(self):
        config = Config({"a": 1})
        data = config.to_dict()
        data["a"] = 2
        assert config.get("a") == 1


class TestPlaceholders:
    def test_config_reference(self):
        config = Config({"app": {"name": "shop"}, "session": {"prefix": "${app.name}:"}})
        assert config.get("session.prefix") == "shop:"

    def test_env_reference(self, monkeypatch):
        monkeypatch.setenv("REDIS_HOST", "cache.internal")
        config = Config({"url": "redis://${REDIS_HOST}:6379/0"})
        assert config.get("url") == "redis://cache.internal:6379/0"

    def test_default_value(self):
        config = Config({"url": "redis://${REDIS_HOST_UNSET_FOR_TEST:localhost}:6379"})
        assert config.get("url") == "redis://localhost:6379"

    def test_unresolvable_placeholder(self):
        config = Config({"url": "${NOT_A_KEY_ANYWHERE}"})
        with pytest.raises(ValueError, match="Cannot resolve placeholder"):
            config.get("url")

    def test_circular_reference(self):
        config = Config({"a": "${b}", "b": "${a}"})
        with pytest.raises(ValueError, match="Max recursion depth"):
            config.get("a")


class TestConfigFiles:
    def test_load_yaml(self, tmp_path: Path):
        path = tmp_path / "app.yaml"
        path.write_text("pyfoundation:\n  session:\n    store: memory\n    expiretime: 60\n")
        config = Config.from_file(path)
        assert config.get("pyfoundation.session.store") == "memory"
        assert config.get("pyfoundation.session.expiretime") == 60
        assert config.loaded_sources == [str(path)]

    def test_load_toml(self, tmp_path: Path):
        path = tmp_path / "app.toml"
        path.write_text('[pyfoundation.session]\nprefix = "toml:"\n')
        assert Config.from_file(path).get("pyfoundation.session.prefix") == "toml:"

    def test_missing_file_is_empty(self, tmp_path: Path):
        config = Config.from_file(tmp_path / "absent.yaml")
        assert config.to_dict() == {}
        assert config.loaded_sources == []

    def test_profile_overlay(self, tmp_path: Path):
        base = tmp_path / "app.yaml"
        base.write_text("pyfoundation:\n  session:\n    store: redis\n    prefix: base\n")
        (tmp_path / "app-dev.yaml").write_text("pyfoundation:\n  session:\n    store: memory\n")

        config = Config.from_file(base, active_profiles=["dev", "missing"])
        assert config.get("pyfoundation.session.store") == "memory"
        assert config.get("pyfoundation.session.prefix") == "base"
        assert len(config.loaded_sources) == 2


class TestBind:
    def test_bind_requires_decorator(self):
        @dataclass
        class Plain:
            value: int = 1

        with pytest.raises(ValueError, match="not decorated"):
            Config({}).bind(Plain)

    def test_bind_coerces_strings(self):
        @config_properties(prefix="limits")
        @dataclass
        class Limits:
            count: int = 0
            ratio: float = 0.0
            enabled: bool = False

        limits = Config({"limits": {"count": "3", "ratio": "0.5", "enabled": "yes"}}).bind(Limits)
        assert limits == Limits(count=3, ratio=0.5, enabled=True)

    def test_session_properties_defaults(self):
        properties = Config({}).bind(SessionProperties)
        assert properties == SessionProperties()
        assert properties.handler_options() == {"prefix": "sf2s", "expiretime": 86400}

    def test_session_properties_dashed_keys(self):
        config = Config(
            {"pyfoundation": {"session": {"redis-url": "redis://h:1/0", "redis-cluster": "true"}}}
        )
        properties = config.bind(SessionProperties)
        assert properties.redis_url == "redis://h:1/0"
        assert properties.redis_cluster is True

    def test_session_properties_env_override(self, monkeypatch):
        monkeypatch.setenv("PYFOUNDATION_SESSION_PREFIX", "from-env")
        properties = Config({"pyfoundation": {"session": {"prefix": "from-file"}}}).bind(SessionProperties)
        assert properties.prefix == "from-env"
