"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from elresolver.config import ResolverConfig, load_config
from elresolver.constants.messages import STATIC_FIELD_READ_ERROR
from elresolver.context import EvaluationContext
from elresolver.exceptions import ConfigError, MethodNotFoundError
from elresolver.model import ClassHandle
from elresolver.resolvers import StaticFieldResolver
from tests.sample_types import Geometry


def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    loaded = load_config(tmp_path)

    assert loaded == ResolverConfig()
    assert loaded.locale == "en"
    assert loaded.include_classmethods is True
    assert loaded.messages == {}


def test_load_config_missing_explicit_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(tmp_path, tmp_path / "absent.yaml")


def test_load_config_reads_default_file(tmp_path: Path) -> None:
    (tmp_path / "elresolver.yaml").write_text(
        "locale: de\ninclude_classmethods: false\nmessages:\n  static-field-read-error: 'nope {1}'\n",
        encoding="utf-8",
    )

    loaded = load_config(tmp_path)

    assert loaded.locale == "de"
    assert loaded.include_classmethods is False
    assert loaded.messages == {STATIC_FIELD_READ_ERROR: "nope {1}"}
    assert loaded.catalog().format(STATIC_FIELD_READ_ERROR, "T", "F") == "nope F"


def test_load_config_empty_file(tmp_path: Path) -> None:
    config_path = tmp_path / "custom.yaml"
    config_path.write_text("", encoding="utf-8")

    assert load_config(tmp_path, config_path) == ResolverConfig()


@pytest.mark.parametrize(
    ("yaml_content", "expected_match"),
    [
        ("- a\n- b\n", "must be a YAML mapping"),
        ("locale: [en]\n", "locale"),
        ("locale: '../x'\n", "locale"),
        ("include_classmethods: maybe\n", "include_classmethods"),
        ("messages: [1]\n", "messages"),
        ("messages:\n  static-field-read-eror: x\n", "did you mean `static-field-read-error`"),
        ("messages:\n  null-context: 3\n", "messages.null-context"),
        ("locael: en\n", "did you mean `locale`"),
        ("locale: [unclosed\n", "Invalid YAML"),
    ],
    ids=[
        "not_mapping",
        "locale_type",
        "locale_pattern",
        "bool_type",
        "messages_type",
        "unknown_message_id",
        "message_template_type",
        "unknown_key",
        "invalid_yaml",
    ],
)
def test_load_config_rejects_invalid_values(tmp_path: Path, yaml_content: str, expected_match: str) -> None:
    config_path = tmp_path / "elresolver.yaml"
    config_path.write_text(yaml_content, encoding="utf-8")

    with pytest.raises(ConfigError, match=expected_match):
        load_config(tmp_path, config_path)


def test_resolver_from_config_honours_classmethod_toggle() -> None:
    context = EvaluationContext()
    resolver = StaticFieldResolver.from_config(ResolverConfig(include_classmethods=False))

    with pytest.raises(MethodNotFoundError):
        resolver.invoke(context, ClassHandle(Geometry), "named", None, ["x"])
    assert resolver.invoke(context, ClassHandle(Geometry), "square", None, [3]).value == 9
