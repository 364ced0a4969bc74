# tests/adapters/test_structured_files.py
"""
Testes dos adapters que delegam a codecs estruturados (YAML e JSON).

Esses formatos já representam árvores aninhadas: o conteúdo não passa
pelo engine de KeyPath, apenas pela validação de raiz do adapter base.
"""

import json
from pathlib import Path

import pytest
import yaml

from atlas_keypath.adapters.json_file import JsonFileAdapter
from atlas_keypath.adapters.yaml_file import YamlFileAdapter
from atlas_keypath.core.errors import ConfigFileNotFoundError, InvalidConfigRootTypeError


def test_yaml_decode():
    assert YamlFileAdapter().from_string("a:\n  b: 1\nc: [1, 2]\n") == {"a": {"b": 1}, "c": [1, 2]}


def test_yaml_dotted_keys_are_not_expanded():
    assert YamlFileAdapter().from_string("a.b: 1\n") == {"a.b": 1}


def test_yaml_empty_document_is_empty_dict():
    assert YamlFileAdapter().from_string("") == {}


def test_yaml_list_root_is_rejected():
    with pytest.raises(InvalidConfigRootTypeError):
        YamlFileAdapter().from_string("- 1\n- 2\n")


def test_yaml_encode_keeps_order_and_header(sample_tree):
    text = YamlFileAdapter().to_string(sample_tree)
    assert text.startswith("# generated by atlas_keypath\n\n")
    loaded = yaml.safe_load(text)
    assert loaded == sample_tree
    assert list(loaded) == ["app", "version", "db"]


def test_json_round_trip(sample_tree):
    adapter = JsonFileAdapter()
    text = adapter.to_string(sample_tree)
    assert json.loads(text) == sample_tree
    assert adapter.from_string(text) == sample_tree


def test_json_has_no_header():
    assert JsonFileAdapter().to_string({"a": 1}).startswith("{")


def test_json_empty_text_is_empty_dict():
    assert JsonFileAdapter().from_string("  \n") == {}


def test_json_scalar_root_is_rejected():
    with pytest.raises(InvalidConfigRootTypeError):
        JsonFileAdapter().from_string("3")


def test_file_round_trip(tmp_path: Path, sample_tree):
    adapter = YamlFileAdapter()
    path = adapter.to_file(sample_tree, tmp_path / "nested" / "config.yaml")
    assert path.exists()
    assert adapter.from_file(path) == sample_tree


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(ConfigFileNotFoundError) as exc:
        JsonFileAdapter().from_file(tmp_path / "missing.json")
    assert exc.value.details["path"].endswith("missing.json")


def test_from_file_records_path_in_context(tmp_path: Path, codec_ctx):
    path = tmp_path / "c.json"
    path.write_text('{"a": 1}', encoding="utf-8")
    JsonFileAdapter().from_file(path, codec_ctx)
    assert codec_ctx.meta["path"] == str(path)
    assert codec_ctx.events[-1]["step_id"] == "json.decode"
