# src/atlas_keypath/adapters/yaml_file.py
"""
Adapter YAML.

Delegação total ao PyYAML: o documento já é uma árvore aninhada, portanto
não passa pelo engine de KeyPath.

Decisões arquiteturais:
    - Leitura com `yaml.safe_load` (nenhuma tag Python é construída)
    - Escrita em estilo bloco, preservando a ordem de inserção das chaves
    - Documento vazio é interpretado como dicionário vazio
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import yaml  # PyYAML

from ..core.context import CodecContext
from .base import FileAdapter


class YamlFileAdapter(FileAdapter):
    name = "yaml"
    extensions = ("yaml", "yml")
    comment_prefix = "#"

    def _decode(self, text: str, ctx: Optional[CodecContext]) -> Any:
        return yaml.safe_load(text)

    def _encode(self, tree: Dict[str, Any], ctx: Optional[CodecContext]) -> str:
        return yaml.safe_dump(
            tree,
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )
