# src/atlas_keypath/__init__.py
"""
Atlas KeyPath: conversão entre configuração plana delimitada e árvores
aninhadas.

Arquitetura em alto nível:
    - core      → engine de KeyPath (builder, flatten, merge, values)
    - adapters  → formatos de superfície (INI, YAML, JSON, Python)
    - loader    → leitura/gravação por caminho de arquivo e camadas

Fluxo:
    decode: texto → lexer do formato → mapeamento plano → árvore
    encode: árvore → linhas `caminho = valor` → texto
"""

from .core.builder import build_tree
from .core.context import CodecContext
from .core.errors import (
    ConfigError,
    InvalidKeyError,
    KeyConflictError,
    UnsupportedValueError,
)
from .core.flatten import render_tree
from .core.options import CodecOptions
from .core.values import encode_value
from .loader import dump_config, load_config, load_layered, load_options

__all__ = [
    "CodecContext",
    "CodecOptions",
    "ConfigError",
    "InvalidKeyError",
    "KeyConflictError",
    "UnsupportedValueError",
    "build_tree",
    "dump_config",
    "encode_value",
    "load_config",
    "load_layered",
    "load_options",
    "render_tree",
]
