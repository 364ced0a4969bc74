# src/atlas_keypath/adapters/__init__.py
"""
Adapters de formato de arquivo do Atlas KeyPath.

Cada adapter traduz um formato de superfície para a árvore genérica:
    - ini     → lexer tipado + engine de KeyPath do core
    - yaml    → PyYAML
    - json    → json
    - python  → execução do arquivo e leitura de `CONFIG`
"""

from .base import FileAdapter
from .ini_file import IniFileAdapter, lex_ini, parse_scalar
from .json_file import JsonFileAdapter
from .python_file import PythonFileAdapter
from .registry import AdapterRegistry, default_registry
from .yaml_file import YamlFileAdapter

__all__ = [
    "AdapterRegistry",
    "FileAdapter",
    "IniFileAdapter",
    "JsonFileAdapter",
    "PythonFileAdapter",
    "YamlFileAdapter",
    "default_registry",
    "lex_ini",
    "parse_scalar",
]
