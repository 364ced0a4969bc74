# src/atlas_keypath/adapters/registry.py
"""
Registro canônico de adapters de formato.

O `AdapterRegistry` mantém os adapters disponíveis em ordem de registro e
resolve qual adapter atende um caminho de arquivo, com base exclusivamente
na extensão.

Invariantes:
    - Cada `adapter.name` é único no registry
    - A resolução percorre os adapters na ordem de registro
    - Extensões sem adapter são rejeitadas explicitamente

Limites explícitos:
    - Não lê nem escreve arquivos
    - Não tenta inferir formato pelo conteúdo
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..core.errors import DuplicateAdapterError, UnsupportedConfigFormatError
from ..core.options import CodecOptions
from .base import FileAdapter, PathLike
from .ini_file import IniFileAdapter
from .json_file import JsonFileAdapter
from .python_file import PythonFileAdapter
from .yaml_file import YamlFileAdapter


@dataclass
class AdapterRegistry:
    _adapters: Dict[str, FileAdapter] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def add(self, adapter: FileAdapter) -> None:
        name = getattr(adapter, "name", None)
        if not isinstance(name, str) or not name.strip():
            raise ValueError("adapter.name must be a non-empty string")
        if name in self._adapters:
            raise DuplicateAdapterError(
                f"Adapter duplicado: {name}",
                details={"name": name},
            )
        self._adapters[name] = adapter
        self._order.append(name)

    def get(self, name: str) -> FileAdapter:
        return self._adapters[name]

    def list(self) -> List[FileAdapter]:
        return [self._adapters[name] for name in self._order]

    def adapter_for(self, path: PathLike) -> FileAdapter:
        for adapter in self.list():
            if adapter.supports(path):
                return adapter

        raise UnsupportedConfigFormatError(
            f"Formato não suportado: {path}",
            details={"path": str(path), "formats": list(self._order)},
        )


def default_registry(options: Optional[CodecOptions] = None) -> AdapterRegistry:
    """Registry com os adapters INI, YAML, JSON e Python, nessa ordem."""
    registry = AdapterRegistry()
    for adapter_cls in (IniFileAdapter, YamlFileAdapter, JsonFileAdapter, PythonFileAdapter):
        registry.add(adapter_cls(options))
    return registry
