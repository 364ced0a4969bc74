# src/atlas_keypath/adapters/base.py
"""
Contrato base dos adapters de formato de arquivo.

Um adapter traduz entre o texto de um formato de superfície (INI, YAML,
JSON, Python) e a árvore de configuração genérica (`dict`).

Responsabilidades do módulo:
    - Definir o protocolo comum: supports / from_string / from_file /
      to_string / to_file
    - Validar que a raiz decodificada é um dicionário
    - Prefixar a saída com o comentário de proveniência
    - Registrar eventos estruturados no `CodecContext` quando informado

Invariantes:
    - Arquivos são lidos e escritos em UTF-8
    - A raiz retornada por `from_string`/`from_file` é sempre `dict`
    - O cabeçalho de proveniência usa `CodecOptions.provenance`, um valor
      estático, nunca o nome da classe em runtime

Limites explícitos:
    - Não decide qual adapter usar (responsabilidade do registry)
    - Não realiza merge entre arquivos
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from ..core.context import CodecContext
from ..core.errors import ConfigFileNotFoundError, InvalidConfigRootTypeError
from ..core.options import CodecOptions


PathLike = Union[str, Path]


class FileAdapter(ABC):
    """
    Adapter abstrato de um formato de configuração.

    Subclasses definem `name`, `extensions`, `comment_prefix` e implementam
    `_decode`/`_encode`.
    """

    name: str = ""
    extensions: Tuple[str, ...] = ()
    comment_prefix: Optional[str] = "#"

    def __init__(self, options: Optional[CodecOptions] = None) -> None:
        self.options = options or CodecOptions()

    def supports(self, path: PathLike) -> bool:
        suffix = Path(path).suffix.lower().lstrip(".")
        return suffix in self.extensions

    # -----------------------------
    # Leitura
    # -----------------------------
    def from_string(self, text: str, ctx: Optional[CodecContext] = None) -> Dict[str, Any]:
        data = self._decode(text, ctx)
        if data is None:
            data = {}

        if not isinstance(data, dict):
            raise InvalidConfigRootTypeError(
                f"Config root deve ser dict, recebido: {type(data).__name__}",
                details={"format": self.name},
            )

        if ctx is not None:
            ctx.log(
                step_id=f"{self.name}.decode",
                level="INFO",
                message="Configuração decodificada",
                root_keys=len(data),
            )
        return data

    def from_file(self, path: PathLike, ctx: Optional[CodecContext] = None) -> Dict[str, Any]:
        file = Path(path)
        if not file.exists():
            raise ConfigFileNotFoundError(
                f"Arquivo de configuração não encontrado: {file}",
                details={"path": str(file)},
            )

        if ctx is not None:
            ctx.meta.setdefault("path", str(file))

        return self.from_string(file.read_text(encoding="utf-8"), ctx)

    # -----------------------------
    # Escrita
    # -----------------------------
    def header(self) -> str:
        if self.comment_prefix is None:
            return ""
        return f"{self.comment_prefix} generated by {self.options.provenance}\n\n"

    def to_string(self, tree: Dict[str, Any], ctx: Optional[CodecContext] = None) -> str:
        if not isinstance(tree, dict):
            raise InvalidConfigRootTypeError(
                f"Config root deve ser dict, recebido: {type(tree).__name__}",
                details={"format": self.name},
            )

        text = self.header() + self._encode(tree, ctx)

        if ctx is not None:
            ctx.log(
                step_id=f"{self.name}.encode",
                level="INFO",
                message="Configuração codificada",
                chars=len(text),
            )
        return text

    def to_file(self, tree: Dict[str, Any], path: PathLike, ctx: Optional[CodecContext] = None) -> Path:
        file = Path(path)
        text = self.to_string(tree, ctx)
        file.parent.mkdir(parents=True, exist_ok=True)
        file.write_text(text, encoding="utf-8")
        return file

    # -----------------------------
    # Formato
    # -----------------------------
    @abstractmethod
    def _decode(self, text: str, ctx: Optional[CodecContext]) -> Any:
        raise NotImplementedError

    @abstractmethod
    def _encode(self, tree: Dict[str, Any], ctx: Optional[CodecContext]) -> str:
        raise NotImplementedError
