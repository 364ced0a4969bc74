# src/atlas_keypath/adapters/python_file.py
"""
Adapter de arquivos Python executáveis.

Leitura:
    O arquivo é executado com `runpy.run_path` e a configuração é o valor
    da variável de módulo `CONFIG`. A leitura a partir de string não é
    suportada: o conteúdo só tem significado como arquivo executado.

Escrita:
    `CONFIG = {...}` renderizado com `pprint`, preservando a ordem de
    inserção, precedido pelo cabeçalho de proveniência.

Limites explícitos:
    - Não aplica sandbox: executar o arquivo equivale a importá-lo
"""

from __future__ import annotations

import pprint
import runpy
from pathlib import Path
from typing import Any, Dict, Optional

from ..core.context import CodecContext
from ..core.errors import (
    ConfigFileNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedOperationError,
)
from .base import FileAdapter, PathLike


CONFIG_VARIABLE = "CONFIG"


class PythonFileAdapter(FileAdapter):
    name = "python"
    extensions = ("py",)
    comment_prefix = "#"

    def from_file(self, path: PathLike, ctx: Optional[CodecContext] = None) -> Dict[str, Any]:
        file = Path(path)
        if not file.exists():
            raise ConfigFileNotFoundError(
                f"Arquivo de configuração não encontrado: {file}",
                details={"path": str(file)},
            )

        namespace = runpy.run_path(str(file))
        data = namespace.get(CONFIG_VARIABLE)

        if not isinstance(data, dict):
            raise InvalidConfigRootTypeError(
                f"{CONFIG_VARIABLE} deve ser dict, recebido: {type(data).__name__}",
                details={"path": str(file), "variable": CONFIG_VARIABLE},
                hint=f"Defina `{CONFIG_VARIABLE} = {{...}}` no nível de módulo.",
            )

        if ctx is not None:
            ctx.meta.setdefault("path", str(file))
            ctx.log(
                step_id=f"{self.name}.decode",
                level="INFO",
                message="Configuração executada",
                root_keys=len(data),
            )
        return data

    def _decode(self, text: str, ctx: Optional[CodecContext]) -> Any:
        raise UnsupportedOperationError(
            "Leitura de configuração Python a partir de string não é suportada",
            details={"format": self.name},
            hint="Use from_file com o caminho do arquivo.",
        )

    def _encode(self, tree: Dict[str, Any], ctx: Optional[CodecContext]) -> str:
        body = pprint.pformat(tree, indent=4, sort_dicts=False)
        return f"{CONFIG_VARIABLE} = {body}\n"
