# src/atlas_keypath/loader.py
"""
Carregamento e gravação de configuração por caminho de arquivo.

Este módulo é a porta de entrada de I/O do Atlas KeyPath: resolve o
adapter pela extensão do arquivo e delega a leitura/escrita. Arquivos de
opções do codec (`load_options`) passam pelo mesmo despacho.

Política de resolução em camadas (`load_layered`):
    - O arquivo de defaults é obrigatório
    - O arquivo local é opcional; quando existe, tem prioridade
    - A resolução utiliza `deep_merge` (override estrito por tipo)
    - Defaults e local podem estar em formatos diferentes

Invariantes:
    - O resultado é sempre um dicionário puro (`dict`)
    - Overrides locais nunca mutam os defaults

Limites explícitos:
    - Não valida semântica de domínio
    - Não interpola variáveis de ambiente
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from .adapters.base import PathLike
from .adapters.registry import AdapterRegistry, default_registry
from .core.context import CodecContext
from .core.merge import deep_merge
from .core.options import CodecOptions, options_from_mapping, options_to_dict


def _registry(options: Optional[CodecOptions], registry: Optional[AdapterRegistry]) -> AdapterRegistry:
    return registry if registry is not None else default_registry(options)


def load_config(
    path: PathLike,
    *,
    options: Optional[CodecOptions] = None,
    registry: Optional[AdapterRegistry] = None,
    ctx: Optional[CodecContext] = None,
) -> Dict[str, Any]:
    """
    Lê um arquivo de configuração com o adapter correspondente à extensão.

    Raises:
        UnsupportedConfigFormatError: Nenhum adapter suporta a extensão.
        ConfigFileNotFoundError: Arquivo inexistente.
        ConfigError: Qualquer erro estrutural de decode.
    """
    adapter = _registry(options, registry).adapter_for(path)
    return adapter.from_file(path, ctx)


def dump_config(
    tree: Dict[str, Any],
    path: PathLike,
    *,
    options: Optional[CodecOptions] = None,
    registry: Optional[AdapterRegistry] = None,
    ctx: Optional[CodecContext] = None,
) -> Path:
    """Grava `tree` no formato indicado pela extensão de `path`."""
    adapter = _registry(options, registry).adapter_for(path)
    return adapter.to_file(tree, path, ctx)


def load_layered(
    defaults_path: PathLike,
    local_path: Optional[PathLike] = None,
    *,
    options: Optional[CodecOptions] = None,
    registry: Optional[AdapterRegistry] = None,
    ctx: Optional[CodecContext] = None,
) -> Dict[str, Any]:
    """
    Carrega defaults e aplica overrides locais opcionais.

    Raises:
        ConfigFileNotFoundError: Se o arquivo de defaults não existir.
        ConfigTypeConflictError: Conflito de tipo entre defaults e local.
    """
    registry = _registry(options, registry)
    effective = load_config(defaults_path, registry=registry, ctx=ctx)

    if local_path is not None and Path(local_path).exists():
        local = load_config(local_path, registry=registry, ctx=ctx)
        effective = deep_merge(effective, local)
        if ctx is not None:
            ctx.log(
                step_id="load.layered",
                level="INFO",
                message="Overrides locais aplicados",
                local_path=str(local_path),
            )

    return effective


def load_options(
    path: PathLike,
    *,
    registry: Optional[AdapterRegistry] = None,
    ctx: Optional[CodecContext] = None,
) -> CodecOptions:
    """
    Carrega `CodecOptions` de um arquivo em qualquer formato registrado.

    O arquivo é lido pelo adapter da extensão, como uma configuração comum,
    usando as opções default. Arquivos vazios resultam nas opções default.

    Raises:
        ConfigFileNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Nenhum adapter suporta a extensão.
        InvalidConfigRootTypeError: Conteúdo raiz não é dicionário.
        ConfigError: Opções inválidas.
    """
    options = options_from_mapping(load_config(path, registry=registry, ctx=ctx))

    if ctx is not None:
        ctx.log(
            step_id="load.options",
            level="INFO",
            message="Opções do codec carregadas",
            options=options_to_dict(options),
        )

    return options
