# src/atlas_keypath/core/options.py
"""
Opções de codificação/decodificação do Atlas KeyPath.

Este módulo define `CodecOptions`, a única fonte de configuração consumida
pelo core, e utilitários para convertê-la de e para um dicionário puro.

Opções suportadas (v1):
    - separator               → separador de segmentos de KeyPath (default ".")
    - process_sections        → se False, seções são achatadas na raiz
    - render_without_sections → se True, o INI é renderizado sem seções
    - provenance              → nome estático usado no comentário de cabeçalho

Invariantes:
    - `CodecOptions` é imutável (frozen)
    - O separador nunca é vazio
    - A proveniência é um valor estático, nunca derivado do tipo em runtime

Limites explícitos:
    - Não carrega configurações de domínio (apenas opções do codec)
    - Não lê variáveis de ambiente
    - Não lê arquivos (ver `loader.load_options`)
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping

from .errors import ConfigError


DEFAULT_SEPARATOR = "."
DEFAULT_PROVENANCE = "atlas_keypath"


@dataclass(frozen=True)
class CodecOptions:
    """
    Opções imutáveis aplicadas a uma chamada de decode/encode.

    Campos:
        - separator: separador de segmentos de KeyPath
        - process_sections: processa seções como subárvores (True) ou
          mescla seu conteúdo diretamente na raiz (False)
        - render_without_sections: renderiza todas as folhas com caminho
          completo, sem cabeçalhos de seção
        - provenance: identificador estático escrito no cabeçalho gerado

    Raises:
        ConfigError: Se o separador for vazio ou não for string.
    """

    separator: str = DEFAULT_SEPARATOR
    process_sections: bool = True
    render_without_sections: bool = False
    provenance: str = DEFAULT_PROVENANCE

    def __post_init__(self) -> None:
        if not isinstance(self.separator, str) or self.separator == "":
            raise ConfigError(
                "Separador de KeyPath deve ser uma string não vazia",
                details={"separator": self.separator},
            )


def options_from_mapping(mapping: Mapping[str, Any]) -> CodecOptions:
    """
    Constrói `CodecOptions` a partir de um dicionário puro, validando
    chaves desconhecidas e tipos das flags.

    Raises:
        ConfigError: Chave desconhecida ou tipo inválido.
    """
    known = {f.name for f in fields(CodecOptions)}
    unknown = sorted(set(mapping) - known)
    if unknown:
        raise ConfigError(
            f"Opções desconhecidas: {', '.join(unknown)}",
            details={"unknown": unknown, "allowed": sorted(known)},
        )

    for flag in ("process_sections", "render_without_sections"):
        if flag in mapping and not isinstance(mapping[flag], bool):
            raise ConfigError(
                f"Opção '{flag}' deve ser bool, recebido: {type(mapping[flag]).__name__}",
                details={"option": flag},
            )

    if "provenance" in mapping and not isinstance(mapping["provenance"], str):
        raise ConfigError(
            "Opção 'provenance' deve ser string",
            details={"option": "provenance"},
        )

    return CodecOptions(**dict(mapping))


def options_to_dict(options: CodecOptions) -> Dict[str, Any]:
    return {f.name: getattr(options, f.name) for f in fields(options)}
