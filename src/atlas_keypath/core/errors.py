# src/atlas_keypath/core/errors.py
"""
Exceções canônicas do Atlas KeyPath.

Este módulo define a hierarquia oficial de exceções utilizadas durante a
decodificação (texto → árvore), a codificação (árvore → texto) e o
carregamento de arquivos de configuração.

As exceções aqui definidas representam **violações estruturais
explícitas**, e não erros genéricos de execução.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Não existe modo de resultado parcial

Invariantes:
    - Todas as exceções herdam de `ConfigError`
    - Toda exceção pode ser convertida em `ErrorPayload` serializável

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não registra eventos (responsabilidade do `CodecContext`)
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro do Atlas KeyPath.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

CONFIG_ERROR = "CONFIG_ERROR"
KEY_INVALID = "KEY_INVALID"
KEY_CONFLICT = "KEY_CONFLICT"
VALUE_UNSUPPORTED = "VALUE_UNSUPPORTED"
INI_SYNTAX_ERROR = "INI_SYNTAX_ERROR"
FILE_NOT_FOUND = "FILE_NOT_FOUND"
FORMAT_UNSUPPORTED = "FORMAT_UNSUPPORTED"
ROOT_TYPE_INVALID = "ROOT_TYPE_INVALID"
MERGE_TYPE_CONFLICT = "MERGE_TYPE_CONFLICT"
OPERATION_UNSUPPORTED = "OPERATION_UNSUPPORTED"
ADAPTER_DUPLICATE = "ADAPTER_DUPLICATE"


class ConfigError(Exception):
    """
    Exceção base para erros de configuração do Atlas KeyPath.

    Todas as exceções levantadas durante decode, encode, merge e
    carregamento de arquivos devem herdar desta classe, permitindo:
        - captura genérica de erros de configuração
        - conversão determinística para `ErrorPayload`

    Args:
        message (str): Mensagem curta e humana.
        details (Optional[Dict[str, Any]]): Dados estruturados do erro.
        hint (Optional[str]): Ação sugerida ao operador.
    """

    code = CONFIG_ERROR

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})
        self.hint = hint

    def to_payload(self) -> ErrorPayload:
        return ErrorPayload(
            type=self.code,
            message=self.message,
            details=dict(self.details),
            hint=self.hint,
        )


class InvalidKeyError(ConfigError):
    """
    Exceção levantada quando um KeyPath possui segmento vazio.

    Exemplos rejeitados (separador `.`):
        - ".a"   → separador no início
        - "a."   → separador no final
        - "a..b" → separador duplicado

    Invariantes:
        - Nenhum segmento de um KeyPath válido é vazio
    """

    code = KEY_INVALID


class KeyConflictError(ConfigError):
    """
    Exceção levantada quando uma atribuição exigiria criar um mapa
    aninhado sob um caminho que já contém um escalar.

    Exemplo de conflito:
        - {"a": 1, "a.b": 2} → "a" já é escalar, não pode receber "b"

    Limites explícitos:
        - Não tenta converter o escalar em mapa automaticamente
    """

    code = KEY_CONFLICT


class UnsupportedValueError(ConfigError):
    """
    Exceção levantada quando um valor não pode ser codificado com
    segurança pelas regras atuais (ex.: string contendo aspas duplas).
    """

    code = VALUE_UNSUPPORTED


class IniSyntaxError(ConfigError):
    """Linha INI que não é seção, par chave/valor, comentário ou vazia."""

    code = INI_SYNTAX_ERROR


class ConfigFileNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de configuração não existe
    no caminho informado.

    Limites explícitos:
        - Não tenta inferir ou criar o arquivo automaticamente
    """

    code = FILE_NOT_FOUND


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando nenhum adapter registrado suporta a
    extensão do arquivo.

    Decisões arquiteturais:
        - O formato é decidido exclusivamente pela extensão
        - Extensões desconhecidas são rejeitadas imediatamente
    """

    code = FORMAT_UNSUPPORTED


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz decodificado não é um
    dicionário (`dict`).
    """

    code = ROOT_TYPE_INVALID


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o merge
    de overrides (defaults + local).

    Exemplo de conflito:
        - base:     {"engine": {"fail_fast": true}}
        - override: {"engine": "DEBUG"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """

    code = MERGE_TYPE_CONFLICT


class UnsupportedOperationError(ConfigError):
    """Operação não suportada pelo adapter (ex.: ler código Python de string)."""

    code = OPERATION_UNSUPPORTED


class DuplicateAdapterError(ConfigError):
    """Dois adapters registrados com o mesmo nome de formato."""

    code = ADAPTER_DUPLICATE
