# src/atlas_keypath/core/types.py
"""
Tipos canônicos de valores de configuração do Atlas KeyPath.

Este módulo define o conjunto fechado de variantes que uma árvore de
configuração pode conter e a função de classificação usada por todos
os componentes do core (builder, merge, flatten e codec de valores).

Variantes suportadas (v1):
    - STRING, INTEGER, FLOAT, BOOLEAN → escalares
    - NULL                            → ausência de valor (codificada como "")
    - NESTED                          → mapa ordenado str → ConfigValue
    - SEQUENCE                        → lista produzida pelo merge recursivo

Invariantes:
    - Todo valor aceito pertence a exatamente uma variante
    - `bool` é classificado antes de `int` (bool é subclasse de int)
    - Valores fora do conjunto fechado são rejeitados explicitamente

Limites explícitos:
    - Não realiza coerção de tipos
    - Não valida schema
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from .errors import UnsupportedValueError


class ValueKind(str, Enum):
    """
    Variantes canônicas de um ConfigValue.

    Os valores são strings para facilitar serialização em eventos
    estruturados e mensagens de erro.
    """

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    NULL = "null"
    NESTED = "nested"
    SEQUENCE = "sequence"


SCALAR_KINDS = frozenset(
    {ValueKind.STRING, ValueKind.INTEGER, ValueKind.FLOAT, ValueKind.BOOLEAN, ValueKind.NULL}
)


def classify(value: Any) -> ValueKind:
    """
    Classifica um valor em exatamente uma variante do conjunto fechado.

    Raises:
        UnsupportedValueError: Se o valor não pertence a nenhuma variante.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, dict):
        return ValueKind.NESTED
    if isinstance(value, list):
        return ValueKind.SEQUENCE

    raise UnsupportedValueError(
        f"Tipo de valor não suportado: {type(value).__name__}",
        details={"type": type(value).__name__},
        hint="Use apenas string, int, float, bool, None, dict ou list.",
    )


def is_container(value: Any) -> bool:
    return classify(value) not in SCALAR_KINDS
