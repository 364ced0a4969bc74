# src/atlas_keypath/core/values.py
"""
Codec de valores escalares para linhas `chave = valor`.

Política de codificação (v1):
    - int / float → literal numérico sem aspas, forma decimal canônica
    - bool        → `true` ou `false`, sem aspas
    - str         → entre aspas duplas; aspas internas são rejeitadas
    - None        → string vazia entre aspas (`""`)

Decisões arquiteturais:
    - Não existe mecanismo de escape: aspas duplas em strings são erro
    - Floats não finitos (nan, inf) não possuem literal estável e são erro
    - Containers nunca chegam aqui: são achatados pelo flattener

Limites explícitos:
    - Não decodifica texto (responsabilidade do lexer de cada formato)
"""

from __future__ import annotations

import math
from typing import Any

from .errors import UnsupportedValueError
from .types import ValueKind, classify


def encode_value(value: Any) -> str:
    """
    Converte um escalar em sua representação textual de linha INI.

    Args:
        value: Escalar (str, int, float, bool) ou None.

    Returns:
        str: Texto pronto para o lado direito de `chave = valor`.

    Raises:
        UnsupportedValueError: String com aspas duplas, float não finito
            ou valor que não é escalar.
    """
    kind = classify(value)

    if kind is ValueKind.NULL:
        return '""'

    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"

    if kind is ValueKind.INTEGER:
        return str(value)

    if kind is ValueKind.FLOAT:
        if not math.isfinite(value):
            raise UnsupportedValueError(
                f"Float não finito não pode ser codificado: {value!r}",
                details={"value": repr(value)},
            )
        return repr(value)

    if kind is ValueKind.STRING:
        if '"' in value:
            raise UnsupportedValueError(
                "Valor não pode conter aspas duplas",
                details={"value": value},
                hint="Remova as aspas duplas do valor; o formato não possui escape.",
            )
        return f'"{value}"'

    raise UnsupportedValueError(
        f"Valor do tipo '{kind.value}' não é escalar",
        details={"kind": kind.value},
    )
