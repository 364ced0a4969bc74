# src/atlas_keypath/core/keypath.py
"""
Decomposição de KeyPaths.

Um KeyPath é uma string composta por um ou mais segmentos não vazios
unidos por um separador configurável (default "."), por exemplo
"database.primary.host".

Invariantes:
    - Nenhum segmento é vazio (sem separador no início, no fim ou duplicado)
    - `split_key` divide apenas na primeira ocorrência do separador
    - `join_path(split_path(k)) == k` para todo KeyPath válido

Limites explícitos:
    - Não acessa árvores de configuração
    - Não escapa separadores dentro de segmentos
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .errors import InvalidKeyError


def _invalid(key: str, separator: str) -> InvalidKeyError:
    return InvalidKeyError(
        f'Chave inválida "{key}"',
        details={"key": key, "separator": separator},
        hint="Remova separadores no início, no fim ou duplicados da chave.",
    )


def split_key(key: str, separator: str) -> Tuple[str, Optional[str]]:
    """
    Divide `key` na primeira ocorrência de `separator`.

    Returns:
        Tuple[str, Optional[str]]: `(head, rest)`; `rest` é None quando a
        chave não contém o separador. `rest` pode conter outros
        separadores e é decomposto por chamadas subsequentes.

    Raises:
        InvalidKeyError: Se `head` ou `rest` resultarem vazios.
    """
    if separator not in key:
        return key, None

    head, rest = key.split(separator, 1)
    if head == "" or rest == "":
        raise _invalid(key, separator)

    return head, rest


def split_path(key: str, separator: str) -> List[str]:
    """
    Divide `key` em todos os seus segmentos.

    Raises:
        InvalidKeyError: Se qualquer segmento for vazio.
    """
    segments = key.split(separator)
    if any(segment == "" for segment in segments):
        raise _invalid(key, separator)
    return segments


def join_path(segments: Sequence[str], separator: str) -> str:
    return separator.join(str(segment) for segment in segments)
