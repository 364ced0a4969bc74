# src/atlas_keypath/core/merge.py
"""
Políticas de merge de árvores de configuração.

Este módulo implementa as duas políticas de merge do Atlas KeyPath:

`merge_recursive`: usada pelo builder para combinar seções com prefixo
comum (ex.: seções "a.b" e "a.c" contribuem ambas sob "a"):
    - dict + dict          → merge recursivo por chave
    - qualquer outra colisão → lista com os dois valores em ordem de
      encontro; listas existentes são estendidas, não aninhadas

`deep_merge`: usada pelo loader em camadas (defaults + local):
    - dict + dict          → merge recursivo por chave
    - list                 → sobrescrita total
    - escalar              → sobrescrita pelo override de mesmo tipo
    - None em qualquer lado → sobrescrita sem checagem de tipo
    - conflito de tipos    → `ConfigTypeConflictError` com o caminho completo

Princípios fundamentais:
    - Ambas as políticas são puramente funcionais
    - Nenhum input é mutado durante o processo

Limites explícitos:
    - Não valida semântica de domínio
    - Não realiza coerção de tipos
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, List, Tuple

from .errors import ConfigTypeConflictError


def _as_list(value: Any) -> List[Any]:
    if isinstance(value, list):
        return deepcopy(value)
    return [deepcopy(value)]


def merge_recursive(left: Dict[str, Any], right: Dict[str, Any]) -> Dict[str, Any]:
    """
    Combina duas árvores chave a chave, acumulando colisões em listas.

    Quando as duas árvores possuem a mesma chave e ao menos um dos lados
    não é um mapa, o resultado é uma lista com o valor da esquerda seguido
    do valor da direita. Se algum lado já for lista, seus elementos são
    concatenados em vez de aninhados.

    Exemplos:
        {"a": {"x": 1}} + {"a": {"y": 2}} → {"a": {"x": 1, "y": 2}}
        {"a": {"x": 1}} + {"a": {"x": 2}} → {"a": {"x": [1, 2]}}
        {"k": [1, 2]}   + {"k": 3}        → {"k": [1, 2, 3]}

    Args:
        left (Dict[str, Any]): Árvore acumulada até aqui.
        right (Dict[str, Any]): Árvore a ser incorporada.

    Returns:
        Dict[str, Any]: Nova árvore; a ordem de chaves da esquerda é mantida
        e chaves novas da direita são adicionadas ao final.
    """
    result: Dict[str, Any] = deepcopy(left)

    for key, right_value in right.items():
        if key not in result:
            result[key] = deepcopy(right_value)
            continue

        left_value = result[key]

        if isinstance(left_value, dict) and isinstance(right_value, dict):
            result[key] = merge_recursive(left_value, right_value)
            continue

        result[key] = _as_list(left_value) + _as_list(right_value)

    return result


def _override(base: Dict[str, Any], override: Dict[str, Any], trail: Tuple[str, ...]) -> Dict[str, Any]:
    merged: Dict[str, Any] = deepcopy(base)

    for key, incoming in override.items():
        path = trail + (str(key),)
        current = merged.get(key)

        if isinstance(current, dict) and isinstance(incoming, dict):
            merged[key] = _override(current, incoming, path)
            continue

        if current is not None and incoming is not None and not isinstance(incoming, list):
            if type(current) is not type(incoming):
                raise ConfigTypeConflictError(
                    f"Conflito de tipo em '{'.'.join(path)}': "
                    f"{type(current).__name__} vs {type(incoming).__name__}",
                    details={"path": list(path)},
                    hint="O override deve manter o tipo do valor base.",
                )

        merged[key] = deepcopy(incoming)

    return merged


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Aplica overrides explícitos sobre uma configuração base.

    Regras por chave:
        - mapa sobre mapa → merge recursivo
        - lista           → substitui o valor base, qualquer que seja
        - None em qualquer lado → o override vence sem checagem de tipo
        - demais valores  → o override vence se o tipo for o mesmo

    Raises:
        ConfigTypeConflictError: Raiz não-dict ou tipos incompatíveis; os
            detalhes trazem o caminho completo (`details["path"]`).
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}",
        )

    return _override(base, override, ())
