# src/atlas_keypath/core/builder.py
"""
Construção de árvores aninhadas a partir de mapeamentos planos.

Este módulo transforma o mapeamento produzido por um lexer (chaves com
separador, seções e seções com separador no nome) na árvore aninhada
consumida pelo restante do sistema.

Algoritmo (v1):
    1. Para cada entrada de topo, em ordem:
        - seção com separador no nome → cadeia de mapas de uma chave
          envolvendo o conteúdo processado, combinada via `merge_recursive`
        - seção comum               → `process_section`, gravada sob o nome
        - escalar                   → `assign_key` direto na raiz
    2. `process_section` roteia cada par por `assign_key`
    3. `assign_key` desce pelo KeyPath criando mapas intermediários

Decisões arquiteturais:
    - Passagem de posse: cada função recebe o acumulador, passa a ser sua
      dona e o devolve; quem chama sempre reatribui o retorno
    - Atribuição direta a uma chave existente segue "última escrita vence"
      para qualquer tipo (escalar ou mapa, em qualquer ordem) e é
      registrada como warning no `CodecContext`
    - Chave "0" sob acumulador não vazio envolve o acumulador inteiro sob
      "0" antes de descer; o evento é registrado como warning

Invariantes:
    - Um caminho resolve para o último valor atribuído diretamente a ele
    - Nenhum segmento de chave é vazio
    - Nenhum estado é compartilhado entre chamadas de `build_tree`

Limites explícitos:
    - Não lê texto (responsabilidade do lexer)
    - Não valida schema nem converte tipos
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from .context import CodecContext, emit_warning
from .errors import InvalidConfigRootTypeError, KeyConflictError
from .keypath import split_key, split_path
from .merge import merge_recursive
from .options import CodecOptions


STEP_ID = "decode.build"


def _store(into: Dict[str, Any], key: str, value: Any, ctx: Optional[CodecContext]) -> Dict[str, Any]:
    if into.get(key) is not None:
        emit_warning(ctx, step_id=STEP_ID, message=f'Chave "{key}" sobrescrita', key=key)

    into[key] = value
    return into


def assign_key(
    key: str,
    value: Any,
    into: Dict[str, Any],
    separator: str,
    ctx: Optional[CodecContext] = None,
) -> Dict[str, Any]:
    """
    Atribui `value` ao KeyPath `key` dentro de `into`.

    Args:
        key (str): Chave, possivelmente contendo o separador.
        value (Any): Valor a atribuir.
        into (Dict[str, Any]): Acumulador; a função passa a ser sua dona.
        separator (str): Separador de segmentos.
        ctx (Optional[CodecContext]): Contexto para warnings.

    Returns:
        Dict[str, Any]: O acumulador atualizado. Pode ser um novo mapa
        quando a promoção da chave "0" ocorre.

    Raises:
        InvalidKeyError: Segmento vazio na chave.
        KeyConflictError: Um prefixo da chave já contém escalar.
    """
    head, rest = split_key(key, separator)

    if rest is None:
        return _store(into, key, value, ctx)

    if into.get(head) is None:
        if head == "0" and into:
            emit_warning(
                ctx,
                step_id=STEP_ID,
                message=f'Chave "0" promoveu o acumulador existente ao atribuir "{key}"',
                key=key,
            )
            into = {head: into}
        else:
            into[head] = {}
    elif not isinstance(into[head], dict):
        raise KeyConflictError(
            f'Não é possível criar sub-chave para "{head}": a chave já existe como escalar',
            details={"key": key, "head": head},
            hint="Renomeie a chave escalar ou remova a sub-chave conflitante.",
        )

    into[head] = assign_key(rest, value, into[head], separator, ctx)
    return into


def process_section(
    section: Mapping[str, Any],
    separator: str,
    ctx: Optional[CodecContext] = None,
) -> Dict[str, Any]:
    config: Dict[str, Any] = {}
    for key, value in section.items():
        config = assign_key(str(key), value, config, separator, ctx)
    return config


def build_nested_section(
    segments: List[str],
    section: Mapping[str, Any],
    separator: str,
    ctx: Optional[CodecContext] = None,
) -> Dict[str, Any]:
    """Envolve o conteúdo processado da seção na cadeia `segments`."""
    if not segments:
        return process_section(section, separator, ctx)

    first, remaining = segments[0], segments[1:]
    return {first: build_nested_section(remaining, section, separator, ctx)}


def strip_sections(flat: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Remove os invólucros de seção, mesclando seu conteúdo na raiz.

    Usado quando `process_sections` é False. Chaves repetidas entre
    seções seguem "última escrita vence".
    """
    root: Dict[str, Any] = {}
    for name, value in flat.items():
        if isinstance(value, dict):
            root.update(value)
        else:
            root[name] = value
    return root


def build_tree(
    flat: Mapping[str, Any],
    options: Optional[CodecOptions] = None,
    ctx: Optional[CodecContext] = None,
) -> Dict[str, Any]:
    """
    Constrói a árvore aninhada a partir de um mapeamento plano/seccionado.

    Args:
        flat (Mapping[str, Any]): Saída do lexer, em ordem de leitura.
        options (Optional[CodecOptions]): Separador e processamento de seções.
        ctx (Optional[CodecContext]): Contexto para eventos e warnings.

    Returns:
        Dict[str, Any]: Nova árvore aninhada.

    Raises:
        InvalidConfigRootTypeError: Se `flat` não for um mapeamento.
        InvalidKeyError: Chave ou nome de seção com segmento vazio.
        KeyConflictError: Sub-chave sob um prefixo que já contém escalar.
    """
    if not isinstance(flat, Mapping):
        raise InvalidConfigRootTypeError(
            f"Entrada do builder deve ser mapeamento, recebido: {type(flat).__name__}",
        )

    options = options or CodecOptions()
    separator = options.separator

    if not options.process_sections:
        flat = strip_sections(flat)

    config: Dict[str, Any] = {}

    for name, value in flat.items():
        name = str(name)
        if isinstance(value, dict):
            if separator in name:
                nested = build_nested_section(split_path(name, separator), value, separator, ctx)
                config = merge_recursive(config, nested)
            else:
                config = _store(config, name, process_section(value, separator, ctx), ctx)
        else:
            config = assign_key(name, value, config, separator, ctx)

    if ctx is not None:
        ctx.log(
            step_id=STEP_ID,
            level="INFO",
            message="Árvore construída",
            entries=len(flat),
            root_keys=len(config),
        )

    return config
