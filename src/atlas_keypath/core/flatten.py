# src/atlas_keypath/core/flatten.py
"""
Achatamento de árvores aninhadas em linhas `caminho = valor`.

Política de renderização (v1):
    - Sem seções: cada folha vira `caminho.completo = valor`
    - Com seções: escalares de topo primeiro (`chave = valor`), depois um
      bloco `[secao]` por mapa de topo, com caminhos relativos à seção e
      uma linha em branco ao final do bloco
    - Listas são achatadas como mapas indexados por posição (0, 1, ...)

Invariantes:
    - Todos os escalares de topo são emitidos antes de qualquer seção
    - A ordem relativa dos escalares entre si é preservada
    - A ordem relativa das seções entre si é preservada
    - Nenhuma chave ou seção é emitida se o lexer não puder lê-la de volta

Limites explícitos:
    - Não escreve em disco
    - Não adiciona cabeçalho de proveniência (responsabilidade do adapter)
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from .context import CodecContext
from .errors import InvalidConfigRootTypeError, InvalidKeyError
from .keypath import join_path
from .options import CodecOptions
from .types import is_container
from .values import encode_value


STEP_ID = "encode.flatten"


def sort_root_elements(tree: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Reordena a raiz: escalares primeiro, containers (seções) depois.

    A ordem de inserção é preservada dentro de cada grupo.
    """
    scalars = {key: value for key, value in tree.items() if not is_container(value)}
    sections = {key: value for key, value in tree.items() if is_container(value)}
    return {**scalars, **sections}


def check_line_key(key: str) -> str:
    """
    Garante que `key` pode ocupar o lado esquerdo de `chave = valor` e ser
    lida de volta como a mesma chave.

    Raises:
        InvalidKeyError: Chave vazia, com espaços nas bordas, iniciada por
            `;`, `#` ou `[`, contendo `=` ou quebra de linha, ou terminada
            em `[]`.
    """
    if not key:
        problem = "chave vazia"
    elif key != key.strip():
        problem = "espaços nas bordas são descartados na leitura"
    elif key[0] in ";#[":
        problem = "seria lida como comentário ou seção"
    elif "=" in key:
        problem = "contém '='"
    elif "\n" in key:
        problem = "contém quebra de linha"
    elif key.endswith("[]"):
        problem = "seria lida como lista"
    else:
        return key

    raise InvalidKeyError(
        f'Chave "{key}" não pode ser renderizada: {problem}',
        details={"key": key},
        hint="Renomeie a chave antes de gerar o INI.",
    )


def check_section_name(name: str) -> str:
    """
    Garante que `name` cabe num cabeçalho `[nome]` legível pelo lexer.

    Raises:
        InvalidKeyError: Nome vazio, com espaços nas bordas, contendo `]`
            ou quebra de linha.
    """
    if not name:
        problem = "nome vazio"
    elif name != name.strip():
        problem = "espaços nas bordas são descartados na leitura"
    elif "]" in name:
        problem = "contém ']'"
    elif "\n" in name:
        problem = "contém quebra de linha"
    else:
        return name

    raise InvalidKeyError(
        f'Seção "{name}" não pode ser renderizada: {problem}',
        details={"section": name},
        hint="Renomeie a seção ou use render_without_sections.",
    )


def _children(branch: Any) -> Iterator[Tuple[str, Any]]:
    if isinstance(branch, list):
        for index, value in enumerate(branch):
            yield str(index), value
        return

    for key, value in branch.items():
        key = str(key)
        if key == "":
            raise InvalidKeyError("Chave vazia não pode ser renderizada", details={"key": key})
        yield key, value


def iter_leaves(branch: Any, parents: Optional[List[str]] = None) -> Iterator[Tuple[List[str], Any]]:
    """Percorre `branch` em profundidade produzindo `(caminho, escalar)`."""
    parents = parents or []
    for key, value in _children(branch):
        group = parents + [key]
        if is_container(value):
            yield from iter_leaves(value, group)
        else:
            yield group, value


def flatten_branch(branch: Any, separator: str, parents: Optional[List[str]] = None) -> str:
    lines = [
        f"{check_line_key(join_path(path, separator))} = {encode_value(value)}\n"
        for path, value in iter_leaves(branch, parents)
    ]
    return "".join(lines)


def render_tree(
    tree: Mapping[str, Any],
    options: Optional[CodecOptions] = None,
    ctx: Optional[CodecContext] = None,
) -> str:
    """
    Renderiza a árvore como texto INI.

    Args:
        tree (Mapping[str, Any]): Árvore aninhada.
        options (Optional[CodecOptions]): Separador e modo de renderização.
        ctx (Optional[CodecContext]): Contexto para eventos.

    Returns:
        str: Texto INI (sem cabeçalho de proveniência).

    Raises:
        InvalidConfigRootTypeError: Raiz não é mapeamento.
        InvalidKeyError: Chave ou nome de seção que o lexer não lê de volta.
        UnsupportedValueError: Escalar não codificável.
    """
    if not isinstance(tree, Mapping):
        raise InvalidConfigRootTypeError(
            f"Árvore deve ser mapeamento, recebido: {type(tree).__name__}",
        )

    options = options or CodecOptions()
    separator = options.separator

    if options.render_without_sections:
        text = flatten_branch(tree, separator)
        sections = 0
    else:
        parts: List[str] = []
        sections = 0
        for name, data in sort_root_elements(tree).items():
            name = str(name)
            if is_container(data):
                parts.append(f"[{check_section_name(name)}]\n{flatten_branch(data, separator)}\n")
                sections += 1
            else:
                parts.append(f"{check_line_key(name)} = {encode_value(data)}\n")
        text = "".join(parts)

    if ctx is not None:
        ctx.log(
            step_id=STEP_ID,
            level="INFO",
            message="Árvore renderizada",
            sections=sections,
            without_sections=options.render_without_sections,
        )

    return text
