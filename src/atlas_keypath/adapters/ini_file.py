# src/atlas_keypath/adapters/ini_file.py
"""
Adapter INI: lexer tipado + engine de aninhamento/achatamento do core.

Leitura:
    texto → `lex_ini` (mapeamento plano/seccionado) → `build_tree`

Escrita:
    árvore → `render_tree` → cabeçalho `; generated by ...` + texto

Política do lexer (v1):
    - `[nome]` abre uma seção; seções repetidas acumulam no mesmo mapa;
      seção ou lista declarada sobre escalar substitui o escalar
    - `chave = valor` atribui; `chave[] = valor` acrescenta a uma lista
    - Linhas iniciadas por `;` ou `#` são comentários
    - Linhas terminam apenas em `\\n` (ou `\\r\\n`); um valor entre aspas
      pode atravessar várias linhas até a aspa de fechamento
    - Escalares tipados: aspas → string literal; true/on/yes → True;
      false/off/no/none → False; null → None; inteiros e floats → números;
      demais textos → string crua (comentário `;` ao final é removido)

Limites explícitos:
    - Não interpola variáveis de ambiente
    - Não preserva comentários entre leitura e escrita
    - Não possui mecanismo de escape dentro de aspas
"""

from __future__ import annotations

import re
from typing import Any, Dict, Optional

from ..core.builder import build_tree
from ..core.context import CodecContext
from ..core.errors import IniSyntaxError
from ..core.flatten import render_tree
from .base import FileAdapter


_SECTION_RE = re.compile(r"^\[([^\]]*)\]\s*(?:[;#].*)?$")
_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?")

_TRUE = {"true", "on", "yes"}
_FALSE = {"false", "off", "no", "none"}


def parse_scalar(raw: str, lineno: int = 0) -> Any:
    """
    Converte o lado direito de uma linha INI em escalar tipado.

    Raises:
        IniSyntaxError: Aspas sem fechamento ou texto após o fechamento.
    """
    raw = raw.strip()

    if raw[:1] in {'"', "'"}:
        quote = raw[0]
        end = raw.find(quote, 1)
        if end == -1:
            raise IniSyntaxError(
                f"Aspas sem fechamento na linha {lineno}",
                details={"line": lineno, "value": raw},
            )
        tail = raw[end + 1:].strip()
        if tail and tail[0] not in ";#":
            raise IniSyntaxError(
                f"Texto inesperado após aspas na linha {lineno}",
                details={"line": lineno, "value": raw},
            )
        return raw[1:end]

    raw = raw.split(";", 1)[0].strip()
    lowered = raw.lower()

    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    if lowered == "null":
        return None
    if _INT_RE.fullmatch(raw):
        return int(raw)
    if _FLOAT_RE.fullmatch(raw):
        return float(raw)
    return raw


def _opens_quote(raw: str) -> bool:
    return raw[:1] in {'"', "'"} and raw.find(raw[0], 1) == -1


def lex_ini(text: str) -> Dict[str, Any]:
    """
    Lê texto INI e devolve o mapeamento plano/seccionado, em ordem.

    Raises:
        IniSyntaxError: Linha malformada.
    """
    result: Dict[str, Any] = {}
    target = result

    # Só "\n" quebra linha ("\r\n" cai no strip); outros separadores Unicode
    # pertencem ao valor.
    lines = text.split("\n")
    index = 0

    while index < len(lines):
        raw_line = lines[index]
        lineno = index + 1
        index += 1

        line = raw_line.strip()
        if not line or line[0] in ";#":
            continue

        if line.startswith("["):
            match = _SECTION_RE.match(line)
            name = match.group(1).strip() if match else ""
            if not name:
                raise IniSyntaxError(
                    f"Cabeçalho de seção inválido na linha {lineno}",
                    details={"line": lineno, "text": line},
                )
            if not isinstance(result.get(name), dict):
                result[name] = {}
            target = result[name]
            continue

        if "=" not in line:
            raise IniSyntaxError(
                f"Linha sem '=' na linha {lineno}",
                details={"line": lineno, "text": line},
            )

        key, raw_value = raw_line.split("=", 1)
        key = key.strip()
        if not key:
            raise IniSyntaxError(
                f"Chave vazia na linha {lineno}",
                details={"line": lineno, "text": line},
            )

        raw_value = raw_value.lstrip()
        # valor entre aspas continua nas linhas seguintes até o fechamento
        while index < len(lines) and _opens_quote(raw_value):
            raw_value = f"{raw_value}\n{lines[index]}"
            index += 1

        value = parse_scalar(raw_value, lineno)

        if key.endswith("[]"):
            key = key[:-2].strip()
            if not isinstance(target.get(key), list):
                target[key] = []
            target[key].append(value)
        else:
            target[key] = value

    return result


class IniFileAdapter(FileAdapter):
    """Lê e gera arquivos INI com chaves aninhadas por separador."""

    name = "ini"
    extensions = ("ini",)
    comment_prefix = ";"

    def _decode(self, text: str, ctx: Optional[CodecContext]) -> Any:
        return build_tree(lex_ini(text), self.options, ctx)

    def _encode(self, tree: Dict[str, Any], ctx: Optional[CodecContext]) -> str:
        return render_tree(tree, self.options, ctx)
