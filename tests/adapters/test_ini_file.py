# tests/adapters/test_ini_file.py
"""
Testes do adapter INI (lexer tipado + engine de KeyPath).

Este módulo valida:
- a leitura tipada de escalares pelo lexer
- a construção da árvore a partir de texto INI com seções aninhadas
- o cabeçalho de proveniência na escrita
- a propriedade de ida e volta: decode(encode(T)) == T para árvores
  compostas apenas por escalares sem aspas duplas

Limites explícitos:
    - Não testa despacho por extensão (ver test_registry.py)
"""

import pytest

from atlas_keypath.adapters.ini_file import IniFileAdapter, lex_ini, parse_scalar
from atlas_keypath.core.errors import (
    IniSyntaxError,
    InvalidKeyError,
    KeyConflictError,
    UnsupportedValueError,
)
from atlas_keypath.core.options import CodecOptions


@pytest.mark.parametrize(
    "raw, expected",
    [
        ('"quoted ; text"', "quoted ; text"),
        ("'single'", "single"),
        ('"5"', "5"),
        ('""', ""),
        ("", ""),
        ("true", True),
        ("On", True),
        ("yes", True),
        ("false", False),
        ("off", False),
        ("none", False),
        ("null", None),
        ("42", 42),
        ("-7", -7),
        ("0.5", 0.5),
        ("1e+20", 1e20),
        ("localhost", "localhost"),
        ("value ; comment", "value"),
    ],
)
def test_parse_scalar(raw, expected):
    out = parse_scalar(raw)
    assert out == expected
    assert type(out) is type(expected)


def test_parse_scalar_unterminated_quote():
    with pytest.raises(IniSyntaxError) as exc:
        parse_scalar('"open', lineno=3)
    assert exc.value.details["line"] == 3


def test_lex_ini(sample_ini_text):
    assert lex_ini(sample_ini_text) == {
        "name": "demo",
        "debug": True,
        "database": {"host": "localhost", "port": 5432, "ratio": 0.5},
        "database.replica": {"host": "r1"},
    }


def test_lex_ini_repeated_section_accumulates():
    text = "[s]\na = 1\n[t]\nb = 2\n[s]\nc = 3\n"
    assert lex_ini(text) == {"s": {"a": 1, "c": 3}, "t": {"b": 2}}


def test_lex_ini_list_syntax():
    assert lex_ini("k[] = 1\nk[] = two\n") == {"k": [1, "two"]}


@pytest.mark.parametrize("text", ["just text\n", "= 1\n", "[]\n", "[open\n"])
def test_lex_ini_rejects_malformed_lines(text):
    with pytest.raises(IniSyntaxError):
        lex_ini(text)


def test_lex_ini_section_over_scalar_overwrites():
    assert lex_ini("s = 1\n[s]\na = 2\n") == {"s": {"a": 2}}


def test_lex_ini_list_over_scalar_overwrites():
    assert lex_ini("k = 1\nk[] = 2\nk[] = 3\n") == {"k": [2, 3]}


def test_decode_builds_nested_tree(sample_ini_text):
    tree = IniFileAdapter().from_string(sample_ini_text)
    assert tree == {
        "name": "demo",
        "debug": True,
        "database": {
            "host": "localhost",
            "port": 5432,
            "ratio": 0.5,
            "replica": {"host": "r1"},
        },
    }


def test_decode_errors_propagate():
    with pytest.raises(KeyConflictError):
        IniFileAdapter().from_string("a = 1\na.b = 2\n")
    with pytest.raises(InvalidKeyError):
        IniFileAdapter().from_string("[s]\na..b = 1\n")


def test_decode_without_processing_sections():
    adapter = IniFileAdapter(CodecOptions(process_sections=False))
    tree = adapter.from_string("x = 1\n[s]\na.b = 2\n[t]\nc = 3\n")
    assert tree == {"x": 1, "a": {"b": 2}, "c": 3}


def test_encode_has_provenance_header():
    text = IniFileAdapter().to_string({"k": 1})
    assert text == "; generated by atlas_keypath\n\nk = 1\n"


def test_encode_uses_static_provenance_option():
    text = IniFileAdapter(CodecOptions(provenance="acme.tool")).to_string({"k": 1})
    assert text.startswith("; generated by acme.tool\n")


def test_encode_rejects_double_quotes():
    with pytest.raises(UnsupportedValueError):
        IniFileAdapter().to_string({"s": {"k": 'say "hi"'}})


def test_encode_rejects_comment_like_root_keys():
    """
    Chaves iniciadas por `#` ou `;` virariam comentários e sumiriam na
    leitura; a escrita falha em vez de perder dados.
    """
    with pytest.raises(InvalidKeyError):
        IniFileAdapter().to_string({"#k": 1, ";j": 2})


def test_round_trip_sectioned(sample_tree):
    """
    Verifica a propriedade de ida e volta com seções.

    A igualdade vale a menos da regra de ordenação: escalares de topo
    passam a vir antes das seções.
    """
    adapter = IniFileAdapter()
    decoded = adapter.from_string(adapter.to_string(sample_tree))
    assert decoded == sample_tree
    assert list(decoded) == ["version", "app", "db"]


def test_round_trip_without_sections(sample_tree):
    adapter = IniFileAdapter(CodecOptions(render_without_sections=True))
    text = adapter.to_string(sample_tree)
    assert "[" not in text
    assert adapter.from_string(text) == sample_tree


def test_round_trip_custom_separator(sample_tree):
    adapter = IniFileAdapter(CodecOptions(separator=":"))
    text = adapter.to_string(sample_tree)
    assert "limits:max = 10" in text
    assert adapter.from_string(text) == sample_tree


def test_round_trip_of_string_lookalikes():
    tree = {"s": {"num": "5", "flag": "true", "empty": "", "spaced": "  x  "}}
    adapter = IniFileAdapter()
    assert adapter.from_string(adapter.to_string(tree)) == tree


@pytest.mark.parametrize(
    "value",
    ["a\nb", "line1\nline2\n", "a\u2028b", "a\x85b", "a\x0cb", "a\r\nb"],
)
def test_round_trip_of_strings_with_line_breaks(value):
    """
    Strings com quebras de linha (ASCII ou Unicode) devem voltar intactas.

    O lexer só quebra linhas em "\\n"; um valor entre aspas atravessa
    quantas linhas forem necessárias até a aspa de fechamento.
    """
    tree = {"top": value, "s": {"k": value, "after": 1}}
    adapter = IniFileAdapter()
    assert adapter.from_string(adapter.to_string(tree)) == tree


def test_lex_ini_quoted_value_spans_crlf_lines():
    text = 'k = "a\r\nb"\r\nn = 1\r\n'
    assert lex_ini(text) == {"k": "a\r\nb", "n": 1}


def test_lex_ini_unterminated_quote_reports_opening_line():
    with pytest.raises(IniSyntaxError) as exc:
        lex_ini('x = 1\nk = "open\nmore = 2\n')
    assert exc.value.details["line"] == 2


def test_decode_and_encode_log_events(codec_ctx, sample_ini_text):
    adapter = IniFileAdapter()
    tree = adapter.from_string(sample_ini_text, codec_ctx)
    adapter.to_string(tree, codec_ctx)

    step_ids = [ev["step_id"] for ev in codec_ctx.events]
    assert step_ids == ["decode.build", "ini.decode", "encode.flatten", "ini.encode"]
