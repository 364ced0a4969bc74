# tests/core/test_context.py
"""
Testes de logging estruturado e coleta de warnings no CodecContext.

Invariantes:
    - Eventos sempre incluem `run_id`, `step_id`, `level`, `message` e
      `timestamp`
    - Warnings são agrupados por `step_id`
"""

from atlas_keypath.core.context import CodecContext, emit_warning


def test_structured_log_event(codec_ctx):
    codec_ctx.log(step_id="ini.decode", level="INFO", message="hello", foo=1)

    ev = codec_ctx.events[-1]
    assert ev["run_id"] == codec_ctx.run_id
    assert ev["step_id"] == "ini.decode"
    assert ev["level"] == "INFO"
    assert ev["message"] == "hello"
    assert ev["foo"] == 1
    assert "timestamp" in ev


def test_warning_collection(codec_ctx):
    codec_ctx.add_warning(step_id="decode.build", message="a")
    codec_ctx.add_warning(step_id="decode.build", message="b")
    assert codec_ctx.warnings == {"decode.build": ["a", "b"]}


def test_emit_warning_records_event_and_warning(codec_ctx):
    emit_warning(codec_ctx, step_id="decode.build", message="w", key="k")
    assert codec_ctx.warnings == {"decode.build": ["w"]}
    assert codec_ctx.events[-1]["level"] == "WARNING"
    assert codec_ctx.events[-1]["key"] == "k"


def test_emit_warning_without_context_is_noop():
    emit_warning(None, step_id="decode.build", message="w")


def test_contexts_are_isolated():
    a, b = CodecContext(), CodecContext()
    a.log(step_id="x", level="INFO", message="m")
    assert b.events == []
    assert a.run_id != b.run_id
