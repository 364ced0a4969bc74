# tests/core/test_errors.py
"""Testes da hierarquia de exceções e do payload canônico de erro."""

import pytest

from atlas_keypath.core import errors


@pytest.mark.parametrize(
    "exc_cls, code",
    [
        (errors.InvalidKeyError, errors.KEY_INVALID),
        (errors.KeyConflictError, errors.KEY_CONFLICT),
        (errors.UnsupportedValueError, errors.VALUE_UNSUPPORTED),
        (errors.IniSyntaxError, errors.INI_SYNTAX_ERROR),
        (errors.ConfigFileNotFoundError, errors.FILE_NOT_FOUND),
        (errors.UnsupportedConfigFormatError, errors.FORMAT_UNSUPPORTED),
        (errors.InvalidConfigRootTypeError, errors.ROOT_TYPE_INVALID),
        (errors.ConfigTypeConflictError, errors.MERGE_TYPE_CONFLICT),
        (errors.UnsupportedOperationError, errors.OPERATION_UNSUPPORTED),
        (errors.DuplicateAdapterError, errors.ADAPTER_DUPLICATE),
    ],
)
def test_all_errors_inherit_config_error(exc_cls, code):
    exc = exc_cls("falha")
    assert isinstance(exc, errors.ConfigError)
    assert exc.to_payload().type == code


def test_payload_is_serializable():
    exc = errors.KeyConflictError("conflito", details={"key": "a"}, hint="renomeie")
    assert exc.to_payload().to_dict() == {
        "type": "KEY_CONFLICT",
        "message": "conflito",
        "details": {"key": "a"},
        "hint": "renomeie",
    }
    assert str(exc) == "conflito"


def test_details_default_to_empty_dict():
    assert errors.ConfigError("x").details == {}
