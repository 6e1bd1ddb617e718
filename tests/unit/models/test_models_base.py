"""
Unit tests for the shared model base and column types.
"""

import uuid

import pytest

from src.pocketnotes.core.models.types import GUID, coerce_uuid


class TestCoerceUuid:
    def test_uuid_passthrough(self):
        value = uuid.uuid4()
        assert coerce_uuid(value) is value

    def test_string_parsed(self):
        value = uuid.uuid4()
        assert coerce_uuid(str(value)) == value

    @pytest.mark.parametrize("value", ["not-a-uuid", "", "123", None, 42, "abc123"])
    def test_malformed_is_none(self, value):
        assert coerce_uuid(value) is None


class TestGUID:
    class _Dialect:
        def __init__(self, name):
            self.name = name

    def test_sqlite_binds_string(self):
        value = uuid.uuid4()
        assert GUID().process_bind_param(value, self._Dialect("sqlite")) == str(value)

    def test_postgres_binds_uuid(self):
        value = uuid.uuid4()
        assert GUID().process_bind_param(str(value), self._Dialect("postgresql")) == value

    def test_result_is_uuid(self):
        value = uuid.uuid4()
        assert GUID().process_result_value(str(value), self._Dialect("sqlite")) == value
        assert GUID().process_result_value(None, self._Dialect("sqlite")) is None
