"""Tests for the runner executor."""

import io
import json

import pytest

from external_store.runner.__main__ import main
from external_store.runner.executor import Executor
from external_store.runner.schema import RunnerInput, StorableSchema, StoreConfigSchema
from external_store.stores import InMemoryStoreProvider, SQLiteStoreProvider


def _input(operation, store=None, **kwargs):
    return RunnerInput(
        operation=operation,
        store=store or StoreConfigSchema(type="memory", store_name="storables"),
        **kwargs,
    )


class TestCreateProvider:
    """Tests for Executor._create_provider()."""

    def test_sqlite_is_default(self):
        provider = Executor()._create_provider(
            StoreConfigSchema(connection_string="x.db", store_name="s", db_name="other.db")
        )
        assert isinstance(provider, SQLiteStoreProvider)
        assert provider.connection_string == "x.db"
        assert provider.store_name == "s"
        assert provider.db_name == "other.db"

    def test_memory(self):
        provider = Executor()._create_provider(StoreConfigSchema(type="memory", store_name="s"))
        assert isinstance(provider, InMemoryStoreProvider)


class TestExecute:
    """Tests for Executor.execute() against an injected provider."""

    @pytest.fixture
    async def executor(self, memory_provider):
        await memory_provider.init()
        return Executor(provider=memory_provider)

    async def test_add_then_get(self, executor):
        item = StorableSchema(key="k", contents="body", content_type="text/plain", longevity="LIMITED")

        output = await executor.execute(_input("add_or_update", storable=item))
        assert output.success
        assert output.result is None

        output = await executor.execute(_input("get", key="k"))
        assert output.success
        assert output.result == item.model_dump()

    async def test_get_missing_is_success(self, executor):
        output = await executor.execute(_input("get", key="missing"))
        assert output.success
        assert output.result is None

    async def test_get_all(self, executor):
        await executor.execute(_input("add_or_update", storable=StorableSchema(key="a")))
        await executor.execute(_input("add_or_update", storable=StorableSchema(key="b")))

        output = await executor.execute(_input("get_all"))
        assert sorted(r["key"] for r in output.result) == ["a", "b"]

    async def test_delete(self, executor):
        await executor.execute(_input("add_or_update", storable=StorableSchema(key="a")))
        output = await executor.execute(_input("delete", key="a"))
        assert output.success
        assert (await executor.execute(_input("get", key="a"))).result is None

    async def test_invalid_longevity_reported(self, executor):
        output = await executor.execute(
            _input("add_or_update", storable=StorableSchema(key="a", longevity="FOREVER"))
        )
        assert not output.success
        assert output.error_type == "InvalidEnumerationValueError"

    async def test_missing_storable_reported(self, executor):
        output = await executor.execute(_input("add_or_update"))
        assert not output.success
        assert output.error_type == "InvalidArgumentError"

    async def test_blank_key_reported(self, executor):
        output = await executor.execute(_input("get"))
        assert not output.success
        assert output.error_type == "InvalidArgumentError"

    async def test_delete_store(self, executor):
        output = await executor.execute(_input("delete_store"))
        assert output.success
        output = await executor.execute(_input("get_all"))
        assert output.error_type == "StoreNotInitializedError"


class TestSQLiteFlow:
    """End-to-end runs with a provider created from configuration."""

    async def test_init_add_get(self, db_path):
        store = StoreConfigSchema(connection_string=db_path, store_name="storables")
        executor = Executor()

        assert (await executor.execute(_input("init", store=store))).success
        await executor.execute(_input("add_or_update", store=store, storable=StorableSchema(key="k")))
        output = await executor.execute(_input("get", store=store, key="k"))
        assert output.result["key"] == "k"
        assert output.result["longevity"] == "PERMANENT"

    async def test_missing_configuration_reported(self):
        output = await Executor().execute(_input("init", store=StoreConfigSchema(store_name="s")))
        assert not output.success
        assert output.error_type == "MissingConfigurationError"


class TestMain:
    """Tests for the ``python -m external_store.runner`` entry point."""

    def test_round_trip_through_stdio(self, monkeypatch, capsys, db_path):
        store = {"connection_string": db_path, "store_name": "storables"}
        for payload in (
            {"operation": "init", "store": store},
            {"operation": "add_or_update", "store": store, "storable": {"key": "k", "contents": "c"}},
        ):
            monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(payload)))
            assert main() == 0

        monkeypatch.setattr(
            "sys.stdin", io.StringIO(json.dumps({"operation": "get", "store": store, "key": "k"}))
        )
        capsys.readouterr()
        assert main() == 0
        output = json.loads(capsys.readouterr().out)
        assert output["success"] is True
        assert output["result"]["contents"] == "c"

    def test_invalid_input(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO('{"operation": "explode"}'))
        assert main() == 1
        output = json.loads(capsys.readouterr().out)
        assert output["success"] is False
        assert output["error_type"] == "ValidationError"
