import logging

import pytest

from minorm.adapters import AdapterExecutionError, ConnectionConfig, SQLiteAdapter
from minorm.executor import StatementExecutor, UpdateResult


@pytest.fixture
def executor():
    adapter = SQLiteAdapter()
    adapter.connect(ConnectionConfig(url="sqlite:///:memory:"))
    executor = StatementExecutor(adapter)
    executor.execute("CREATE TABLE item (id INTEGER, label VARCHAR(20), PRIMARY KEY (id));")
    yield executor
    adapter.close()


def test_update_reports_rowcount_and_generated_key(executor):
    result = executor.update("INSERT INTO item (label) VALUES (?);", ["first"])
    assert result == UpdateResult(rowcount=1, last_insert_id=1)


def test_query_returns_rows_as_column_mappings(executor):
    executor.update("INSERT INTO item (id, label) VALUES (?, ?);", [7, "seven"])
    rows = executor.query("SELECT * FROM item WHERE id = ?;", [7])
    assert rows == [{"id": 7, "label": "seven"}]


def test_query_without_rows_returns_empty_list(executor):
    assert executor.query("SELECT * FROM item WHERE id = ?;", [1]) == []


def test_adapter_errors_propagate(executor):
    with pytest.raises(AdapterExecutionError):
        executor.query("SELECT * FROM missing_table;")


def test_each_statement_is_timed_once_with_adapter_threshold(monkeypatch, caplog):
    monkeypatch.setenv("MINORM_SLOW_QUERY_MS", "0")
    adapter = SQLiteAdapter()
    adapter.connect(ConnectionConfig(url="sqlite:///:memory:"))
    executor = StatementExecutor(adapter)
    caplog.set_level(logging.DEBUG, logger="minorm")
    executor.query("SELECT 1 AS one;")
    adapter.close()

    timings = [record for record in caplog.records if "took" in record.message]
    assert len(timings) == 1
    assert timings[0].name == "minorm.adapters.sqlite"
    assert timings[0].levelno == logging.WARNING
