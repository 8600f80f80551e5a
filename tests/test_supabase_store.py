import asyncio
from types import SimpleNamespace

import pytest
from postgrest.exceptions import APIError

from database.base import DataStoreError
from database.supabase_store import SupabaseStudentStore
from schemas.students import StudentDraft


def run(coro):
    return asyncio.run(coro)


class FakeQuery:
    """supabase 쿼리 빌더 흉내: 체이닝 호출을 기록하고 execute()에서 결과 반환"""

    def __init__(self, client, table):
        self.client = client
        self.ops = [("table", table)]

    def __getattr__(self, name):
        def op(*args, **kwargs):
            self.ops.append((name, args, kwargs))
            return self
        return op

    async def execute(self):
        self.client.queries.append(self.ops)
        if self.client.error is not None:
            raise self.client.error
        return SimpleNamespace(data=self.client.data)


class FakeClient:
    def __init__(self, data=None, error=None):
        self.data = data
        self.error = error
        self.queries = []

    def table(self, name):
        return FakeQuery(self, name)


ROW = {"id": 1, "Name": "Ana", "Address": None, "Phone": "555", "Observacion": "nota"}


def test_list_orders_by_id_and_maps_columns():
    client = FakeClient(data=[ROW])
    store = SupabaseStudentStore("http://x", "k", table="student", client=client)
    rows = run(store.list_students())
    assert rows[0].name == "Ana"
    assert rows[0].address == ""
    assert rows[0].note == "nota"
    ops = client.queries[0]
    assert ops[0] == ("table", "student")
    assert ("order", ("id",), {"desc": False}) in ops


def test_insert_sends_table_columns():
    client = FakeClient(data=[ROW])
    store = SupabaseStudentStore("http://x", "k", client=client)
    record = run(store.create_student(StudentDraft(name="Ana", phone="555", note="nota")))
    assert record.id == 1
    assert client.queries[0][1] == (
        "insert", ({"Name": "Ana", "Address": "", "Phone": "555", "Observacion": "nota"},), {}
    )


def test_update_filters_by_id():
    client = FakeClient(data=[ROW])
    store = SupabaseStudentStore("http://x", "k", client=client)
    run(store.update_student(1, StudentDraft(name="Ana")))
    assert ("eq", ("id", 1), {}) in client.queries[0]


def test_update_with_no_matching_row_raises():
    store = SupabaseStudentStore("http://x", "k", client=FakeClient(data=[]))
    with pytest.raises(DataStoreError):
        run(store.update_student(9, StudentDraft(name="x")))


def test_api_error_becomes_datastore_error():
    error = APIError({"message": "duplicate key", "code": "23505", "hint": None, "details": None})
    store = SupabaseStudentStore("http://x", "k", client=FakeClient(error=error))
    with pytest.raises(DataStoreError) as exc:
        run(store.create_student(StudentDraft(name="Ana")))
    assert exc.value.message == "duplicate key"


def test_missing_credentials():
    store = SupabaseStudentStore(None, None)
    with pytest.raises(DataStoreError):
        run(store.list_students())
