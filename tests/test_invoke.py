"""Tests for raptor._internal.invoke — uniform sync/async handler calls."""

from raptor._internal.invoke import invoke


class Record:
    def __init__(self, params):
        self.params = params

    @classmethod
    def find_by_id(cls, id):
        return ("found", id)

    @classmethod
    async def fetch(cls, id):
        return ("fetched", id)


class TestInvoke:
    async def test_sync_function(self) -> None:
        assert await invoke(lambda a, b: a + b, 1, 2) == 3

    async def test_async_function(self) -> None:
        async def handler(value):
            return value * 2

        assert await invoke(handler, 21) == 42

    async def test_classmethod(self) -> None:
        assert await invoke(Record.find_by_id, 7) == ("found", 7)

    async def test_async_classmethod(self) -> None:
        assert await invoke(Record.fetch, 7) == ("fetched", 7)

    async def test_constructor(self) -> None:
        record = await invoke(Record, {"title": "x"})
        assert isinstance(record, Record)
        assert record.params == {"title": "x"}

    async def test_keyword_arguments(self) -> None:
        assert await invoke(dict, a=1) == {"a": 1}
