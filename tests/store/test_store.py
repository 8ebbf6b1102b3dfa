import pytest

from toolshed.models import Tool
from toolshed.store import MemoryStore, DatabaseStore, ToolStore, get_store


class TestStore:
    """Checks the contract every store must adhere to."""

    async def test_save_assigns_id(self, store: ToolStore):
        tool = await store.save(Tool("Hammer", "A heavy tool"))
        assert tool.id is not None
        assert await store.find_by_id(tool.id) == tool

    async def test_save_assigns_unique_ids(self, store: ToolStore):
        first = await store.save(Tool("Hammer", "A heavy tool"))
        second = await store.save(Tool("Screwdriver", "A precision tool"))
        assert first.id != second.id

    async def test_save_overwrites(self, store: ToolStore):
        tool = await store.save(Tool("Hammer", "A heavy tool"))
        tool.name = "Mallet"
        await store.save(tool)
        assert (await store.find_by_id(tool.id)).name == "Mallet"
        assert await store.count() == 1

    async def test_changes_need_saving(self, store: ToolStore):
        tool = await store.save(Tool("Hammer", "A heavy tool"))
        tool.name = "Mallet"
        assert (await store.find_by_id(tool.id)).name == "Hammer"

    async def test_find_missing(self, store: ToolStore):
        assert await store.find_by_id(1) is None
        assert not await store.exists_by_id(1)

    async def test_find_all_in_insertion_order(self, store: ToolStore):
        names = ["Hammer", "Screwdriver", "Wrench"]
        for name in names:
            await store.save(Tool(name, ""))
        assert [tool.name for tool in await store.find_all()] == names

    async def test_delete_by_id(self, store: ToolStore):
        tool = await store.save(Tool("Hammer", "A heavy tool"))
        assert await store.exists_by_id(tool.id)
        await store.delete_by_id(tool.id)
        assert not await store.exists_by_id(tool.id)

    async def test_delete_missing_is_noop(self, store: ToolStore):
        await store.save(Tool("Hammer", "A heavy tool"))
        await store.delete_by_id(1234)
        assert await store.count() == 1

    async def test_delete_all(self, store: ToolStore):
        await store.save(Tool("Hammer", "A heavy tool"))
        await store.save(Tool("Screwdriver", "A precision tool"))
        assert await store.count() == 2
        await store.delete_all()
        assert await store.count() == 0
        assert await store.find_all() == []


class TestGetStore:

    def test_get_memory_store(self):
        assert isinstance(get_store("memory"), MemoryStore)

    def test_get_database_store(self):
        assert isinstance(get_store("database"), DatabaseStore)

    def test_get_unknown_store(self):
        with pytest.raises(ValueError):
            get_store("mongo")


class TestMemoryStore:

    async def test_ids_start_at_one(self):
        store = MemoryStore()
        tool = await store.save(Tool("Hammer", "A heavy tool"))
        assert tool.id == 1

    async def test_ids_follow_highest(self):
        store = MemoryStore()
        await store.save(Tool("Hammer", "A heavy tool", id=10))
        tool = await store.save(Tool("Screwdriver", "A precision tool"))
        assert tool.id == 11

    async def test_stores_are_independent(self):
        first, second = MemoryStore(), MemoryStore()
        await first.save(Tool("Hammer", "A heavy tool"))
        assert await second.count() == 0
