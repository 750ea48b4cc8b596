"""Tests for entity lookup and chat tools"""
import pytest

from minecraft_mcp.responses import response_text
from minecraft_mcp.schemas import FindEntityInput, SendChatInput
from minecraft_mcp.tools.chat import send_chat
from minecraft_mcp.tools.entities import entity_filter, find_entity
from tests.mocks import MockBotSession, entity

STEVE = entity("player", 3.6, 64, -2.2, username="Steve", id=2)
ZOMBIE = entity("mob", 5, 64, 5, name="zombie", id=3)
COW = entity("animal", 1, 64, 1, name="cow", id=4)
FAR_CREEPER = entity("mob", 40, 64, 40, name="creeper", id=5)


class TestEntityFilter:
    def test_empty_matches_anything(self):
        match = entity_filter("")
        assert match(STEVE) and match(ZOMBIE) and match(COW)

    def test_category_is_exact(self):
        match = entity_filter("mob")
        assert match(ZOMBIE)
        assert not match(COW)
        assert not match(STEVE)

    def test_name_is_case_insensitive_substring(self):
        match = entity_filter("ZOMB")
        assert match(ZOMBIE)
        assert not match(FAR_CREEPER)

    def test_name_search_skips_nameless_entities(self):
        assert not entity_filter("steve")(STEVE)


class TestFindEntity:
    @pytest.mark.asyncio
    async def test_nearest_any_entity(self):
        session = MockBotSession(entities=[ZOMBIE, COW, FAR_CREEPER], position=(0, 64, 0))

        result = await find_entity(session, FindEntityInput())

        assert response_text(result) == "Found cow at position (1, 64, 1)"

    @pytest.mark.asyncio
    async def test_player_uses_username(self):
        session = MockBotSession(entities=[STEVE, COW])

        result = await find_entity(session, FindEntityInput(type="player"))

        assert response_text(result) == "Found Steve at position (3, 64, -3)"

    @pytest.mark.asyncio
    async def test_out_of_range_is_not_found(self):
        session = MockBotSession(entities=[FAR_CREEPER])

        result = await find_entity(session, FindEntityInput(type="creeper", maxDistance=16))

        assert response_text(result) == "No creeper found within 16 blocks"
        assert not result.isError
        assert result.meta == {"status": "not_found"}

    @pytest.mark.asyncio
    async def test_nothing_nearby(self):
        result = await find_entity(MockBotSession(), FindEntityInput(maxDistance=32))

        assert response_text(result) == "No entity found within 32 blocks"

    @pytest.mark.asyncio
    async def test_lookup_failure(self):
        session = MockBotSession()
        session.nearest_entity.side_effect = RuntimeError("entity tracker unavailable")

        result = await find_entity(session, FindEntityInput(type="mob"))

        assert result.isError is True
        assert "entity tracker unavailable" in response_text(result)


class TestSendChat:
    @pytest.mark.asyncio
    async def test_sends_message(self):
        session = MockBotSession()

        result = await send_chat(session, SendChatInput(message="hello world"))

        session.chat.assert_called_once_with("hello world")
        assert response_text(result) == 'Sent message: "hello world"'
        assert not result.isError

    @pytest.mark.asyncio
    async def test_chat_failure(self):
        session = MockBotSession()
        session.chat.side_effect = RuntimeError("not connected")

        result = await send_chat(session, SendChatInput(message="hi"))

        assert result.isError is True
        assert response_text(result) == "Failed: not connected"
