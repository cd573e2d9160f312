from __future__ import annotations

import asyncio
from datetime import datetime, timezone

import pytest
from aiogram.exceptions import TelegramBadRequest

from clients.evm.dto import PairSnapshot, ReservesSnapshot, TokenInfo
from fakes import PAIR, TOKEN_A, TOKEN_B
from handlers.pair import refresh_pair
from services.pair_lookup import LookupResult


SNAPSHOT = PairSnapshot(
    pair_address=PAIR,
    token0=TokenInfo(TOKEN_A, "Token A", "TKA", 18, "1"),
    token1=TokenInfo(TOKEN_B, "Token B", "TKB", 18, "2"),
    reserves=ReservesSnapshot(10**18, 2 * 10**18, 1_690_000_000),
    total_supply="3",
    block_number=17_000_000,
    last_updated=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
)


class FakeLookup:
    def __init__(self, result: LookupResult):
        self.result = result
        self.queries = []

    async def lookup(self, query):
        self.queries.append(query)
        return self.result


class FakeMessage:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.edits = []

    async def edit_text(self, text, **kwargs):
        self.edits.append(text)
        if self.error is not None:
            raise self.error


class FakeCallback:
    def __init__(self, message: FakeMessage):
        self.data = f"refresh_pair:{PAIR}"
        self.message = message
        self.answers = []

    async def answer(self, text=None, **kwargs):
        self.answers.append(text)


def test_refresh_edits_message_and_answers():
    callback = FakeCallback(FakeMessage())
    lookup = FakeLookup(LookupResult(success=True, value=SNAPSHOT))

    asyncio.run(refresh_pair(callback, lookup))

    assert lookup.queries[0].pair_address == PAIR
    assert len(callback.message.edits) == 1
    assert callback.answers == ["Updated"]


def test_refresh_with_unchanged_text_still_answers():
    error = TelegramBadRequest(
        method=None,
        message="Bad Request: message is not modified: specified new message content "
        "and reply markup are exactly the same as a current content and reply markup of the message",
    )
    callback = FakeCallback(FakeMessage(error))

    asyncio.run(refresh_pair(callback, FakeLookup(LookupResult(success=True, value=SNAPSHOT))))

    assert callback.answers == ["Updated"]


def test_refresh_reraises_other_bad_requests():
    error = TelegramBadRequest(method=None, message="Bad Request: message to edit not found")
    callback = FakeCallback(FakeMessage(error))

    with pytest.raises(TelegramBadRequest):
        asyncio.run(refresh_pair(callback, FakeLookup(LookupResult(success=True, value=SNAPSHOT))))

    assert callback.answers == []
