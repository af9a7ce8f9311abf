"""Tests for the database readiness check."""

import pytest

from voteschallenge.pre_start import check_database, wait_for_database

UNREACHABLE_URL = "sqlite+aiosqlite:////nonexistent-directory/voting.db"


@pytest.mark.asyncio
async def test_in_memory_database_is_ready():
    assert await check_database("sqlite+aiosqlite://")


@pytest.mark.asyncio
async def test_unreachable_database_gives_up():
    assert not await wait_for_database(UNREACHABLE_URL, max_retries=2, retry_interval=0)
