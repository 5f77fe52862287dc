"""
NameRepository tests.

`InMemoryNames` stands in for the fantasy_names table: it answers the
statements NameRepository issues and enforces the gender CHECK constraint.
"""

import asyncio
import random
from datetime import datetime, timezone

import asyncpg
import pytest

from core.db import PoolExhaustedError, PoolNotInitializedError
from names.catalog import seed_records
from names.errors import PersistenceError
from names.records import NameQuerySpec, NameRecord
from names.repository import NameRepository


class InMemoryNames:

    def __init__(self):
        self.rows = []

    def _insert(self, name, gender, origin):
        if gender not in ("male", "female", "neutral"):
            raise asyncpg.exceptions.CheckViolationError(
                'new row for relation "fantasy_names" violates check constraint'
            )
        row = {
            "id": len(self.rows) + 1,
            "name": name,
            "gender": gender,
            "origin": origin,
            "created_at": datetime.now(timezone.utc),
        }
        self.rows.append(row)
        return row

    async def executemany(self, sql, values):
        for value in values:
            self._insert(*value)

    async def fetchrow(self, sql, *args):
        if sql.lstrip().startswith("INSERT"):
            return self._insert(*args)
        if "count(*) AS n" in sql:
            return {"n": len(self.rows)}
        raise AssertionError(f"unexpected statement: {sql}")

    async def fetch(self, sql, *args):
        if "GROUP BY gender" in sql:
            counts = {}
            for row in self.rows:
                counts[row["gender"]] = counts.get(row["gender"], 0) + 1
            return [{"gender": g, "count": n} for g, n in sorted(counts.items())]

        args = list(args)
        limit = args.pop()
        matches = self.rows
        if "gender = $1" in sql:
            wanted = {args.pop(0), args.pop(0)}
            matches = [r for r in matches if r["gender"] in wanted]
        if "origin = $" in sql:
            origin = args.pop(0)
            matches = [r for r in matches if r["origin"] == origin]
        matches = random.sample(matches, len(matches))
        return [{"name": r["name"]} for r in matches[:limit]]


@pytest.fixture
def table(connection):
    fake = InMemoryNames()
    connection.fetch.side_effect = fake.fetch
    connection.fetchrow.side_effect = fake.fetchrow
    connection.executemany.side_effect = fake.executemany
    return fake


@pytest.fixture
def repository(db_pool):
    return NameRepository(db_pool)


async def _add_all(repository, records):
    for record in records:
        await repository.add(record)


class TestFindRandom:

    @pytest.mark.asyncio
    async def test_maps_rows(self, repository, connection):
        connection.fetch.return_value = [{"name": "Aldric"}, {"name": "Ash"}]
        result = await repository.find_random(NameQuerySpec(gender="male", count=5, origin=None))

        assert result.names == ["Aldric", "Ash"]
        assert result.gender == "male"
        assert result.count == 2
        assert result.origin is None

        sql, *args = connection.fetch.await_args.args
        assert "ORDER BY random()" in sql
        assert args == ["male", "neutral", 5]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("count", [1, 7, 50])
    async def test_never_more_than_requested(self, repository, table, count):
        await _add_all(repository, [NameRecord(name=f"N{i}", gender="neutral") for i in range(20)])
        result = await repository.find_random(NameQuerySpec(count=count))
        assert 0 <= result.count <= count
        assert result.count == min(count, 20)

    @pytest.mark.asyncio
    async def test_female_never_returns_male(self, repository, table):
        await _add_all(
            repository,
            [
                NameRecord(name="Aldric", gender="male"),
                NameRecord(name="Thorin", gender="male"),
                NameRecord(name="Arwen", gender="female"),
                NameRecord(name="Ash", gender="neutral"),
            ],
        )
        for _ in range(10):
            result = await repository.find_random(NameQuerySpec(gender="female", count=50))
            assert sorted(result.names) == ["Arwen", "Ash"]

    @pytest.mark.asyncio
    async def test_any_includes_neutral(self, repository, table):
        await _add_all(
            repository,
            [NameRecord(name="Aldric", gender="male"), NameRecord(name="Ash", gender="neutral")],
        )
        result = await repository.find_random(NameQuerySpec(gender="any", count=50))
        assert sorted(result.names) == ["Aldric", "Ash"]

    @pytest.mark.asyncio
    async def test_origin_echoed_and_filtered(self, repository, table):
        await _add_all(
            repository,
            [
                NameRecord(name="Arwen", gender="female", origin="elvish"),
                NameRecord(name="Helga", gender="female", origin="dwarven"),
            ],
        )
        result = await repository.find_random(NameQuerySpec(gender="female", count=5, origin="elvish"))
        assert result.names == ["Arwen"]
        assert result.origin == "elvish"

    @pytest.mark.asyncio
    async def test_driver_failure_releases_connection(self, repository, connection, raw_pool):
        connection.fetch.side_effect = ConnectionResetError("server closed the connection")
        with pytest.raises(PersistenceError):
            await repository.find_random(NameQuerySpec())
        raw_pool.release.assert_awaited_once_with(connection)

    @pytest.mark.asyncio
    async def test_pool_errors_propagate(self, repository, raw_pool, db_pool):
        raw_pool.acquire.side_effect = asyncio.TimeoutError()
        with pytest.raises(PoolExhaustedError):
            await repository.find_random(NameQuerySpec())

        await db_pool.shutdown()
        with pytest.raises(PoolNotInitializedError):
            await repository.find_random(NameQuerySpec())


class TestAdd:

    @pytest.mark.asyncio
    async def test_returns_saved_record(self, repository, table):
        saved = await repository.add(NameRecord(name="Aelindra", gender="female", origin="elvish"))
        assert saved.id == 1
        assert saved.name == "Aelindra"
        assert saved.origin == "elvish"
        assert saved.created_at is not None

    @pytest.mark.asyncio
    async def test_origin_is_nullable(self, repository, connection, table):
        await repository.add(NameRecord(name="Ash", gender="neutral"))
        _, name, gender, origin = connection.fetchrow.await_args.args
        assert (name, gender, origin) == ("Ash", "neutral", None)

    @pytest.mark.asyncio
    async def test_invalid_gender_is_persistence_error(self, repository, table, raw_pool, connection):
        with pytest.raises(PersistenceError):
            await repository.add(NameRecord(name="X", gender="invalid"))
        assert table.rows == []
        raw_pool.release.assert_awaited_once_with(connection)

    @pytest.mark.asyncio
    async def test_added_name_is_found_and_counted(self, repository, table):
        await _add_all(
            repository,
            [NameRecord(name="Helga", gender="female", origin="dwarven"), NameRecord(name="Bram", gender="male")],
        )
        before = dict(await repository.get_stats())

        await repository.add(NameRecord(name="Aelindra", gender="female", origin="elvish"))

        after = dict(await repository.get_stats())
        assert after["female"] == before["female"] + 1
        assert after["male"] == before["male"]
        result = await repository.find_random(NameQuerySpec(gender="female", count=50, origin="elvish"))
        assert "Aelindra" in result.names

    @pytest.mark.asyncio
    async def test_no_row_returned(self, repository, connection):
        connection.fetchrow.return_value = None
        with pytest.raises(PersistenceError):
            await repository.add(NameRecord(name="Ash", gender="neutral"))


class TestAddMany:

    @pytest.mark.asyncio
    async def test_single_transaction(self, repository, connection, raw_pool):
        inserted = await repository.add_many(
            [NameRecord(name="Ash", gender="neutral"), NameRecord(name="Arwen", gender="female", origin="elvish")]
        )
        assert inserted == 2
        _, values = connection.executemany.await_args.args
        assert values == [("Ash", "neutral", None), ("Arwen", "female", "elvish")]
        assert connection.transaction_state == "committed"
        assert raw_pool.acquire.await_count == 1

    @pytest.mark.asyncio
    async def test_failure_rolls_back(self, repository, connection, raw_pool):
        connection.executemany.side_effect = asyncpg.exceptions.CheckViolationError("check violated")
        with pytest.raises(PersistenceError):
            await repository.add_many([NameRecord(name="X", gender="invalid")])
        assert connection.transaction_state == "rolled_back"
        raw_pool.release.assert_awaited_once_with(connection)

    @pytest.mark.asyncio
    async def test_empty_batch(self, repository, raw_pool):
        assert await repository.add_many([]) == 0
        raw_pool.acquire.assert_not_awaited()


class TestStats:

    @pytest.mark.asyncio
    async def test_empty_table_reports_nothing(self, repository, table):
        assert await repository.get_stats() == []

    @pytest.mark.asyncio
    async def test_absent_genders_are_omitted(self, repository, table):
        await repository.add(NameRecord(name="Bram", gender="male"))
        assert await repository.get_stats() == [("male", 1)]

    @pytest.mark.asyncio
    async def test_failure(self, repository, connection):
        connection.fetch.side_effect = asyncpg.exceptions.UndefinedTableError("relation does not exist")
        with pytest.raises(PersistenceError):
            await repository.get_stats()

    @pytest.mark.asyncio
    async def test_count_names(self, repository, table):
        assert await repository.count_names() == 0
        await repository.add(NameRecord(name="Bram", gender="male"))
        assert await repository.count_names() == 1

    @pytest.mark.asyncio
    async def test_after_seeding(self, repository, table):
        await repository.add_many(seed_records())
        assert await repository.get_stats() == [("female", 40), ("male", 40), ("neutral", 31)]
