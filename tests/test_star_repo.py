from __future__ import annotations

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from hollywood_stars.db.repositories.stars import StarFilter, StarRepo

NAMES = ["Johnny Depp", "Elton John", "Meryl Streep", "100% Legit", "snake_case"]


async def _seed(repo: StarRepo) -> None:
    for name in NAMES:
        await repo.insert({"name": name, "email": f"{name[:3].lower()}@x.com", "major": "Drama"})


@pytest.mark.asyncio
async def test_insert_assigns_id_and_keeps_extra_fields(session: AsyncSession) -> None:
    repo = StarRepo(session)
    star = await repo.insert({"_id": "forged", "name": "Tom Hanks", "awards": 2})
    await session.commit()

    assert star.id and star.id != "forged"
    record = star.to_record()
    assert record == {"_id": star.id, "name": "Tom Hanks", "awards": 2}

    found = await repo.find_by_id(star.id)
    assert found is not None
    assert found.to_record() == record
    assert await repo.find_by_id("missing") is None


@pytest.mark.asyncio
async def test_find_preserves_insertion_order_with_skip_and_limit(session: AsyncSession) -> None:
    repo = StarRepo(session)
    await _seed(repo)

    names = [s.name for s in await repo.find()]
    assert names == NAMES

    page = await repo.find(skip=1, limit=2)
    assert [s.name for s in page] == NAMES[1:3]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("needle", "expected"),
    [
        ("john", ["Johnny Depp", "Elton John"]),
        ("JOHN", ["Johnny Depp", "Elton John"]),
        ("depp", ["Johnny Depp"]),
        ("deppx", []),
        ("%", ["100% Legit"]),
        ("_", ["snake_case"]),
        ("", NAMES),
    ],
)
async def test_name_filter_is_case_insensitive_literal_substring(
    session: AsyncSession, needle: str, expected: list[str]
) -> None:
    repo = StarRepo(session)
    await _seed(repo)

    f = StarFilter(name_contains=needle)
    assert [s.name for s in await repo.find(f)] == expected
    assert await repo.count(f) == len(expected)


@pytest.mark.asyncio
async def test_empty_filter_skips_documents_without_name(session: AsyncSession) -> None:
    repo = StarRepo(session)
    await repo.insert({"name": "Cher"})
    await repo.insert({"email": "anon@x.com"})

    assert await repo.count(StarFilter(name_contains="")) == 1
    assert await repo.count(StarFilter()) == 2
    assert await repo.count() == 2


@pytest.mark.asyncio
async def test_update_merges_fields_and_reports_matches(session: AsyncSession) -> None:
    repo = StarRepo(session)
    star = await repo.insert({"name": "Meryl Streep", "email": "m@s.com", "major": "Drama"})
    await session.commit()

    result = await repo.update_by_id(star.id, {"major": "Acting", "name": "Meryl S."})
    await session.commit()
    assert result.matched_count == 1

    updated = await repo.find_by_id(star.id)
    assert updated is not None
    assert updated.to_record() == {
        "_id": star.id,
        "name": "Meryl S.",
        "email": "m@s.com",
        "major": "Acting",
    }
    # The search column follows the document.
    assert await repo.count(StarFilter(name_contains="meryl s.")) == 1

    assert (await repo.update_by_id("missing", {"major": "x"})).matched_count == 0


@pytest.mark.asyncio
async def test_delete_reports_deleted_count(session: AsyncSession) -> None:
    repo = StarRepo(session)
    star = await repo.insert({"name": "Cher"})
    await session.commit()

    assert (await repo.delete_by_id(star.id)).deleted_count == 1
    await session.commit()
    assert (await repo.delete_by_id(star.id)).deleted_count == 0
    assert await repo.find_by_id(star.id) is None
