"""Unit tests for IterationHistoryStub."""

from __future__ import annotations

from datetime import datetime
from uuid import uuid4

import pytest

from warden.application.ports.iteration_history import IterationHistoryProtocol
from warden.domain.errors.iteration import IterationOrdinalConflictError
from warden.domain.models.warden_iteration import WardenIteration
from warden.infrastructure.stubs.iteration_history_stub import IterationHistoryStub


@pytest.fixture
def stub() -> IterationHistoryStub:
    """Create a fresh stub for each test."""
    return IterationHistoryStub()


def _iteration(ordinal: int, t0: datetime) -> WardenIteration:
    return WardenIteration.create(ordinal, [], t0, t0)


def test_implements_protocol(stub: IterationHistoryStub) -> None:
    assert isinstance(stub, IterationHistoryProtocol)


@pytest.mark.asyncio
async def test_empty_history(stub: IterationHistoryStub) -> None:
    organization_id = uuid4()

    assert await stub.get_latest_ordinal(organization_id) is None
    assert await stub.list_for_organization(organization_id) == []


@pytest.mark.asyncio
async def test_append_and_list(stub: IterationHistoryStub, t0: datetime) -> None:
    organization_id = uuid4()
    await stub.append(organization_id, "api", _iteration(1, t0))
    await stub.append(organization_id, "db", _iteration(2, t0))

    assert await stub.get_latest_ordinal(organization_id) == 2
    assert [i.ordinal for i in await stub.list_for_organization(organization_id)] == [1, 2]
    assert [
        i.ordinal for i in await stub.list_for_organization(organization_id, "db")
    ] == [2]


@pytest.mark.asyncio
@pytest.mark.parametrize("ordinal", [3, 2])
async def test_non_increasing_ordinal_rejected(
    stub: IterationHistoryStub, t0: datetime, ordinal: int
) -> None:
    organization_id = uuid4()
    await stub.append(organization_id, "api", _iteration(3, t0))

    with pytest.raises(IterationOrdinalConflictError) as exc_info:
        await stub.append(organization_id, "api", _iteration(ordinal, t0))

    assert exc_info.value.latest_ordinal == 3
    assert len(await stub.list_for_organization(organization_id)) == 1


@pytest.mark.asyncio
async def test_gaps_are_allowed(stub: IterationHistoryStub, t0: datetime) -> None:
    """Ordinals must increase, not be contiguous."""
    organization_id = uuid4()
    await stub.append(organization_id, "api", _iteration(0, t0))
    await stub.append(organization_id, "api", _iteration(5, t0))

    assert await stub.get_latest_ordinal(organization_id) == 5


@pytest.mark.asyncio
async def test_clear(stub: IterationHistoryStub, t0: datetime) -> None:
    organization_id = uuid4()
    await stub.append(organization_id, "api", _iteration(1, t0))

    stub.clear()

    assert await stub.get_latest_ordinal(organization_id) is None
