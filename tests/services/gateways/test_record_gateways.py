from datetime import date

import pytest

from glowboard.core.exceptions import GatewayError, RecordNotFoundError
from glowboard.schemas.note import NoteCreate
from glowboard.schemas.sales_record import SalesRecordCreate
from glowboard.services.gateways import AuditLogGateway, NoteGateway, SalesRecordGateway


@pytest.mark.asyncio
async def test_create_assigns_id_and_timestamps(store):
    """Test that the store assigns id and timestamps on create"""
    gateway = SalesRecordGateway(store)

    record = await gateway.create(SalesRecordCreate(location="UWS", date=date(2024, 5, 1), daily_sales=1200))

    assert record.id
    assert record.created_at is not None
    assert record.created_at == record.updated_at
    assert (await gateway.get(record.id)).daily_sales == 1200


@pytest.mark.asyncio
async def test_update_merges_fields(store):
    """Test that update only touches the supplied fields"""
    gateway = SalesRecordGateway(store)
    record = await gateway.create(
        SalesRecordCreate(location="UWS", date=date(2024, 5, 1), daily_sales=1200, treatments_count=4)
    )

    updated = await gateway.update(record.id, {"daily_sales": 1500})

    assert updated.daily_sales == 1500
    assert updated.treatments_count == 4
    assert updated.updated_at > record.updated_at


@pytest.mark.asyncio
async def test_delete_is_permanent(store):
    """Test that a deleted record can no longer be fetched"""
    gateway = SalesRecordGateway(store)
    record = await gateway.create(SalesRecordCreate(location="UWS", date=date(2024, 5, 1)))

    await gateway.delete(record.id)

    with pytest.raises(RecordNotFoundError, match="salesRecords not found"):
        await gateway.get(record.id)
    assert await gateway.list() == []


@pytest.mark.asyncio
async def test_update_of_missing_record(store):
    """Test that updating an unknown id raises not found"""
    with pytest.raises(RecordNotFoundError):
        await NoteGateway(store).update("missing", {"title": "x"})


@pytest.mark.asyncio
async def test_sales_queries_filter_and_order(store):
    """Test location and date range queries, newest day first"""
    gateway = SalesRecordGateway(store)
    for location, day in [("UWS", 1), ("UWS", 9), ("Midtown", 5), ("UWS", 20)]:
        await gateway.create(SalesRecordCreate(location=location, date=date(2024, 5, day)))

    by_location = await gateway.get_by_location("UWS")
    in_range = await gateway.get_by_date_range(date(2024, 5, 5), date(2024, 5, 9))

    assert [r.date.day for r in by_location] == [20, 9, 1]
    assert [(r.location, r.date.day) for r in in_range] == [("UWS", 9), ("Midtown", 5)]


@pytest.mark.asyncio
async def test_notes_by_location_newest_first(store):
    """Test that notes of a location come back newest first"""
    gateway = NoteGateway(store)
    first = await gateway.create(NoteCreate(location="UWS", title="First", content="a"))
    await gateway.create(NoteCreate(location="Midtown", title="Other", content="b"))
    second = await gateway.create(NoteCreate(location="UWS", title="Second", content="c"))

    notes = await gateway.get_by_location("UWS")

    assert [n.id for n in notes] == [second.id, first.id]


@pytest.mark.asyncio
async def test_audit_log_entry(store):
    """Test the fields recorded for an audit action"""
    entry = await AuditLogGateway(store).log_action(
        "update", "Note", "note-1", "owner@glowboard.test",
        old_values={"title": "Old"}, new_values={"title": "New"},
    )

    assert entry.action_type == "update"
    assert entry.location == "System"
    assert entry.ip_address == "Unknown"
    assert entry.details == "update performed on Note"
    assert entry.new_values == {"title": "New"}


@pytest.mark.asyncio
@pytest.mark.parametrize("call,message", [
    (lambda g: g.list(), "Failed to fetch salesRecords"),
    (lambda g: g.get("x"), "Failed to fetch salesRecords"),
    (lambda g: g.create({"location": "UWS", "date": "2024-05-01"}), "Failed to create salesRecords"),
    (lambda g: g.update("x", {"daily_sales": 1}), "Failed to update salesRecords"),
    (lambda g: g.delete("x"), "Failed to delete salesRecords"),
    (lambda g: g.get_by_location("UWS"), "Failed to fetch sales by location"),
])
async def test_store_failures_are_wrapped(failing_store, call, message):
    """Test that provider errors surface as gateway errors without details"""
    with pytest.raises(GatewayError) as exc_info:
        await call(SalesRecordGateway(failing_store))

    assert str(exc_info.value) == message
    assert "db-host" not in str(exc_info.value)
    assert exc_info.value.__cause__ is None
