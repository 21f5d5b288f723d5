from datetime import date

import pytest

from glowboard.core.constants import AUDIT_LOGS_COLLECTION
from glowboard.core.exceptions import InputValidationError, PermissionDeniedError
from glowboard.schemas.sales_record import SalesRecordCreate
from glowboard.schemas.settings import LocationGoals
from glowboard.services.audit import AuditLogger
from glowboard.services.gateways import AuditLogGateway, SalesRecordGateway
from glowboard.services.sales_service import SalesDataService, goal_location

TODAY = date(2024, 5, 15)


def build_service(store, audit_store=None, user_email="owner@glowboard.test"):
    audit = AuditLogger(AuditLogGateway(audit_store or store), user_email)
    return SalesDataService(SalesRecordGateway(store), audit)


@pytest.mark.asyncio
async def test_create_validates_and_audits(store, admin_user):
    """Test a valid create is stored with sanitized values and audited"""
    service = build_service(store)

    record = await service.create(
        admin_user,
        {"location": "UWS", "date": "2024-05-15", "daily_sales": "1200.50", "treatments_count": "7.8",
         "notes": "<script>x</script>Busy day"},
        today=TODAY,
    )
    await service.audit.drain()

    assert record.daily_sales == 1200.5
    assert record.treatments_count == 7
    assert record.notes == "Busy day"
    entries = await store.list(AUDIT_LOGS_COLLECTION)
    assert [(e["action_type"], e["entity_type"], e["entity_id"]) for e in entries] == [
        ("create", "SalesRecord", record.id)
    ]


@pytest.mark.asyncio
async def test_create_rejects_invalid_input(store, admin_user):
    """Test that invalid input blocks the write with every issue"""
    service = build_service(store)

    with pytest.raises(InputValidationError) as exc_info:
        await service.create(admin_user, {"location": "Nowhere", "date": "2024-05-15", "daily_sales": -10},
                             today=TODAY)

    assert {issue.code for issue in exc_info.value.issues} == {"LOCATION_INVALID", "SALES_AMOUNT_TOO_LOW"}
    assert {"field": "location", "message": "Invalid location selected", "code": "LOCATION_INVALID"} in \
        exc_info.value.extensions["issues"]
    assert await service.gateway.list() == []


@pytest.mark.asyncio
async def test_staff_cannot_write_other_locations(store, staff_user):
    """Test that non-admins are limited to their own location"""
    service = build_service(store)

    with pytest.raises(PermissionDeniedError):
        await service.create(staff_user, {"location": "UWS", "date": "2024-05-15", "daily_sales": 10},
                             today=TODAY)

    record = await service.create(staff_user, {"location": "Midtown", "date": "2024-05-15", "daily_sales": 10},
                                  today=TODAY)
    with pytest.raises(PermissionDeniedError):
        await service.update(staff_user, record.id, {"location": "UWS"}, today=TODAY)


@pytest.mark.asyncio
async def test_write_succeeds_when_audit_fails(store, failing_store, admin_user):
    """Test that the primary write survives a broken audit channel"""
    service = build_service(store, audit_store=failing_store)

    record = await service.create(admin_user, {"location": "UWS", "date": "2024-05-15", "daily_sales": 10},
                                  today=TODAY)
    await service.audit.drain()

    assert (await service.gateway.get(record.id)).daily_sales == 10


@pytest.mark.asyncio
async def test_update_and_delete_are_audited(store, admin_user):
    """Test that update keeps untouched fields and both writes are audited"""
    service = build_service(store)
    record = await service.gateway.create(
        SalesRecordCreate(location="UWS", date=date(2024, 5, 14), daily_sales=100, treatments_count=2)
    )

    updated = await service.update(admin_user, record.id, {"daily_sales": "150"}, today=TODAY)
    await service.delete(admin_user, record.id)
    await service.audit.drain()

    assert updated.daily_sales == 150
    assert updated.treatments_count == 2
    entries = await store.list(AUDIT_LOGS_COLLECTION)
    assert sorted(e["action_type"] for e in entries) == ["delete", "update"]
    update_entry = next(e for e in entries if e["action_type"] == "update")
    assert update_entry["old_values"]["daily_sales"] == 100
    assert update_entry["new_values"]["daily_sales"] == 150


@pytest.mark.asyncio
async def test_load_applies_location_filter(store, admin_user, staff_user):
    """Test that staff only load their own location"""
    service = build_service(store)
    for location in ("UWS", "Midtown", "Midtown"):
        await service.gateway.create(SalesRecordCreate(location=location, date=TODAY))

    assert len(await service.load(admin_user, "all")) == 3
    assert {r.location for r in await service.load(staff_user, "all")} == {"Midtown"}


@pytest.mark.asyncio
async def test_dashboard(store, staff_user):
    """Test that the dashboard combines every aggregate for the user's view"""
    service = build_service(store)
    await service.gateway.create(SalesRecordCreate(
        location="Midtown", date=TODAY, daily_sales=1000, treatments_count=5, daily_service_sales=1000,
    ))
    await service.gateway.create(SalesRecordCreate(location="UWS", date=TODAY, daily_sales=9000))

    dashboard = await service.dashboard(staff_user, LocationGoals.defaults(), "all", "1day", today=TODAY)

    assert dashboard.stats.today_sales == 1000
    assert dashboard.performance.avg_sales_per_treatment == 200
    assert [e.location for e in dashboard.location_leaderboard.entries] == ["Midtown"]
    assert dashboard.goal_progress.location == "Midtown"
    assert dashboard.goal_progress.total_service_sales == 1000


def test_goal_location(admin_user, staff_user):
    """Test whose goals apply to a dashboard selection"""
    assert goal_location(admin_user, "all") is None
    assert goal_location(staff_user, "all") == "Midtown"
    assert goal_location(admin_user, "UWS") == "UWS"
