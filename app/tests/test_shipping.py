"""
Shipping record creation and filtering
"""

from datetime import datetime
from unittest.mock import patch

import pytest
from sqlalchemy.exc import SQLAlchemyError

from app.models.user import UserRole
from app.models.fulfillment import ShippingRecord
from app.schemas.fulfillment import ShippingRecordCreate
from app.services.auth_service import AuthService
from app.services.shipping_service import ShippingService


def shipment(campaign_id, tracking, date="2026-03-10T09:00:00Z", **extra):
    body = {
        "campaignId": campaign_id,
        "shippingDate": date,
        "trackingNumber": tracking,
        "productName": "Granola 500g",
        "recipientInfo": {"name": "Kim", "address": "Seoul"},
    }
    body.update(extra)
    return body


@pytest.fixture
def campaign(advertiser_user, make_campaign):
    return make_campaign(advertiser_user)


def test_partner_creates_record_for_self(client, db_session, partner_user, partner_headers, campaign):
    response = client.post(
        "/api/shipping-records",
        json=shipment(campaign.id, "CJ-1001", partnerId=9999),
        headers=partner_headers
    )

    # Unknown fields are ignored; the partner always comes from the session
    assert response.status_code == 201
    data = response.json()
    assert data["partnerId"] == partner_user.id
    assert data["status"] == "shipped"
    assert data["trackingNumber"] == "CJ-1001"


def test_partner_sees_only_own_records_newest_first(client, db_session, make_user, headers_for, campaign):
    partner_a = make_user(UserRole.PARTNER)
    partner_b = make_user(UserRole.PARTNER)
    for tracking in ("A-1", "A-2"):
        client.post("/api/shipping-records", json=shipment(campaign.id, tracking), headers=headers_for(partner_a))
    client.post("/api/shipping-records", json=shipment(campaign.id, "B-1"), headers=headers_for(partner_b))

    response = client.get("/api/shipping-records", headers=headers_for(partner_a))

    assert response.status_code == 200
    assert [r["trackingNumber"] for r in response.json()] == ["A-2", "A-1"]


def test_partner_date_params_are_ignored(client, partner_headers, campaign):
    client.post("/api/shipping-records", json=shipment(campaign.id, "CJ-1"), headers=partner_headers)

    response = client.get(
        "/api/shipping-records",
        params={"startDate": "2020-01-01", "endDate": "2020-01-02"},
        headers=partner_headers
    )
    assert len(response.json()) == 1


def test_admin_without_range_gets_empty_list(client, admin_headers, partner_headers, campaign):
    client.post("/api/shipping-records", json=shipment(campaign.id, "CJ-1"), headers=partner_headers)

    response = client.get("/api/shipping-records", headers=admin_headers)
    assert response.status_code == 200
    assert response.json() == []

    response = client.get("/api/shipping-records", params={"startDate": "2026-03-01"}, headers=admin_headers)
    assert response.json() == []


def test_date_range_is_inclusive_and_ordered_by_shipping_date(client, admin_headers, partner_headers, campaign):
    for tracking, date in [
        ("before", "2026-02-28T23:59:59Z"),
        ("first-day", "2026-03-01T00:00:00Z"),
        ("middle", "2026-03-15T12:00:00Z"),
        ("last-day", "2026-03-31T18:30:00Z"),
        ("after", "2026-04-01T00:00:00Z"),
    ]:
        client.post("/api/shipping-records", json=shipment(campaign.id, tracking, date=date), headers=partner_headers)

    response = client.get(
        "/api/shipping-records",
        params={"startDate": "2026-03-01", "endDate": "2026-03-31"},
        headers=admin_headers
    )

    assert response.status_code == 200
    assert [r["trackingNumber"] for r in response.json()] == ["last-day", "middle", "first-day"]


def test_advertiser_can_filter_by_range(client, advertiser_headers, partner_headers, campaign):
    client.post("/api/shipping-records", json=shipment(campaign.id, "CJ-1"), headers=partner_headers)

    response = client.get(
        "/api/shipping-records",
        params={"startDate": "2026-03-01T00:00:00Z", "endDate": "2026-03-31T23:59:59Z"},
        headers=advertiser_headers
    )
    assert [r["trackingNumber"] for r in response.json()] == ["CJ-1"]


@pytest.mark.parametrize("start,end", [
    ("yesterday", "2026-03-31"),
    ("2026-03-01", "31/03/2026"),
    ("2026-04-01", "2026-03-01"),
])
def test_invalid_range_is_400(client, admin_headers, start, end):
    response = client.get(
        "/api/shipping-records",
        params={"startDate": start, "endDate": end},
        headers=admin_headers
    )
    assert response.status_code == 400
    assert "message" in response.json()


def test_bulk_insert_persists_every_record(client, db_session, partner_user, partner_headers, campaign):
    records = [shipment(campaign.id, f"BULK-{i}") for i in range(3)]

    response = client.post("/api/shipping-records/bulk", json={"records": records}, headers=partner_headers)

    assert response.status_code == 201
    assert len(response.json()) == 3
    assert db_session.query(ShippingRecord).filter(ShippingRecord.partner_id == partner_user.id).count() == 3


def test_one_malformed_record_fails_whole_batch(client, db_session, partner_headers, campaign):
    records = [shipment(campaign.id, "OK-1"), shipment(campaign.id, "OK-2")]
    records.append({"campaignId": campaign.id, "productName": "missing tracking and date"})

    response = client.post("/api/shipping-records/bulk", json={"records": records}, headers=partner_headers)

    assert response.status_code == 400
    assert db_session.query(ShippingRecord).count() == 0


def test_record_for_unknown_campaign_is_404(client, db_session, partner_headers):
    response = client.post("/api/shipping-records", json=shipment(99999, "CJ-404"), headers=partner_headers)

    assert response.status_code == 404
    assert response.json() == {"message": "Campaign not found"}
    assert db_session.query(ShippingRecord).count() == 0


def test_unknown_campaign_fails_whole_batch(client, db_session, partner_headers, campaign):
    records = [shipment(campaign.id, "OK-1"), shipment(99999, "ORPHAN-1")]

    response = client.post("/api/shipping-records/bulk", json={"records": records}, headers=partner_headers)

    assert response.status_code == 400
    assert "99999" in response.json()["message"]
    assert db_session.query(ShippingRecord).count() == 0


def test_empty_batch_is_rejected(client, partner_headers):
    response = client.post("/api/shipping-records/bulk", json={"records": []}, headers=partner_headers)
    assert response.status_code == 400


def test_bulk_insert_rolls_back_on_database_error(db_session, partner_user, campaign):
    records = [
        ShippingRecordCreate(
            campaign_id=campaign.id,
            shipping_date=datetime(2026, 3, 10),
            tracking_number=f"TX-{i}",
            product_name="Granola"
        )
        for i in range(2)
    ]

    with patch.object(db_session, "commit", side_effect=SQLAlchemyError("disk full")):
        with pytest.raises(SQLAlchemyError):
            ShippingService.create_bulk_records(db_session, AuthService.to_session_user(partner_user), records)

    assert db_session.query(ShippingRecord).count() == 0
