"""
Campaign, application and sample product flows
"""

from datetime import datetime, timedelta
from unittest.mock import patch

import pytest
from sqlalchemy.exc import SQLAlchemyError

from app.models.campaign import Campaign, CampaignApplication
from app.models.performance import PerformanceMetric
from app.models.user import UserRole
from app.schemas.campaign import CampaignUpdate
from app.services.auth_service import AuthService
from app.services.campaign_service import CampaignService


def test_advertiser_creates_campaign_with_coerced_fields(client, advertiser_user, advertiser_headers, sample_campaign_payload):
    response = client.post("/api/campaigns", json=sample_campaign_payload, headers=advertiser_headers)

    assert response.status_code == 201
    data = response.json()
    assert data["advertiserId"] == advertiser_user.id
    assert data["maxPartners"] == 5
    assert data["selectedPartners"] == 0
    assert data["status"] == "draft"
    assert data["recruitmentStartDate"].startswith("2026-11-01T00:00:00")


def test_advertiser_id_in_body_is_ignored_for_advertisers(
    client, advertiser_user, advertiser_headers, sample_campaign_payload, make_user
):
    other = make_user(UserRole.ADVERTISER)
    sample_campaign_payload["advertiserId"] = other.id

    response = client.post("/api/campaigns", json=sample_campaign_payload, headers=advertiser_headers)
    assert response.json()["advertiserId"] == advertiser_user.id


def test_admin_may_create_on_behalf_of_advertiser(client, advertiser_user, admin_headers, sample_campaign_payload):
    sample_campaign_payload["advertiserId"] = advertiser_user.id

    response = client.post("/api/campaigns", json=sample_campaign_payload, headers=admin_headers)
    assert response.status_code == 201
    assert response.json()["advertiserId"] == advertiser_user.id


def test_selected_partners_is_not_accepted(client, advertiser_headers, sample_campaign_payload):
    sample_campaign_payload["selectedPartners"] = 3

    response = client.post("/api/campaigns", json=sample_campaign_payload, headers=advertiser_headers)
    assert response.status_code == 400


def test_invalid_campaign_bodies_are_400(client, advertiser_headers, sample_campaign_payload):
    bad_budget = dict(sample_campaign_payload, dailyBudget="a lot")
    reversed_window = dict(sample_campaign_payload, recruitmentEndDate="2026-10-01T00:00:00Z")
    missing_title = {k: v for k, v in sample_campaign_payload.items() if k != "title"}

    for body in (bad_budget, reversed_window, missing_title):
        response = client.post("/api/campaigns", json=body, headers=advertiser_headers)
        assert response.status_code == 400
        assert "errors" in response.json()


def test_partner_cannot_create_campaign(client, partner_headers, sample_campaign_payload):
    response = client.post("/api/campaigns", json=sample_campaign_payload, headers=partner_headers)
    assert response.status_code == 403


def test_campaign_listing_by_role(
    client, db_session, advertiser_user, advertiser_headers, admin_headers, partner_headers, make_user, make_campaign
):
    now = datetime.utcnow()
    own_recruiting = make_campaign(advertiser_user, title="Recruiting now")
    own_draft = make_campaign(advertiser_user, title="Draft", status="draft")
    make_campaign(
        make_user(UserRole.ADVERTISER),
        title="Window closed",
        recruitment_start_date=now - timedelta(days=10),
        recruitment_end_date=now - timedelta(days=1)
    )

    admin_titles = {c["title"] for c in client.get("/api/campaigns", headers=admin_headers).json()}
    advertiser_ids = {c["id"] for c in client.get("/api/campaigns", headers=advertiser_headers).json()}
    partner_titles = [c["title"] for c in client.get("/api/campaigns", headers=partner_headers).json()]

    assert admin_titles == {"Recruiting now", "Draft", "Window closed"}
    assert advertiser_ids == {own_recruiting.id, own_draft.id}
    assert partner_titles == ["Recruiting now"]


def test_get_missing_campaign_is_404(client, partner_headers):
    response = client.get("/api/campaigns/999", headers=partner_headers)
    assert response.status_code == 404
    assert response.json() == {"message": "Campaign not found"}


def test_update_campaign_and_ownership(client, advertiser_user, advertiser_headers, make_user, make_campaign, headers_for):
    campaign = make_campaign(advertiser_user)

    response = client.put(
        f"/api/campaigns/{campaign.id}",
        json={"title": "Renamed", "status": "completed"},
        headers=advertiser_headers
    )
    assert response.status_code == 200
    assert response.json()["title"] == "Renamed"
    assert response.json()["status"] == "completed"

    intruder = make_user(UserRole.ADVERTISER)
    response = client.put(f"/api/campaigns/{campaign.id}", json={"title": "Hijacked"}, headers=headers_for(intruder))
    assert response.status_code == 403


def test_update_rejects_explicit_nulls(client, advertiser_user, advertiser_headers, make_campaign):
    campaign = make_campaign(advertiser_user, title="Keep me")

    for body in ({"title": None}, {"dailyBudget": None}, {"campaignEndDate": None}, {"status": None}):
        response = client.put(f"/api/campaigns/{campaign.id}", json=body, headers=advertiser_headers)
        assert response.status_code == 400

    # Nullable fields may still be cleared
    response = client.put(f"/api/campaigns/{campaign.id}", json={"description": None}, headers=advertiser_headers)
    assert response.status_code == 200
    assert response.json()["title"] == "Keep me"


def test_update_keeps_windows_ordered(client, advertiser_user, advertiser_headers, make_campaign):
    campaign = make_campaign(advertiser_user)
    too_early = (campaign.campaign_start_date - timedelta(days=1)).isoformat()

    response = client.put(
        f"/api/campaigns/{campaign.id}",
        json={"campaignEndDate": too_early},
        headers=advertiser_headers
    )
    assert response.status_code == 400
    assert "campaignEndDate" in response.json()["message"]

    response = client.put(
        f"/api/campaigns/{campaign.id}",
        json={"recruitmentStartDate": "2030-01-01T00:00:00"},
        headers=advertiser_headers
    )
    assert response.status_code == 400

    current = client.get(f"/api/campaigns/{campaign.id}", headers=advertiser_headers).json()
    assert datetime.fromisoformat(current["campaignEndDate"]) == campaign.campaign_end_date


def test_failed_update_rolls_back(db_session, advertiser_user, make_campaign):
    campaign = make_campaign(advertiser_user, title="Original")

    with patch.object(db_session, "commit", side_effect=SQLAlchemyError("connection lost")):
        with pytest.raises(SQLAlchemyError):
            CampaignService.update_campaign(
                db_session,
                AuthService.to_session_user(advertiser_user),
                campaign.id,
                CampaignUpdate(title="Renamed")
            )

    assert db_session.get(Campaign, campaign.id).title == "Original"


def test_application_flow(client, db_session, advertiser_user, advertiser_headers, partner_user, partner_headers, make_campaign):
    campaign = make_campaign(advertiser_user)

    response = client.post(
        f"/api/campaigns/{campaign.id}/apply",
        json={"applicationMessage": "I deliver in Gangnam"},
        headers=partner_headers
    )
    assert response.status_code == 201
    application_id = response.json()["id"]
    assert response.json()["status"] == "pending"

    mine = client.get("/api/applications/mine", headers=partner_headers).json()
    assert [a["id"] for a in mine] == [application_id]

    listed = client.get(f"/api/campaigns/{campaign.id}/applications", headers=advertiser_headers).json()
    assert listed[0]["partnerId"] == partner_user.id

    response = client.put(
        f"/api/applications/{application_id}/status",
        json={"status": "approved"},
        headers=advertiser_headers
    )
    assert response.status_code == 200
    assert response.json()["status"] == "approved"
    assert response.json()["reviewedBy"] == advertiser_user.id
    assert response.json()["reviewedAt"] is not None


def test_application_review_rejects_pending_and_unknown_ids(client, advertiser_headers):
    response = client.put("/api/applications/1/status", json={"status": "pending"}, headers=advertiser_headers)
    assert response.status_code == 400

    response = client.put("/api/applications/999/status", json={"status": "rejected"}, headers=advertiser_headers)
    assert response.status_code == 404


def test_apply_to_missing_campaign_is_404(client, partner_headers):
    response = client.post("/api/campaigns/999/apply", json={}, headers=partner_headers)
    assert response.status_code == 404


def test_sample_workflow(client, db_session, advertiser_user, partner_headers, admin_headers, advertiser_headers, make_campaign):
    campaign = make_campaign(advertiser_user)

    response = client.post(
        "/api/sample-products",
        json={"campaignId": campaign.id, "productName": "Granola 500g", "quantity": 2},
        headers=partner_headers
    )
    assert response.status_code == 201
    sample_id = response.json()["id"]
    assert response.json()["status"] == "pending"

    assert len(client.get("/api/sample-products", headers=partner_headers).json()) == 1
    assert len(client.get("/api/sample-products", headers=admin_headers).json()) == 1
    assert len(client.get(
        "/api/sample-products", params={"campaignId": campaign.id + 1}, headers=admin_headers
    ).json()) == 0
    assert client.get("/api/sample-products", headers=advertiser_headers).json() == []

    response = client.put(f"/api/sample-products/{sample_id}/status", json={"status": "approved"}, headers=admin_headers)
    assert response.json()["approvedAt"] is not None
    assert response.json()["shippedAt"] is None

    response = client.put(
        f"/api/sample-products/{sample_id}/status",
        json={"status": "shipped", "trackingNumber": "CJ-7788"},
        headers=admin_headers
    )
    assert response.json()["status"] == "shipped"
    assert response.json()["shippedAt"] is not None
    assert response.json()["trackingNumber"] == "CJ-7788"

    response = client.put(f"/api/sample-products/{sample_id}/status", json={"status": "delivered"}, headers=admin_headers)
    assert response.json()["deliveredAt"] is not None


def test_sample_quantity_must_be_positive(client, advertiser_user, partner_headers, make_campaign):
    campaign = make_campaign(advertiser_user)
    response = client.post(
        "/api/sample-products",
        json={"campaignId": campaign.id, "productName": "Granola", "quantity": 0},
        headers=partner_headers
    )
    assert response.status_code == 400


def test_sample_status_for_missing_sample_is_404(client, admin_headers):
    response = client.put("/api/sample-products/999/status", json={"status": "approved"}, headers=admin_headers)
    assert response.status_code == 404


def test_admin_deletes_campaign_with_its_applications(
    client, db_session, advertiser_user, admin_headers, partner_headers, make_campaign
):
    campaign = make_campaign(advertiser_user)
    client.post(f"/api/campaigns/{campaign.id}/apply", json={}, headers=partner_headers)

    response = client.delete(f"/api/campaigns/{campaign.id}", headers=admin_headers)

    assert response.status_code == 204
    db_session.expire_all()
    assert db_session.query(Campaign).count() == 0
    assert db_session.query(CampaignApplication).count() == 0


def test_only_admins_delete_campaigns(client, advertiser_user, advertiser_headers, make_campaign):
    campaign = make_campaign(advertiser_user)

    assert client.delete(f"/api/campaigns/{campaign.id}", headers=advertiser_headers).status_code == 403
    assert client.delete("/api/campaigns/999", headers=advertiser_headers).status_code == 403


def test_campaign_with_metrics_is_not_deleted(client, db_session, advertiser_user, admin_headers, make_campaign):
    campaign = make_campaign(advertiser_user)
    db_session.add(PerformanceMetric(campaign_id=campaign.id, date=datetime(2026, 3, 1)))
    db_session.commit()

    response = client.delete(f"/api/campaigns/{campaign.id}", headers=admin_headers)

    assert response.status_code == 400
    assert client.get(f"/api/campaigns/{campaign.id}", headers=admin_headers).status_code == 200
    assert client.delete("/api/campaigns/999", headers=admin_headers).status_code == 404
