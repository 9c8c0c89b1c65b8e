from datetime import timedelta

from hekayaty.utils.timeutil import utcnow
from tests.support import auth, seed_vip_code, fetch_profile


def test_admin_generates_code_and_mails_it(client, users, fakes):
    response = client.post(
        "/subscriptions/generate-code",
        json={"email": "reader@example.com", "durationDays": 7},
        headers=auth(users.admin),
    )

    assert response.status_code == 200
    body = response.json()
    code = body["code"]["code"]
    assert len(code) == 8
    assert code.isalnum() and code.upper() == code
    assert body["emailSent"] is True
    assert fakes.mail.sent[0]["to"] == "reader@example.com"
    assert code in fakes.mail.sent[0]["html"]


def test_code_is_kept_when_mail_fails(client, users, fakes):
    fakes.mail.fail = True

    response = client.post(
        "/subscriptions/generate-code", json={"email": "reader@example.com"}, headers=auth(users.admin)
    )

    assert response.status_code == 200
    assert response.json()["emailSent"] is False

    code = response.json()["code"]["code"]
    assert client.post("/subscriptions/redeem", json={"code": code}, headers=auth(users.bob)).status_code == 200


def test_only_admin_generates_codes(client, users):
    response = client.post(
        "/subscriptions/generate-code", json={"email": "reader@example.com"}, headers=auth(users.alice)
    )

    assert response.status_code == 403
    assert response.json() == {"error": "Admin access required"}


def test_code_redeems_exactly_once(client, users):
    expires_at = utcnow() + timedelta(days=30)
    seed_vip_code("GOLD2024", expires_at)

    response = client.post("/subscriptions/redeem", json={"code": "gold2024"}, headers=auth(users.alice))

    assert response.status_code == 200
    assert response.json()["success"] is True
    profile = fetch_profile(users.alice)
    assert profile.role == "vip"
    assert profile.is_premium is True
    assert profile.subscription_end_date == expires_at

    for user_id in (users.alice, users.bob):
        response = client.post("/subscriptions/redeem", json={"code": "GOLD2024"}, headers=auth(user_id))
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid or expired code"}

    assert fetch_profile(users.bob).role == "free"


def test_expired_code_is_rejected(client, users):
    seed_vip_code("OLDCODE1", utcnow() - timedelta(minutes=1))

    response = client.post("/subscriptions/redeem", json={"code": "OLDCODE1"}, headers=auth(users.alice))

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid or expired code"}
    assert fetch_profile(users.alice).role == "free"


def test_unknown_code_is_rejected(client, users):
    response = client.post("/subscriptions/redeem", json={"code": "NOPE0000"}, headers=auth(users.alice))

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid or expired code"}


def test_status_reflects_redemption(client, users):
    response = client.get("/subscriptions/status", headers=auth(users.alice))
    assert response.json()["role"] == "free"
    assert response.json()["isPremium"] is False

    seed_vip_code("SILVER99", utcnow() + timedelta(days=3))
    client.post("/subscriptions/redeem", json={"code": "SILVER99"}, headers=auth(users.alice))

    status = client.get("/subscriptions/status", headers=auth(users.alice)).json()
    assert status["role"] == "vip"
    assert status["isPremium"] is True
    assert status["isExpired"] is False
    assert status["expiresAt"] is not None


def test_send_vip_email(client, users, fakes):
    response = client.post(
        "/send-vip-email",
        json={"to": "fan@example.com", "code": "ABCD1234", "expiresAt": "2026-12-31T00:00:00Z", "paid": True},
        headers=auth(users.admin),
    )

    assert response.status_code == 200
    assert response.json() == {"success": True, "emailId": "email-1"}
    assert "ABCD1234" in fakes.mail.sent[0]["html"]


def test_send_vip_email_failure(client, users, fakes):
    fakes.mail.fail = True

    response = client.post(
        "/send-vip-email", json={"to": "fan@example.com", "code": "ABCD1234"}, headers=auth(users.admin)
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Email send failed: domain not verified"}
