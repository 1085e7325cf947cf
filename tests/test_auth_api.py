from claimcheck.core.security import SESSION_PURPOSE
from claimcheck.models import User
from tests.helpers import FakeMailClient, auth_header, login, mail_recipient, mail_text, signup


def reset_token_from(mail):
    return mail_text(mail).rsplit("token=", 1)[-1]


def user_count(app):
    with app.state.session_factory() as db:
        return db.query(User).count()


def test_health(client):
    assert client.get("/").json() == {"message": "Claim check API is running", "accountsEnabled": True}


def test_signup_returns_user_and_session_token(client, tokens):
    res = signup(client)
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["message"] == "User created successfully"
    assert body["user"]["username"] == "al"
    assert body["user"]["email"] == "al@x.com"
    assert body["user"]["createdAt"]
    assert "password" not in body["user"]
    assert "hashed_password" not in body["user"]

    claims = tokens.verify(body["token"], purpose=SESSION_PURPOSE)
    assert claims["userId"] == body["user"]["id"]
    assert claims["username"] == "al"


def test_signup_rejects_duplicate_username_or_email(client, app):
    assert signup(client).status_code == 200

    for username, email in [("al", "new@x.com"), ("new", "al@x.com")]:
        res = signup(client, username=username, email=email)
        assert res.status_code == 400
        assert res.json() == {
            "success": False,
            "message": "User with this email or username already exists",
        }
    assert user_count(app) == 1


def test_signup_validates_body(client):
    res = client.post("/auth/signup", json={"username": "al", "email": "not-an-email", "password": "pw"})
    assert res.status_code == 400
    body = res.json()
    assert body["success"] is False
    assert body["message"] == "Invalid request body"
    assert body["errors"][0]["field"] == "email"

    res = client.post("/auth/signup", json={"username": "al", "email": "al@x.com"})
    assert res.status_code == 400
    assert res.json()["errors"][0]["field"] == "password"


def test_login_by_username_and_email(client, tokens):
    user_id = signup(client).json()["user"]["id"]

    for identifier in ("al", "al@x.com"):
        res = login(client, username=identifier)
        assert res.status_code == 200
        body = res.json()
        assert body["message"] == "Login successful"
        assert tokens.verify(body["token"])["userId"] == user_id


def test_login_with_email_as_typed_at_signup(client):
    res = signup(client, username="al", email="Al@X.COM")
    assert res.status_code == 200
    assert res.json()["user"]["email"] == "Al@x.com"

    for identifier in ("Al@X.COM", "Al@x.com"):
        assert login(client, username=identifier).status_code == 200


def test_signup_email_conflict_ignores_domain_case(client):
    signup(client, username="al", email="al@x.com")
    assert signup(client, username="bo", email="al@X.com").status_code == 400


def test_created_at_is_utc_with_offset(client):
    created_at = signup(client).json()["user"]["createdAt"]
    assert created_at.endswith("+00:00")


def test_login_rejects_bad_credentials(client):
    signup(client)
    for identifier, password in [("al", "wrong"), ("ghost", "pw"), ("al@x.com", "PW")]:
        res = login(client, username=identifier, password=password)
        assert res.status_code == 400
        assert res.json() == {"success": False, "message": "Invalid username or password"}


def test_forgot_username_emails_registered_address(client, mail_client):
    signup(client)
    res = client.post("/auth/forgot-username", json={"email": "al@x.com"})
    assert res.status_code == 200
    assert res.json() == {"success": True, "message": "Username sent to your email"}

    [mail] = mail_client.sent
    assert mail_recipient(mail) == "al@x.com"
    assert mail_text(mail) == "Your username is: al"


def test_forgot_username_unknown_email(client, mail_client):
    res = client.post("/auth/forgot-username", json={"email": "nobody@x.com"})
    assert res.status_code == 400
    assert res.json()["message"] == "No account found with this email"
    assert mail_client.sent == []


def test_forgot_password_requires_matching_pair(client, mail_client):
    signup(client)
    signup(client, username="bo", email="bo@x.com")

    res = client.post("/auth/forgot-password", json={"username": "al", "email": "bo@x.com"})
    assert res.status_code == 400
    assert res.json()["message"] == "No account found with this username and email combination"
    assert mail_client.sent == []


def test_password_reset_flow(client, mail_client):
    signup(client)
    res = client.post("/auth/forgot-password", json={"username": "al", "email": "al@x.com"})
    assert res.status_code == 200
    assert res.json() == {"success": True, "message": "Password reset instructions sent to your email"}

    [mail] = mail_client.sent
    assert "http://frontend.local:8501/reset-password?token=" in mail_text(mail)

    res = client.post("/auth/reset-password", json={"token": reset_token_from(mail), "password": "new-pw"})
    assert res.status_code == 200
    assert res.json()["success"] is True

    assert login(client, password="new-pw").status_code == 200
    assert login(client, password="pw").status_code == 400


def test_reset_token_cannot_authenticate_requests(client, mail_client):
    signup(client)
    client.post("/auth/forgot-password", json={"username": "al", "email": "al@x.com"})
    reset_token = reset_token_from(mail_client.sent[0])

    res = client.get("/api/search-history", headers=auth_header(reset_token))
    assert res.status_code == 403


def test_reset_password_rejects_session_and_bogus_tokens(client):
    session_token = signup(client).json()["token"]
    for token in (session_token, "garbage"):
        res = client.post("/auth/reset-password", json={"token": token, "password": "x"})
        assert res.status_code == 400
        assert res.json() == {"success": False, "message": "Invalid or expired reset token"}
    assert login(client).status_code == 200


def test_mail_failure_is_generic_server_error(settings, analyzer):
    from fastapi.testclient import TestClient
    from claimcheck.core.mailer import Mailer
    from claimcheck.main import create_app

    mailer = Mailer(None, settings.mail_sender, settings.frontend_url, client=FakeMailClient(fail=True))
    with TestClient(create_app(settings, analyzer=analyzer, mailer=mailer)) as client:
        signup(client)
        res = client.post("/auth/forgot-username", json={"email": "al@x.com"})
    assert res.status_code == 500
    assert res.json() == {"success": False, "message": "Server error"}
