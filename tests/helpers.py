FAKE_ANALYSIS = (
    "**Summary:** The claim is contradicted by centuries of observation.\n\n"
    "- Satellite images show a curved horizon.\n"
    "- Ships disappear hull-first over the horizon.\n\n"
    "**Tip:** Check whether a claim ignores easily repeatable observations."
)


class FakeMailClient:
    """Stands in for SendGridAPIClient and keeps every message it is asked to send."""

    def __init__(self, fail=False):
        self.fail = fail
        self.sent = []

    def send(self, message):
        if self.fail:
            raise RuntimeError("mail provider unavailable")
        self.sent.append(message.get())


def mail_text(mail):
    return mail["content"][0]["value"]


def mail_recipient(mail):
    return mail["personalizations"][0]["to"][0]["email"]


def signup(client, username="al", email="al@x.com", password="pw"):
    return client.post("/auth/signup", json={"username": username, "email": email, "password": password})


def login(client, username="al", password="pw"):
    return client.post("/auth/login", json={"username": username, "password": password})


def auth_header(token):
    return {"Authorization": f"Bearer {token}"}
