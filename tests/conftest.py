import pytest
from fastapi.testclient import TestClient
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from claimcheck.config import Settings
from claimcheck.core.analyzer import Analyzer
from claimcheck.core.mailer import Mailer
from claimcheck.core.security import PasswordHasher, TokenIssuer
from claimcheck.database import init_db, make_engine, make_session_factory
from claimcheck.main import create_app
from tests.helpers import FAKE_ANALYSIS, FakeMailClient


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite://",
        jwt_secret_key="test-secret",
        bcrypt_rounds=4,
        mail_sender="noreply@claimcheck.dev",
        frontend_url="http://frontend.local:8501/",
    )


@pytest.fixture
def mail_client():
    return FakeMailClient()


@pytest.fixture
def mailer(settings, mail_client):
    return Mailer(None, settings.mail_sender, settings.frontend_url, client=mail_client)


@pytest.fixture
def analyzer():
    return Analyzer(FakeListChatModel(responses=[FAKE_ANALYSIS]))


@pytest.fixture
def app(settings, analyzer, mailer):
    return create_app(settings, analyzer=analyzer, mailer=mailer)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def tokens(app, client):
    return app.state.tokens


@pytest.fixture
def passwords():
    return PasswordHasher(rounds=4)


@pytest.fixture
def db():
    engine = make_engine("sqlite://")
    init_db(engine)
    session = make_session_factory(engine)()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def issuer():
    return TokenIssuer("unit-secret")

