# claimcheck/main.py

import logging
from contextlib import asynccontextmanager
from datetime import timedelta
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from claimcheck.api import analyze, auth, history
from claimcheck.config import Settings
from claimcheck.core.analyzer import Analyzer
from claimcheck.core.mailer import Mailer
from claimcheck.core.security import PasswordHasher, TokenIssuer
from claimcheck.database import init_db, make_engine, make_session_factory
from claimcheck.errors import AuthenticationError


logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def create_app(settings: Settings | None = None, *, analyzer: Analyzer | None = None, mailer: Mailer | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    settings.validate()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.settings = settings
        app.state.analyzer = analyzer or Analyzer.from_settings(settings)
        engine = None

        if settings.enable_accounts:
            engine = make_engine(settings.database_url)
            init_db(engine)
            app.state.engine = engine
            app.state.session_factory = make_session_factory(engine)
            app.state.passwords = PasswordHasher(rounds=settings.bcrypt_rounds)
            app.state.tokens = TokenIssuer(
                settings.jwt_secret_key,
                algorithm=settings.jwt_algorithm,
                session_ttl=timedelta(days=settings.session_token_expire_days),
                reset_ttl=timedelta(minutes=settings.reset_token_expire_minutes),
            )
            app.state.mailer = mailer or Mailer(
                settings.sendgrid_api_key,
                settings.mail_sender,
                settings.frontend_url,
            )
            logger.info("Database ready at %s", engine.url.render_as_string(hide_password=True))

        logger.info("Claim check API started (accounts=%s)", settings.enable_accounts)
        try:
            yield
        finally:
            if engine is not None:
                engine.dispose()
            logger.info("Claim check API stopped")

    app = FastAPI(title="Claim Check API", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(AuthenticationError)
    async def authentication_error_handler(request: Request, exc: AuthenticationError):
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = [
            {"field": ".".join(str(part) for part in err.get("loc", ())[1:]), "message": err.get("msg", "")}
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=400,
            content={"success": False, "message": "Invalid request body", "errors": errors},
        )

    if settings.enable_accounts:
        app.include_router(auth.router)
        app.include_router(history.router)
    app.include_router(analyze.router)

    @app.get("/")
    def root():
        return {"message": "Claim check API is running", "accountsEnabled": settings.enable_accounts}

    return app


def run():
    import uvicorn

    settings = Settings.from_env()
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
