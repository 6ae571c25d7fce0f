# server/main.py

import logging
import time
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from server.api import auth, health, leadership_values, pdf_email, submissions
from server.config import Settings, load_settings
from server.core.tokens import TokenService
from server.database import build_engine, build_session_factory, init_db
from server.errors import install_error_handlers


logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if settings.uses_insecure_secret:
        if settings.is_production:
            raise RuntimeError("JWT_SECRET must be set to a strong value in production (not default).")
        logger.warning("JWT_SECRET is not set; using the insecure default secret (ENV=%s)", settings.env)

    engine = build_engine(settings.database_url, timeout=settings.db_timeout)
    init_db(engine)

    app = FastAPI(title="Leadership Values")
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.token_service = TokenService(settings.jwt_secret)
    app.state.started_at = time.monotonic()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_error_handlers(app)

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(leadership_values.router)
    app.include_router(submissions.router)
    app.include_router(pdf_email.router)

    logger.info("Leadership Values API ready (ENV=%s)", settings.env)
    return app
