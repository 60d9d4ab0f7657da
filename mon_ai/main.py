from contextlib import asynccontextmanager
from typing import Optional
import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from langfuse import Langfuse
from mon_ai.core.config import Settings, settings as default_settings
from mon_ai.core.default_vocabulary import DEFAULT_VOCABULARY
from mon_ai.core.handlers import register_exception_handlers
from mon_ai.core.logging import configure_logging
from mon_ai.crud.vocabulary import seed_vocabulary
from mon_ai.dependencies.database import Database
from mon_ai.services.translator import TranslationGateway
from mon_ai.routers import history, system, translation, vocabulary


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = Database(settings.DATABASE_URL)
        await database.create_all()
        async with database.async_session_maker() as session:
            await seed_vocabulary(session, DEFAULT_VOCABULARY)
        logging.info(f"Default vocabulary ensured ({len(DEFAULT_VOCABULARY)} entries)")

        app.state.database = database
        if not app.state.translator.configured:
            logging.warning("GEMINI_API_KEY is not set; /api/translate is disabled")
        try:
            yield
        finally:
            if app.state.langfuse is not None:
                app.state.langfuse.flush()
            await database.dispose()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.translator = TranslationGateway(
        api_key=settings.GEMINI_API_KEY,
        model_name=settings.TRANSLATION_MODEL,
        base_url=settings.TRANSLATION_BASE_URL,
    )

    # Initialize Langfuse
    app.state.langfuse = None
    if settings.tracing_configured:
        app.state.langfuse = Langfuse(
            public_key=settings.LANGFUSE_PUBLIC_KEY,
            secret_key=settings.LANGFUSE_SECRET_KEY,
            host=settings.LANGFUSE_HOST,
        )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type"],
    )

    @app.middleware("http")
    async def log_request_info(request: Request, call_next):
        logging.info(f"Incoming request: {request.method} {request.url.path}")
        return await call_next(request)

    register_exception_handlers(app)

    app.include_router(vocabulary.router)
    app.include_router(history.router)
    app.include_router(translation.router)
    app.include_router(system.router)

    return app


app = create_app()
