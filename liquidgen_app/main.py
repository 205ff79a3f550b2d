import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from liquidgen_app.api.routes import router as api_router
from liquidgen_app.config import settings
from liquidgen_app.utils.json_safety import SafeJSONResponse

# ── Logging ──
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="LiquidGen Yield & Buyback Calculator",
        default_response_class=SafeJSONResponse,
    )

    # ── CORS (the landing page is served from its own origin) ──
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── API routes ──
    app.include_router(api_router, prefix="/api")

    logger.info("LiquidGen API ready (cors_origins=%s)", settings.cors_origins)
    return app


app = create_app()


def run():
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
