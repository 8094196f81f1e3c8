import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tower_bot.config import Settings, configure_logging, load_settings
from tower_bot.models import CombatRequest, NegotiateRequest
from tower_bot.strategy import decide_combat, decide_negotiation

log = logging.getLogger(__name__)


def create_app(settings: Settings) -> FastAPI:
    """Create the bot's FastAPI app for the given settings."""
    app = FastAPI(title="Kingdom Wars Bot", version=settings.version)
    app.state.settings = settings

    @app.middleware("http")
    async def log_request(request: Request, call_next):
        log.info("[KW-BOT] %s %s %s", settings.team_name, request.method, request.url.path)
        return await call_next(request)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        log.warning("rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(
            status_code=422,
            content={"error": "Invalid request", "detail": jsonable_encoder(exc.errors())},
        )

    @app.get("/healthz")
    async def health_check():
        """Health check endpoint"""
        return JSONResponse(
            status_code=200,
            content={
                "status": "OK",
            }
        )

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {"message": "Welcome to Kingdom Wars Bot"}

    @app.get("/info")
    async def info():
        """Team identification."""
        return {
            "name": settings.team_name,
            "strategy": settings.strategy,
            "version": settings.version,
        }

    @app.post("/negotiate")
    async def negotiate(req: NegotiateRequest):
        """Negotiation phase: propose alliances and coordinate attacks."""
        proposals = decide_negotiation(req)
        return JSONResponse(content=proposals)

    @app.post("/combat")
    async def combat(req: CombatRequest):
        """Combat phase: decide armor, attacks, and upgrades."""
        actions = decide_combat(req)
        return JSONResponse(content=actions)

    return app


_settings = load_settings()
configure_logging(_settings.log_level)
app = create_app(_settings)
