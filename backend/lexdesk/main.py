import logging
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from lexdesk.config import settings
from lexdesk.middleware.logging_config import configure_logging

configure_logging(settings.log_level, settings.log_format)

from lexdesk.api.confirm import router as confirm_router  # noqa: E402
from lexdesk.api.dashboard import router as dashboard_router  # noqa: E402
from lexdesk.api.metrics import router as metrics_router  # noqa: E402
from lexdesk.auth.route_guard import UnauthorizedRouteError  # noqa: E402
from lexdesk.confirm.sessions import ConfirmSessions  # noqa: E402
from lexdesk.schemas.schemas import UnauthorizedView  # noqa: E402

logger = logging.getLogger("lexdesk")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: one confirm arbiter per signed-in user, created on demand
    app.state.confirm_sessions = ConfirmSessions()
    yield
    # Shutdown: settle anything still waiting
    app.state.confirm_sessions.close_all()


app = FastAPI(
    title="Lexdesk",
    description="Legal office dashboard: route permissions and confirmation dialogs",
    version="0.1.0",
    lifespan=lifespan,
)

# ── CORS ─────────────────────────────────────────────────────────────────────
origins = [o.strip() for o in settings.allowed_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE"],
    allow_headers=["Content-Type", "Authorization", "X-Request-ID"],
)

# ── Security headers middleware ──────────────────────────────────────────────
from lexdesk.middleware.security_headers import SecurityHeadersMiddleware  # noqa: E402

app.add_middleware(SecurityHeadersMiddleware)

# ── Request context middleware (request ID + timing) ─────────────────────────
from lexdesk.middleware.request_context import RequestContextMiddleware  # noqa: E402

app.add_middleware(RequestContextMiddleware)

# ── Prometheus metrics middleware ────────────────────────────────────────────
from lexdesk.middleware.metrics import PrometheusMiddleware  # noqa: E402

app.add_middleware(PrometheusMiddleware)


@app.exception_handler(UnauthorizedRouteError)
async def unauthorized_route_handler(request: Request, exc: UnauthorizedRouteError):
    """Standard unauthorized view in place of the protected page."""
    return JSONResponse(
        status_code=403,
        content=UnauthorizedView(path=exc.path).model_dump(),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Return detailed error info in development mode so 500s are debuggable."""
    tb = traceback.format_exc()
    logger.error(
        "Unhandled %s on %s %s: %s\n%s",
        type(exc).__name__, request.method, request.url.path, exc, tb,
    )
    detail = f"{type(exc).__name__}: {exc}"
    if settings.environment == "development":
        return JSONResponse(
            status_code=500,
            content={"detail": detail, "traceback": tb.splitlines()[-5:]},
        )
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


# Register API routers
app.include_router(dashboard_router)
app.include_router(confirm_router)
app.include_router(metrics_router)


@app.get("/api/health")
async def health_check():
    sessions: ConfirmSessions = app.state.confirm_sessions
    return {
        "status": "healthy",
        "environment": settings.environment,
        "components": {
            "confirm_sessions": {"status": "ready", "active": len(sessions)},
        },
    }
