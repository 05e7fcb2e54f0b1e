"""FastAPI application entry point for the HR admin rules engine.

Stateless JSON surface over the statutory calculators. The dashboard
owns all employee data and persistence; this service only computes.
"""

import logging

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hradmin.api.benefits import router as benefits_router
from hradmin.api.compliance import router as compliance_router
from hradmin.api.dependencies import get_rule_repository
from hradmin.api.payroll import router as payroll_router
from hradmin.api.rules import router as rules_router
from hradmin.api.saudization import router as saudization_router
from hradmin.config.settings import get_settings

APP_VERSION = "0.1.0"

settings = get_settings()

_LOG_NAME_TO_LEVEL: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# --- Structured logging ---
structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer() if settings.ENVIRONMENT == "dev"
        else structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        _LOG_NAME_TO_LEVEL[settings.LOG_LEVEL.value],
    ),
    context_class=dict,
    logger_factory=structlog.PrintLoggerFactory(),
    cache_logger_on_first_use=True,
)
logging.basicConfig(level=_LOG_NAME_TO_LEVEL[settings.LOG_LEVEL.value])

logger: structlog.stdlib.BoundLogger = structlog.get_logger()

# --- FastAPI app ---
app = FastAPI(
    title="HR Admin Rules API",
    description=(
        "Saudi labor-law calculations: EOSB, GOSI, Nitaqat, leave, payroll."
    ),
    version=APP_VERSION,
)

# --- CORS middleware ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.ENVIRONMENT == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Routers ---
app.include_router(rules_router)
app.include_router(benefits_router)
app.include_router(saudization_router)
app.include_router(payroll_router)
app.include_router(compliance_router)


# --- Infrastructure Endpoints (global) ---


@app.get("/health")
async def health_check() -> dict:
    """Liveness probe; also confirms the rule table loads."""
    checks: dict[str, bool] = {"api": True}
    loaded = get_rule_repository().list_rules()
    checks["rules"] = len(loaded) > 0

    all_ok = all(checks.values())
    if not all_ok:
        logger.warning("health_degraded", checks=checks)

    return {
        "status": "ok" if all_ok else "degraded",
        "version": APP_VERSION,
        "environment": settings.ENVIRONMENT.value,
        "checks": checks,
    }


@app.get("/api/version")
async def get_version() -> dict[str, str]:
    """Return application name, version, and environment."""
    return {
        "name": "HR Admin Rules",
        "version": APP_VERSION,
        "environment": settings.ENVIRONMENT.value,
    }
