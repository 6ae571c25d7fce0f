# server/api/health.py

import logging
import time
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from server.storage import Storage, get_storage


logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/")
def ping():
    return {"status": "ok", "timestamp": _timestamp()}


@router.get("/api/health")
def health(request: Request, storage: Storage = Depends(get_storage)):
    """
    Reports process uptime and whether the database answers a trivial query.
    """
    uptime = time.monotonic() - request.app.state.started_at
    try:
        storage.ping()
    except Exception:
        logger.exception("Health check failed")
        return JSONResponse(
            status_code=503,
            content={
                "status": "unhealthy",
                "timestamp": _timestamp(),
                "uptime": uptime,
                "database": "disconnected",
            },
        )
    return {
        "status": "healthy",
        "timestamp": _timestamp(),
        "uptime": uptime,
        "database": "connected",
    }
