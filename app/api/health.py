import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.session import get_db

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
def health(db: Session = Depends(get_db)):
    # Storage is the only dependency worth probing
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error("health check failed: %s", exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="database unavailable")
    return {"status": "ok", "database": "ok"}


@router.get("/actuator/info")
def actuator_info(request: Request):
    settings = request.app.state.settings
    return {
        "name": settings.SERVICE_NAME,
        "version": request.app.version,
        "env": settings.APP_ENV,
    }


@router.get("/actuator/ping")
def actuator_ping():
    # Liveness only: answers without touching storage
    return Response(status_code=status.HTTP_200_OK)
