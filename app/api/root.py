from fastapi import APIRouter, Request

router = APIRouter()

@router.get("/")
def root(request: Request):
    settings = request.app.state.settings
    return {
        "name": settings.SERVICE_NAME,
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
        "metrics": "/metrics" if settings.METRICS_ENABLED else None,
        "employees": f"{settings.API_PREFIX}/employees",
    }
