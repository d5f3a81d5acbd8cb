import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.api.v1.api import router as api_v1_router
from app.api.v1.routers.pages import render_page, wants_html
from app.services.firebase import health_check as firebase_health
from app.services.payments.factory import get_payments_provider

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# reachable while the maintenance page is up
MAINTENANCE_EXEMPT_PATHS = {"/maintenance", "/health"}


def create_app() -> FastAPI:
    app = FastAPI(title="Tickify API", version="0.1.0")

    # set up CORS so the frontend can talk to us
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def maintenance_mode(request: Request, call_next):
        # only page navigations are blocked, the payment API keeps serving
        if (
            settings.MAINTENANCE_MODE
            and request.method == "GET"
            and request.url.path not in MAINTENANCE_EXEMPT_PATHS
            and wants_html(request)
        ):
            return render_page(request, "maintenance.html", status_code=503)
        return await call_next(request)

    @app.exception_handler(StarletteHTTPException)
    async def not_found_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404 and wants_html(request):
            return render_page(request, "not_found.html", status_code=404)
        return await http_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def server_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        if wants_html(request):
            return render_page(request, "server_error.html", status_code=500)
        return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})

    app.include_router(api_v1_router)

    @app.get("/health")
    def health():
        return {
            "status": "ok",
            "env": settings.APP_ENV,
            "maintenance": settings.MAINTENANCE_MODE,
            "integrations": {
                "payments": get_payments_provider().health_check(),
                "firebase": firebase_health(),
            },
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.APP_HOST, port=settings.APP_PORT)
