from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parents[3] / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

SITE_NAME = "Tickify"

router = APIRouter(tags=["pages"])


def wants_html(request: Request) -> bool:
    """browser navigation, as opposed to an API client expecting JSON."""
    return "text/html" in request.headers.get("accept", "")


def render_page(request: Request, template: str, status_code: int = 200) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        template,
        {"site_name": SITE_NAME},
        status_code=status_code,
    )


@router.get("/", response_class=HTMLResponse)
def home_page(request: Request):
    return render_page(request, "home.html")


@router.get("/404", response_class=HTMLResponse)
def not_found_page(request: Request):
    return render_page(request, "not_found.html")


@router.get("/500", response_class=HTMLResponse)
def server_error_page(request: Request):
    return render_page(request, "server_error.html")


@router.get("/maintenance", response_class=HTMLResponse)
def maintenance_page(request: Request):
    return render_page(request, "maintenance.html")
