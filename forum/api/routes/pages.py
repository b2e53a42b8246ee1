"""Page Routes — server-rendered view stubs.

Invariants:
    - Every page is a plain GET with no data dependencies
    - PAGES is the complete list of page paths; each maps to one template

Design Decisions:
    - Templates resolved from settings.templates_dir at import time
    - Paths keep their historical spelling (/Loginpage, /cartjs) for existing links
"""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from forum.config import get_settings

router = APIRouter(tags=["pages"], include_in_schema=False)
templates = Jinja2Templates(directory=get_settings().templates_dir)

PAGES: dict[str, str] = {
    "/": "index",
    "/homepagejs": "index",
    "/dashboardjs": "dashboard",
    "/cartjs": "cart",
    "/contactusjs": "contactus",
    "/enrolledcoursesjs": "enrolledcourses",
    "/Loginpage": "login",
    "/Signuppage": "signup",
    "/discussion": "discussion",
}


def _page_endpoint(template: str):
    async def render(request: Request):
        return templates.TemplateResponse(
            request, f"{template}.html", {"page": template},
        )
    render.__name__ = f"page_{template}"
    return render


for _path, _template in PAGES.items():
    router.add_api_route(
        _path, _page_endpoint(_template),
        methods=["GET"], response_class=HTMLResponse,
        name=f"page:{_path.strip('/') or 'root'}",
    )
