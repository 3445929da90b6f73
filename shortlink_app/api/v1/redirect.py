from fastapi import APIRouter, Depends, HTTPException, status, Request
from fastapi.responses import RedirectResponse

from shortlink_app.api.v1.links import create_link
from shortlink_app.exceptions import LinkNotFoundError
from shortlink_app.schemas.link import ClickCount, LinkCreate, LinkCreated
from shortlink_app.security import require_trusted_referer
from shortlink_app.services.link_service import LinkService
from shortlink_app.dependencies import get_link_service

router = APIRouter(tags=["redirect"])


@router.post(
    "/shorten",
    response_model=LinkCreated,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_trusted_referer)]
)
def shorten_from_browser(
    link_data: LinkCreate,
    request: Request,
    link_service: LinkService = Depends(get_link_service)
):
    """Create a short link from our own front end (referrer-checked instead of API key)"""
    return create_link(link_data, link_service, request)


@router.get("/clicks/{short_code}", response_model=ClickCount)
def get_clicks(
    short_code: str,
    link_service: LinkService = Depends(get_link_service)
):
    """Current click count for a link, polled by the front end"""
    try:
        return ClickCount(clicks=link_service.get_clicks(short_code))
    except LinkNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Short URL not found"
        )


@router.get("/{short_code}")
def redirect_to_long_url(
    short_code: str,
    link_service: LinkService = Depends(get_link_service)
):
    """
    Redirect to the original URL.

    Flow:
    1. Resolve the short code (expired links count as missing)
    2. Count the click
    3. Redirect

    Best-effort counting: a link expiring between steps 1 and 2 loses the click.
    """
    try:
        long_url = link_service.get_long_url_for_redirect(short_code)
    except LinkNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Short URL not found or expired"
        )

    return RedirectResponse(url=long_url, status_code=status.HTTP_302_FOUND)
