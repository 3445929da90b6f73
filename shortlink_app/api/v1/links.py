import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status

from shortlink_app.config import settings
from shortlink_app.exceptions import (
    InvalidExpirationError,
    InvalidTargetError,
    KeyspaceExhaustedError,
    LinkNotFoundError,
    NameConflictError,
)
from shortlink_app.schemas.link import LinkCreate, LinkCreated, LinkInfo
from shortlink_app.security import require_api_key
from shortlink_app.services.link_service import LinkService
from shortlink_app.dependencies import get_link_service


logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/urls",
    tags=["urls"],
    dependencies=[Depends(require_api_key)]
)


def public_base_url(request: Request) -> str:
    return settings.base_url or str(request.base_url)


def create_link(link_data: LinkCreate, link_service: LinkService, request: Request) -> LinkCreated:
    """Create a link and map registry errors to HTTP errors. Shared by the API and the browser route."""
    try:
        short_code, record = link_service.create_short_link(
            link_data.long_url,
            custom_name=link_data.custom_name,
            expires_in=link_data.expires_in
        )
    except (InvalidExpirationError, InvalidTargetError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NameConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except KeyspaceExhaustedError:
        logger.error("Short code keyspace exhausted, refusing to create link")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not allocate a short code"
        )

    return LinkCreated(
        short_code=short_code,
        short_url=LinkService.build_short_url(short_code, public_base_url(request)),
        long_url=record.long_url,
        expires_at=record.expires_at,
        custom_name=record.custom_name,
    )


@router.post("/", response_model=LinkCreated, status_code=status.HTTP_201_CREATED)
def create_short_url(
    link_data: LinkCreate,
    request: Request,
    link_service: LinkService = Depends(get_link_service)
):
    """Create a new short link"""
    return create_link(link_data, link_service, request)


@router.get("/", response_model=List[LinkInfo])
def list_links(link_service: LinkService = Depends(get_link_service)):
    """List every link that has not expired yet, oldest first"""
    return [
        LinkInfo(short_code=short_code, **record.model_dump())
        for short_code, record in link_service.list_active_links()
    ]


@router.get("/{short_code}", response_model=LinkInfo)
def get_url_info(
    short_code: str,
    link_service: LinkService = Depends(get_link_service)
):
    """Get information about a short link (does not count a click)"""
    try:
        record = link_service.get_link_info(short_code)
    except LinkNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Short URL not found"
        )
    return LinkInfo(short_code=short_code, **record.model_dump())
