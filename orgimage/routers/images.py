# orgimage/routers/images.py
# Responsibility: JSON endpoints exposing srcset generation for Siren image entities.

from typing import Any, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from orgimage.services.image_service import ImageSrcsetService, get_image_service

router = APIRouter(
    prefix="/images",
    tags=["Images"]
)

# --- Pydantic Models ---
class DefaultLinkRequest(BaseModel):
    # Raw Siren JSON; validated by the service so bad entities degrade to null
    image: Optional[Any] = None
    image_class: Optional[str] = None

class SrcsetRequest(DefaultLinkRequest):
    force_image_refresh: bool = False

class SrcsetResponse(BaseModel):
    srcset: Optional[str] = None

class PictureSourceItem(BaseModel):
    type: str
    srcset: str

class PictureResponse(BaseModel):
    sources: Optional[List[PictureSourceItem]] = None

class DefaultLinkResponse(BaseModel):
    href: Optional[str] = None

# --- Endpoints ---
@router.post("/srcset", response_model=SrcsetResponse)
def image_srcset_endpoint(
    req: SrcsetRequest,
    service: ImageSrcsetService = Depends(get_image_service)
):
    """
    Returns the `srcset` for an <img> tag, built from the preferred media type.
    """
    try:
        image = service.load_image(req.image)
        srcset = service.get_image_srcset(image, req.image_class, req.force_image_refresh)
    except Exception as e:
        print(f"[Images] Srcset generation failed: {e}")
        raise HTTPException(status_code=500, detail="Internal server error during srcset generation")

    return SrcsetResponse(srcset=srcset)

@router.post("/picture", response_model=PictureResponse)
def picture_srcsets_endpoint(
    req: SrcsetRequest,
    service: ImageSrcsetService = Depends(get_image_service)
):
    """
    Returns one `type`/`srcset` pair per media type, for <picture><source> tags.
    """
    try:
        image = service.load_image(req.image)
        sources = service.get_picture_srcsets(image, req.image_class, req.force_image_refresh)
    except Exception as e:
        print(f"[Images] Picture srcset generation failed: {e}")
        raise HTTPException(status_code=500, detail="Internal server error during srcset generation")

    if sources is None:
        return PictureResponse()
    return PictureResponse(sources=[PictureSourceItem(**source) for source in sources])

@router.post("/default-link", response_model=DefaultLinkResponse)
def default_link_endpoint(
    req: DefaultLinkRequest,
    service: ImageSrcsetService = Depends(get_image_service)
):
    """
    Returns the URL of the largest available image variant.
    """
    try:
        image = service.load_image(req.image)
        href = service.get_default_image_link(image, req.image_class)
    except Exception as e:
        print(f"[Images] Default link lookup failed: {e}")
        raise HTTPException(status_code=500, detail="Internal server error during link lookup")

    return DefaultLinkResponse(href=href)
