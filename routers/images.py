import random
from fastapi import APIRouter, HTTPException, Request, status
from typing import List
from dependencies import get_db
from routers.crud import REST_PREFIX
from schemas.images import Image
from store import RecordNotFound
from logging_config import get_logger

logger = get_logger(__name__)

images_router = APIRouter(prefix=f"{REST_PREFIX}/images", tags=["images"])


@images_router.get("/", response_model=List[Image])
async def list_images(request: Request):
    return get_db(request).collection("images").all()


@images_router.get("/random", response_model=Image)
async def random_image(request: Request):
    images = get_db(request).collection("images").all()
    if not images:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No images available")
    return random.choice(images)


@images_router.get("/{image_id}", response_model=Image)
async def get_image(image_id: int, request: Request):
    try:
        return get_db(request).collection("images").get(image_id)
    except RecordNotFound:
        logger.warning(f"Image {image_id} not found")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Image not found")
