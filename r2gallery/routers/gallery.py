# r2gallery/routers/gallery.py
from typing import List, Optional
import logging

from fastapi import APIRouter, Depends, Query
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse, JSONResponse

from r2gallery import config
from r2gallery.page import render_page
from r2gallery.storage import ObjectStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["gallery"])


@router.get("/list.json", response_model=List[str])
async def list_json(
    sort: Optional[str] = Query(None),
    cache_bust: Optional[str] = Query(None, alias="_"),
    store: ObjectStore = Depends(get_store),
):
    # sort is accepted for client compatibility; the listing keeps backend order
    logger.debug("list.json sort=%s _=%s", sort, cache_bust)
    entries = await run_in_threadpool(store.list_objects)
    return JSONResponse([e.key for e in entries])


# Registered last: everything that is not /list.json gets the gallery page
@router.get("/{full_path:path}", response_class=HTMLResponse)
def gallery_page(full_path: str):
    return HTMLResponse(render_page(config.PUBLIC_URL_PREFIX, config.GALLERY_TITLE))
