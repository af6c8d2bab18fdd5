import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from r2gallery import config
from r2gallery.logging_config import setup_logging
from r2gallery.routers.gallery import router as gallery_router
from r2gallery.storage import StorageError

logger = logging.getLogger(__name__)

# no docs/openapi routes: every path except /list.json serves the gallery
app = FastAPI(title="R2 Image Gallery", docs_url=None, redoc_url=None, openapi_url=None)

app.include_router(gallery_router)


# --- Startup ---
def check_public_url_prefix(prefix: str) -> bool:
    # object URLs are prefix + key, so a missing "/" glues the key onto the last segment
    if not prefix.endswith("/"):
        logger.warning("PUBLIC_URL_PREFIX %r does not end with '/'; image URLs will be malformed", prefix)
        return False
    return True


@app.on_event("startup")
def on_startup():
    setup_logging(config.LOG_LEVEL)
    logger.info(
        "Serving bucket %r via %s backend, public prefix %s",
        config.BUCKET_NAME, config.STORAGE_BACKEND, config.PUBLIC_URL_PREFIX,
    )
    check_public_url_prefix(config.PUBLIC_URL_PREFIX)


# --- Errors ---
@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    # details are in the server log only
    logger.error("Listing failed for %s: %s", request.url.path, exc)
    return PlainTextResponse("Error fetching objects from storage", status_code=500)


def run():
    uvicorn.run(app, host=config.HOST, port=config.PORT)
