# r2gallery/page.py
from functools import lru_cache
import html
import json
import os
import re

CLIENT_DIR = os.path.join(os.path.dirname(__file__), "client")
PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")

BATCH_SIZE = 50
LAZY_MARGIN_PX = 200
SCROLL_THRESHOLD_PX = 150
POLL_INTERVAL_MS = 300000  # 5 minutes


def _read_client_file(name: str) -> str:
    with open(os.path.join(CLIENT_DIR, name), "r", encoding="utf-8") as f:
        return f.read()


def client_config(public_url_prefix: str) -> dict:
    return {
        "publicUrlPrefix": public_url_prefix,
        "batchSize": BATCH_SIZE,
        "lazyMarginPx": LAZY_MARGIN_PX,
        "scrollThresholdPx": SCROLL_THRESHOLD_PX,
        "pollIntervalMs": POLL_INTERVAL_MS,
    }


def _script_literal(value) -> str:
    # JSON is a valid JS literal; "</" must not terminate the inline <script>
    return json.dumps(value).replace("</", "<\\/")


@lru_cache(maxsize=8)
def render_page(public_url_prefix: str, title: str) -> str:
    """
    Build the gallery document with the client script inlined.
    Cached so every non-listing path gets the same body.
    """
    values = {
        "TITLE": html.escape(title),
        "CONFIG": _script_literal(client_config(public_url_prefix)),
        "SCRIPT": _read_client_file("gallery.js"),
    }
    # single pass, inserted values are never rescanned
    return PLACEHOLDER.sub(lambda m: values[m.group(1)], _read_client_file("gallery.html"))
