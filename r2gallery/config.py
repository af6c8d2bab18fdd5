# r2gallery/config.py
import os

DEFAULT_PUBLIC_URL_PREFIX = "https://your-account-id.r2.cloudflarestorage.com/your-bucket-name/"


def _resolve_endpoint_url():
    # Explicit endpoint wins, then an R2 account id
    url = os.getenv("S3_ENDPOINT_URL") or os.getenv("R2_ENDPOINT_URL")
    if url:
        return url
    account_id = os.getenv("R2_ACCOUNT_ID")
    if account_id:
        return f"https://{account_id}.r2.cloudflarestorage.com"
    # None -> boto3 default endpoint
    return None


def _resolve_region(endpoint_url):
    # R2 expects "auto"; without a custom endpoint boto3 resolves the region itself
    region = os.getenv("AWS_REGION")
    if region:
        return region
    return "auto" if endpoint_url else None


BUCKET_NAME = os.getenv("BUCKET_NAME", "gallery")
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "s3").lower()  # "s3" | "memory"
S3_ENDPOINT_URL = _resolve_endpoint_url()
AWS_REGION = _resolve_region(S3_ENDPOINT_URL)

# Direct object URLs are PUBLIC_URL_PREFIX + key; must point at the bucket's public endpoint and end with "/"
PUBLIC_URL_PREFIX = os.getenv("PUBLIC_URL_PREFIX", DEFAULT_PUBLIC_URL_PREFIX)
GALLERY_TITLE = os.getenv("GALLERY_TITLE", "R2 Image Gallery")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
