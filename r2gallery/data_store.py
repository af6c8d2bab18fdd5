# r2gallery/data_store.py
from datetime import datetime, timedelta, timezone

from r2gallery.models import ObjectEntry


def demo_objects(count: int = 120):
    """Sample bucket contents for STORAGE_BACKEND=memory."""
    base = datetime.now(tz=timezone.utc) - timedelta(days=2)
    objects = []
    for i in range(1, count + 1):
        objects.append(ObjectEntry(
            key=f"{['photos', 'screenshots', 'misc'][i % 3]}/img_{i:04d}.{['jpg', 'png', 'webp'][i % 3]}",
            size=1024 * (50 + i),
            last_modified=base + timedelta(minutes=i * 7),
        ))
    # S3-style listing order: lexicographic by key
    objects.sort(key=lambda o: o.key)
    return objects
