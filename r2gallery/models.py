# r2gallery/models.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


# ----- Core: one stored object -----
class ObjectEntry(BaseModel):
    # path-like identifier, the only field surfaced to clients
    key: str

    # exposed by the backend listing call but not part of /list.json
    size: Optional[int] = None
    last_modified: Optional[datetime] = None
