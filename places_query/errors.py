# places_query/errors.py
from typing import Optional

# Body statuses that carry a usable (possibly empty) result
OK_STATUSES = ("OK", "ZERO_RESULTS")


class PlacesApiError(RuntimeError):
    """The service answered HTTP 200 with a failing `status` field."""

    def __init__(self, status: Optional[str], message: Optional[str] = None):
        self.status = status
        self.message = message
        super().__init__(f"Places API error: status={status}, msg={message}")
