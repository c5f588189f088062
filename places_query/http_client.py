# places_query/http_client.py
import logging
import requests
from typing import Any, Dict, Union

from .config import Settings
from .errors import OK_STATUSES, PlacesApiError

logger = logging.getLogger(__name__)


def encode_params(api_key: str, params: Dict[str, Any]) -> Dict[str, Any]:
    """Key first, booleans as the lowercase words the service expects."""
    out: Dict[str, Any] = {"key": api_key}
    for k, v in params.items():
        out[k] = ("true" if v else "false") if isinstance(v, bool) else v
    return out


class HttpClient:
    def __init__(self, settings: Settings, session: Any = None):
        self.settings = settings
        self.session = session or requests

    def get(self, path: str, params: Dict[str, Any]) -> Union[Dict[str, Any], bytes]:
        url = self.settings.base_url.rstrip("/") + path
        logger.debug("Requesting %s", path)
        resp = self.session.get(
            url,
            params=encode_params(self.settings.api_key, params),
            timeout=self.settings.timeout_sec,
        )
        resp.raise_for_status()

        content_type = resp.headers.get("Content-Type", "")
        if "json" not in content_type:
            # Photo endpoint answers with the image itself
            return resp.content

        data = resp.json()
        status = data.get("status")
        if status is not None and status not in OK_STATUSES:
            # Common: OVER_QUERY_LIMIT, REQUEST_DENIED, INVALID_REQUEST
            logger.warning("Places API %s returned status=%s", path, status)
            raise PlacesApiError(status, data.get("error_message"))
        return data
