import platform

import requests
from pydantic import BaseModel
from requests.exceptions import RequestException

from util import log
from util.config import config
from util.error_codes import URL_PROBE_FAILED
from util.errors import ExternalServiceError

PLATFORM = f"{platform.python_implementation()}/{platform.python_version()}"
USER_AGENT = f"Mozilla/5.0 (compatible; SponsorDirectory/1.0; {PLATFORM})"
DEFAULT_HEADERS = {"User-Agent": USER_AGENT}
SUPPORTED_SCHEMES = ("http://", "https://")
DEFAULT_SCHEME = "https://"


class UrlProbeResult(BaseModel):
    reachable: bool
    normalized_url: str


def normalize_url(url: str) -> str:
    if url.startswith(SUPPORTED_SCHEMES):
        return url
    return f"{DEFAULT_SCHEME}{url}"


class UrlReachabilityChecker:
    """
    Checks whether a URL points to a live resource using a single HEAD request.

    Redirects are not followed, so only a direct 200 counts as reachable. Transport failures
    (malformed URL, DNS, refused connections, timeouts) are raised as ExternalServiceError
    and never reported as unreachable.
    """

    __timeout_s: int

    def __init__(self, timeout_s: int | None = None):
        self.__timeout_s = timeout_s or config.web_timeout_s

    def probe(self, url: str) -> UrlProbeResult:
        normalized_url = normalize_url(url)
        log.t(f"Probing '{normalized_url}'")
        try:
            response = requests.head(
                normalized_url,
                headers = DEFAULT_HEADERS,
                allow_redirects = False,
                timeout = self.__timeout_s,
            )
        except (RequestException, ValueError) as e:
            raise ExternalServiceError(f"Could not probe '{normalized_url}'", URL_PROBE_FAILED) from e
        log.t(f"  Probe of '{normalized_url}' returned {response.status_code}")
        return UrlProbeResult(reachable = response.status_code == 200, normalized_url = normalized_url)
