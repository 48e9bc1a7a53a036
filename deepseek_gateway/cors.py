from typing import Dict, Optional
from urllib.parse import urlsplit


def _host_matches_domain(origin: str, trusted_domain: str) -> bool:
    try:
        host = urlsplit(origin).hostname or ""
    except ValueError:
        # unparseable origins, e.g. an unterminated IPv6 bracket
        return False
    domain = trusted_domain.lower().lstrip(".")
    return host == domain or host.endswith("." + domain)


def get_cors_headers(
    origin: Optional[str], trusted_domain: str, strict: bool = False
) -> Dict[str, str]:
    """
    Build the CORS headers for a request's Origin.

    Local development origins (anything containing "localhost" or "127.0.0.1")
    and origins ending with `trusted_domain` are echoed back; everything else
    gets an empty Allow-Origin. The suffix test is a plain string suffix, so
    "evil-example.com" passes for "example.com" unless `strict` is set, in
    which case the origin's host must be the domain or one of its subdomains.
    """
    origin = origin or ""
    allowed_origin = ""

    if "localhost" in origin or "127.0.0.1" in origin:
        allowed_origin = origin
    elif strict:
        if trusted_domain and _host_matches_domain(origin, trusted_domain):
            allowed_origin = origin
    elif origin.endswith(trusted_domain):
        allowed_origin = origin

    return {
        "Access-Control-Allow-Origin": allowed_origin,
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Allow-Headers": "Content-Type, Authorization",
        "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    }
