import ipaddress
import re
from urllib.parse import unquote, urlsplit

ALLOWED_SCHEMES = frozenset({"http", "https"})

# Characters a URL host may never contain, checked after percent-decoding.
FORBIDDEN_HOST_CHARS = frozenset(" #%/:<>?@[\\]^|\x7f")

# First http(s):// occurrence up to the next whitespace. Trailing punctuation
# stays attached to the match.
URL_IN_TEXT_RE = re.compile(r"https?://\S+")


def _is_valid_host(netloc: str, hostname: str | None) -> bool:
    if not hostname or any(ch.isspace() for ch in netloc):
        return False
    # IPv6 literals come back from urlsplit without their brackets
    if netloc.rpartition("@")[2].startswith("["):
        try:
            ipaddress.IPv6Address(hostname)
        except ValueError:
            return False
        return True
    decoded = unquote(hostname)
    return not any(
        ch in FORBIDDEN_HOST_CHARS or ord(ch) < 0x20 or ch.isspace() for ch in decoded
    )


def is_valid_url(candidate: str) -> bool:
    if not candidate or not isinstance(candidate, str):
        return False
    try:
        parsed = urlsplit(candidate.strip())
        # .port raises ValueError for out-of-range or non-numeric ports
        parsed.port
    except ValueError:
        return False
    if parsed.scheme not in ALLOWED_SCHEMES:
        return False
    return _is_valid_host(parsed.netloc, parsed.hostname)


def find_url_in_text(text: str) -> str | None:
    if not text:
        return None
    match = URL_IN_TEXT_RE.search(text)
    return match.group(0) if match else None


def extract_url(
    url: str | None = None,
    text: str | None = None,
    title: str | None = None,
) -> str | None:
    """Pick the candidate URL from share-sheet parameters.

    Priority is ``url``, then the first URL found in ``text``, then ``title``.
    Each source is validated on its own, so an invalid ``url`` falls through.
    """
    if url and is_valid_url(url):
        return url

    found = find_url_in_text(text or "")
    if found and is_valid_url(found):
        return found

    if title and is_valid_url(title):
        return title

    return None
