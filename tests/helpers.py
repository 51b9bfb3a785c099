import io
import json
import time
import urllib.error

import jwt

TEST_KID = "test-key-1"
JWKS_PATH = "/.well-known/jwks.json"


def make_token(private_key, kid=TEST_KID, **claims):
    now = int(time.time())
    payload = {"sub": "test-user", "iat": now, "exp": now + 3600}
    payload.update(claims)
    return jwt.encode(payload, private_key, algorithm="RS256", headers={"kid": kid})


def jwks_urlopen(key_set, requests):
    """Stand-in for urllib.request.urlopen that serves ``key_set``."""

    def urlopen(request, timeout=None, context=None):
        requests.append(request.full_url)
        if request.full_url.endswith(JWKS_PATH):
            return io.BytesIO(json.dumps(key_set).encode("utf-8"))
        raise urllib.error.URLError("connection refused")

    return urlopen


def unreachable_urlopen(request, timeout=None, context=None):
    raise urllib.error.URLError("connection refused")
