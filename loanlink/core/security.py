"""
Firebase ID token verification.

ID tokens issued by Firebase Authentication are RS256 JWTs signed with
Google-managed keys. The public keys are published as x509 certificates
keyed by ``kid`` and rotated regularly; the endpoint's Cache-Control
header says how long a fetched set stays valid.
"""

import logging
import re
import time
from typing import Any, Dict, Optional

import httpx
from jose import jwt, JWTError, ExpiredSignatureError
from jose.exceptions import JWKError

logger = logging.getLogger(__name__)

GOOGLE_CERTS_URL = (
    "https://www.googleapis.com/robot/v1/metadata/x509/"
    "securetoken@system.gserviceaccount.com"
)
ISSUER_PREFIX = "https://securetoken.google.com/"
DEFAULT_CERTS_TTL = 3600

_MAX_AGE_RE = re.compile(r"max-age=(\d+)")


class TokenVerificationError(Exception):
    """Raised when an ID token cannot be verified"""


class FirebaseTokenVerifier:
    """Verifies Firebase ID tokens for a single project"""

    def __init__(
        self,
        project_id: str,
        http_client: Optional[httpx.AsyncClient] = None,
        certs_url: str = GOOGLE_CERTS_URL,
    ):
        self.project_id = project_id
        self.issuer = f"{ISSUER_PREFIX}{project_id}"
        self.certs_url = certs_url
        self._http = http_client or httpx.AsyncClient(timeout=10)
        self._certs: Dict[str, str] = {}
        self._certs_expire_at: float = 0

    async def _get_certificates(self) -> Dict[str, str]:
        """Fetch signing certificates, reusing them until max-age runs out"""
        if self._certs and time.time() < self._certs_expire_at:
            return self._certs

        try:
            response = await self._http.get(self.certs_url)
            response.raise_for_status()
            certs = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise TokenVerificationError(f"Failed to fetch signing certificates: {exc}") from exc

        ttl = DEFAULT_CERTS_TTL
        match = _MAX_AGE_RE.search(response.headers.get("cache-control", ""))
        if match:
            ttl = int(match.group(1))

        self._certs = certs
        self._certs_expire_at = time.time() + ttl
        logger.info(f"Refreshed {len(certs)} signing certificates (ttl {ttl}s)")
        return self._certs

    async def verify_id_token(self, token: str) -> Dict[str, Any]:
        """
        Verify signature, expiry, audience and issuer of an ID token.

        Returns the decoded claims; raises TokenVerificationError
        describing the first failed check.
        """
        try:
            header = jwt.get_unverified_header(token)
        except JWTError as exc:
            raise TokenVerificationError(f"Malformed token: {exc}") from exc

        if header.get("alg") != "RS256":
            raise TokenVerificationError(f"Unexpected signing algorithm: {header.get('alg')}")

        kid = header.get("kid")
        if not kid:
            raise TokenVerificationError("Token has no key id")

        certs = await self._get_certificates()
        certificate = certs.get(kid)
        if certificate is None:
            raise TokenVerificationError(f"No certificate found for key id {kid}")

        try:
            claims = jwt.decode(
                token,
                certificate,
                algorithms=["RS256"],
                audience=self.project_id,
                issuer=self.issuer,
            )
        except ExpiredSignatureError as exc:
            raise TokenVerificationError("Token has expired") from exc
        except (JWTError, JWKError) as exc:
            raise TokenVerificationError(f"Invalid token: {exc}") from exc

        subject = claims.get("sub")
        if not isinstance(subject, str) or not subject:
            raise TokenVerificationError("Token has no subject")

        now = time.time()
        for claim in ("iat", "auth_time"):
            value = claims.get(claim)
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise TokenVerificationError(f"Token has no valid {claim} claim")
            if value > now:
                raise TokenVerificationError(f"Token {claim} is in the future")

        return claims

    async def close(self) -> None:
        await self._http.aclose()
