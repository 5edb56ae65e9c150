from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import Optional
import logging

from loanlink.core.security import FirebaseTokenVerifier, TokenVerificationError

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

UNAUTHORIZED_MESSAGE = "Unauthorized Access!"


def get_token_verifier(request: Request) -> FirebaseTokenVerifier:
    """Get the token verifier created at startup"""
    return request.app.state.token_verifier


async def get_token_email(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    verifier: FirebaseTokenVerifier = Depends(get_token_verifier)
) -> Optional[str]:
    """Verify the bearer token and return the email it was issued for"""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"message": UNAUTHORIZED_MESSAGE},
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        claims = await verifier.verify_id_token(credentials.credentials)
    except TokenVerificationError as e:
        logger.warning(f"Rejected bearer token: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"message": UNAUTHORIZED_MESSAGE, "err": str(e)},
            headers={"WWW-Authenticate": "Bearer"},
        )

    return claims.get("email")
