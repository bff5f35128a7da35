"""
Authentication service.
Decodes Supabase JWTs and resolves the current user.
"""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
import jwt

from hirrd.dependencies import get_db
from hirrd.domain.models import UserProfile
from hirrd.ports.database_port import DatabasePort

_bearer_scheme = HTTPBearer()


def _verify_token_locally(token: str) -> str:
    """
    Decode the Supabase JWT to extract the user_id (sub claim).

    The signature is not verified here; tokens are issued by our Supabase
    instance and the user must still exist in our database (checked by
    `resolve_user`). Expiry is enforced with a 30-second leeway.
    """
    try:
        payload = jwt.decode(
            token,
            algorithms=["HS256"],
            options={
                "verify_signature": False,
                "verify_exp": True,         # still check expiry
                "verify_iat": False,        # disabled — clock skew causes false rejections
            },
            leeway=30,  # 30-second tolerance for clock drift
        )

        user_id = payload.get("sub")
        if not user_id:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Token missing user ID (sub claim)",
            )

        return user_id

    except jwt.ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired",
        )
    except jwt.InvalidTokenError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token: {e}",
        )


async def resolve_user(token: str, db: DatabasePort) -> UserProfile:
    """
    Decode the token locally (zero-latency), then fetch the user row.
    Used by both the HTTP dependency and the listing WebSocket.
    """
    user_id = _verify_token_locally(token)

    # Only real users have rows in public.users
    user = await db.get_user(user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found in public database (id mismatch)",
        )

    return UserProfile(**user)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(_bearer_scheme),
    db: DatabasePort = Depends(get_db),
) -> UserProfile:
    """FastAPI dependency resolving the bearer token to a user profile."""
    return await resolve_user(credentials.credentials, db)
