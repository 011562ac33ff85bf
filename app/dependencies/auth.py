# app/dependencies/auth.py

from jose import JWTError, jwt
from fastapi import Depends, HTTPException
from fastapi.security import OAuth2PasswordBearer

from app.config import SECRET_KEY, ALGORITHM

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/token")


def verify_token(token: str = Depends(oauth2_scheme)) -> dict:
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        raise HTTPException(status_code=401, detail="Invalid or expired token")

    if not payload.get("sub"):
        raise HTTPException(status_code=401, detail="Invalid token payload")
    return payload


def require_role(*roles: str):
    """Dependency admitting only tokens whose 'role' claim is one of ``roles``."""

    def _check(token_payload: dict = Depends(verify_token)) -> dict:
        if token_payload.get("role") not in roles:
            raise HTTPException(status_code=403, detail="Not allowed for this role")
        return token_payload

    return _check
