import secrets
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from mangashelf.core import config

security = HTTPBasic(auto_error=False)


def require_basic_auth(credentials: Optional[HTTPBasicCredentials] = Depends(security)):
    # auth is only enforced when both credentials are configured
    username, password = config.BASIC_AUTH_USERNAME, config.BASIC_AUTH_PASSWORD
    if not (username and password):
        return
    if credentials is not None:
        user_ok = secrets.compare_digest(credentials.username.encode(), username.encode())
        pass_ok = secrets.compare_digest(credentials.password.encode(), password.encode())
        if user_ok and pass_ok:
            return
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid credentials",
        headers={"WWW-Authenticate": "Basic"},
    )
