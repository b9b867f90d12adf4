#gloverse_hq/api/deps.py

from fastapi import HTTPException, Request, status
from gloverse_hq.core.session import has_session

async def require_session(request: Request) -> bool:
    """Reject API calls that do not carry a valid operator session"""
    if not has_session(request):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated"
        )
    return True
