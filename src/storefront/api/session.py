"""Session-backed identity for API requests.

The session cookie only ever carries the user id. Routes receive that id
through ``current_user_id`` and pass it to the domain explicitly.
"""

from fastapi import HTTPException, Request

SESSION_USER_KEY = "user_id"


def login_user(request: Request, user_id: str) -> None:
    request.session[SESSION_USER_KEY] = str(user_id)


def logout_user(request: Request) -> None:
    request.session.clear()


def current_user_id(request: Request) -> str:
    user_id = request.session.get(SESSION_USER_KEY)
    if not user_id:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user_id
