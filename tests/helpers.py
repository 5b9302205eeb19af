from app.core.security import create_access_token
from app.db.models.user import User


def auth_headers(user: User) -> dict:
    """Bearer header for ``user``, as issued by /auth/login."""
    return {"Authorization": f"Bearer {create_access_token({'sub': user.email})}"}
