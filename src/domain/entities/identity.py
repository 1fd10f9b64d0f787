"""
Identity

Claims of the authenticated caller, derived from a verified token.
Never persisted.
"""

from pydantic import BaseModel


class Identity(BaseModel):
    """Authenticated caller: user id, email and role"""

    user_id: str
    email: str
    role: str
