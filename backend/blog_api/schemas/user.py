"""User Schemas - credential pairs for signup and login.

Invariants:
    - username and password are non-empty strings, compared verbatim (no strip)
    - Passwords are stored and compared in plaintext (known weakness, unchanged)
"""

from pydantic import BaseModel, ConfigDict, Field

from blog_api.core.domain_types import UserAction


class Credentials(BaseModel):
    """A username/password pair."""
    model_config = ConfigDict(extra="ignore")

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UserRequest(Credentials):
    """Body of POST /api/users: credentials plus which action to take."""
    action: UserAction = UserAction.LOGIN

    def credentials(self) -> Credentials:
        return Credentials(username=self.username, password=self.password)
