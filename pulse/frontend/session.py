"""
Client-side user session.

Created when login or verification succeeds, cleared on logout. The server
never sees this object; every request carries the email explicitly.
"""

from dataclasses import dataclass
from typing import Any, Mapping, MutableMapping, Optional

SESSION_KEY = "pulse_user"
ANONYMOUS = "Anonymous"


@dataclass
class UserSession:
    name: Optional[str] = None
    email: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return bool(self.email)

    def start(self, name: Optional[str], email: str) -> None:
        if not email or not email.strip():
            raise ValueError("A session requires an email")
        self.name = (name or "").strip() or "User"
        self.email = email.strip().lower()

    def end(self) -> None:
        self.name = None
        self.email = None

    def owns(self, review: Mapping[str, Any]) -> bool:
        if review.get("ownedByCurrentUser"):
            return True
        author = (review.get("studentEmail") or "").lower()
        return self.is_active and author == self.email

    def can_like(self, review: Mapping[str, Any]) -> bool:
        return (
            self.is_active
            and not review.get("likedByCurrentUser")
            and not self.owns(review)
        )

    # ---- persistence in a key/value store (e.g. st.session_state) ----

    def save(self, store: MutableMapping[str, Any]) -> None:
        if self.is_active:
            store[SESSION_KEY] = {"name": self.name, "email": self.email}
        else:
            store.pop(SESSION_KEY, None)

    @classmethod
    def load(cls, store: Mapping[str, Any]) -> "UserSession":
        data = store.get(SESSION_KEY)
        session = cls()
        if isinstance(data, Mapping) and data.get("email"):
            session.start(data.get("name"), data["email"])
        return session


def display_author(review: Mapping[str, Any]) -> str:
    """Reviewer name shown on a card; email is never displayed."""
    name = (review.get("studentName") or "").strip()
    return name or ANONYMOUS
