"""Site user domain entity.

Pure business data, no framework dependencies. Role membership is kept by the
user repository, not on the entity.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class User:
    """User account belonging to one site.

    Attributes:
        id: Unique user identifier.
        site_id: Owning site. Assigned by the seeder before the user is created.
        email: Email address.
        user_name: Login name.
        display_name: Name shown in the UI.
        password_hash: Bcrypt hash (never plaintext).
        normalized_email: Upper-cased email for lookups.
        normalized_user_name: Upper-cased user name for lookups.
        email_confirmed: Whether the email has been confirmed.
        must_change_password: Force a password change at next login.
        account_approved: Whether the account may sign in.
        created_at: When the user was created.
    """

    id: UUID
    site_id: UUID | None
    email: str
    user_name: str
    display_name: str
    password_hash: str
    normalized_email: str = ""
    normalized_user_name: str = ""
    email_confirmed: bool = False
    must_change_password: bool = False
    account_approved: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate identity fields and derive normalized values.

        Raises:
            ValueError: If email or user_name is missing or malformed.
        """
        if not self.email or "@" not in self.email:
            raise ValueError("User email must be a valid address")

        if not self.user_name:
            raise ValueError("User name cannot be empty")

        if not self.normalized_email:
            self.normalized_email = self.email.upper()

        if not self.normalized_user_name:
            self.normalized_user_name = self.user_name.upper()

    def __repr__(self) -> str:
        """Return repr for debugging (password hash omitted).

        Returns:
            str: String representation.
        """
        return (
            f"User(id={self.id}, site_id={self.site_id}, "
            f"user_name={self.user_name!r}, email={self.email!r})"
        )
