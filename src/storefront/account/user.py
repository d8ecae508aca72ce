"""User aggregate: a shopper's account and credentials."""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from storefront.account.events import UserRegistered
from storefront.account.passwords import hash_password, verify_password
from storefront.domain import storefront


@storefront.aggregate
class User:
    username = String(required=True, max_length=50)
    email = String(required=True, max_length=254, unique=True)
    full_name = String(required=True, max_length=100)
    phone = String(max_length=20)
    password_hash = String(required=True, max_length=255)
    registered_at = DateTime()

    @invariant.post
    def email_must_be_well_formed(self):
        email = self.email or ""
        if " " in email or email.count("@") != 1:
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

        local_part, domain_part = email.split("@", 1)
        if not local_part or "." not in domain_part or domain_part.startswith(".") or domain_part.endswith("."):
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

    @classmethod
    def register(cls, username, email, full_name, password, phone=None):
        if not password or len(password) < 6:
            raise ValidationError({"password": ["Password must be at least 6 characters"]})

        user = cls(
            username=username,
            email=email.strip().lower(),
            full_name=full_name,
            phone=phone,
            password_hash=hash_password(password),
            registered_at=datetime.now(UTC),
        )
        user.raise_(
            UserRegistered(
                user_id=str(user.id),
                username=username,
                email=user.email,
            )
        )
        return user

    def check_password(self, password) -> bool:
        return verify_password(password, self.password_hash)

    def public_profile(self) -> dict:
        """Account details safe to hand to the client."""
        return {
            "id": str(self.id),
            "username": self.username,
            "email": self.email,
            "full_name": self.full_name,
            "phone": self.phone,
        }
