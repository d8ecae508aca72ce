"""Account registration and login."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.account.user import User
from storefront.domain import logger, storefront


@storefront.command(part_of="User")
class RegisterUser:
    username = String(required=True, max_length=50)
    email = String(required=True, max_length=254)
    full_name = String(required=True, max_length=100)
    phone = String(max_length=20)
    password = String(required=True, max_length=128)


@storefront.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.find_by_email(command.email) is not None:
            raise ValidationError({"email": ["User with this email already exists"]})

        user = User.register(
            username=command.username,
            email=command.email,
            full_name=command.full_name,
            password=command.password,
            phone=command.phone,
        )
        repo.add(user)
        return str(user.id)


def authenticate(email: str, password: str) -> User | None:
    """The user with these credentials, or None."""
    user = current_domain.repository_for(User).find_by_email(email)
    if user is None or not user.check_password(password):
        logger.info("login_rejected", email=email)
        return None
    return user


def get_user(user_id) -> User:
    return current_domain.repository_for(User).get(user_id)
