"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    InvalidCredentialsError,
    InactiveAccountError,
    UserNotFoundError,
    DuplicateEmailError,
    CannotDeactivateSelfError,
)
from .user_authentication import authenticate_user
from .user_management import (
    get_user_by_id,
    create_user,
    update_user,
    deactivate_user,
)

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'UserNotFoundError',
    'DuplicateEmailError',
    'CannotDeactivateSelfError',
    # Services
    'authenticate_user',
    'get_user_by_id',
    'create_user',
    'update_user',
    'deactivate_user',
]
