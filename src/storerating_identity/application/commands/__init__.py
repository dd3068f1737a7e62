from storerating_identity.application.commands.create_user_command import (
    CreateUserCommand,
)

__all__ = ["CreateUserCommand"]
