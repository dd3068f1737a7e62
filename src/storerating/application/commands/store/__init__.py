from storerating.application.commands.store.create_store_command import (
    CreateStoreCommand,
    NewOwnerDetails,
)
from storerating.application.commands.store.delete_store_command import (
    DeleteStoreCommand,
)
from storerating.application.commands.store.owner_validation import (
    ensure_store_owner,
)
from storerating.application.commands.store.update_store_command import (
    UpdateStoreCommand,
)

__all__ = [
    "CreateStoreCommand",
    "DeleteStoreCommand",
    "NewOwnerDetails",
    "UpdateStoreCommand",
    "ensure_store_owner",
]
