"""
The permission record an office administrator assigns to a user.

The office backend stores it with camelCase keys (documentPermissions,
sessionPermission, ...). The model accepts either spelling so that a
profile can be lifted straight out of a token claim or an API payload.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PermissionProfile(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int = 0
    name: str = ""

    # 0-15: view / create / update / delete bits
    document_permissions: int = 0
    client_permissions: int = 0
    session_permission: int = 0
    finance_permission: int = 0

    # Cases & tasks: view level 0-3, DML bits 0-7
    view_case_permissions: int = 0
    dml_case_permissions: int = 0
    view_task_permissions: int = 0
    dml_task_permissions: int = 0
