"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (CreateSecret, AddSecretVersion).

Each command has a corresponding handler that contains the business logic
to execute the command.
"""

from src.application.commands.secret_commands import (
    AddSecretVersion,
    CancelVersionDestruction,
    CreateSecret,
    DeleteSecret,
    RollbackSecretVersion,
    ScheduleVersionDestruction,
    UpdateSecret,
)
from src.application.commands.session_commands import BeginSession

__all__ = [
    # Session commands
    "BeginSession",
    # Secret commands
    "AddSecretVersion",
    "CancelVersionDestruction",
    "CreateSecret",
    "DeleteSecret",
    "RollbackSecretVersion",
    "ScheduleVersionDestruction",
    "UpdateSecret",
]
