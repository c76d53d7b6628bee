"""Domain entities."""

from src.domain.entities.cloud import Cloud, Folder
from src.domain.entities.kms_key import KmsKey
from src.domain.entities.operation import Operation, OperationError
from src.domain.entities.page import Page
from src.domain.entities.payload import Payload, PayloadEntry
from src.domain.entities.secret import Secret
from src.domain.entities.secret_version import SecretVersion
from src.domain.entities.session import Session

__all__ = [
    "Cloud",
    "Folder",
    "KmsKey",
    "Operation",
    "OperationError",
    "Page",
    "Payload",
    "PayloadEntry",
    "Secret",
    "SecretVersion",
    "Session",
]
