"""Queries - Read operations that fetch data.

Queries represent a request for information. They are immutable dataclasses
with question-like names (ListSecrets, GetSecretPayload).

Each query has a corresponding handler that fetches and returns the requested
data. Queries NEVER change state.
"""

from src.application.queries.resource_queries import (
    ListClouds,
    ListFolders,
    ListKmsKeys,
)
from src.application.queries.secret_queries import (
    GetSecret,
    GetSecretPayload,
    ListSecrets,
    ListSecretVersions,
    LoadSecretDetail,
)

__all__ = [
    # Resource queries
    "ListClouds",
    "ListFolders",
    "ListKmsKeys",
    # Secret queries
    "GetSecret",
    "GetSecretPayload",
    "ListSecretVersions",
    "ListSecrets",
    "LoadSecretDetail",
]
