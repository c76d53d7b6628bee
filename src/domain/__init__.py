"""Domain layer - Pure business logic.

Entities, value objects, protocols (ports) and errors of the secrets
console. The domain layer has NO dependencies on any framework or
infrastructure - it is pure Python.

Structure:
- entities/: Session, Secret, SecretVersion, Payload, Cloud, Folder, KmsKey, Operation
- value_objects/: AccessToken, PayloadEntryChange, SecretVersionRef
- protocols/: Ports implemented by infrastructure adapters
- errors/: UpstreamError, VersionConflictError, DetailLoadError
- validators/: Payload key and secret name rules
"""
