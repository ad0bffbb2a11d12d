"""Error taxonomy shared by services, repositories and the CLI."""

from __future__ import annotations


class UserFileError(Exception):
    """Base class for every error surfaced at the process boundary."""


# -------------------------- arguments --------------------------
class ArgumentError(UserFileError):
    """Invalid flag combination; raised before the backing file is opened."""


class MissingFileNameError(ArgumentError):
    def __init__(self) -> None:
        super().__init__("-fileName flag has to be specified")


class MissingOperationError(ArgumentError):
    def __init__(self) -> None:
        super().__init__("-operation flag has to be specified")


class UnknownOperationError(ArgumentError):
    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Operation {operation} not allowed!")


class MissingItemError(ArgumentError):
    def __init__(self) -> None:
        super().__init__("-item flag has to be specified")


class MissingIdError(ArgumentError):
    def __init__(self) -> None:
        super().__init__("-id flag has to be specified")


# -------------------------- storage --------------------------
class StorageError(UserFileError):
    """Failure while reading, decoding or writing the backing file."""


class FileAccessError(StorageError):
    pass


class InvalidRecordFormatError(StorageError):
    pass


class CorruptStoreError(StorageError):
    pass


class StoreWriteError(StorageError):
    pass
