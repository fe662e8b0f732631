from enum import IntEnum


class ErrorKind(IntEnum):
    """
    Failure classes. Each value doubles as the process exit status.
    """
    USAGE = 1
    READ = 2
    NAMING = 3
    COPY = 4


class UniqopyError(Exception):
    kind: ErrorKind


class UsageError(UniqopyError):
    kind = ErrorKind.USAGE


class ReadError(UniqopyError):
    kind = ErrorKind.READ


class NamingError(UniqopyError):
    kind = ErrorKind.NAMING


class CopyError(UniqopyError):
    kind = ErrorKind.COPY
