"""Process exit codes.

The packager exits with one of these codes. Values are part of the CI
contract and should remain stable.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for ``ouch-release``.

    - 0: Success
    - 1: User error (bad options, release directory already present)
    - 2: Environment error (artifacts or docs missing, malformed artifact)
    - 5: I/O error (copy, rename or archive write failed)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    IO_ERROR = 5
