"""Policy for I/O and encoding failures met in the middle of a walk."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take when an entry or directory cannot be read during a walk.

    Values:
        IGNORE: Skip the entry (or show an unreadable directory without expanding it),
            record a message in the run summary and carry on with its siblings (default)
        RAISE: Propagate the error immediately, leaving the lines already emitted as
            partial output
    """

    IGNORE = "ignore"
    RAISE = "raise"
