"""Leaderboard storage failures.

Both kinds subclass OSError so callers that only care about "storage went
wrong" can catch that, while callers that need to tell a corrupt file from an
unwritable one can catch the specific subclass. Neither is ever raised after
the in-memory board has been partially modified.
"""


class LeaderboardStorageError(OSError):
    """Base class for leaderboard persistence failures."""


class LeaderboardCorruptError(LeaderboardStorageError):
    """The leaderboard file exists but cannot be decoded into score records."""


class LeaderboardUnavailableError(LeaderboardStorageError):
    """The leaderboard directory or file cannot be written."""
