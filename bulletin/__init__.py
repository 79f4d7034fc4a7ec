"""Campus bulletin board API: token auth, roles, ownership and post moderation."""

__version__ = "0.1.0"
