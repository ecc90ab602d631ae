"""Error kinds shared by commands."""

from __future__ import annotations

from dataclasses import dataclass

MISSING_ACCESS = 50001


class UserError(Exception):
    """An error caused by the user; its message is meant to be shown to them."""


class LogChannelError(Exception):
    """Failure to post in a log channel, with the service's error details."""

    def __init__(
        self,
        message: str,
        *,
        code: int | None = None,
        required_permissions: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.required_permissions = required_permissions


def contextualize_log_channel_error(error: Exception) -> Exception:
    """Turn a log channel send failure into the error to report."""
    context = "failed to send message in log channel"
    if isinstance(error, LogChannelError) and error.code == MISSING_ACCESS:
        result: Exception = UserError(
            f"{context}: unable to access the log channel "
            f"(may be missing permission): {error}"
        )
    elif isinstance(error, LogChannelError) and error.required_permissions:
        result = UserError(
            f"{context}: missing required log channel permission(s): "
            f"{error.required_permissions}: {error}"
        )
    else:
        result = RuntimeError(f"{context}: {error}")
    result.__cause__ = error
    return result


@dataclass(frozen=True)
class CustomData:
    """Extra command metadata."""

    early_access: bool = False