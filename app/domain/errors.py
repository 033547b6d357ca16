"""
Error taxonomy for the countdown notifier.

Gateway errors come from the chat bridge. Dispatch errors are what the
HTTP trigger reports back to its caller.
"""


class CountdownNotifierError(Exception):
    """Base class for all application errors."""


# === Configuration ===

class ConfigurationError(CountdownNotifierError):
    """Static configuration is unusable."""


class EmptyCatalogError(ConfigurationError):
    def __init__(self, occasion: str | None = None):
        label = f" for {occasion}" if occasion else ""
        super().__init__(f"Quote catalog{label} is empty")
        self.occasion = occasion


# === Chat gateway ===

class GatewayError(CountdownNotifierError):
    """Raised by ChatGateway implementations."""


class GatewayConnectionError(GatewayError):
    """Session could not be established. Fatal at startup."""


class GroupResolutionError(GatewayError):
    """Invite link could not be resolved to a group."""


class SendError(GatewayError):
    """Message was not accepted by the bridge."""


# === Dispatch ===

class DispatchError(CountdownNotifierError):
    """
    A dispatch failed. ``message`` is safe to return to HTTP callers.
    """
    message = "Failed to dispatch notification"

    def __init__(self, occasion: str, cause: Exception | None = None):
        super().__init__(f"{self.message} ({occasion}): {cause}")
        self.occasion = occasion
        self.cause = cause


class GroupResolutionFailed(DispatchError):
    message = "Failed to get info group"


class SendFailed(DispatchError):
    message = "Failed to send message"


# === Scheduling ===

class ScheduleInvocationError(CountdownNotifierError):
    """Loopback call from a scheduled job did not succeed."""
