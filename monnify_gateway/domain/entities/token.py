"""BearerToken entity returned by the gateway login call."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class BearerToken:
    """
    Short-lived access token.

    Attributes:
        value: The raw access token
        obtained_at: Monotonic clock reading when the login completed
        expires_in: Declared validity window in seconds, if the gateway
            returned one
    """

    value: str = field(repr=False)
    obtained_at: float
    expires_in: float | None = None

    @property
    def expires_at(self) -> float | None:
        if self.expires_in is None:
            return None
        return self.obtained_at + self.expires_in

    def is_valid(self, now: float, leeway: float = 0.0) -> bool:
        """
        Check whether the token may still be served at ``now``.

        A token without a declared validity window is never considered
        valid for reuse.
        """
        expires_at = self.expires_at
        if expires_at is None:
            return False
        return now < expires_at - leeway

    @property
    def header(self) -> str:
        return f"Bearer {self.value}"
