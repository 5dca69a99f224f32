"""Connection settings for the remote label printer."""

from dataclasses import dataclass

from labelmaker.preferences import PREF_AUTH_TOKEN, PREF_ENDPOINT, Preferences, get_preferences


@dataclass
class ConnectionSettings:
    """Settings needed to reach the print service.

    Attributes:
        endpoint: URL the print request is posted to.
        auth_token: Value sent verbatim in the Authorization header.
    """

    endpoint: str = ""
    auth_token: str = ""

    def is_configured(self) -> bool:
        """Check if both endpoint and token are set.

        Returns:
            bool: True if endpoint and auth_token are non-empty.
        """
        return bool(self.endpoint and self.auth_token)

    @property
    def masked_token(self) -> str:
        """Auth token with all but the last four characters hidden."""
        if len(self.auth_token) > 4:
            return f"{'*' * 8}...{self.auth_token[-4:]}"
        return "****" if self.auth_token else ""


class SettingsStore:
    """Loads and saves ConnectionSettings through the preferences group."""

    def __init__(self, preferences: Preferences | None = None):
        self.preferences = preferences if preferences is not None else get_preferences()

    def load(self) -> ConnectionSettings:
        return ConnectionSettings(
            endpoint=self.preferences.get_string(PREF_ENDPOINT),
            auth_token=self.preferences.get_string(PREF_AUTH_TOKEN),
        )

    def save(self, settings: ConnectionSettings) -> None:
        self.preferences.put_strings(
            {
                PREF_ENDPOINT: settings.endpoint,
                PREF_AUTH_TOKEN: settings.auth_token,
            }
        )
