"""Window-manager clients reporting the focused application and window."""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = ["Client", "NullClient", "WMClient", "build_client"]


class Client(ABC):
    """A source of information about the focused window."""

    @abstractmethod
    def supported(self) -> bool:
        """Whether this client can talk to the running window manager."""

    @abstractmethod
    def current_application(self) -> str | None:
        """The focused application's name, if known."""

    @abstractmethod
    def current_window(self) -> str | None:
        """The focused window's title, if known."""

    @abstractmethod
    def current_pid(self) -> int | None:
        """The focused window's process id, if known."""


class NullClient(Client):
    """A client for when no window manager is supported; it never knows the focus."""

    application: str | None = None
    window: str | None = None
    pid: int | None = None

    def supported(self) -> bool:
        return False

    def current_application(self) -> str | None:
        return self.application

    def current_window(self) -> str | None:
        return self.window

    def current_pid(self) -> int | None:
        return self.pid


class WMClient:
    """Wraps a :class:`Client`, checking support once and reporting changes."""

    def __init__(self, name: str, client: Client) -> None:
        self.name = name
        self.client = client
        self._supported: bool | None = None
        self._last_application = ""
        self._last_window = ""

    def _is_supported(self) -> bool:
        if self._supported is None:
            self._supported = self.client.supported()
            print(f"application-client: {self.name} (supported: {str(self._supported).lower()})")
        return self._supported

    def current_window(self) -> str | None:
        if not self._is_supported():
            return None
        window = self.client.current_window()
        if window is not None and window != self._last_window:
            self._last_window = window
            print(f"window: {window}")
        return window

    def current_application(self) -> str | None:
        if not self._is_supported():
            return None
        application = self.client.current_application()
        if application is not None and application != self._last_application:
            self._last_application = application
            print(f"application: {application}")
        return application

    def current_pid(self) -> int | None:
        if not self._is_supported():
            return None
        return self.client.current_pid()


def build_client() -> WMClient:
    """The client used when no window-manager integration is available."""
    return WMClient("none", NullClient())