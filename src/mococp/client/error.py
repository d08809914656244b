# SPDX-License-Identifier: MIT

from typing import Optional


class NotLoggedInError(Exception):
    """Raised when credentials a request needs are missing from the configuration."""

    def __init__(self, system: str, missing: list[str]) -> None:
        super().__init__(
            f"Not logged in to {system} (missing {', '.join(missing)}), "
            f"run 'mococp login {system.lower()}' first"
        )
        self.system = system
        self.missing = missing


class ApiError(Exception):
    """Raised when a remote API call fails or answers with an error status."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
