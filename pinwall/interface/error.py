"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class LoginRequired(InterfaceError):
    """A browser request needs a session; send the caller to log in."""

    def __init__(self, login_url: str = "/auth/external"):
        self.login_url = login_url
        super().__init__(f"Login required, redirecting to {login_url}")
