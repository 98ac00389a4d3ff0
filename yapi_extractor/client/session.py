"""YApi session lifecycle: login, validity tracking and invalidation."""

from typing import Iterable, List, Optional

from yapi_extractor.client.http import YapiHttpClient
from yapi_extractor.config import DEFAULT_LOGIN_PATH
from yapi_extractor.exceptions import AuthenticationError, NetworkError
from yapi_extractor.logger import Logger, server_logger


def parse_session_tokens(set_cookie_headers: Iterable[str]) -> List[str]:
    """Keep the ``name=value`` part of each Set-Cookie header, dropping attributes."""
    tokens: List[str] = []
    for header in set_cookie_headers:
        pair = header.split(";", 1)[0].strip()
        if "=" in pair and not pair.startswith("="):
            tokens.append(pair)
    return tokens


class YapiSession:
    """Owns the session tokens for the configured YApi account.

    The session is either valid (tokens held, usable for authenticated calls)
    or not; there is no partially valid state. There is no lock: two callers
    that both find the session invalid will both log in and the last login
    wins, which is harmless.
    """

    def __init__(
        self,
        http: YapiHttpClient,
        email: str,
        password: str,
        login_path: str = DEFAULT_LOGIN_PATH,
        logger: Optional[Logger] = None,
    ):
        """
        Args:
            http: Transport used for the login call
            email: Account email
            password: Account password
            login_path: Login route; LDAP deployments use /api/user/login_by_ldap,
                others /api/user/login. Both accept {email, password}.
            logger: Logger instance
        """
        self.http = http
        self.email = email
        self._password = password
        self.login_path = login_path
        self.logger: Logger = logger or server_logger
        self._tokens: List[str] = []
        self._valid = False

    @property
    def is_valid(self) -> bool:
        return self._valid and bool(self._tokens)

    @property
    def cookie_header(self) -> str:
        """Session tokens rendered as a Cookie header value."""
        return "; ".join(self._tokens)

    async def ensure_session(self) -> None:
        """Log in unless a valid session is already held.

        Raises:
            AuthenticationError: Login rejected or no tokens returned
            NetworkError: Login call failed at the transport level
        """
        if self.is_valid:
            return
        await self.login()

    async def login(self) -> None:
        """Perform the login call and capture the session tokens."""
        self.logger.info("Logging in to YApi", login_path=self.login_path, email=self.email)
        try:
            response = await self.http.post(
                self.login_path,
                operation="login",
                payload={"email": self.email, "password": self._password},
            )
        except NetworkError:
            self.invalidate()
            raise

        envelope = response.envelope
        if not envelope.ok:
            self.invalidate()
            self.logger.warning("YApi login rejected", errcode=envelope.errcode)
            raise AuthenticationError(
                f"YApi login rejected: {envelope.errmsg}",
                details={"errcode": envelope.errcode, "login_path": self.login_path},
            )

        tokens = parse_session_tokens(response.set_cookies)
        if not tokens:
            self.invalidate()
            self.logger.warning("YApi login returned no session cookies")
            raise AuthenticationError(
                "YApi login succeeded but returned no session cookies",
                code="NO_SESSION_TOKENS",
                details={"login_path": self.login_path},
            )

        self._tokens = tokens
        self._valid = True
        self.logger.info("YApi session established", token_count=len(tokens))

    def invalidate(self) -> None:
        """Drop the session so the next ensure_session() logs in again."""
        if self._valid:
            self.logger.info("YApi session invalidated")
        self._tokens = []
        self._valid = False
