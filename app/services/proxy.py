from typing import Optional
import uuid
from loguru import logger
from app.models.proxy import ProxyConfig

class ProxyService:
    """
    Builds rotating DataImpulse proxy URLs for transcript requests.

    All four connection settings must be present; otherwise requests go out
    directly.
    """

    def __init__(
        self,
        host: Optional[str],
        port: Optional[int],
        login: Optional[str],
        password: Optional[str],
    ):
        self.host = host
        self.port = port
        self.login = login
        self.password = password

    @property
    def is_configured(self) -> bool:
        return bool(self.host and self.port and self.login and self.password)

    def get_proxies(self) -> Optional[ProxyConfig]:
        """
        Constructs the authenticated proxy URL.
        Appends a random session ID to the login to force a new IP for every request.
        """
        if not self.is_configured:
            logger.debug("Proxy settings not fully configured. Using direct connection.")
            return None

        session_id = str(uuid.uuid4())
        # DataImpulse format: login__session-ID
        login_with_session = f"{self.login}__session-{session_id}"

        proxy_url = (
            f"http://{login_with_session}:{self.password}"
            f"@{self.host}:{self.port}"
        )

        logger.info(f"Fetching transcript through proxy (Session: {session_id})")
        return ProxyConfig(http=proxy_url, https=proxy_url)
