import logging
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "wikibase-rest/0.1.0 (https://pypi.org/project/wikibase-rest/)"


class Settings(BaseSettings):
    wikibase_url: str = "https://www.wikidata.org"
    user_agent: str = DEFAULT_USER_AGENT
    bot: bool = True
    allow_ip_edits: bool = False
    request_timeout: float = 30.0
    log_level: str = "INFO"
    log_http_requests: bool = False

    model_config = SettingsConfigDict(env_prefix="WIKIBASE_", env_file=".env", extra="ignore")


# noinspection PyArgumentList
settings = Settings()

logger.debug("=== Settings Debug ===")
logger.debug(f"Wikibase URL: {settings.wikibase_url}")
logger.debug(f"User Agent: {settings.user_agent}")
logger.debug(f"Bot: {settings.bot}")
logger.debug(f"Allow IP Edits: {settings.allow_ip_edits}")
logger.debug(f"Request Timeout: {settings.request_timeout}")
logger.debug(f"Log HTTP Requests: {settings.log_http_requests}")
logger.debug("=== End Settings Debug ===")
