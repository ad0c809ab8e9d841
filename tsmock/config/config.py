import os
import re
from typing import List

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


class Configs(BaseSettings):

    # server
    APP_HOST: str = os.getenv("APP_HOST", "127.0.0.1")
    APP_PORT: int = int(os.getenv("APP_PORT", "3000"))

    # extraction
    ROUTE_MARKER: str = os.getenv("ROUTE_MARKER", "route")
    STRICT_PARSE: bool = os.getenv("STRICT_PARSE", "true").lower() in ("1", "true", "yes")
    IGNORE_DIRS: str = os.getenv("IGNORE_DIRS", "node_modules,.git")

    # synthesis
    NUMBER_PATTERN: str = os.getenv("NUMBER_PATTERN", "###")
    FAKER_LOCALE: str = os.getenv("FAKER_LOCALE", "en_US")

    # logging
    LOG_FILE: str = os.getenv("LOG_FILE", "tsmock.log")

    @property
    def ignore_dirs(self) -> List[str]:
        return [name.strip() for name in self.IGNORE_DIRS.split(",") if name.strip()]

    def validate_server_config(self) -> None:
        """Validate settings the mock server cannot start without."""
        if not self.ROUTE_MARKER.strip():
            raise ValueError("ROUTE_MARKER must not be empty.")
        if not re.fullmatch(r"#+", self.NUMBER_PATTERN):
            raise ValueError(
                f"NUMBER_PATTERN must consist of '#' placeholders only, got {self.NUMBER_PATTERN!r}."
            )
        if not 0 < self.APP_PORT < 65536:
            raise ValueError(f"APP_PORT out of range: {self.APP_PORT}")

    class Config:
        case_sensitive = True


configs = Configs()
