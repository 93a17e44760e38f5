# apiwire/clients/options.py
# Created: 2026-10-19 09:40:22

from typing import Dict
from dataclasses import dataclass

from ..core.config import Config
from ..core.exceptions import ConfigError

@dataclass
class ClientOptions:
    """Configuration for HTTP clients"""
    base_url: str
    timeout: float = 45.0
    user_agent: str = "apiwire/1.0"
    accept: str = "application/json"
    keep_alive: str = "300"

    def __post_init__(self):
        if self.timeout <= 0:
            raise ConfigError(f"timeout must be a positive number: {self.timeout}")

    def default_headers(self) -> Dict[str, str]:
        return {
            "Accept": self.accept,
            "User-Agent": self.user_agent,
            "Keep-Alive": self.keep_alive,
        }

    @classmethod
    def from_config(cls, config: Config) -> "ClientOptions":
        return cls(
            base_url=config.get("client.base_url", ""),
            timeout=float(config.get("client.timeout", 45)),
            user_agent=config.get("client.user_agent", "apiwire/1.0"),
            accept=config.get("client.accept", "application/json"),
            keep_alive=str(config.get("client.keep_alive", "300"))
        )
