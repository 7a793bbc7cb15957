"""
Configuration management for endpoint definitions and well-known URLs.
"""

import yaml
from typing import Any, Dict, List, Optional
from pathlib import Path
from urllib.parse import quote
from pydantic import BaseModel, Field

# OAuth2 authorization endpoint (RFC 6749 section 3.1)
AUTHORIZATION_URL = "https://www.patreon.com/oauth2/authorize"

# OAuth2 token endpoint (RFC 6749 section 3.2)
ACCESS_TOKEN_URL = "https://api.patreon.com/oauth2/token"

BASE_URL = "https://www.patreon.com"


class EndpointConfig(BaseModel):
    """Model for endpoint configuration."""
    path: str
    resource_type: str
    many: bool = False
    description: str = ""
    includes: List[str] = Field(default_factory=list)
    scopes: List[str] = Field(default_factory=list)

    def format_path(self, **params: Any) -> str:
        """Fill path placeholders such as ``{id}``. Values are escaped as single path segments."""
        escaped = {key: quote(str(value), safe='') for key, value in params.items()}
        try:
            return self.path.format(**escaped)
        except KeyError as e:
            raise ValueError(f"Missing path parameter {e} for '{self.path}'") from e


class Config:
    """Configuration loader and validator for YAML endpoint definitions."""

    def __init__(self, config_path: Optional[str] = None):
        if config_path is None:
            config_path = Path(__file__).parent / "endpoints.yaml"

        self.config_path = Path(config_path)
        self._endpoints: Dict[str, EndpointConfig] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Load and validate YAML configuration."""
        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        with open(self.config_path, 'r', encoding='utf-8') as file:
            raw_config = yaml.safe_load(file) or {}

        for endpoint_name, endpoint_data in raw_config.get('endpoints', {}).items():
            self._endpoints[endpoint_name] = EndpointConfig(**endpoint_data)

    def get_endpoint(self, name: str) -> EndpointConfig:
        """Get endpoint configuration by name."""
        if name not in self._endpoints:
            available = list(self._endpoints.keys())
            raise ValueError(f"Unknown endpoint '{name}'. Available: {available}")
        return self._endpoints[name]

    def list_endpoints(self) -> List[str]:
        """Get list of available endpoint names."""
        return list(self._endpoints.keys())

    def get_includes(self, name: str) -> List[str]:
        """Get relationships an endpoint accepts in ``include``."""
        return self.get_endpoint(name).includes
