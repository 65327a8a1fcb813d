from typing import Optional
from vcloud_director.interface.config import BaseConfig
from vcloud_director.interface.auth import ApiTokenAuthConfig, BasicAuthConfig, TokenAuthConfig

class CLIAuthConfig(BaseConfig):
    api_url: str
    api_version: str = "37.0"
    insecure: bool = False
    is_tm: bool = False
    basic: Optional[BasicAuthConfig] = None
    token: Optional[TokenAuthConfig] = None
    api_token: Optional[ApiTokenAuthConfig] = None

    @property
    def display_name(self) -> str:
        if self.basic != None:
            return f"{self.basic.username}@{self.basic.org} ({self.api_url})"
        elif self.api_token != None:
            return f"api-token@{self.api_token.org} ({self.api_url})"
        elif self.token != None:
            return f"token@{self.token.org} ({self.api_url})"
        return self.api_url
