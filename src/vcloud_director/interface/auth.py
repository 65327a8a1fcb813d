from abc import ABC
from vcloud_director.interface.config import BaseConfig

class AuthConfig(ABC, BaseConfig):
    pass

class BasicAuthConfig(AuthConfig):
    username: str
    password: str
    org: str = "System"

class TokenAuthConfig(AuthConfig):
    token: str
    org: str = "System"

class ApiTokenAuthConfig(AuthConfig):
    api_token: str
    org: str = "System"
