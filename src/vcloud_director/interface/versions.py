from typing import Optional
from packaging.version import Version
from vcloud_director.interface.base import VCDModel

def parse_version(version: str) -> Version:
    """Parse an API version. Prereleases such as ``38.0.0-alpha`` sort below ``38.0``."""
    return Version(version)

class VersionInfo(VCDModel):
    version: str
    deprecated: Optional[bool] = False

class SupportedVersions(VCDModel):
    version_info: list[VersionInfo] = []

    def max_version(self) -> Optional[str]:
        if not self.version_info:
            return None
        return max((info.version for info in self.version_info), key=parse_version)
