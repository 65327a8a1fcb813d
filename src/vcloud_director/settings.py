import os
import threading

def _env_bool(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).lower() in ["true", "1", "yes", "on"]

class ClientSettings:
    _instance = None
    _lock = threading.Lock()

    def __init__(self):
        self.VCD_URL = os.environ.get("VCD_URL", None)
        self.VCD_USER = os.environ.get("VCD_USER", None)
        self.VCD_PASSWORD = os.environ.get("VCD_PASSWORD", None)
        self.VCD_ORG = os.environ.get("VCD_ORG", "System")
        # Bearer token of an already established session
        self.VCD_TOKEN = os.environ.get("VCD_TOKEN", None)
        # API (refresh) token exchanged for a bearer token on login
        self.VCD_API_TOKEN = os.environ.get("VCD_API_TOKEN", None)
        self.VCD_API_VERSION = os.environ.get("VCD_API_VERSION", "37.0")
        self.VCD_INSECURE = _env_bool("VCD_INSECURE")
        self.VCD_IS_TM = _env_bool("VCD_IS_TM")
        self.VCD_HTTP_TIMEOUT = float(os.environ.get("VCD_HTTP_TIMEOUT", "120"))
        self.VCD_TASK_POLL_INTERVAL = float(os.environ.get("VCD_TASK_POLL_INTERVAL", "1"))
        self.VCD_TASK_TIMEOUT = float(os.environ.get("VCD_TASK_TIMEOUT", "600"))

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super(ClientSettings, cls).__new__(cls)
        return cls._instance

settings = ClientSettings()
