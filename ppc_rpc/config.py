from dataclasses import dataclass
import os
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

MAINNET_RPC_PORT = 9902
TESTNET_RPC_PORT = 9904


@dataclass
class Settings:
    rpcip: str = ""
    rpcport: int = 0
    rpcuser: str = ""
    rpcpass: str = ""
    timeout: float = 30.0
    testnet: bool = False
    log_level: str = "INFO"
    verbose: bool = False  # Deprecated: use log_level instead

    def __post_init__(self):
        """Load settings from environment variables at instance creation time"""
        self.testnet = os.getenv("TESTNET", "false").lower() == "true"
        self.rpcip = os.getenv("PPC_RPC_HOST", os.getenv("PPC_RPC_IP", "127.0.0.1"))
        default_port = TESTNET_RPC_PORT if self.testnet else MAINNET_RPC_PORT
        self.rpcport = int(os.getenv("PPC_RPC_PORT", str(default_port)))
        self.rpcuser = os.getenv("PPC_RPC_USER", "")
        self.rpcpass = os.getenv("PPC_RPC_PASS", "")
        try:
            self.timeout = float(os.getenv("PPC_RPC_TIMEOUT", "30.0"))
        except ValueError:
            self.timeout = 30.0
        if self.timeout <= 0:
            self.timeout = 30.0

        # Log level configuration (LOG_LEVEL takes precedence over VERBOSE)
        log_level_env = os.getenv("LOG_LEVEL", "").upper()
        if log_level_env:
            self.log_level = log_level_env
        else:
            self.verbose = os.getenv("VERBOSE", "false").lower() == "true"
            self.log_level = "DEBUG" if self.verbose else "INFO"

    @property
    def node_url(self) -> str:
        return f"http://{self.rpcuser}:{self.rpcpass}@{self.rpcip}:{self.rpcport}"
