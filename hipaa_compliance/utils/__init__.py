from .logger import setup_logging
from .hashing import fingerprint, sha256_hash

__all__ = ["setup_logging", "fingerprint", "sha256_hash"]
