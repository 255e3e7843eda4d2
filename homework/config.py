"""Application configuration."""
import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

load_dotenv()


def _optional_int(value: Optional[str]) -> Optional[int]:
    return int(value) if value else None


@dataclass
class Config:
    """Self-test configuration loaded from environment variables."""
    
    # Ordered tree self-test
    tree_test_size: int = int(os.getenv("TREE_TEST_SIZE", "2048"))
    
    # Shared random source (unset means OS entropy)
    random_seed: Optional[int] = _optional_int(os.getenv("HOMEWORK_SEED"))
    
    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


config = Config()
