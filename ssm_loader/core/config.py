import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


load_dotenv()


@dataclass(frozen=True)
class Config:
    """Process configuration loaded from environment variables.

    Built once at startup and handed to the loader explicitly; nothing here
    is read again after construction.
    """

    SSM_PATH: str = "/Env/Application/"
    AWS_PROFILE: Optional[str] = None
    AWS_REGION: Optional[str] = None
    ENVIRONMENT: str = "production"
    LOCAL_PARAMETERS_FILE: str = "parameters.json"
    LOG_LEVEL: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            SSM_PATH=os.getenv("SSM_PATH", "/Env/Application/"),
            AWS_PROFILE=os.getenv("AWS_PROFILE") or None,
            AWS_REGION=os.getenv("AWS_REGION") or None,
            ENVIRONMENT=os.getenv("ENVIRONMENT", "production"),
            LOCAL_PARAMETERS_FILE=os.getenv("LOCAL_PARAMETERS_FILE", "parameters.json"),
            LOG_LEVEL=os.getenv("LOG_LEVEL", "WARNING").upper(),
        )

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    def validate(self) -> None:
        if not self.SSM_PATH:
            raise ValueError("SSM_PATH environment variable is required")
        # Fragments are appended verbatim
        if not self.SSM_PATH.endswith("/"):
            raise ValueError(f"SSM_PATH must end with '/': {self.SSM_PATH!r}")
        if not isinstance(logging.getLevelName(self.LOG_LEVEL), int):
            raise ValueError(f"Invalid LOG_LEVEL: {self.LOG_LEVEL!r}")
