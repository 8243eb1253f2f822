# Copyright 2025 Loopper-AI
# Configuration management for paw

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_FUNCTION_NAME = "PawLambda"
DEFAULT_STATE_MACHINE_NAME = "PawMachine"


@dataclass(frozen=True)
class Config:
    """Immutable configuration from environment variables."""

    function_name: str = DEFAULT_FUNCTION_NAME
    state_machine_name: str = DEFAULT_STATE_MACHINE_NAME
    bucket: str | None = None
    region: str | None = None
    max_results: int = 1000
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> Config:
        """Load config. BUCKET is injected by the provisioning layer and may be absent."""
        region = os.environ.get("AWS_REGION") or os.environ.get("AWS_DEFAULT_REGION") or None

        return cls(
            function_name=(os.environ.get("FUNCTION_NAME") or DEFAULT_FUNCTION_NAME).strip(),
            state_machine_name=(os.environ.get("STATE_MACHINE_NAME") or DEFAULT_STATE_MACHINE_NAME).strip(),
            bucket=os.environ.get("BUCKET") or None,
            region=region,
            max_results=int(os.environ.get("MAX_RESULTS", "1000")),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> tuple[bool, str | None]:
        if not self.function_name:
            return False, "FUNCTION_NAME must not be empty"
        if not 1 <= self.max_results <= 1000:
            return False, "MAX_RESULTS must be between 1 and 1000"
        return True, None
