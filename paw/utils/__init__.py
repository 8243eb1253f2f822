# Copyright 2025 Loopper-AI
# Utility modules

from .date_utils import DATE_EXAMPLE, parse_utc_date_time

__all__ = ["DATE_EXAMPLE", "parse_utc_date_time"]
