# Copyright 2025 Loopper-AI
# Client modules for AWS services

from .lambda_client import LambdaClient
from .step_functions_client import StepFunctionsClient

__all__ = ["LambdaClient", "StepFunctionsClient"]
