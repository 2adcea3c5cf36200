"""
Get Thing Lambda Function - Entry point for the get thing API.

This module serves as the Lambda function entry point that delegates to the
get thing handler in the service package.
"""

import os
import sys
from typing import Any, Dict

# Add the service module to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from aws_lambda_powertools.utilities.typing import LambdaContext
from service.handlers.get_thing_handler import lambda_handler as get_thing_handler


def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    return get_thing_handler(event, context)
