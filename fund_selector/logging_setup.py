"""
Structured logging setup for the Lambda handler, the CLI and the Streamlit app.

PURPOSE:
- Emit one JSON object per log line so runs can be queried in CloudWatch Insights.
- Every entry carries the service name and environment.
"""

from __future__ import annotations
import logging
import sys
from typing import Optional

import structlog

from fund_selector.config import Settings, load_settings


def configure_logging(settings: Optional[Settings] = None):
    """
    Configure structlog JSON logging and return a bound logger.

    parameters:
    - settings: Settings (optional) – defaults to load_settings().

    returns:
    - structlog.BoundLogger – bound with service and env.

    example log entry:
    {"event": "profile.built", "level": "info", "timestamp": "2026-10-17T09:00:00Z",
     "service": "FundSelector", "env": "dev", "final_risk": "HIGH"}
    """
    settings = settings or load_settings()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level, logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    return structlog.get_logger().bind(service=settings.service_name, env=settings.env)


def get_logger(name: str):
    """Module-level logger; picks up whatever configuration is active."""
    return structlog.get_logger(name)
