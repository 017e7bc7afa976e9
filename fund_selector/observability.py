"""
Optional AWS X-Ray tracing.

PURPOSE:
- Turn on X-Ray instrumentation when USE_XRAY=1 (patches requests and boto3 so the
  fund-search call and the DynamoDB session writes show up as subsegments).
- Stay a no-op locally and in tests.
"""
from __future__ import annotations
from typing import Optional

from fund_selector.config import Settings, load_settings
from fund_selector.logging_setup import get_logger

log = get_logger(__name__)


def init_observability(settings: Optional[Settings] = None):
    """
    Configure the X-Ray recorder if enabled.

    returns:
    - xray_recorder when configured, otherwise None.

    notes:
    - Import or configuration failures are logged and tracing stays off; they never
      stop a request from being served.
    """
    settings = settings or load_settings()
    if not settings.use_xray:
        return None
    try:
        from aws_xray_sdk.core import xray_recorder, patch
        xray_recorder.configure(service=settings.service_name)
        patch(("requests", "boto3"))
        return xray_recorder
    except Exception as e:
        log.warning("observability.xray_unavailable", error=str(e))
        return None


class xray_segment:
    """
    Context manager for a manual subsegment.

    usage:
    >>> with xray_segment("build_profile"):
    >>>     profile = build_profile(inputs)

    notes:
    - Without an active recorder/segment this does nothing. Exceptions raised inside
      the block propagate normally.
    """

    def __init__(self, name: str):
        self.name = name
        self.sub = None

    def __enter__(self):
        try:
            from aws_xray_sdk.core import xray_recorder
            self.sub = xray_recorder.begin_subsegment(self.name)
        except Exception:
            self.sub = None
        return self

    def __exit__(self, exc_type, exc, tb):
        if self.sub is None:
            return False
        try:
            from aws_xray_sdk.core import xray_recorder
            if exc is not None:
                self.sub.add_exception(exc, [])
            xray_recorder.end_subsegment()
        except Exception as e:
            log.debug("observability.end_subsegment_failed", error=str(e))
        return False
