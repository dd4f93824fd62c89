"""
Application services module.
"""

from investcalc.services.advisory import AdvisoryService, get_advisory_service

__all__ = ["AdvisoryService", "get_advisory_service"]
