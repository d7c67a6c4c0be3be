"""
서비스 패키지
"""

from .job_posting_service import JobPostingService

__all__ = ["JobPostingService"]
