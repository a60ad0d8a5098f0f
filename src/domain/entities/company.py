"""
Domain entities for company fundamentals: profile and summary statistics.
Zero external dependencies: pure Python dataclasses only.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class CompanyProfile:
    name: Optional[str] = None
    sector: Optional[str] = None
    industry: Optional[str] = None
    summary: Optional[str] = None
    location: Optional[str] = None
    exchange: Optional[str] = None


@dataclass(frozen=True)
class ProfileLookup:
    """Outcome of a profile fetch.

    A failed lookup is still a successful return value: *profile* is None and
    *error* holds the logged cause, so callers fall back to defaults instead
    of aborting the request.
    """

    profile: Optional[CompanyProfile] = None
    error: Optional[str] = None

    @classmethod
    def found(cls, profile: CompanyProfile) -> "ProfileLookup":
        return cls(profile=profile)

    @classmethod
    def failed(cls, error: str) -> "ProfileLookup":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.profile is not None


@dataclass(frozen=True)
class FinancialStats:
    annual_revenue: Optional[float] = None
    annual_revenue_end_date: Optional[datetime] = None
    ttm_revenue: Optional[float] = None
    beta: Optional[float] = None
    shares_outstanding: Optional[float] = None
