"""Job search criteria and the predicates that evaluate them."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Iterable, List, Optional, Set

from .models import CompanySize, EmploymentType, ExperienceLevel, JobPosting, Post, WorkType
from .text_utils import contains_ci


class DateRange(str, Enum):
    ANY_TIME = "any_time"
    PAST_DAY = "past_day"
    PAST_WEEK = "past_week"
    PAST_MONTH = "past_month"

    @property
    def title(self) -> str:
        return {
            "any_time": "Any time",
            "past_day": "Past 24 hours",
            "past_week": "Past week",
            "past_month": "Past month",
        }[self.value]

    def cutoff(self, now: Optional[datetime] = None) -> Optional[datetime]:
        """Earliest posted date that still qualifies, or None for no limit."""
        now = now or datetime.now()
        if self == DateRange.PAST_DAY:
            return now - timedelta(days=1)
        if self == DateRange.PAST_WEEK:
            return now - timedelta(weeks=1)
        if self == DateRange.PAST_MONTH:
            return now - timedelta(days=30)
        return None


@dataclass
class JobSearchFilters:
    """Job search criteria. An empty field places no constraint on results."""

    keywords: str = ""
    location: str = ""
    work_types: Set[WorkType] = field(default_factory=set)
    employment_types: Set[EmploymentType] = field(default_factory=set)
    experience_levels: Set[ExperienceLevel] = field(default_factory=set)
    industries: Set[str] = field(default_factory=set)
    company_sizes: Set[CompanySize] = field(default_factory=set)
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    is_remote_only: bool = False
    is_easy_apply_only: bool = False
    posted_within: DateRange = DateRange.ANY_TIME

    def is_empty(self) -> bool:
        return self == JobSearchFilters()

    @classmethod
    def from_dict(cls, data: dict) -> "JobSearchFilters":
        """
        Build filters from plain values, as found in YAML or CLI arguments.

        Args:
            data: Mapping using the field names of this class. Enum-valued
                sets take their string values.

        Returns:
            JobSearchFilters instance.
        """
        data = data or {}
        return cls(
            keywords=data.get("keywords") or "",
            location=data.get("location") or "",
            work_types={WorkType(v) for v in data.get("work_types") or []},
            employment_types={EmploymentType(v) for v in data.get("employment_types") or []},
            experience_levels={ExperienceLevel(v) for v in data.get("experience_levels") or []},
            industries=set(data.get("industries") or []),
            company_sizes={CompanySize(v) for v in data.get("company_sizes") or []},
            salary_min=data.get("salary_min"),
            salary_max=data.get("salary_max"),
            is_remote_only=bool(data.get("is_remote_only", False)),
            is_easy_apply_only=bool(data.get("is_easy_apply_only", False)),
            posted_within=DateRange(data.get("posted_within") or DateRange.ANY_TIME.value),
        )


def _keyword_match(job: JobPosting, keywords: str) -> bool:
    if not keywords:
        return True
    return (
        contains_ci(job.title, keywords)
        or contains_ci(job.company, keywords)
        or any(contains_ci(skill, keywords) for skill in job.skills)
    )


def _salary_match(job: JobPosting, salary_min: Optional[int], salary_max: Optional[int]) -> bool:
    if salary_min is None and salary_max is None:
        return True
    if job.salary_range is None:
        return False
    if salary_min is not None and job.salary_range.max_salary < salary_min:
        return False
    if salary_max is not None and job.salary_range.min_salary > salary_max:
        return False
    return True


def matches(job: JobPosting, filters: JobSearchFilters, now: Optional[datetime] = None) -> bool:
    """Check whether a job satisfies every constraint set in ``filters``."""
    if not _keyword_match(job, filters.keywords):
        return False

    if filters.location and not contains_ci(job.location, filters.location):
        return False

    if filters.work_types and job.work_type not in filters.work_types:
        return False

    if filters.employment_types and job.employment_type not in filters.employment_types:
        return False

    if filters.experience_levels and job.experience_level not in filters.experience_levels:
        return False

    if filters.industries:
        wanted = {industry.lower() for industry in filters.industries}
        if job.industry.lower() not in wanted:
            return False

    if filters.company_sizes and job.company_size not in filters.company_sizes:
        return False

    if not _salary_match(job, filters.salary_min, filters.salary_max):
        return False

    if filters.is_remote_only and not job.is_remote:
        return False

    if filters.is_easy_apply_only and not job.is_easy_apply:
        return False

    cutoff = filters.posted_within.cutoff(now)
    if cutoff is not None and job.posted_date < cutoff:
        return False

    return True


def apply_filters(
    jobs: Iterable[JobPosting],
    filters: JobSearchFilters,
    now: Optional[datetime] = None,
) -> List[JobPosting]:
    """Return the jobs matching ``filters``, keeping their original order."""
    now = now or datetime.now()
    return [job for job in jobs if matches(job, filters, now)]


def post_matches(post: Post, query: str) -> bool:
    """Case-insensitive search across a post's content, author and hashtags."""
    if not query:
        return True
    return (
        contains_ci(post.content, query)
        or contains_ci(post.author_name, query)
        or any(contains_ci(tag, query) for tag in post.hashtags)
    )
