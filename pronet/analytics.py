"""Analytics snapshots republished by the stores after every change."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from .models import JobPosting, Post
from .sample_data import COMMON_TITLES


@dataclass(frozen=True)
class JobAnalytics:
    total_jobs: int = 0
    total_applications: int = 0
    average_salary: int = 0
    top_industries: List[str] = field(default_factory=list)
    top_locations: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class JobDetailAnalytics:
    job_id: str
    views: int
    applications: int
    saves: int
    click_through_rate: float
    average_time_to_apply: float
    top_application_sources: List[str]
    demographic_breakdown: Dict[str, int]


@dataclass(frozen=True)
class SalaryInsights:
    average_min: int
    average_max: int
    job_count: int
    currency: str = "USD"

    @property
    def formatted_range(self) -> str:
        return f"${self.average_min:,} - ${self.average_max:,}"


@dataclass(frozen=True)
class PostAnalytics:
    total_posts: int = 0
    total_likes: int = 0
    total_comments: int = 0
    total_shares: int = 0
    average_engagement: float = 0.0
    top_hashtags: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class PostDetailAnalytics:
    post_id: str
    impressions: int
    likes: int
    comments: int
    shares: int
    engagement_rate: float
    demographics: Dict[str, Dict[str, int]]
    views_by_hour: List[int]


@dataclass(frozen=True)
class NetworkAnalytics:
    suggestions: int = 0
    connections: int = 0
    pending_requests: int = 0
    sent_requests: int = 0


@dataclass(frozen=True)
class NotificationAnalytics:
    total: int = 0
    unread: int = 0
    by_type: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class ChatAnalytics:
    conversations: int = 0
    messages: int = 0
    unread_messages: int = 0


def top_n(values: Iterable[str], n: int) -> List[str]:
    """Most frequent values first; ties keep first-seen order."""
    return [value for value, _ in Counter(values).most_common(n)]


def compute_job_analytics(jobs: List[JobPosting]) -> JobAnalytics:
    """Aggregate a visible slice of jobs."""
    salaries = [job.salary_range.midpoint for job in jobs if job.salary_range]
    return JobAnalytics(
        total_jobs=len(jobs),
        total_applications=sum(job.applicant_count for job in jobs),
        average_salary=sum(salaries) // len(salaries) if salaries else 0,
        top_industries=top_n((job.industry for job in jobs), 5),
        top_locations=top_n((job.location for job in jobs), 5),
    )


def trending_hashtags(posts: List[Post], n: int = 10) -> List[Tuple[str, int]]:
    counts = Counter(tag for post in posts for tag in post.hashtags)
    return counts.most_common(n)


def compute_post_analytics(posts: List[Post]) -> PostAnalytics:
    total_likes = sum(post.like_count for post in posts)
    total_comments = sum(post.comment_count for post in posts)
    total_shares = sum(post.share_count for post in posts)
    engagement = total_likes + total_comments + total_shares
    return PostAnalytics(
        total_posts=len(posts),
        total_likes=total_likes,
        total_comments=total_comments,
        total_shares=total_shares,
        average_engagement=engagement / len(posts) if posts else 0.0,
        top_hashtags=[tag for tag, _ in trending_hashtags(posts, 5)],
    )


def base_job_title(title: str) -> str:
    """Fold a title into one of the common role names, if it contains one."""
    lowered = title.lower()
    for common in COMMON_TITLES:
        if common.lower() in lowered:
            return common
    return title
