"""Data models for jobs, posts, users and messaging."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Set


def new_id() -> str:
    return str(uuid.uuid4())


class WorkType(str, Enum):
    REMOTE = "remote"
    ON_SITE = "on_site"
    HYBRID = "hybrid"

    @property
    def title(self) -> str:
        return {"remote": "Remote", "on_site": "On-site", "hybrid": "Hybrid"}[self.value]


class EmploymentType(str, Enum):
    FULL_TIME = "full_time"
    PART_TIME = "part_time"
    CONTRACT = "contract"
    INTERNSHIP = "internship"
    FREELANCE = "freelance"

    @property
    def title(self) -> str:
        return self.value.replace("_", "-").capitalize()


class ExperienceLevel(str, Enum):
    """Seniority, declared from most junior to most senior."""

    INTERNSHIP = "internship"
    ENTRY_LEVEL = "entry_level"
    ASSOCIATE = "associate"
    MID_LEVEL = "mid_level"
    SENIOR = "senior"
    DIRECTOR = "director"
    EXECUTIVE = "executive"

    @property
    def rank(self) -> int:
        return list(ExperienceLevel).index(self)

    @property
    def years_experience(self) -> str:
        return {
            "internship": "0 years",
            "entry_level": "0-1 years",
            "associate": "1-3 years",
            "mid_level": "3-5 years",
            "senior": "5-10 years",
            "director": "10+ years",
            "executive": "15+ years",
        }[self.value]

    def __lt__(self, other):
        if not isinstance(other, ExperienceLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, ExperienceLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, ExperienceLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, ExperienceLevel):
            return NotImplemented
        return self.rank >= other.rank


class ApplicationStatus(str, Enum):
    """Application lifecycle.

    The happy path runs submitted -> reviewing -> shortlisted -> interviewing
    -> offered -> accepted. Rejected and withdrawn end the lifecycle from any
    non-terminal status.
    """

    SUBMITTED = "submitted"
    REVIEWING = "reviewing"
    SHORTLISTED = "shortlisted"
    INTERVIEWING = "interviewing"
    OFFERED = "offered"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    WITHDRAWN = "withdrawn"

    @property
    def is_terminal(self) -> bool:
        return self in (
            ApplicationStatus.ACCEPTED,
            ApplicationStatus.REJECTED,
            ApplicationStatus.WITHDRAWN,
        )

    def can_transition_to(self, other: "ApplicationStatus") -> bool:
        if self.is_terminal or other == self:
            return False
        if other in (ApplicationStatus.REJECTED, ApplicationStatus.WITHDRAWN):
            return True
        return _LIFECYCLE.index(other) > _LIFECYCLE.index(self)


_LIFECYCLE = [
    ApplicationStatus.SUBMITTED,
    ApplicationStatus.REVIEWING,
    ApplicationStatus.SHORTLISTED,
    ApplicationStatus.INTERVIEWING,
    ApplicationStatus.OFFERED,
    ApplicationStatus.ACCEPTED,
]


class CompanySize(str, Enum):
    STARTUP = "startup"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    ENTERPRISE = "enterprise"


class SalaryPeriod(str, Enum):
    HOURLY = "hourly"
    MONTHLY = "monthly"
    YEARLY = "yearly"

    @property
    def suffix(self) -> str:
        return {"hourly": "per hour", "monthly": "per month", "yearly": "per year"}[self.value]


@dataclass
class SalaryRange:
    """Salary band for a posting."""

    min_salary: int
    max_salary: int
    currency: str = "USD"
    period: SalaryPeriod = SalaryPeriod.YEARLY

    @property
    def midpoint(self) -> int:
        return (self.min_salary + self.max_salary) // 2

    @property
    def formatted_range(self) -> str:
        symbol = "$" if self.currency == "USD" else f"{self.currency} "
        return f"{symbol}{self.min_salary:,} - {symbol}{self.max_salary:,} {self.period.suffix}"


@dataclass
class JobApplication:
    """An application submitted by a user to a job posting."""

    job_id: str
    applicant_user_id: str
    applicant_name: str
    applicant_email: str
    id: str = field(default_factory=new_id)
    applicant_profile_image_url: Optional[str] = None
    resume_url: Optional[str] = None
    cover_letter: Optional[str] = None
    application_date: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)
    status: ApplicationStatus = ApplicationStatus.SUBMITTED
    notes: Optional[str] = None


@dataclass
class JobPosting:
    """Represents a job posting."""

    title: str
    company: str
    location: str
    work_type: WorkType
    employment_type: EmploymentType
    experience_level: ExperienceLevel
    description: str = ""
    industry: str = ""
    job_poster_user_id: str = ""
    job_poster_name: str = ""
    id: str = field(default_factory=new_id)
    company_logo_url: Optional[str] = None
    requirements: List[str] = field(default_factory=list)
    responsibilities: List[str] = field(default_factory=list)
    benefits: List[str] = field(default_factory=list)
    skills: List[str] = field(default_factory=list)
    salary_range: Optional[SalaryRange] = None
    posted_date: datetime = field(default_factory=datetime.now)
    application_deadline: Optional[datetime] = None
    applicant_count: int = 0
    views: int = 0
    is_remote: Optional[bool] = None
    is_urgent: bool = False
    is_easy_apply: bool = True
    company_size: CompanySize = CompanySize.MEDIUM
    applications: List[JobApplication] = field(default_factory=list)
    is_active: bool = True
    saved_by_user_ids: Set[str] = field(default_factory=set)
    tags: List[str] = field(default_factory=list)

    def __post_init__(self):
        if self.is_remote is None:
            self.is_remote = self.work_type == WorkType.REMOTE

    @property
    def save_count(self) -> int:
        return len(self.saved_by_user_ids)


@dataclass
class Reply:
    author_id: str
    author_name: str
    content: str
    id: str = field(default_factory=new_id)
    author_profile_image_url: Optional[str] = None
    liked_by_user_ids: Set[str] = field(default_factory=set)
    created_at: datetime = field(default_factory=datetime.now)


@dataclass
class Comment:
    """A comment on a post, with its replies in order."""

    author_id: str
    author_name: str
    content: str
    id: str = field(default_factory=new_id)
    author_profile_image_url: Optional[str] = None
    liked_by_user_ids: Set[str] = field(default_factory=set)
    replies: List[Reply] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    @property
    def like_count(self) -> int:
        return len(self.liked_by_user_ids)


@dataclass
class Post:
    """A feed post."""

    author_id: str
    author_name: str
    content: str
    id: str = field(default_factory=new_id)
    author_headline: Optional[str] = None
    author_profile_image_url: Optional[str] = None
    image_urls: List[str] = field(default_factory=list)
    video_url: Optional[str] = None
    liked_by_user_ids: Set[str] = field(default_factory=set)
    comments: List[Comment] = field(default_factory=list)
    share_count: int = 0
    hashtags: List[str] = field(default_factory=list)
    mentions: List[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)
    is_edited: bool = False

    @property
    def like_count(self) -> int:
        return len(self.liked_by_user_ids)

    @property
    def comment_count(self) -> int:
        return len(self.comments)

    def is_liked_by(self, user_id: str) -> bool:
        return user_id in self.liked_by_user_ids

    def find_comment(self, comment_id: str) -> Optional[Comment]:
        return next((c for c in self.comments if c.id == comment_id), None)


@dataclass
class Experience:
    title: str
    company: str
    start_date: datetime
    end_date: Optional[datetime] = None
    location: Optional[str] = None
    description: Optional[str] = None
    is_current_role: bool = False


@dataclass
class Education:
    institution: str
    degree: str
    start_date: datetime
    end_date: Optional[datetime] = None
    field_of_study: Optional[str] = None


@dataclass
class User:
    """A member profile."""

    email: str
    full_name: str
    id: str = field(default_factory=new_id)
    profile_image_url: Optional[str] = None
    headline: str = ""
    bio: str = ""
    location: str = ""
    experience: List[Experience] = field(default_factory=list)
    education: List[Education] = field(default_factory=list)
    skills: List[str] = field(default_factory=list)
    connections: List[str] = field(default_factory=list)
    pending_connections: List[str] = field(default_factory=list)
    is_online: bool = False
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def initials(self) -> str:
        parts = self.full_name.split()
        if not parts:
            return ""
        first = parts[0][0]
        last = parts[-1][0] if len(parts) > 1 else ""
        return (first + last).upper()


class ConnectionStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    BLOCKED = "blocked"
    WITHDRAWN = "withdrawn"


@dataclass
class Connection:
    from_user_id: str
    to_user_id: str
    id: str = field(default_factory=new_id)
    status: ConnectionStatus = ConnectionStatus.PENDING
    request_message: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)
    accepted_at: Optional[datetime] = None


@dataclass
class ConnectionRequest:
    """An incoming connection request with both ends resolved."""

    connection: Connection
    from_user: User
    to_user: User
    id: str = field(default_factory=new_id)


class NotificationType(str, Enum):
    LIKE = "like"
    COMMENT = "comment"
    SHARE = "share"
    CONNECTION_REQUEST = "connection_request"
    CONNECTION_ACCEPTED = "connection_accepted"
    MENTION = "mention"
    MESSAGE = "message"
    JOB_ALERT = "job_alert"
    POST_UPDATE = "post_update"
    PROFILE_VIEW = "profile_view"


@dataclass
class Notification:
    user_id: str
    type: NotificationType
    title: str
    message: str
    id: str = field(default_factory=new_id)
    from_user_id: Optional[str] = None
    from_user_name: Optional[str] = None
    from_user_profile_image_url: Optional[str] = None
    post_id: Optional[str] = None
    connection_request_id: Optional[str] = None
    is_read: bool = False
    action_taken: bool = False
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)


class MessageType(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    DOCUMENT = "document"
    VOICE = "voice"


@dataclass
class Message:
    chat_room_id: str
    sender_id: str
    sender_name: str
    content: str
    message_type: MessageType = MessageType.TEXT
    id: str = field(default_factory=new_id)
    sender_profile_image_url: Optional[str] = None
    image_url: Optional[str] = None
    video_url: Optional[str] = None
    document_url: Optional[str] = None
    is_read: bool = False
    read_by: Dict[str, datetime] = field(default_factory=dict)
    created_at: datetime = field(default_factory=datetime.now)


@dataclass
class Conversation:
    id: str
    other_user: User
    last_message: Optional[Message] = None
    unread_count: int = 0
