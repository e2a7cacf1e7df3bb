"""Demo data generator.

Every entity is synthesized from the template pools in ``sample_data``.
Template fields are picked by index (``pool[index % len(pool)]``) so the shape
of a dataset is deterministic; the remaining fields are drawn from the
injected ``random.Random``. Seed that generator to make a dataset repeatable.
"""

import random
import uuid
from datetime import datetime, timedelta
from typing import Callable, List, Optional

from . import sample_data
from .models import (
    Comment,
    CompanySize,
    Connection,
    ConnectionRequest,
    Conversation,
    EmploymentType,
    ExperienceLevel,
    JobPosting,
    Message,
    Notification,
    NotificationType,
    Post,
    SalaryRange,
    User,
    WorkType,
)
from .text_utils import extract_hashtags, extract_mentions

IMAGE_BASE_URL = "https://picsum.photos"


class DemoDataGenerator:
    """Builds demo jobs, posts, users, notifications and chat fixtures."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        now: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize the generator.

        Args:
            rng: Random source. A fresh unseeded one is used when omitted.
            now: Clock returning the reference time for relative dates.
        """
        self.rng = rng or random.Random()
        self.now = now or datetime.now

    def new_id(self) -> str:
        """Return a UUID string drawn from the generator's random source."""
        return str(uuid.UUID(int=self.rng.getrandbits(128), version=4))

    # Jobs

    def generate_jobs(self, count: int, start: int = 0) -> List[JobPosting]:
        """
        Generate ``count`` job postings.

        Args:
            count: Number of jobs to build.
            start: Template index of the first job.

        Returns:
            List of fully populated JobPosting objects.
        """
        return [self._build_job(index) for index in range(start, start + count)]

    def _build_job(self, index: int) -> JobPosting:
        title = sample_data.JOB_TITLES[index % len(sample_data.JOB_TITLES)]
        company = sample_data.COMPANIES[index % len(sample_data.COMPANIES)]
        location = sample_data.JOB_LOCATIONS[index % len(sample_data.JOB_LOCATIONS)]
        industry = sample_data.INDUSTRIES[index % len(sample_data.INDUSTRIES)]

        if location == "Remote":
            work_type = WorkType.REMOTE
        else:
            work_type = self.rng.choice(list(WorkType))
        level = self.rng.choice(list(ExperienceLevel))

        job = JobPosting(
            id=self.new_id(),
            title=title,
            company=company,
            location=location,
            work_type=work_type,
            employment_type=self.rng.choice(list(EmploymentType)),
            experience_level=level,
            description=self.rng.choice(sample_data.JOB_DESCRIPTIONS),
            industry=industry,
            job_poster_user_id=self.new_id(),
            job_poster_name="HR Team",
        )
        job.company_logo_url = f"{IMAGE_BASE_URL}/100/100?random={index}"
        job.requirements = self._requirements_for(title)
        job.responsibilities = list(sample_data.RESPONSIBILITIES)
        job.benefits = list(sample_data.BENEFITS)
        job.skills = self.rng.sample(sample_data.SKILLS, self.rng.randint(3, 8))
        job.salary_range = salary_range_for(level, title)
        job.applicant_count = self.rng.randint(5, 150)
        job.views = self.rng.randint(job.applicant_count * 3, job.applicant_count * 10)
        job.is_urgent = self.rng.random() < 0.5 and self.rng.randint(0, 10) < 2
        job.is_easy_apply = self.rng.random() < 0.7
        job.company_size = self.rng.choice(list(CompanySize))
        job.posted_date = self.now() - timedelta(seconds=self.rng.uniform(0, 30 * 24 * 3600))
        return job

    @staticmethod
    def _requirements_for(title: str) -> List[str]:
        if "Engineer" in title or "Developer" in title:
            return sample_data.COMMON_REQUIREMENTS + sample_data.TECH_REQUIREMENTS
        return sample_data.COMMON_REQUIREMENTS + sample_data.DOMAIN_REQUIREMENTS

    # Posts

    def generate_posts(self, count: int, start: int = 0) -> List[Post]:
        """Generate ``count`` feed posts cycling through the author and content pools."""
        posts = []
        for index in range(start, start + count):
            author, headline = sample_data.POST_AUTHORS[index % len(sample_data.POST_AUTHORS)]
            content = sample_data.POST_CONTENTS[index % len(sample_data.POST_CONTENTS)]
            image = self.rng.choice(sample_data.POST_IMAGES) if index % 3 == 0 else None
            posts.append(
                self._build_post(
                    author=author,
                    headline=headline,
                    content=content,
                    image=image,
                    likes=self.rng.randint(15, 250),
                    comments=self.rng.randint(2, 45),
                    shares=self.rng.randint(0, 25),
                    profile_image=f"{IMAGE_BASE_URL}/150/150?random={index % len(sample_data.POST_AUTHORS)}",
                )
            )
        return posts

    def featured_posts(self) -> List[Post]:
        """The fixed showcase posts shown before the feed is first fetched."""
        return [
            self._build_post(
                author=featured["author"],
                headline=featured["headline"],
                content=featured["content"],
                image=featured["image"],
                likes=featured["likes"],
                comments=featured["comments"],
                shares=featured["shares"],
            )
            for featured in sample_data.FEATURED_POSTS
        ]

    def _build_post(
        self,
        author: str,
        headline: str,
        content: str,
        image: Optional[str] = None,
        likes: int = 0,
        comments: int = 0,
        shares: int = 0,
        profile_image: Optional[str] = None,
    ) -> Post:
        post = Post(
            id=self.new_id(),
            author_id=self.new_id(),
            author_name=author,
            content=content,
            author_headline=headline,
            author_profile_image_url=profile_image,
        )
        post.created_at = self.now() - timedelta(seconds=self.rng.uniform(0, 7 * 24 * 3600))
        post.updated_at = post.created_at
        if image:
            post.image_urls = [f"{IMAGE_BASE_URL}/600/400?{image}"]
        post.liked_by_user_ids = {self.new_id() for _ in range(likes)}
        post.share_count = shares
        post.comments = [
            Comment(
                id=self.new_id(),
                author_id=self.new_id(),
                author_name=sample_data.COMMENT_AUTHORS[i % len(sample_data.COMMENT_AUTHORS)],
                content=sample_data.COMMENT_CONTENTS[i % len(sample_data.COMMENT_CONTENTS)],
            )
            for i in range(comments)
        ]
        post.hashtags = extract_hashtags(content)
        post.mentions = extract_mentions(content)
        return post

    # Network

    def generate_users(self) -> List[User]:
        """Suggested members for the network screen."""
        users = []
        for index, (email, name, headline, bio, location, skills) in enumerate(
            sample_data.SUGGESTED_USERS
        ):
            users.append(
                User(
                    id=self.new_id(),
                    email=email,
                    full_name=name,
                    headline=headline,
                    bio=bio,
                    location=location,
                    skills=list(skills),
                    profile_image_url=f"{IMAGE_BASE_URL}/150/150?random={index + 100}",
                )
            )
        return users

    def generate_connections(self) -> List[User]:
        return [
            User(
                id=self.new_id(),
                email=email,
                full_name=name,
                headline=headline,
                profile_image_url=f"{IMAGE_BASE_URL}/150/150?random={index + 200}",
            )
            for index, (email, name, headline) in enumerate(sample_data.CONNECTED_USERS)
        ]

    def generate_pending_requests(self, to_user: User) -> List[ConnectionRequest]:
        requests = []
        for index, (email, name, headline) in enumerate(sample_data.PENDING_USERS):
            sender = User(
                id=self.new_id(),
                email=email,
                full_name=name,
                headline=headline,
                profile_image_url=f"{IMAGE_BASE_URL}/150/150?random={index + 300}",
            )
            connection = Connection(id=self.new_id(), from_user_id=sender.id, to_user_id=to_user.id)
            requests.append(
                ConnectionRequest(
                    id=self.new_id(),
                    connection=connection,
                    from_user=sender,
                    to_user=to_user,
                )
            )
        return requests

    # Notifications

    def generate_notifications(self, user_id: str) -> List[Notification]:
        """Seven fixture notifications an hour apart; the first three are unread."""
        notifications = []
        for index, (kind, title, message, from_name) in enumerate(
            sample_data.NOTIFICATION_FIXTURES
        ):
            created = self.now() - timedelta(hours=index)
            notifications.append(
                Notification(
                    id=self.new_id(),
                    user_id=user_id,
                    type=NotificationType(kind),
                    title=title,
                    message=message,
                    from_user_id=f"user_{index}",
                    from_user_name=from_name,
                    from_user_profile_image_url=f"{IMAGE_BASE_URL}/40/40?random={index + 600}",
                    is_read=index > 2,
                    created_at=created,
                    updated_at=created,
                )
            )
        return notifications

    def random_notification(self, user_id: str) -> Notification:
        kind, action = self.rng.choice(sample_data.SIMULATED_NOTIFICATIONS)
        notification_type = NotificationType(kind)
        return Notification(
            id=self.new_id(),
            user_id=user_id,
            type=notification_type,
            title=notification_type.value.replace("_", " ").title(),
            message=f"Demo User {action}",
            created_at=self.now(),
            updated_at=self.now(),
        )

    # Chat

    def generate_conversations(self) -> List[Conversation]:
        conversations = []
        for index, (email, name, headline, last_text) in enumerate(
            sample_data.CONVERSATION_PARTNERS
        ):
            user = User(
                id=self.new_id(),
                email=email,
                full_name=name,
                headline=headline,
                profile_image_url=f"{IMAGE_BASE_URL}/60/60?random={index + 400}",
            )
            room_id = f"chat_{index}"
            last_message = Message(
                id=self.new_id(),
                chat_room_id=room_id,
                sender_id=user.id,
                sender_name=user.full_name,
                content=last_text,
                created_at=self.now() - timedelta(minutes=30 * index),
            )
            conversations.append(
                Conversation(
                    id=room_id,
                    other_user=user,
                    last_message=last_message,
                    unread_count=2 if index == 0 else 0,
                )
            )
        return conversations

    def generate_messages(self, chat_room_id: str, user: User) -> List[Message]:
        """A scripted back-and-forth between ``user`` and a contact, oldest first."""
        total = len(sample_data.CHAT_SCRIPT)
        messages = []
        for index, (from_user, text) in enumerate(sample_data.CHAT_SCRIPT):
            messages.append(
                Message(
                    id=self.new_id(),
                    chat_room_id=chat_room_id,
                    sender_id=user.id if from_user else "other_user",
                    sender_name=user.full_name if from_user else "Sarah Martinez",
                    content=text,
                    sender_profile_image_url=f"{IMAGE_BASE_URL}/40/40?random={index + 500}",
                    created_at=self.now() - timedelta(minutes=5 * (total - index)),
                )
            )
        return messages


def salary_range_for(level: ExperienceLevel, title: str) -> SalaryRange:
    """Yearly USD band derived from seniority and the kind of role."""
    base = sample_data.BASE_SALARY_BY_LEVEL[level.value]
    if "Engineer" in title or "Developer" in title:
        multiplier = 1.1
    elif "Manager" in title or "Director" in title:
        multiplier = 1.2
    elif "Scientist" in title:
        multiplier = 1.15
    else:
        multiplier = 1.0
    adjusted = int(base * multiplier)
    return SalaryRange(min_salary=adjusted - 10000, max_salary=adjusted + 20000)
