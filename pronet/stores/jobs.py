"""Job board store: search, pagination, applications and saved jobs."""

import logging
from dataclasses import fields
from typing import Dict, List, Optional

from ..analytics import (
    JobAnalytics,
    JobDetailAnalytics,
    SalaryInsights,
    base_job_title,
    compute_job_analytics,
)
from ..filters import JobSearchFilters, apply_filters
from ..models import ApplicationStatus, JobApplication, JobPosting, User
from ..pagination import PaginationCursor
from ..sample_data import APPLICATION_SOURCES
from ..text_utils import contains_ci
from .base import MutationKind, ObservableStore

logger = logging.getLogger(__name__)


class JobStore(ObservableStore[JobPosting]):
    """In-memory job board backed by a generated catalog."""

    name = "jobs"

    def __init__(
        self,
        session,
        generator,
        events=None,
        page_size: int = 20,
        catalog_size: int = 100,
        initial_count: int = 10,
        search_delay: float = 0.0,
        load_more_delay: float = 0.0,
    ):
        super().__init__(session, generator, events=events, delay=search_delay)
        self.load_more_delay = load_more_delay
        self.cursor = PaginationCursor(page_size)
        self.catalog: List[JobPosting] = generator.generate_jobs(catalog_size)
        self.current_filters = JobSearchFilters()
        self.my_applications: List[JobApplication] = []
        self.saved_jobs: List[JobPosting] = []
        # Matches of the current search, fixed until the criteria change
        self._filtered: List[JobPosting] = []

        self.results = list(self.catalog[:initial_count])
        self.has_more = False
        self.cache_entities(self.results)
        self.analytics = self.compute_analytics()

    def compute_analytics(self) -> JobAnalytics:
        return compute_job_analytics(self.results)

    def mutation_handlers(self):
        return {
            MutationKind.APPLY: self.apply_to_job,
            MutationKind.WITHDRAW: self.withdraw_application,
            MutationKind.SAVE: self.save_job,
            MutationKind.UNSAVE: self.unsave_job,
            MutationKind.DEACTIVATE: self.deactivate_job,
            MutationKind.UPDATE: self.update_job,
            MutationKind.ADVANCE: self.advance_application,
        }

    # Search & discovery

    async def search(self, filters: Optional[JobSearchFilters] = None) -> bool:
        """
        Run a new search over the catalog and publish its first page.

        A search started while another is in flight supersedes it; the older
        one's result is discarded when it completes.

        Returns:
            True if this search's results were published.
        """
        filters = filters or JobSearchFilters()
        self.current_filters = filters
        self.cursor.reset()
        self.has_more = True
        generation = self._begin_loading()

        await self._simulate_latency()
        if self._is_stale(generation):
            return False

        filtered = apply_filters(self.catalog, filters, now=self.generator.now())
        self._filtered = filtered
        page = self.cursor.next_page(filtered)
        self.results = page
        self.has_more = self.cursor.has_more
        self.cache_entities(page)
        logger.info(f"Search matched {len(filtered)} jobs, showing {len(page)}")
        self._finish_loading()
        return True

    async def load_more(self) -> bool:
        """
        Append the next page of the current search.

        Returns:
            True if a page was appended. Does nothing while loading or when
            there are no more pages.
        """
        if self.is_loading or not self.has_more:
            return False

        generation = self._begin_loading()
        await self._simulate_latency(self.load_more_delay)
        if self._is_stale(generation):
            return False

        page = self.cursor.next_page(self._filtered)
        self.results.extend(page)
        self.has_more = self.cursor.has_more
        self.cache_entities(page)
        self._finish_loading()
        return bool(page)

    def featured_jobs(self, limit: int = 5) -> List[JobPosting]:
        """Urgent or popular jobs in random order."""
        candidates = [job for job in self.catalog if job.is_urgent or job.applicant_count > 50]
        self.generator.rng.shuffle(candidates)
        return candidates[:limit]

    def recommended_jobs(self, user: Optional[User] = None) -> List[JobPosting]:
        """
        Jobs matching a member's skills or past employers, newest first.

        Args:
            user: Member to recommend for. Defaults to the session user.
        """
        user = user or self.session.current_user
        if user is None:
            return []

        employers = [exp.company for exp in user.experience if exp.company]

        def skill_match(job: JobPosting) -> bool:
            return any(
                contains_ci(user_skill, skill) or contains_ci(skill, user_skill)
                for skill in job.skills
                for user_skill in user.skills
            )

        def employer_match(job: JobPosting) -> bool:
            return any(
                contains_ci(job.company, company) or contains_ci(job.industry, company)
                for company in employers
            )

        matched = [job for job in self.catalog if skill_match(job) or employer_match(job)]
        return sorted(matched, key=lambda job: job.posted_date, reverse=True)

    # Applications

    def apply_to_job(
        self,
        job_id: str,
        cover_letter: Optional[str] = None,
        resume_url: Optional[str] = None,
    ) -> bool:
        """
        Submit an application for the session user.

        The job's application list and ``my_applications`` are updated as two
        separate steps; nothing ties them together transactionally. The job
        side is only written while the job is in the visible results.

        Returns:
            True if the application was recorded.
        """
        user = self.session.current_user
        job = self.get_by_id(job_id)
        if user is None or job is None:
            if job is None:
                logger.warning(f"Job {job_id} not found")
            return False

        application = JobApplication(
            id=self.generator.new_id(),
            job_id=job.id,
            applicant_user_id=user.id,
            applicant_name=user.full_name,
            applicant_email=user.email,
            applicant_profile_image_url=user.profile_image_url,
            cover_letter=cover_letter,
            resume_url=resume_url,
            application_date=self.generator.now(),
            updated_at=self.generator.now(),
        )

        if self._is_visible(job):
            job.applications.append(application)
            job.applicant_count += 1
        else:
            logger.debug(f"Job {job.id} is not in the visible results, applicant count unchanged")
        self.my_applications.append(application)
        logger.debug(f"Application {application.id} added to my applications (separate write)")

        logger.info(f"Applied to job: {job.title} at {job.company}")
        self.commit()
        return True

    def withdraw_application(self, job_id: str) -> bool:
        """Withdraw the session user's application to a job."""
        user_id = self._current_user_id()
        job = self.get_by_id(job_id)
        if user_id is None or job is None:
            return False

        removed = False
        if self._is_visible(job):
            before = len(job.applications)
            job.applications = [a for a in job.applications if a.applicant_user_id != user_id]
            removed = len(job.applications) < before
            if removed:
                job.applicant_count = max(0, job.applicant_count - 1)

        withdrawn = 0
        for application in self.my_applications:
            if (
                application.job_id == job_id
                and application.applicant_user_id == user_id
                and application.status.can_transition_to(ApplicationStatus.WITHDRAWN)
            ):
                application.status = ApplicationStatus.WITHDRAWN
                application.updated_at = self.generator.now()
                withdrawn += 1

        if not removed and not withdrawn:
            return False

        logger.info(f"Withdrew application to {job.title} at {job.company}")
        self.commit()
        return True

    def _is_visible(self, job: JobPosting) -> bool:
        return any(shown is job for shown in self.results)

    def my_applications_for(self, user_id: Optional[str] = None) -> List[JobApplication]:
        user_id = user_id or self._current_user_id()
        if user_id is None:
            return []
        return [a for a in self.my_applications if a.applicant_user_id == user_id]

    def advance_application(self, application_id: str, status: ApplicationStatus) -> bool:
        """
        Move an application along its lifecycle.

        Returns:
            False if the application is unknown or the transition is not allowed.
        """
        application = next((a for a in self.my_applications if a.id == application_id), None)
        if application is None:
            logger.warning(f"Application {application_id} not found")
            return False
        status = ApplicationStatus(status)
        if not application.status.can_transition_to(status):
            logger.warning(
                f"Application {application_id} cannot move from "
                f"{application.status.value} to {status.value}"
            )
            return False
        application.status = status
        application.updated_at = self.generator.now()
        self.commit()
        return True

    # Job management

    def post_job(self, job: JobPosting) -> JobPosting:
        """Publish a new job at the top of the board."""
        job.posted_date = self.generator.now()
        job.is_active = True
        self.results.insert(0, job)
        self.catalog.insert(0, job)
        self.cache[job.id] = job
        logger.info(f"Posted new job: {job.title} at {job.company}")
        self.commit()
        return job

    def update_job(self, job_id: str, **changes) -> bool:
        """Overwrite fields of a job. Unknown field names are ignored."""
        job = self.get_by_id(job_id)
        if job is None:
            return False
        allowed = {f.name for f in fields(JobPosting)} - {"id"}
        applied = False
        for name, value in changes.items():
            if name in allowed:
                setattr(job, name, value)
                applied = True
            else:
                logger.warning(f"Ignoring unknown job field: {name}")
        if applied:
            self.cache[job.id] = job
            self.commit()
        return applied

    def deactivate_job(self, job_id: str) -> bool:
        job = self.get_by_id(job_id)
        if job is None or not job.is_active:
            return False
        job.is_active = False
        self.commit()
        return True

    # Saved jobs

    def save_job(self, job_id: str) -> bool:
        user_id = self._current_user_id()
        job = self.get_by_id(job_id)
        if user_id is None or job is None or self.is_saved(job_id):
            return False
        self.saved_jobs.append(job)
        job.saved_by_user_ids.add(user_id)
        logger.info(f"Saved job: {job.title}")
        self.commit()
        return True

    def unsave_job(self, job_id: str) -> bool:
        user_id = self._current_user_id()
        job = self.get_by_id(job_id)
        if user_id is None or job is None or not self.is_saved(job_id):
            return False
        self.saved_jobs = [saved for saved in self.saved_jobs if saved.id != job_id]
        job.saved_by_user_ids.discard(user_id)
        self.commit()
        return True

    def is_saved(self, job_id: str) -> bool:
        return any(job.id == job_id for job in self.saved_jobs)

    # Insights

    def job_detail_analytics(self, job_id: str) -> Optional[JobDetailAnalytics]:
        job = self.get_by_id(job_id)
        if job is None:
            return None
        rng = self.generator.rng
        return JobDetailAnalytics(
            job_id=job_id,
            views=job.views,
            applications=job.applicant_count,
            saves=job.save_count,
            click_through_rate=job.applicant_count / job.views * 100 if job.views > 0 else 0.0,
            average_time_to_apply=rng.uniform(2.5, 8.0),
            top_application_sources=list(APPLICATION_SOURCES),
            demographic_breakdown={
                "0-2 years exp": rng.randint(20, 40),
                "3-5 years exp": rng.randint(25, 45),
                "5+ years exp": rng.randint(15, 35),
            },
        )

    def trending_job_titles(self, limit: int = 10) -> List[str]:
        counts: Dict[str, int] = {}
        for job in self.catalog:
            base = base_job_title(job.title)
            counts[base] = counts.get(base, 0) + 1
        ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
        return [title for title, _ in ranked[:limit]]

    def salary_insights(self, job_title: str) -> SalaryInsights:
        similar = [
            job for job in self.catalog
            if contains_ci(job.title, job_title) or contains_ci(job_title, job.title)
        ]
        salaries = [job.salary_range for job in similar if job.salary_range]
        if not salaries:
            return SalaryInsights(average_min=0, average_max=0, job_count=0)
        return SalaryInsights(
            average_min=sum(s.min_salary for s in salaries) // len(salaries),
            average_max=sum(s.max_salary for s in salaries) // len(salaries),
            job_count=len(similar),
            currency=salaries[0].currency,
        )
