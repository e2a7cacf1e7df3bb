"""Tests for job search filters and the post search predicate."""

from datetime import timedelta

import pytest

from pronet.filters import DateRange, JobSearchFilters, apply_filters, matches, post_matches
from pronet.models import (
    CompanySize,
    EmploymentType,
    ExperienceLevel,
    JobPosting,
    Post,
    SalaryRange,
    WorkType,
)


def make_job(now, **overrides):
    values = dict(
        title="Senior Software Engineer",
        company="Acme",
        location="Seattle, WA",
        work_type=WorkType.HYBRID,
        employment_type=EmploymentType.FULL_TIME,
        experience_level=ExperienceLevel.SENIOR,
        industry="Technology",
        skills=["Python", "Kubernetes"],
        salary_range=SalaryRange(140000, 170000),
        posted_date=now - timedelta(days=3),
        is_easy_apply=True,
        company_size=CompanySize.LARGE,
    )
    values.update(overrides)
    return JobPosting(**values)


class TestEmptyFilters:
    """An empty filter places no constraint."""

    def test_is_empty(self):
        assert JobSearchFilters().is_empty()
        assert not JobSearchFilters(keywords="x").is_empty()

    def test_accepts_every_generated_job(self, generator, now):
        jobs = generator.generate_jobs(100)
        assert apply_filters(jobs, JobSearchFilters(), now=now) == jobs

    def test_preserves_order(self, generator, now):
        jobs = generator.generate_jobs(30)
        filtered = apply_filters(jobs, JobSearchFilters(is_remote_only=True), now=now)
        positions = [jobs.index(job) for job in filtered]
        assert positions == sorted(positions)


class TestKeywords:
    """Keywords match title, company or any skill, ignoring case."""

    @pytest.mark.parametrize("keywords", ["engineer", "ENGINEER", "EnGiNeEr"])
    def test_case_insensitive_title(self, now, keywords):
        assert matches(make_job(now), JobSearchFilters(keywords=keywords), now)

    def test_matches_company(self, now):
        assert matches(make_job(now), JobSearchFilters(keywords="acme"), now)

    def test_matches_skill(self, now):
        assert matches(make_job(now), JobSearchFilters(keywords="kubern"), now)

    def test_no_match(self, now):
        assert not matches(make_job(now), JobSearchFilters(keywords="accountant"), now)


class TestCategoricalConstraints:
    def test_location_substring(self, now):
        job = make_job(now)
        assert matches(job, JobSearchFilters(location="seattle"), now)
        assert not matches(job, JobSearchFilters(location="boston"), now)

    def test_work_type_set(self, now):
        job = make_job(now)
        assert matches(job, JobSearchFilters(work_types={WorkType.HYBRID, WorkType.REMOTE}), now)
        assert not matches(job, JobSearchFilters(work_types={WorkType.REMOTE}), now)

    def test_employment_type_set(self, now):
        job = make_job(now)
        assert not matches(job, JobSearchFilters(employment_types={EmploymentType.CONTRACT}), now)

    def test_experience_level_set(self, now):
        job = make_job(now)
        assert matches(job, JobSearchFilters(experience_levels={ExperienceLevel.SENIOR}), now)
        assert not matches(job, JobSearchFilters(experience_levels={ExperienceLevel.DIRECTOR}), now)

    def test_industry_ignores_case(self, now):
        assert matches(make_job(now), JobSearchFilters(industries={"technology"}), now)
        assert not matches(make_job(now), JobSearchFilters(industries={"Healthcare"}), now)

    def test_company_size(self, now):
        assert not matches(make_job(now), JobSearchFilters(company_sizes={CompanySize.STARTUP}), now)

    def test_remote_only(self, now):
        assert not matches(make_job(now), JobSearchFilters(is_remote_only=True), now)
        remote = make_job(now, work_type=WorkType.REMOTE)
        assert remote.is_remote
        assert matches(remote, JobSearchFilters(is_remote_only=True), now)

    def test_easy_apply_only(self, now):
        job = make_job(now, is_easy_apply=False)
        assert not matches(job, JobSearchFilters(is_easy_apply_only=True), now)


class TestSalary:
    """Salary bounds select jobs whose range overlaps them."""

    def test_overlapping_range_matches(self, now):
        job = make_job(now)
        assert matches(job, JobSearchFilters(salary_min=160000), now)
        assert matches(job, JobSearchFilters(salary_max=150000), now)

    def test_disjoint_range_rejected(self, now):
        job = make_job(now)
        assert not matches(job, JobSearchFilters(salary_min=180000), now)
        assert not matches(job, JobSearchFilters(salary_max=100000), now)

    def test_job_without_salary_fails_when_bound_set(self, now):
        job = make_job(now, salary_range=None)
        assert matches(job, JobSearchFilters(), now)
        assert not matches(job, JobSearchFilters(salary_min=1), now)


class TestPostedWithin:
    def test_cutoffs(self, now):
        assert DateRange.ANY_TIME.cutoff(now) is None
        assert DateRange.PAST_DAY.cutoff(now) == now - timedelta(days=1)
        assert DateRange.PAST_WEEK.cutoff(now) == now - timedelta(days=7)
        assert DateRange.PAST_MONTH.cutoff(now) == now - timedelta(days=30)

    def test_past_day_excludes_older_job(self, now):
        job = make_job(now)
        assert not matches(job, JobSearchFilters(posted_within=DateRange.PAST_DAY), now)
        assert matches(job, JobSearchFilters(posted_within=DateRange.PAST_WEEK), now)


class TestFromDict:
    def test_builds_enum_sets(self):
        filters = JobSearchFilters.from_dict({
            "keywords": "python",
            "work_types": ["remote"],
            "experience_levels": ["senior", "director"],
            "posted_within": "past_week",
            "salary_min": 100000,
        })
        assert filters.work_types == {WorkType.REMOTE}
        assert filters.experience_levels == {ExperienceLevel.SENIOR, ExperienceLevel.DIRECTOR}
        assert filters.posted_within is DateRange.PAST_WEEK
        assert filters.salary_min == 100000

    def test_empty_dict(self):
        assert JobSearchFilters.from_dict({}).is_empty()

    def test_unknown_enum_value(self):
        with pytest.raises(ValueError):
            JobSearchFilters.from_dict({"work_types": ["underwater"]})


class TestPostMatches:
    def test_content_author_and_hashtag(self):
        post = Post(
            author_id="a",
            author_name="Lisa Wang",
            content="Great conference",
            hashtags=["#ai"],
        )
        assert post_matches(post, "CONFERENCE")
        assert post_matches(post, "lisa")
        assert post_matches(post, "#AI")
        assert not post_matches(post, "kubernetes")

    def test_empty_query_matches(self):
        assert post_matches(Post(author_id="a", author_name="b", content="c"), "")
