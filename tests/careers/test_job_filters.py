from app.domains.careers.filters import (
    ALL,
    JobFilter,
    apply_filter,
    derive_facets,
    facet_options,
    filter_jobs,
    job_type_label,
)
from app.domains.companies.schemas import Job


def make_job(job_id, title, location, job_type="full-time", department=None, description="", is_active=None):
    return Job(
        id=job_id,
        title=title,
        description=description,
        location=location,
        job_type=job_type,
        department=department,
        is_active=is_active,
    )


JOBS = [
    make_job("1", "Senior Engineer", "San Francisco, CA", department="Engineering", description="Python services"),
    make_job("2", "Product Designer", "New York, NY", department="Design", description="Figma"),
    make_job("3", "Data Intern", "Remote", job_type="internship", department="Engineering"),
    make_job("4", "Retired Role", "Remote", job_type="contract", is_active=False),
    make_job("5", "Support Lead", "Remote", job_type="part-time", department=""),
]


def ids(jobs):
    return [job.id for job in jobs]


def test_defaults_return_active_jobs_in_order():
    assert ids(filter_jobs(JOBS)) == ["1", "2", "3", "5"]
    assert ids(filter_jobs(JOBS, "", ALL, ALL, ALL)) == ["1", "2", "3", "5"]


def test_query_matches_title_description_or_location():
    assert ids(filter_jobs(JOBS, query="designer")) == ["2"]
    assert ids(filter_jobs(JOBS, query="PYTHON")) == ["1"]
    assert ids(filter_jobs(JOBS, query="remote")) == ["3", "5"]
    # 부서는 검색 대상이 아님
    assert ids(filter_jobs(JOBS, query="design")) == ["2"]


def test_facets_are_exact_and_anded():
    assert ids(filter_jobs(JOBS, location="Remote")) == ["3", "5"]
    assert ids(filter_jobs(JOBS, location="remote")) == []
    assert ids(filter_jobs(JOBS, department="Engineering")) == ["1", "3"]
    assert ids(filter_jobs(JOBS, location="Remote", department="Engineering")) == ["3"]
    assert ids(filter_jobs(JOBS, query="lead", location="Remote", job_type="part-time")) == ["5"]
    assert ids(filter_jobs(JOBS, job_type="contract")) == []


def test_end_to_end_remote_toggle():
    jobs = [
        make_job("a", "Engineer", "Remote"),
        make_job("b", "Engineer", "Remote", is_active=False),
    ]
    assert ids(filter_jobs(jobs)) == ["a"]
    assert ids(filter_jobs(jobs, location="Berlin")) == []
    assert ids(filter_jobs(jobs, location="Remote")) == ["a"]


def test_apply_filter_and_active_flag():
    job_filter = JobFilter(location="Remote")
    assert job_filter.has_active_filters is True
    assert ids(apply_filter(JOBS, job_filter)) == ["3", "5"]
    # 검색어만 있으면 "필터 적용 중"이 아님
    assert JobFilter(query="engineer").has_active_filters is False


def test_facets_ignore_inactive_and_empty_departments():
    facets = derive_facets(JOBS)
    assert facets.locations == ["New York, NY", "Remote", "San Francisco, CA"]
    assert facets.job_types == ["full-time", "internship", "part-time"]
    assert facets.departments == ["Design", "Engineering"]


def test_facet_options_start_with_all():
    options = facet_options(derive_facets(JOBS))
    assert options["location"][0].value == ALL
    assert options["location"][0].label == "All Locations"
    assert options["job_type"][1].label == "Full Time"
    assert [o.value for o in options["department"]] == [ALL, "Design", "Engineering"]


def test_job_type_label():
    assert job_type_label("full-time") == "Full Time"
    assert job_type_label("internship") == "Internship"
