"""Eligibility rules deciding who may apply to which job."""

from __future__ import annotations

from typing import Mapping, Protocol, runtime_checkable

from ..schemas import Candidate, CandidateStatus, Job, JobType


@runtime_checkable
class EligibilityPolicy(Protocol):
    """Rule contract for one job type."""

    job_type: JobType
    message: str

    def can_apply(self, candidate: Candidate, job: Job) -> bool:
        """Return True when the candidate may apply to the job."""


class CoopPolicy:
    """CO-OP positions accept only candidates who are still studying."""

    job_type = JobType.COOP
    message = "CO-OP positions are only for STUDYING candidates."

    def can_apply(self, candidate: Candidate, job: Job) -> bool:
        return job.type == JobType.COOP and candidate.status == CandidateStatus.STUDYING


class RegularPolicy:
    """REGULAR positions accept only graduated candidates."""

    job_type = JobType.REGULAR
    message = "REGULAR positions are only for GRADUATED candidates."

    def can_apply(self, candidate: Candidate, job: Job) -> bool:
        return job.type == JobType.REGULAR and candidate.status == CandidateStatus.GRADUATED


DEFAULT_POLICIES: Mapping[JobType, EligibilityPolicy] = {
    JobType.COOP: CoopPolicy(),
    JobType.REGULAR: RegularPolicy(),
}


def policy_for(
    job: Job, policies: Mapping[JobType, EligibilityPolicy] | None = None
) -> EligibilityPolicy | None:
    """Return the policy registered for the job's type, or None."""
    registry = DEFAULT_POLICIES if policies is None else policies
    return registry.get(job.type)


def can_apply(
    candidate: Candidate,
    job: Job,
    policies: Mapping[JobType, EligibilityPolicy] | None = None,
) -> bool:
    policy = policy_for(job, policies)
    if policy is None:
        return False
    return policy.can_apply(candidate, job)
