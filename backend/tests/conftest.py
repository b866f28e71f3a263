"""Shared test configuration and fixtures."""

import pytest

from api.router import limiter


SAMPLE_JD = """Senior Platform Engineer
Location: Bengaluru, India
Job Type: Full-time
Reports to: VP Engineering

Role Summary
You will own the reliability of our core platform.
Work closely with product teams.

Key Responsibilities
● Design and operate Kubernetes clusters
● Run incident reviews
Mentor the on-call rotation.

Required Experience
- 6+ years in infrastructure roles
- Deep Linux knowledge

Preferred Experience
• Terraform at scale

Success Criteria
Cut P1 incidents by half in six months.

Resume Weightage: 60%
Problem Solutioning Weightage: 40%

Problem
Design a zero-downtime deploy for a stateful service.

What we look for
- Clear trade-offs
- Failure-mode thinking
"""


@pytest.fixture(autouse=True)
def _reset_rate_limits():
    """Each test starts with a fresh rate-limit window."""
    limiter.reset()
    yield


@pytest.fixture
def sample_jd() -> str:
    return SAMPLE_JD
