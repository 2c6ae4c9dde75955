"""Shared test configuration and CV fixtures."""

import pytest


STRONG_CV = """Jane Doe
jane.doe@example.com | +1 555 010 2030 | linkedin.com/in/janedoe

Professional Summary
Software engineer with eight years building reliable web platforms for fintech and logistics companies. I focus on backend services in Python and Java, cloud infrastructure on AWS, and clear communication with product teams. I enjoy mentoring engineers and turning ambiguous requirements into simple, well-tested systems that scale.

Experience
Senior Software Engineer, Acme Payments, 2020 - Present
• Led a team of six engineers delivering a payments platform that processes two million transactions per day
• Developed microservices in Python and Node.js with PostgreSQL and Redis, cutting checkout latency by 40%
• Improved deployment reliability by building CI/CD pipelines with Docker and Kubernetes on AWS
• Implemented a code review checklist and unit testing standards adopted across four teams
• Mentored five junior developers through weekly pairing sessions and design discussions
Software Engineer, Beta Logistics, 2016 - 2020
• Designed REST API endpoints in Java and Spring for route planning used by 300 dispatchers
• Automated nightly data exports with SQL and TypeScript tooling, saving ten hours per week
• Migrated legacy reporting jobs to React dashboards backed by Git-versioned configuration
• Reduced incident response time by 30% through on-call runbooks and Agile retrospectives
Junior Developer, Gamma Studio, 2014 - 2016
• Built internal admin tools for a small design agency serving regional retail clients
• Maintained the company website and fixed layout bugs reported by customers and account managers
• Created onboarding guides that helped new hires set up local environments in one afternoon

Technical Skills
Python, JavaScript, TypeScript, Java, SQL, React, Node.js, Docker, Kubernetes, AWS

Education
Bachelor of Science in Computer Science, State University, 2016
Graduated with a focus on distributed systems and databases
"""

WEAK_CV = (
    "I am a hard working person who likes to help people and learn new things every day. "
    "I have done many jobs in shops and offices over the years and I get along with everyone. "
    "I am looking for a good job near my home where I can grow and be happy at work."
)


@pytest.fixture
def strong_cv() -> str:
    return STRONG_CV


@pytest.fixture
def weak_cv() -> str:
    return WEAK_CV
