"""CV skill extraction by whole-word matching against a curated skill dictionary."""

import re
from typing import List, Pattern, Tuple

# Canonical skill names, matched in this order (extensible: append new entries; keep unique).
SKILL_DICTIONARY: Tuple[str, ...] = (
    # Programming languages
    "JavaScript", "TypeScript", "Python", "Java", "C#", "C++", "PHP", "Ruby", "Go", "Rust",
    "Swift", "Kotlin", "Scala", "R", "MATLAB", "Perl", "Shell", "Bash",
    # Web technologies
    "HTML", "CSS", "React", "Vue.js", "Angular", "Node.js", "Express", "Next.js", "Nuxt.js",
    "jQuery", "Bootstrap", "Tailwind", "Sass", "LESS", "Webpack", "Vite",
    # Databases
    "MongoDB", "MySQL", "PostgreSQL", "Oracle", "SQL Server", "Redis", "Elasticsearch",
    "DynamoDB", "Firebase", "Cassandra", "Neo4j",
    # Cloud & DevOps
    "AWS", "Azure", "GCP", "Docker", "Kubernetes", "Jenkins", "GitLab CI", "GitHub Actions",
    "Terraform", "Ansible", "CircleCI", "Travis CI",
    # Tools & practices
    "Git", "Linux", "Agile", "Scrum", "Jira", "Confluence", "Slack", "REST API", "GraphQL",
    "Microservices", "TDD", "CI/CD", "DevOps",
    # Data & AI
    "Machine Learning", "Deep Learning", "TensorFlow", "PyTorch", "Scikit-learn", "Pandas",
    "NumPy", "Data Analysis", "Big Data", "Apache Spark", "Hadoop",
    # Mobile
    "React Native", "Flutter", "iOS", "Android", "Xamarin",
    # CRM & business systems
    "CRM", "ERP", "SAP", "Salesforce", "Odoo", "Quadratus", "HubSpot", "Zoho",
    "Marketing", "Project Management", "Gestion de projet", "Commerce",
    # Design & product
    "Photoshop", "Illustrator", "Figma", "Sketch", "Adobe XD", "InVision",
    "UX Design", "UI Design", "Product Management",
)


def _skill_pattern(skill: str) -> Pattern[str]:
    """
    Case-insensitive whole-word pattern for a dictionary entry.
    Look-arounds instead of \\b so entries ending in symbols (C++, C#) still match.
    """
    return re.compile(rf"(?<!\w){re.escape(skill)}(?!\w)", re.IGNORECASE)


_SKILL_PATTERNS: Tuple[Tuple[str, Pattern[str]], ...] = tuple(
    (skill, _skill_pattern(skill)) for skill in SKILL_DICTIONARY
)


def extract_skills(text: str) -> List[str]:
    """
    Return every dictionary skill mentioned in text, in dictionary order.
    "JavaScripting" does not count as "JavaScript"; "I use JavaScript daily" does.
    """
    if not text:
        return []
    return [skill for skill, pattern in _SKILL_PATTERNS if pattern.search(text)]
