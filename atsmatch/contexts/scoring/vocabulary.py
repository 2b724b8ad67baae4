"""
Fixed vocabularies for resume and job description matching.

Every vocabulary is an ordered tuple of lowercase phrases. Order matters:
matched and missing lists are reported in the order declared here.

TECHNICAL_SKILLS and SOFT_SKILLS are disjoint, so a skill is never reported
twice when the two lists are concatenated.
"""

# =============================================================================
# SKILL VOCABULARIES
# =============================================================================

TECHNICAL_SKILLS = (
    "javascript",
    "python",
    "java",
    "react",
    "node.js",
    "typescript",
    "html",
    "css",
    "sql",
    "mongodb",
    "postgresql",
    "git",
    "docker",
    "kubernetes",
    "aws",
    "azure",
    "machine learning",
    "data analysis",
    "artificial intelligence",
    "angular",
    "vue.js",
    "php",
    "ruby",
    "go",
    "rust",
    "c++",
    "c#",
    ".net",
    "spring",
    "django",
    "flask",
    "express",
    "graphql",
    "rest api",
    "microservices",
    "devops",
    "ci/cd",
    "jenkins",
    "terraform",
    "linux",
    "unix",
    "bash",
    "powershell",
    "agile",
    "scrum",
    "jira",
)

SOFT_SKILLS = (
    "leadership",
    "communication",
    "teamwork",
    "problem solving",
    "analytical thinking",
    "project management",
    "time management",
    "adaptability",
    "creativity",
    "collaboration",
    "critical thinking",
    "decision making",
    "mentoring",
    "strategic thinking",
    "customer service",
    "presentation skills",
    "negotiation",
    "conflict resolution",
)

# Matched skills from this set earn the leadership strength
LEADERSHIP_SKILLS = frozenset({"leadership", "management", "lead"})


# =============================================================================
# KEYWORD VOCABULARIES
# =============================================================================

# Phrases that commonly appear in job descriptions
IMPORTANT_KEYWORDS = (
    "experience",
    "bachelor",
    "master",
    "degree",
    "certification",
    "years",
    "senior",
    "junior",
    "lead",
    "manager",
    "architect",
    "developer",
    "engineer",
    "analyst",
    "consultant",
    "specialist",
    "coordinator",
    "director",
    "startup",
    "enterprise",
    "remote",
    "hybrid",
    "full-time",
    "part-time",
    "contract",
)

EDUCATION_KEYWORDS = ("bachelor", "master", "phd", "degree", "university", "college")

ROLE_KEYWORDS = (
    "developer",
    "engineer",
    "manager",
    "analyst",
    "designer",
    "architect",
    "consultant",
)

INDUSTRY_KEYWORDS = (
    "tech",
    "technology",
    "software",
    "finance",
    "healthcare",
    "education",
    "retail",
)


# Convenience mapping for listing and iteration
VOCABULARIES = {
    "technical": TECHNICAL_SKILLS,
    "soft": SOFT_SKILLS,
    "keywords": IMPORTANT_KEYWORDS,
    "education": EDUCATION_KEYWORDS,
    "roles": ROLE_KEYWORDS,
    "industries": INDUSTRY_KEYWORDS,
}
