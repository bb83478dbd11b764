"""Fixed reference vocabulary for skill matching, and keyword stop words."""

# Canonical casing; extraction preserves this order.
SKILLS: tuple[str, ...] = (
    # Languages
    "JavaScript", "TypeScript", "Python", "Java", "C++", "C#", "Ruby", "Go", "Rust", "PHP",
    # Frameworks
    "React", "Angular", "Vue", "Next.js", "Node.js", "Express", "NestJS", "Django", "Flask",
    # Cloud / DevOps
    "AWS", "Azure", "GCP", "Docker", "Kubernetes", "CI/CD", "Git", "GitHub",
    # Data stores
    "SQL", "PostgreSQL", "MySQL", "MongoDB", "Redis", "Firebase", "GraphQL",
    # Web
    "HTML", "CSS", "Sass", "Tailwind", "Bootstrap",
    # Practices
    "REST", "API", "Microservices", "Agile", "Scrum",
    # ML / data
    "Machine Learning", "AI", "Data Science", "TensorFlow", "PyTorch",
)

STOP_WORDS: frozenset[str] = frozenset({
    "that", "this", "with", "from", "have", "been", "were", "they", "will",
    "would", "could", "should", "about", "which", "their", "there", "these",
    "those", "being", "other",
})
