# /pathway/skill_extractor.py

import re
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from langchain_core.prompts import ChatPromptTemplate
from langchain_google_genai import ChatGoogleGenerativeAI

from pathway.config import settings
from pathway.logger import get_logger
from pathway.models import ExtractedSkill, ExtractedSkills

logger = get_logger(__name__)

SKILL_PATTERNS = [
    # Technical
    "JavaScript", "TypeScript", "Python", "Java", "C#", "React", "Angular", "Vue",
    "Node.js", "Express", "Django", "Flask", "Spring", ".NET", "SQL", "NoSQL",
    "MongoDB", "PostgreSQL", "MySQL", "Redis", "Docker", "Kubernetes", "AWS",
    "Azure", "GCP", "Git", "CI/CD", "Jenkins", "REST API", "GraphQL",
    # AI / ML
    "Machine Learning", "Deep Learning", "NLP", "Computer Vision", "TensorFlow",
    "PyTorch", "Scikit-learn", "Data Science", "Data Analysis", "Statistics",
    # Business tools
    "Salesforce", "ServiceNow", "SAP", "Oracle", "Workday", "HubSpot",
    "Microsoft Office", "Excel", "PowerPoint", "Tableau", "Power BI",
    "Google Analytics", "Jira", "Confluence", "Monday.com", "Asana",
    # Soft skills
    "Project Management", "Team Leadership", "Communication", "Problem Solving",
    "Critical Thinking", "Collaboration", "Time Management", "Customer Service",
    "Sales", "Marketing", "Business Development", "Strategic Planning",
]

SKILL_CATEGORIES = {
    "Programming": ["JavaScript", "TypeScript", "Python", "Java", "C#"],
    "Frontend": ["React", "Angular", "Vue", "HTML", "CSS"],
    "Backend": ["Node.js", "Express", "Django", "Flask", "Spring", ".NET"],
    "Database": ["SQL", "NoSQL", "MongoDB", "PostgreSQL", "MySQL", "Redis"],
    "DevOps": ["Docker", "Kubernetes", "AWS", "Azure", "GCP", "CI/CD"],
    "AI/ML": ["Machine Learning", "Deep Learning", "TensorFlow", "PyTorch"],
    "Business Tools": ["Salesforce", "ServiceNow", "SAP", "Microsoft Office"],
    "Analytics": ["Tableau", "Power BI", "Google Analytics", "Data Analysis"],
    "Management": ["Project Management", "Team Leadership", "Strategic Planning"],
    "Communication": ["Communication", "Customer Service", "Sales", "Marketing"],
}

SOFT_MARKERS = ["communication", "leadership", "management", "collaboration", "problem solving"]
TECHNICAL_MARKERS = ["javascript", "python", "java", "react", "docker", "aws", "machine learning"]

SECTION_RE = re.compile(r"(skills|technical|expertise|proficient|experienced)", re.IGNORECASE)
SECTION_WINDOW = 100


class SkillExtractor(ABC):
    """Finds skill names mentioned in free text such as a CV or a profile summary."""
    @abstractmethod
    def extract(self, text: str) -> List[ExtractedSkill]:
        pass


def _skill_regex(skill: str) -> re.Pattern:
    return re.compile(r"(?<![a-z0-9])" + re.escape(skill.lower()) + r"(?![a-z0-9])")


def classify_skill(skill: str) -> str:
    lowered = skill.lower()
    if any(marker in lowered for marker in SOFT_MARKERS):
        return "soft"
    if any(marker in lowered for marker in TECHNICAL_MARKERS):
        return "technical"
    return "domain"


class KeywordSkillExtractor(SkillExtractor):
    """
    Pattern matching against a fixed skill list plus any extra names (usually the
    graph's skill nodes). Confidence starts at 0.7 and grows with repetition and
    with a nearby "skills"/"expertise"-style heading, capped at 1.0.
    """

    def __init__(self, extra_skills: Optional[Dict[str, str]] = None):
        # extra_skills maps a skill name to its category.
        self.categories: Dict[str, str] = {
            skill.lower(): category for category, skills in SKILL_CATEGORIES.items() for skill in skills
        }
        self.patterns: List[str] = list(SKILL_PATTERNS)
        for name, category in (extra_skills or {}).items():
            self.categories.setdefault(name.lower(), category)
            if name.lower() not in {p.lower() for p in self.patterns}:
                self.patterns.append(name)

    def extract(self, text: str) -> List[ExtractedSkill]:
        lowered = (text or "").lower()
        found: List[ExtractedSkill] = []
        seen = set()

        for skill in self.patterns:
            key = skill.lower()
            if key in seen:
                continue
            matches = list(_skill_regex(skill).finditer(lowered))
            if not matches:
                continue
            seen.add(key)
            found.append(ExtractedSkill(
                name=skill,
                confidence=self._confidence(lowered, matches),
                type=classify_skill(skill),
                category=self.categories.get(key, "General"),
            ))

        # Stable: equal confidence keeps pattern order.
        found.sort(key=lambda s: s.confidence, reverse=True)
        return found

    @staticmethod
    def _confidence(lowered: str, matches: List[re.Match]) -> float:
        confidence = 0.7
        if len(matches) > 1:
            confidence += 0.1
        if len(matches) > 3:
            confidence += 0.1
        first = matches[0].start()
        if SECTION_RE.search(lowered[max(0, first - SECTION_WINDOW):first]):
            confidence += 0.1
        return round(min(confidence, 1.0), 2)


class GeminiSkillExtractor(SkillExtractor):
    """
    Structured-output extraction with the fast Gemini model. When a fallback
    extractor is given, a failed model call is logged and the fallback answers.
    """

    def __init__(self, known_skills: Iterable[str] = (), model: Optional[str] = None,
                 api_key: Optional[str] = None, fallback: Optional[SkillExtractor] = None):
        self.known_skills = list(known_skills)
        self.model = model or settings.FAST_MODEL
        self.api_key = api_key if api_key is not None else settings.GOOGLE_API_KEY
        self.fallback = fallback

    def extract(self, text: str) -> List[ExtractedSkill]:
        try:
            skills = self._extract_with_model(text)
        except Exception:
            if self.fallback is None:
                raise
            logger.exception(f"Skill extraction with {self.model} failed; using {type(self.fallback).__name__}")
            return self.fallback.extract(text)

        logger.info(f"Extracted {len(skills)} skill(s) with {self.model}")
        return sorted(skills, key=lambda s: s.confidence, reverse=True)

    def _extract_with_model(self, text: str) -> List[ExtractedSkill]:
        llm = ChatGoogleGenerativeAI(model=self.model, temperature=0, google_api_key=self.api_key)
        prompt = ChatPromptTemplate.from_messages([
            ("system", """
            You extract professional skills from free text such as a resume or profile summary.
            - Only report skills the text actually demonstrates.
            - Prefer these canonical names when they apply: {known_skills}
            - For each skill give a confidence between 0 and 1, a type (technical, soft or domain) and a short category.
            """),
            ("human", "Text:\n{text}"),
        ])
        chain = prompt | llm.with_structured_output(ExtractedSkills)
        result = chain.invoke({"text": text, "known_skills": ", ".join(self.known_skills) or "none"})
        return list(result.skills)
