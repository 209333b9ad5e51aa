# /pathway/models.py

from typing import List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

# Shared pydantic data structures for the graph, the path finder and the
# final pathway response.

NodeKind = Literal["skill", "role"]
Difficulty = Literal["beginner", "intermediate", "advanced"]
Priority = Literal["core", "complementary"]
Demand = Literal["low", "medium", "high"]
Cost = Literal["free", "paid"]
ResourceType = Literal["course", "article", "practice", "certification"]

SKILL: NodeKind = "skill"
ROLE: NodeKind = "role"

LEADS_TO = "leads-to"
REQUIRED_FOR = "required-for"


# --- Graph ---

class SkillAttributes(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    category: str = Field(description="Broad skill family, e.g. 'Analytics' or 'Technology'.")
    difficulty: Difficulty = Field("intermediate", description="Expected difficulty for a newcomer.")
    base_hours: int = Field(0, ge=0, description="Declared effort in hours; 0 when the skill is usually already held.")


class RoleAttributes(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    category: str = Field(description="Occupational family used to propose alternative roles.")
    demand: Demand = Field("medium", description="Labour market demand tier.")
    description: str = Field("", description="One-line summary of the role.")
    avg_salary: Optional[int] = Field(None, ge=0, description="Average yearly salary, when known.")


NodeAttributes = Union[SkillAttributes, RoleAttributes]


class Node(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Stable key, '<kind>-<slugified name>'.")
    kind: NodeKind
    name: str = Field(description="Unique within its kind. Matching is exact and case-sensitive.")
    attributes: NodeAttributes


class Relationship(BaseModel):
    model_config = ConfigDict(frozen=True)

    source_id: str
    target_id: str
    type: str = Field(description="Relationship tag, e.g. 'leads-to' or 'required-for'.")
    strength: float = Field(gt=0, le=1, description="Confidence of the relationship; edge weight is 1/strength.")
    priority: Optional[Priority] = Field(None, description="Only meaningful on required-for edges.")
    effort: Optional[str] = None


# --- Path finding ---

class SkillRequirement(BaseModel):
    """A skill the caller still has to learn, before resources are attached."""
    name: str
    category: str = "General"
    difficulty: Difficulty = "intermediate"
    estimated_hours: int = Field(ge=0)
    priority: Priority = "core"


class PathResult(BaseModel):
    path: List[Node] = Field(default_factory=list)
    skill_gaps: List[SkillRequirement] = Field(default_factory=list)
    confidence: float = Field(ge=0, le=1)
    used_fallback: bool = False


# --- Resources ---

class CandidateResource(BaseModel):
    title: str
    url: str
    provider: str = "Online Platform"
    cost: Cost = "paid"
    rating: float = Field(4.0, ge=0, le=5)
    description: str = ""
    resource_type: ResourceType = "course"
    duration: str = "varies"
    verified: bool = Field(False, description="True only once the URL passed a reachability check or comes pre-verified.")


# --- Pathway response ---

class Milestone(BaseModel):
    id: str
    description: str
    estimated_hours: int = Field(ge=0)


class SkillGap(BaseModel):
    skill: str
    category: str
    difficulty: Difficulty
    priority: Priority = "core"
    estimated_hours: int = Field(ge=0)
    resources: List[CandidateResource] = Field(default_factory=list)
    milestones: List[Milestone] = Field(default_factory=list)


class Alternative(BaseModel):
    role: Optional[str] = None
    skill: Optional[str] = None
    reason: str
    confidence: float = Field(ge=0, le=1)


class Pathway(BaseModel):
    target_role: str
    current_skills: List[str]
    skill_gaps: List[SkillGap] = Field(default_factory=list)
    estimated_time: str
    confidence_score: float = Field(ge=0, le=1)
    alternatives: List[Alternative] = Field(default_factory=list)
    encouragement: str


# --- Skill extraction ---

class ExtractedSkill(BaseModel):
    name: str = Field(description="Canonical skill name as written in the skill catalogue.")
    confidence: float = Field(ge=0, le=1, description="How sure the extractor is that the text shows this skill.")
    type: Literal["technical", "soft", "domain"] = "domain"
    category: str = "General"


class ExtractedSkills(BaseModel):
    """Structured output schema for LLM skill extraction."""
    skills: List[ExtractedSkill] = Field(default_factory=list)
