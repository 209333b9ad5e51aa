# /pathway/assembler.py

import asyncio
import math
from typing import List, Optional, Sequence

from discovery.aggregator import ResourceAggregator
from discovery.ranker import ResourceRanker
from pathway.config import settings
from pathway.errors import PathwayGenerationError
from pathway.graph_store import GraphStore, slugify
from pathway.logger import get_logger
from pathway.models import ROLE, Alternative, Milestone, Pathway, SkillGap, SkillRequirement
from pathway.path_finder import PathFinder

logger = get_logger(__name__)

HOURS_PER_WEEK = 10
HOURS_PER_MILESTONE = 8
MIN_MILESTONES, MAX_MILESTONES = 2, 4
MAX_ALTERNATIVES = 3
ALTERNATIVE_CONFIDENCE = 0.8
MAX_SUGGESTIONS = 3

MILESTONE_TEMPLATES = {
    "AI Tools Proficiency": [
        "Complete introduction to AI concepts",
        "Practice with ChatGPT for work tasks",
        "Create AI-assisted project plan",
        "Integrate AI tools into daily workflow",
    ],
    "Prompt Engineering": [
        "Learn basic prompt structure",
        "Write effective prompts for different scenarios",
        "Develop project-specific prompt templates",
        "Master advanced prompting techniques",
    ],
    "Process Automation": [
        "Set up basic automation workflow",
        "Automate routine reporting tasks",
        "Create complex multi-step automations",
        "Implement error handling and monitoring",
    ],
    "Machine Learning Basics": [
        "Understand core ML concepts",
        "Practice with no-code ML tools",
        "Apply ML to business problems",
        "Evaluate and improve models",
    ],
    "Data Visualization with AI": [
        "Learn AI-powered visualization tools",
        "Create automated dashboard",
        "Build predictive visualizations",
        "Present insights to stakeholders",
    ],
}
GENERIC_MILESTONES = [
    "Complete foundational learning",
    "Apply knowledge to real scenarios",
    "Build practical project",
    "Achieve proficiency level",
]

# (known skill, suggested skill, reason, confidence), checked in order.
SKILL_SUGGESTION_RULES = [
    ("Project Management", "AI Tools Proficiency", "Perfect complement to your project management skills", 0.9),
    ("Project Management", "Process Automation", "Automate repetitive project tasks", 0.8),
    ("Data Analysis", "Machine Learning Basics", "Natural progression from data analysis", 0.9),
    ("Data Analysis", "Data Visualization with AI", "Enhance your analytical storytelling", 0.8),
]
UNIVERSAL_SUGGESTION = ("AI Tools Proficiency", "Essential skill for any AI-enhanced role", 0.95)

DEFAULT_ENCOURAGEMENT = "🌟 Every expert was once a beginner. You've got this!"


def generate_milestones(skill_name: str, total_hours: int) -> List[Milestone]:
    count = min(max(MIN_MILESTONES, math.ceil(total_hours / HOURS_PER_MILESTONE)), MAX_MILESTONES)
    templates = MILESTONE_TEMPLATES.get(skill_name, GENERIC_MILESTONES)
    hours = math.ceil(total_hours / count)
    slug = slugify(skill_name)
    return [
        Milestone(id=f"{slug}-{i}", description=description, estimated_hours=hours)
        for i, description in enumerate(templates[:count], start=1)
    ]


def estimate_duration(total_hours: int) -> str:
    """Human-readable time at HOURS_PER_WEEK; weeks up to 8, months beyond."""
    weeks = math.ceil(total_hours / HOURS_PER_WEEK)
    if weeks <= 8:
        return "1 week" if weeks == 1 else f"{weeks} weeks"
    return f"{math.ceil(weeks / 4)} months"


def generate_encouragement(current_skills: Sequence[str], gap_count: int) -> str:
    strengths = len(current_skills)
    rules = [
        (gap_count == 0,
         "🎉 Amazing! You already have all the skills needed for this role. You're ready to make the transition!"),
        (gap_count == 1,
         f"🎉 You're almost there! With your {strengths} existing skills, you only need to develop "
         f"{gap_count} more area to reach your goal."),
        (gap_count == 2,
         f"🚀 Great foundation! Your {strengths} skills give you a strong starting point. "
         f"Just {gap_count} more skills to master."),
        (gap_count >= 3,
         f"💪 Solid base to build from! Your {strengths} existing skills show you're ready for this challenge. "
         f"The {gap_count} new skills ahead are totally achievable."),
    ]
    return next((message for matches, message in rules if matches), DEFAULT_ENCOURAGEMENT)


class PathwayAssembler:
    """
    Orchestrates a pathway request: one path search, then resource discovery and
    ranking for every gap concurrently, then milestones, duration,
    encouragement and alternative roles.
    """

    def __init__(self, path_finder: PathFinder, aggregator: ResourceAggregator, ranker: ResourceRanker,
                 store: GraphStore, max_resources: Optional[int] = None):
        self.path_finder = path_finder
        self.aggregator = aggregator
        self.ranker = ranker
        self.store = store
        self.max_resources = settings.MAX_RESOURCES_PER_GAP if max_resources is None else max_resources

    async def generate_pathway(self, current_skills: Sequence[str], target_role: str) -> Pathway:
        """
        Raises:
            UnknownRoleError: the role is neither in the graph nor in the requirement table.
            PathwayGenerationError: anything else went wrong; the message carries no detail.
        """
        current_skills = list(current_skills)
        try:
            result = self.path_finder.find_shortest_path(current_skills, target_role)
            gaps = await asyncio.gather(*(self._build_gap(req) for req in result.skill_gaps))
            total_hours = sum(gap.estimated_hours for gap in gaps)

            pathway = Pathway(
                target_role=target_role,
                current_skills=current_skills,
                skill_gaps=list(gaps),
                estimated_time=estimate_duration(total_hours),
                confidence_score=result.confidence,
                alternatives=self.alternatives(target_role),
                encouragement=generate_encouragement(current_skills, len(gaps)),
            )
        except PathwayGenerationError:
            raise
        except Exception as e:
            logger.exception(f"Pathway generation failed for role '{target_role}': {e}")
            raise PathwayGenerationError() from e

        logger.info("Pathway generated", extra={
            "role": target_role,
            "gaps": [gap.skill for gap in pathway.skill_gaps],
            "confidence": pathway.confidence_score,
            "estimated_time": pathway.estimated_time,
        })
        return pathway

    async def _build_gap(self, requirement: SkillRequirement) -> SkillGap:
        candidates = await self.aggregator.discover(requirement.name)
        resources = self.ranker.rank(candidates, requirement.name, limit=self.max_resources)
        return SkillGap(
            skill=requirement.name,
            category=requirement.category,
            difficulty=requirement.difficulty,
            priority=requirement.priority,
            estimated_hours=requirement.estimated_hours,
            resources=resources,
            milestones=generate_milestones(requirement.name, requirement.estimated_hours),
        )

    def alternatives(self, target_role: str) -> List[Alternative]:
        target = self.store.find_node(ROLE, target_role)
        if target is None:
            return []
        category = target.attributes.category
        similar = [
            node for node in self.store.nodes(ROLE)
            if node.id != target.id and node.attributes.category == category
        ]
        return [
            Alternative(role=node.name, reason=f"Similar {category.lower()} role", confidence=ALTERNATIVE_CONFIDENCE)
            for node in similar[:MAX_ALTERNATIVES]
        ]

    def available_roles(self) -> List[str]:
        return [node.name for node in self.store.nodes(ROLE)]

    def suggest_skills(self, current_skills: Sequence[str]) -> List[Alternative]:
        known = set(current_skills)
        suggestions: List[Alternative] = []
        suggested = set()

        def add(skill: str, reason: str, confidence: float):
            if skill in known or skill in suggested:
                return
            suggested.add(skill)
            suggestions.append(Alternative(skill=skill, reason=reason, confidence=confidence))

        for trigger, skill, reason, confidence in SKILL_SUGGESTION_RULES:
            if trigger in known:
                add(skill, reason, confidence)
        add(*UNIVERSAL_SUGGESTION)

        return suggestions[:MAX_SUGGESTIONS]
