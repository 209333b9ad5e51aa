from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, Field
from typing import List

from pathway.assembler import PathwayAssembler
from pathway.errors import PathwayGenerationError, UnknownRoleError
from pathway.logger import get_logger
from pathway.models import Alternative, ExtractedSkill, Pathway
from pathway.skill_extractor import SkillExtractor

logger = get_logger(__name__)

router = APIRouter(
    prefix="/pathway",
    tags=["Learning Pathways"]
)


class PathwayRequest(BaseModel):
    skills: List[str] = Field(default_factory=list, description="Skills the learner already has.")
    role: str = Field(min_length=1, description="Exact name of the target role.")


class PathwayResponse(BaseModel):
    success: bool = True
    pathway: Pathway
    encouragement: str


class SkillsRequest(BaseModel):
    skills: List[str] = Field(default_factory=list)


class TextRequest(BaseModel):
    text: str = Field(min_length=1, description="Free text such as a resume or profile summary.")


def get_assembler(request: Request) -> PathwayAssembler:
    """The assembler is built once by the application lifespan."""
    return request.app.state.assembler


def get_skill_extractor(request: Request) -> SkillExtractor:
    return request.app.state.skill_extractor


@router.post("/generate", response_model=PathwayResponse)
async def generate_pathway(body: PathwayRequest, assembler: PathwayAssembler = Depends(get_assembler)):
    """Builds a learning pathway from the given skills to the target role."""
    try:
        pathway = await assembler.generate_pathway(body.skills, body.role)
    except UnknownRoleError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PathwayGenerationError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return PathwayResponse(pathway=pathway, encouragement=pathway.encouragement)


@router.get("/roles", response_model=List[str])
def get_roles(assembler: PathwayAssembler = Depends(get_assembler)):
    return assembler.available_roles()


@router.post("/skill-suggestions", response_model=List[Alternative])
def get_skill_suggestions(body: SkillsRequest, assembler: PathwayAssembler = Depends(get_assembler)):
    return assembler.suggest_skills(body.skills)


@router.post("/extract-skills", response_model=List[ExtractedSkill])
def extract_skills(body: TextRequest, extractor: SkillExtractor = Depends(get_skill_extractor)):
    """Both extractors recognise every skill in the graph."""
    skills = extractor.extract(body.text)
    logger.info(f"Extracted {len(skills)} skill(s) from {len(body.text)} characters of text")
    return skills
