# /discovery/catalog.py
"""
Static knowledge about where learning content lives: the provider roster with
quality scores, the course aggregator sites, and the curated fallback table of
known-good resources.
"""

from typing import Dict, List, Literal, Optional
from urllib.parse import quote_plus, urlsplit

from pydantic import BaseModel, Field

from pathway.models import CandidateResource


class LearningProvider(BaseModel):
    name: str
    domains: List[str] = Field(description="Hostnames (or parent domains) serving the provider's content.")
    cost_model: Literal["free", "paid", "mixed"]
    quality_score: float = Field(ge=0, le=10)
    search_url: Optional[str] = Field(None, description="Search-results URL template with a '{query}' placeholder.")

    def build_search_url(self, query: str) -> Optional[str]:
        if not self.search_url:
            return None
        return self.search_url.format(query=quote_plus(query.strip()))

    def serves(self, url: str) -> bool:
        host = (urlsplit(url).hostname or "").lower()
        return any(host == d or host.endswith("." + d) for d in self.domains)


PROVIDERS: List[LearningProvider] = [
    LearningProvider(name="Coursera", domains=["coursera.org"], cost_model="mixed", quality_score=9.5,
                     search_url="https://www.coursera.org/search?query={query}"),
    LearningProvider(name="edX", domains=["edx.org"], cost_model="mixed", quality_score=9.0,
                     search_url="https://www.edx.org/search?q={query}"),
    LearningProvider(name="LinkedIn Learning", domains=["linkedin.com"], cost_model="paid", quality_score=8.5,
                     search_url="https://www.linkedin.com/learning/search?keywords={query}"),
    LearningProvider(name="Udemy", domains=["udemy.com"], cost_model="paid", quality_score=7.5,
                     search_url="https://www.udemy.com/courses/search/?q={query}"),
    LearningProvider(name="Microsoft Learn", domains=["learn.microsoft.com", "docs.microsoft.com"],
                     cost_model="free", quality_score=8.8,
                     search_url="https://learn.microsoft.com/en-us/training/browse/?terms={query}"),
    LearningProvider(name="Google AI Education", domains=["developers.google.com"], cost_model="free",
                     quality_score=8.7),
    LearningProvider(name="IBM SkillsBuild", domains=["skillsbuild.org"], cost_model="free", quality_score=8.0),
    LearningProvider(name="AWS Training", domains=["aws.amazon.com", "aws.training"], cost_model="mixed",
                     quality_score=8.3),
    LearningProvider(name="Pluralsight", domains=["pluralsight.com"], cost_model="paid", quality_score=8.2,
                     search_url="https://www.pluralsight.com/search?q={query}"),
    LearningProvider(name="FutureLearn", domains=["futurelearn.com"], cost_model="mixed", quality_score=7.8,
                     search_url="https://www.futurelearn.com/search?q={query}"),
]


class AggregatorSite(BaseModel):
    name: str
    search_url: str
    title_template: str
    description_template: str
    rating: float


AGGREGATOR_SITES: List[AggregatorSite] = [
    AggregatorSite(
        name="Class Central",
        search_url="https://www.classcentral.com/search?q={query}",
        title_template="{skill} Courses",
        description_template="Find {skill} courses from multiple providers",
        rating=4.0,
    ),
    AggregatorSite(
        name="Course Report",
        search_url="https://www.coursereport.com/schools?track={query}",
        title_template="{skill} Training Programs",
        description_template="{skill} bootcamps and intensive programs",
        rating=4.1,
    ),
]


def provider_for_url(url: str) -> Optional[LearningProvider]:
    for provider in PROVIDERS:
        if provider.serves(url):
            return provider
    return None


# --- Curated fallback table ---
# (title, provider, url, type, duration, cost, rating, description)
_CURATED: Dict[str, list] = {
    "AI Tools Proficiency": [
        ("AI For Everyone", "Coursera", "https://www.coursera.org/learn/ai-for-everyone",
         "course", "4 weeks", "free", 4.8, "Non-technical introduction to AI by Andrew Ng"),
        ("Introduction to Artificial Intelligence", "edX",
         "https://www.edx.org/course/introduction-to-artificial-intelligence-ai",
         "course", "6 weeks", "free", 4.6, "Comprehensive AI fundamentals course"),
        ("AI Fundamentals", "Microsoft Learn",
         "https://learn.microsoft.com/en-us/training/paths/get-started-with-artificial-intelligence-on-azure/",
         "course", "3 hours", "free", 4.5, "Microsoft Azure AI fundamentals"),
    ],
    "Prompt Engineering": [
        ("ChatGPT Prompt Engineering for Developers", "DeepLearning.AI",
         "https://www.deeplearning.ai/short-courses/chatgpt-prompt-engineering-for-developers/",
         "course", "1 hour", "free", 4.9, "Learn prompt engineering techniques"),
        ("Prompt Engineering Guide", "Prompt Engineering Guide", "https://www.promptingguide.ai/",
         "article", "2 hours", "free", 4.7, "Comprehensive prompt engineering resource"),
        ("Introduction to Prompt Design", "Google AI Education",
         "https://developers.google.com/machine-learning/resources/prompt-eng",
         "course", "2 hours", "free", 4.6, "Google's guide to effective prompting"),
    ],
    "Process Automation": [
        ("Microsoft Power Automate Fundamentals", "Microsoft Learn",
         "https://learn.microsoft.com/en-us/training/paths/automate-process-power-automate/",
         "course", "4 hours", "free", 4.6, "Learn workflow automation with Power Automate"),
        ("RPA Developer Foundation", "UiPath Academy", "https://academy.uipath.com/courses/rpa-developer-foundation",
         "course", "40 hours", "free", 4.8, "Complete RPA development training"),
        ("Zapier Automation Course", "Zapier", "https://zapier.com/learn/automation/",
         "course", "3 hours", "free", 4.5, "Learn to automate workflows with Zapier"),
    ],
    "Machine Learning Basics": [
        ("Machine Learning for Everyone", "Coursera", "https://www.coursera.org/learn/machine-learning-for-everyone",
         "course", "6 weeks", "free", 4.7, "Non-technical introduction to machine learning"),
        ("Introduction to Machine Learning", "edX", "https://www.edx.org/course/introduction-to-machine-learning",
         "course", "8 weeks", "free", 4.6, "Comprehensive ML fundamentals"),
        ("Machine Learning Crash Course", "Google AI Education",
         "https://developers.google.com/machine-learning/crash-course",
         "course", "15 hours", "free", 4.8, "Google's fast-paced ML introduction"),
    ],
    "Data Visualization with AI": [
        ("Data Visualization with Power BI", "Microsoft Learn",
         "https://learn.microsoft.com/en-us/training/paths/create-use-analytics-reports-power-bi/",
         "course", "6 hours", "free", 4.7, "Create AI-powered visualizations with Power BI"),
        ("Tableau Fundamentals", "Tableau", "https://www.tableau.com/learn/training/20201-tableau-fundamentals",
         "course", "5 hours", "free", 4.6, "Learn Tableau for data visualization"),
        ("Python Data Visualization", "DataCamp",
         "https://www.datacamp.com/courses/introduction-to-data-visualization-with-python",
         "course", "4 hours", "paid", 4.5, "Python libraries for data visualization"),
    ],
    "AI-Powered Customer Analytics": [
        ("Customer Analytics", "Coursera", "https://www.coursera.org/learn/wharton-customer-analytics",
         "course", "4 weeks", "free", 4.6, "Learn customer analytics from Wharton School"),
        ("AI Fundamentals", "Microsoft Learn",
         "https://learn.microsoft.com/en-us/training/paths/get-started-with-artificial-intelligence-on-azure/",
         "course", "3 hours", "free", 4.5, "Get started with AI on Azure platform"),
    ],
    "Conversational AI Management": [
        ("ChatGPT Prompt Engineering for Developers", "DeepLearning.AI",
         "https://www.deeplearning.ai/short-courses/chatgpt-prompt-engineering-for-developers/",
         "course", "1 hour", "free", 4.8, "Learn prompt engineering for conversational AI"),
        ("AI Fundamentals", "Microsoft Learn",
         "https://learn.microsoft.com/en-us/training/paths/get-started-with-artificial-intelligence-on-azure/",
         "course", "3 hours", "free", 4.5, "Get started with AI on Azure platform"),
    ],
    "Customer Journey Automation": [
        ("Marketing Automation", "HubSpot Academy", "https://academy.hubspot.com/courses/marketing-automation",
         "course", "2 hours", "free", 4.5, "Automate customer journeys with marketing tools"),
    ],
    "Workflow Automation Tools": [
        ("Automate processes with Power Automate", "Microsoft Learn",
         "https://learn.microsoft.com/en-us/training/paths/automate-process-power-automate/",
         "course", "4 hours", "free", 4.6, "Automate workflows with Power Automate"),
        ("Zapier Automation Course", "Zapier", "https://zapier.com/learn/automation/",
         "course", "3 hours", "free", 4.4, "Master workflow automation with Zapier"),
    ],
}


def curated_resources(skill_name: str) -> List[CandidateResource]:
    return [
        CandidateResource(
            title=title, provider=provider, url=url, resource_type=rtype, duration=duration,
            cost=cost, rating=rating, description=description,
        )
        for title, provider, url, rtype, duration, cost, rating, description in _CURATED.get(skill_name, [])
    ]
