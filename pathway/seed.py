# /pathway/seed.py

from pathway.graph_store import GraphStore
from pathway.logger import get_logger
from pathway.models import LEADS_TO, REQUIRED_FOR, ROLE, SKILL

logger = get_logger(__name__)

# (name, category, difficulty, base hours). Base hours of 0 mark skills people
# usually bring with them.
SKILLS = [
    ("Project Management", "Management", "intermediate", 0),
    ("Data Analysis", "Analytics", "intermediate", 0),
    ("AI Tools Proficiency", "Technology", "beginner", 20),
    ("Prompt Engineering", "AI", "beginner", 15),
    ("Process Automation", "Technology", "intermediate", 25),
    ("Machine Learning Basics", "Analytics", "intermediate", 30),
    ("Data Visualization with AI", "Analytics", "intermediate", 25),
]

# (name, category, demand, avg salary, description)
ROLES = [
    ("AI-Enhanced Project Manager", "Operations", "high", None,
     "Project managers who plan and run delivery with AI assistants, prompt workflows and automation"),
    ("AI-Enhanced Data Analyst", "Analytics", "high", None,
     "Data analysts who add machine learning and AI-assisted visualization to their reporting"),
    ("AI-Enhanced Customer Experience Specialist", "Customer Service", "high", 68000,
     "Customer service professionals who use AI analytics and automation to enhance customer experiences"),
    ("AI-Enhanced Administrative Coordinator", "Administration", "high", 55000,
     "Administrative professionals who leverage AI for workflow automation and intelligent document management"),
    ("AI-Enhanced Financial Services Advisor", "Finance", "high", 78000,
     "Financial advisors who integrate AI-powered analytics and robo-advisory tools in client service"),
    ("AI-Enhanced Healthcare Information Manager", "Healthcare", "high", 72000,
     "Healthcare information professionals using AI for medical data analysis and workflow optimization"),
    ("AI-Enhanced Retail Operations Manager", "Retail", "high", 65000,
     "Retail managers who use AI for inventory optimization, customer behavior analysis, and operations"),
    ("AI-Enhanced Human Resources Specialist", "Human Resources", "high", 70000,
     "HR professionals who leverage AI recruitment tools, people analytics, and employee experience AI"),
    ("AI-Enhanced Marketing Communications Manager", "Marketing", "high", 75000,
     "Marketing professionals who use AI content generation, automation platforms, and performance analytics"),
    ("AI-Enhanced Operations Analyst", "Operations", "high", 82000,
     "Operations analysts who apply AI for process mining, predictive analytics, and business intelligence"),
    ("AI-Enhanced Quality Assurance Coordinator", "Quality", "high", 68000,
     "QA professionals who implement AI-driven testing, quality analytics, and process improvement"),
    ("AI-Enhanced Business Intelligence Analyst", "Analytics", "high", 88000,
     "BI analysts who use advanced AI analytics, machine learning, and automated data storytelling"),
    ("AI-Enhanced Content Strategy Manager", "Content", "high", 72000,
     "Content managers who leverage AI for content planning, performance analysis, and SEO optimization"),
    ("AI-Enhanced Sales Development Representative", "Sales", "high", 62000,
     "Sales professionals who use AI-powered CRM, lead scoring, and sales forecasting tools"),
    ("AI-Enhanced Process Improvement Specialist", "Operations", "high", 78000,
     "Process improvement experts who design automation and use AI for efficiency analysis and change management"),
    ("AI-Enhanced Training and Development Coordinator", "Education", "medium", 65000,
     "Training coordinators who use AI-powered learning platforms, analytics, and personalized learning systems"),
    ("AI-Enhanced Compliance and Risk Analyst", "Compliance", "high", 85000,
     "Compliance professionals who leverage RegTech AI, risk prediction models, and automated monitoring"),
    ("AI-Enhanced Event Coordination Manager", "Events", "medium", 58000,
     "Event coordinators who use AI planning tools, attendee analytics, and virtual event technology"),
    ("AI-Enhanced Research and Insights Analyst", "Research", "high", 75000,
     "Research analysts who apply AI methodologies, data mining, and automated insight generation"),
    ("AI-Enhanced Digital Marketing Specialist", "Marketing", "high", 68000,
     "Digital marketers who use AI tools, programmatic advertising, and marketing attribution systems"),
    ("AI-Enhanced Supply Chain Coordinator", "Operations", "high", 70000,
     "Supply chain professionals who optimize operations with AI, demand forecasting, and logistics automation"),
    ("AI-Enhanced Customer Success Manager", "Customer Success", "high", 80000,
     "Customer success managers who use AI health scoring, churn prediction, and lifecycle automation"),
]

# (source kind, source name, target kind, target name, type, strength, priority, effort)
RELATIONSHIPS = [
    (SKILL, "Data Analysis", SKILL, "Machine Learning Basics", LEADS_TO, 0.8, None, "low"),

    (SKILL, "AI Tools Proficiency", ROLE, "AI-Enhanced Project Manager", REQUIRED_FOR, 0.9, "core", None),
    (SKILL, "Prompt Engineering", ROLE, "AI-Enhanced Project Manager", REQUIRED_FOR, 0.8, "core", None),
    (SKILL, "Process Automation", ROLE, "AI-Enhanced Project Manager", REQUIRED_FOR, 0.65, "complementary", None),

    (SKILL, "AI Tools Proficiency", ROLE, "AI-Enhanced Data Analyst", REQUIRED_FOR, 0.9, "core", None),
    (SKILL, "Machine Learning Basics", ROLE, "AI-Enhanced Data Analyst", REQUIRED_FOR, 0.8, "core", None),
    (SKILL, "Data Visualization with AI", ROLE, "AI-Enhanced Data Analyst", REQUIRED_FOR, 0.7, "complementary", None),
]


def seed_graph(store: GraphStore) -> GraphStore:
    """
    Populates an empty store with the default skills, roles and relationships.
    Call once at startup, before any request reads the graph.
    """
    for name, category, difficulty, base_hours in SKILLS:
        store.add_skill(name, category, difficulty, base_hours)

    for name, category, demand, avg_salary, description in ROLES:
        store.add_role(name, category, demand, description, avg_salary)

    for src_kind, src_name, dst_kind, dst_name, rel_type, strength, priority, effort in RELATIONSHIPS:
        source = store.find_node(src_kind, src_name)
        target = store.find_node(dst_kind, dst_name)
        store.add_relationship(source.id, target.id, rel_type, strength, priority=priority, effort=effort)

    logger.info("Seeded graph store", extra={
        "skills": len(SKILLS), "roles": len(ROLES), "relationships": len(RELATIONSHIPS),
    })
    return store
