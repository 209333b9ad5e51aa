# /pathway/role_requirements.py
"""
Static "required skills for this role" table, consulted when the graph cannot
produce a path for a role. Each entry is (skill, category, difficulty, hours).
"""

from typing import Dict, List, Tuple

from pathway.models import SkillRequirement

ROLE_REQUIREMENTS: Dict[str, List[Tuple[str, str, str, int]]] = {
    "AI-Enhanced Customer Experience Specialist": [
        ("AI-Powered Customer Analytics", "Analytics", "beginner", 25),
        ("Conversational AI Management", "AI", "intermediate", 30),
        ("Customer Journey Automation", "Technology", "intermediate", 35),
    ],
    "AI-Enhanced Administrative Coordinator": [
        ("Workflow Automation Tools", "Technology", "beginner", 20),
        ("AI-Assisted Scheduling", "AI", "beginner", 15),
        ("Document Intelligence Systems", "Technology", "intermediate", 25),
    ],
    "AI-Enhanced Financial Services Advisor": [
        ("FinTech AI Applications", "Finance", "intermediate", 40),
        ("Robo-Advisory Platforms", "Finance", "intermediate", 30),
        ("Financial Risk AI Analysis", "Analytics", "advanced", 45),
    ],
    "AI-Enhanced Healthcare Information Manager": [
        ("Healthcare AI Systems", "Healthcare", "intermediate", 35),
        ("Medical Data Analytics", "Analytics", "intermediate", 40),
        ("Health Information Automation", "Technology", "intermediate", 30),
    ],
    "AI-Enhanced Retail Operations Manager": [
        ("Inventory Optimization AI", "Operations", "intermediate", 35),
        ("Customer Behavior Analytics", "Analytics", "beginner", 30),
        ("Retail Automation Systems", "Technology", "intermediate", 40),
    ],
    "AI-Enhanced Human Resources Specialist": [
        ("AI Recruitment Tools", "HR", "beginner", 25),
        ("People Analytics", "Analytics", "intermediate", 35),
        ("Employee Experience AI", "HR", "intermediate", 30),
    ],
    "AI-Enhanced Marketing Communications Manager": [
        ("AI Content Generation", "Marketing", "beginner", 20),
        ("Marketing Automation Platforms", "Technology", "intermediate", 35),
        ("Campaign Performance AI", "Analytics", "intermediate", 30),
    ],
    "AI-Enhanced Operations Analyst": [
        ("Process Mining and AI", "Operations", "intermediate", 40),
        ("Predictive Operations Analytics", "Analytics", "advanced", 45),
        ("Business Intelligence AI", "Analytics", "intermediate", 35),
    ],
    "AI-Enhanced Quality Assurance Coordinator": [
        ("Automated Testing with AI", "Quality", "intermediate", 35),
        ("Quality Analytics and Prediction", "Analytics", "intermediate", 30),
        ("AI-Driven Process Improvement", "Operations", "intermediate", 40),
    ],
    "AI-Enhanced Business Intelligence Analyst": [
        ("Advanced AI Analytics", "Analytics", "advanced", 50),
        ("Machine Learning for Business", "AI", "intermediate", 45),
        ("Data Storytelling with AI", "Analytics", "intermediate", 30),
    ],
    "AI-Enhanced Content Strategy Manager": [
        ("AI Content Planning", "Content", "beginner", 25),
        ("Content Performance AI", "Analytics", "intermediate", 30),
        ("SEO and AI Optimization", "Marketing", "intermediate", 35),
    ],
    "AI-Enhanced Sales Development Representative": [
        ("Sales AI and CRM", "Sales", "beginner", 25),
        ("Lead Scoring with AI", "Sales", "intermediate", 30),
        ("Sales Forecasting AI", "Analytics", "intermediate", 35),
    ],
    "AI-Enhanced Process Improvement Specialist": [
        ("Process Automation Design", "Operations", "intermediate", 40),
        ("AI-Driven Efficiency Analysis", "Analytics", "intermediate", 35),
        ("Change Management with AI", "Management", "intermediate", 30),
    ],
    "AI-Enhanced Training and Development Coordinator": [
        ("AI-Powered Learning Platforms", "Education", "beginner", 25),
        ("Learning Analytics", "Analytics", "intermediate", 30),
        ("Personalized Learning AI", "Education", "intermediate", 35),
    ],
    "AI-Enhanced Compliance and Risk Analyst": [
        ("RegTech and AI Compliance", "Compliance", "intermediate", 40),
        ("Risk Prediction AI", "Analytics", "advanced", 45),
        ("Automated Compliance Monitoring", "Technology", "intermediate", 35),
    ],
    "AI-Enhanced Event Coordination Manager": [
        ("Event Planning AI Tools", "Events", "beginner", 20),
        ("Attendee Experience Analytics", "Analytics", "beginner", 25),
        ("Virtual Event Technology", "Technology", "intermediate", 30),
    ],
    "AI-Enhanced Research and Insights Analyst": [
        ("AI Research Methodologies", "Research", "intermediate", 35),
        ("Data Mining with AI", "Analytics", "advanced", 40),
        ("Insight Generation AI", "Analytics", "intermediate", 35),
    ],
    "AI-Enhanced Digital Marketing Specialist": [
        ("Digital Marketing AI Tools", "Marketing", "beginner", 25),
        ("Programmatic Advertising", "Marketing", "intermediate", 35),
        ("Marketing Attribution AI", "Analytics", "intermediate", 30),
    ],
    "AI-Enhanced Supply Chain Coordinator": [
        ("Supply Chain AI Optimization", "Operations", "intermediate", 40),
        ("Demand Forecasting AI", "Analytics", "intermediate", 35),
        ("Logistics Automation", "Technology", "intermediate", 30),
    ],
    "AI-Enhanced Customer Success Manager": [
        ("Customer Health Scoring AI", "Customer Success", "beginner", 25),
        ("Churn Prediction Models", "Analytics", "intermediate", 35),
        ("Customer Lifecycle Automation", "Technology", "intermediate", 30),
    ],
}


def has_requirements(role_name: str) -> bool:
    return role_name in ROLE_REQUIREMENTS


def required_skills_for_role(role_name: str) -> List[SkillRequirement]:
    return [
        SkillRequirement(name=name, category=category, difficulty=difficulty, estimated_hours=hours)
        for name, category, difficulty, hours in ROLE_REQUIREMENTS.get(role_name, [])
    ]
