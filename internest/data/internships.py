from functools import lru_cache
from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Internship(BaseModel):
    id: int
    title: str
    company: str
    location: str
    duration: str
    education_requirements: str
    skills_required: list[str] = Field(default_factory=list)
    description: str
    stipend: str
    sector: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


_CATALOG: tuple[dict, ...] = (
    {
        "id": 1,
        "title": "Software Development Intern",
        "company": "TechCorp Solutions",
        "location": "Mumbai, Maharashtra",
        "duration": "3 months",
        "education_requirements": "Bachelor's Degree",
        "skills_required": ["React", "JavaScript", "Node.js"],
        "description": "Join our team to work on cutting-edge web applications using modern technologies.",
        "stipend": "₹15,000/month",
        "sector": "Information Technology",
    },
    {
        "id": 2,
        "title": "Digital Marketing Intern",
        "company": "MarketPro Agency",
        "location": "Bangalore, Karnataka",
        "duration": "4 months",
        "education_requirements": "12th Pass",
        "skills_required": ["Social Media", "Content Writing", "Analytics"],
        "description": "Help create and execute digital marketing campaigns for various clients.",
        "stipend": "₹12,000/month",
        "sector": "Marketing",
    },
    {
        "id": 3,
        "title": "Data Analyst Intern",
        "company": "DataInsights Ltd",
        "location": "Pune, Maharashtra",
        "duration": "6 months",
        "education_requirements": "Bachelor's Degree",
        "skills_required": ["Python", "SQL", "Excel"],
        "description": "Analyze business data and create insights to drive decision making.",
        "stipend": "₹18,000/month",
        "sector": "Information Technology",
    },
    {
        "id": 4,
        "title": "Clinical Research Intern",
        "company": "MediCare Research Institute",
        "location": "Hyderabad, Telangana",
        "duration": "6 months",
        "education_requirements": "Master's Degree",
        "skills_required": ["Data Collection", "Research", "Report Writing"],
        "description": "Support clinical trial coordination and research documentation.",
        "stipend": "₹20,000/month",
        "sector": "Healthcare",
    },
    {
        "id": 5,
        "title": "Teaching Assistant Intern",
        "company": "BrightMinds Learning",
        "location": "New Delhi, Delhi",
        "duration": "2 months",
        "education_requirements": "Diploma",
        "skills_required": ["Communication", "Lesson Planning", "MS Office"],
        "description": "Assist instructors with classroom sessions and learning material preparation.",
        "stipend": "₹8,000/month",
        "sector": "Education",
    },
    {
        "id": 6,
        "title": "Machine Learning Research Intern",
        "company": "NeuralWorks Labs",
        "location": "Bangalore, Karnataka",
        "duration": "6 months",
        "education_requirements": "PhD",
        "skills_required": ["Python", "Machine Learning", "PyTorch"],
        "description": "Prototype and evaluate models for language and vision research projects.",
        "stipend": "₹35,000/month",
        "sector": "Information Technology",
    },
    {
        "id": 7,
        "title": "Field Operations Intern",
        "company": "GreenHarvest Agritech",
        "location": "Nashik, Maharashtra",
        "duration": "3 months",
        "education_requirements": "10th Pass",
        "skills_required": ["Field Work", "Communication", "Data Entry"],
        "description": "Coordinate with farmers and record crop data for supply chain planning.",
        "stipend": "₹7,000/month",
        "sector": "Agriculture",
    },
    {
        "id": 8,
        "title": "Financial Analyst Intern",
        "company": "Capital Ledger Advisors",
        "location": "Mumbai, Maharashtra",
        "duration": "4 months",
        "education_requirements": "Bachelor's Degree",
        "skills_required": ["Excel", "Financial Modeling", "Accounting"],
        "description": "Build financial models and prepare client-ready investment summaries.",
        "stipend": "₹16,000/month",
        "sector": "Finance",
    },
)


@lru_cache
def _catalog_cache() -> tuple[Internship, ...]:
    return tuple(Internship.model_validate(item) for item in _CATALOG)


def load_internships() -> list[Internship]:
    return list(_catalog_cache())


def get_internship_by_id(internships: Sequence[Internship], internship_id: int) -> Internship | None:
    for internship in internships:
        if internship.id == internship_id:
            return internship
    return None
