"""Knowledge base for the portfolio assistant."""

from .profile_loader import (
    BlogPost,
    ExperienceEntry,
    KnowledgeBase,
    PersonalInfo,
    Project,
    SkillCategory,
    fallback_knowledge_base,
    load_knowledge_base,
    parse_knowledge_base,
)

__all__ = [
    "BlogPost",
    "ExperienceEntry",
    "KnowledgeBase",
    "PersonalInfo",
    "Project",
    "SkillCategory",
    "fallback_knowledge_base",
    "load_knowledge_base",
    "parse_knowledge_base",
]
