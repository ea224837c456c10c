"""Loader for the portfolio knowledge base JSON document."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from config import Config, get_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PersonalInfo:
    """Identity and contact details of the portfolio owner."""

    name: str
    title: str
    email: str = ""
    linkedin: str = ""
    github: str = ""


@dataclass(frozen=True)
class Project:
    """A portfolio project."""

    title: str
    description: str = ""
    keywords: Tuple[str, ...] = ()
    technologies: Tuple[str, ...] = ()
    achievements: Tuple[str, ...] = ()


@dataclass(frozen=True)
class BlogPost:
    """A published article."""

    title: str
    url: str = ""
    topics: Tuple[str, ...] = ()
    summary: str = ""


@dataclass(frozen=True)
class SkillCategory:
    """Technologies grouped under one skill category."""

    technologies: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ExperienceEntry:
    """A position in the work history."""

    title: str
    company: str = ""
    duration: str = ""
    description: str = ""


@dataclass(frozen=True)
class KnowledgeBase:
    """Static profile data used to ground assistant replies."""

    personal_info: PersonalInfo
    professional_summary: str = ""
    projects: Tuple[Project, ...] = ()
    blog_posts: Tuple[BlogPost, ...] = ()
    skills: Dict[str, SkillCategory] = field(default_factory=dict)
    experience: Tuple[ExperienceEntry, ...] = ()

    @property
    def is_empty(self) -> bool:
        """True when no projects, posts, skills or experience are present."""
        return not (self.projects or self.blog_posts or self.skills or self.experience)


def _strings(values) -> Tuple[str, ...]:
    """Coerce a JSON list into a tuple of strings."""
    if not values:
        return ()
    if isinstance(values, str):
        raise TypeError(f"Expected a list of strings, got {values!r}")
    return tuple(str(v) for v in values)


def _parse_project(data: dict) -> Project:
    return Project(
        title=data.get("title", ""),
        description=data.get("description", ""),
        keywords=_strings(data.get("keywords")),
        technologies=_strings(data.get("technologies")),
        achievements=_strings(data.get("achievements")),
    )


def _parse_blog_post(data: dict) -> BlogPost:
    return BlogPost(
        title=data.get("title", ""),
        url=data.get("url", ""),
        topics=_strings(data.get("topics")),
        summary=data.get("summary", ""),
    )


def _parse_experience(data: dict) -> ExperienceEntry:
    return ExperienceEntry(
        title=data.get("title", ""),
        company=data.get("company", ""),
        duration=data.get("duration", ""),
        description=data.get("description", ""),
    )


def _parse_skills(data: dict) -> Dict[str, SkillCategory]:
    """Parse skill categories; categories without a technology list are kept empty."""
    skills: Dict[str, SkillCategory] = {}
    for category, entry in data.items():
        technologies: Tuple[str, ...] = ()
        if isinstance(entry, dict):
            technologies = _strings(entry.get("technologies"))
        skills[category] = SkillCategory(technologies=technologies)
    return skills


def parse_knowledge_base(data: dict) -> KnowledgeBase:
    """Build a KnowledgeBase from the decoded JSON document."""
    personal = data.get("personal_info", {})
    projects: List[Project] = [_parse_project(p) for p in data.get("projects", [])]
    blog_posts: List[BlogPost] = [_parse_blog_post(b) for b in data.get("blog_posts", [])]
    experience: List[ExperienceEntry] = [
        _parse_experience(e) for e in data.get("experience", [])
    ]

    return KnowledgeBase(
        personal_info=PersonalInfo(
            name=personal.get("name", ""),
            title=personal.get("title", ""),
            email=personal.get("email", ""),
            linkedin=personal.get("linkedin", ""),
            github=personal.get("github", ""),
        ),
        professional_summary=data.get("professional_summary", ""),
        projects=tuple(projects),
        blog_posts=tuple(blog_posts),
        skills=_parse_skills(data.get("skills", {})),
        experience=tuple(experience),
    )


def fallback_knowledge_base(config: Optional[Config] = None) -> KnowledgeBase:
    """Minimal knowledge base with identity fields and empty collections."""
    config = config or get_config()
    return KnowledgeBase(
        personal_info=PersonalInfo(name=config.owner_name, title=config.owner_title),
        professional_summary=config.owner_summary,
    )


def load_knowledge_base(
    path: Optional[Path] = None,
    config: Optional[Config] = None,
) -> KnowledgeBase:
    """
    Load the knowledge base from a JSON file.

    Any failure (missing file, invalid JSON, unexpected structure) is logged
    and replaced by the fallback knowledge base, so callers always get a
    usable structure.
    """
    config = config or get_config()
    path = Path(path) if path else config.knowledge_base_path

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        knowledge_base = parse_knowledge_base(data)
    except (OSError, ValueError, TypeError, AttributeError) as e:
        logger.error(f"Failed to load knowledge base from {path}: {e}")
        return fallback_knowledge_base(config)

    logger.info(
        f"Knowledge base loaded from {path}: {len(knowledge_base.projects)} projects, "
        f"{len(knowledge_base.blog_posts)} blog posts"
    )
    return knowledge_base
