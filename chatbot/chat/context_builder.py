"""
Keyword-based context builder for chat responses.
"""

import logging
from typing import Iterable

from knowledge.profile_loader import BlogPost, KnowledgeBase, Project

logger = logging.getLogger(__name__)

MAX_PROJECTS = 2
MAX_BLOG_POSTS = 2

# Query tokens must be longer than this to be matched against item text
MIN_TOKEN_LENGTH = 3

SKILL_TRIGGERS = ("skill", "expertise", "technology")
EXPERIENCE_TRIGGERS = ("experience", "work", "job")


def _is_relevant(query_lower: str, terms: Iterable[str], search_text: str) -> bool:
    """
    Check whether an item matches a query.

    An item matches when one of its terms occurs in the query, or when a
    query word longer than MIN_TOKEN_LENGTH occurs in the item's text.
    """
    if any(term.lower() in query_lower for term in terms if term):
        return True
    return any(
        len(word) > MIN_TOKEN_LENGTH and word in search_text
        for word in query_lower.split()
    )


class ContextBuilder:
    """Selects the parts of the knowledge base relevant to a question."""

    def __init__(self, knowledge_base: KnowledgeBase):
        """
        Initialize the context builder.

        Args:
            knowledge_base: Loaded profile data.
        """
        self.knowledge_base = knowledge_base

    def find_projects(self, query: str) -> list[Project]:
        """Relevant projects in knowledge base order, at most MAX_PROJECTS."""
        query_lower = query.lower()
        matches = []
        for project in self.knowledge_base.projects:
            search_text = " ".join(
                [project.title, project.description, *project.keywords]
            ).lower()
            if _is_relevant(query_lower, project.keywords, search_text):
                matches.append(project)
                if len(matches) == MAX_PROJECTS:
                    break
        return matches

    def find_blog_posts(self, query: str) -> list[BlogPost]:
        """Relevant blog posts in knowledge base order, at most MAX_BLOG_POSTS."""
        query_lower = query.lower()
        matches = []
        for post in self.knowledge_base.blog_posts:
            search_text = " ".join([post.title, post.summary, *post.topics]).lower()
            if _is_relevant(query_lower, post.topics, search_text):
                matches.append(post)
                if len(matches) == MAX_BLOG_POSTS:
                    break
        return matches

    def build_context(self, query: str) -> str:
        """
        Build the context text injected into the prompt.

        Args:
            query: User's question.

        Returns:
            Context blocks joined into a single string.
        """
        kb = self.knowledge_base
        query_lower = query.lower()

        context_parts = [
            f"Name: {kb.personal_info.name}",
            f"Role: {kb.personal_info.title}",
            f"Background: {kb.professional_summary}",
        ]

        projects = self.find_projects(query)
        if projects:
            context_parts.append("\nRelevant Projects:")
            for project in projects:
                context_parts.append(f"\n- {project.title}: {project.description}")
                context_parts.append(f"  Technologies: {', '.join(project.technologies)}")
                context_parts.append(f"  Achievements: {'; '.join(project.achievements)}")

        posts = self.find_blog_posts(query)
        if posts:
            context_parts.append("\nRelevant Blog Posts:")
            for post in posts:
                context_parts.append(f"\n- {post.title}")
                context_parts.append(f"  URL: {post.url}")
                context_parts.append(f"  Summary: {post.summary}")

        skills = {c: s for c, s in kb.skills.items() if s.technologies}
        if skills and any(word in query_lower for word in SKILL_TRIGGERS):
            context_parts.append("\nKey Skills:")
            for category, entry in skills.items():
                context_parts.append(f"\n{category}: {', '.join(entry.technologies)}")

        if kb.experience and any(word in query_lower for word in EXPERIENCE_TRIGGERS):
            context_parts.append("\nWork Experience:")
            for entry in kb.experience:
                context_parts.append(f"\n- {entry.title} at {entry.company} ({entry.duration})")
                context_parts.append(f"  {entry.description}")

        logger.debug(
            f"Context for query: {len(projects)} projects, {len(posts)} blog posts"
        )
        return "\n".join(context_parts)


def build_context(query: str, knowledge_base: KnowledgeBase) -> str:
    """Convenience function to build context for a single query."""
    return ContextBuilder(knowledge_base).build_context(query)
