"""
Chat engine orchestrating assistant responses.
"""

import logging
from typing import Optional

from config import Config, get_config
from knowledge.profile_loader import KnowledgeBase

from ..history import ConversationState
from ..models.schemas import Turn
from .client import CompletionError, RelayClient
from .context_builder import ContextBuilder
from .prompts import (
    CHAT_SYSTEM_PROMPT,
    CONTEXT_TEMPLATE,
    FALLBACK_BLOG,
    FALLBACK_CONTACT,
    FALLBACK_DEFAULT,
    FALLBACK_PROJECTS,
    FALLBACK_SKILLS,
)

logger = logging.getLogger(__name__)

PROJECT_TRIGGERS = ("healthcare", "medical", "mammography")
SKILL_TRIGGERS = ("skill", "expertise", "technology")
BLOG_TRIGGERS = ("blog", "article", "write")
CONTACT_TRIGGERS = ("contact", "schedule", "call", "meeting")


def contact_lines(knowledge_base: KnowledgeBase) -> list[str]:
    """Markdown contact lines for the portfolio owner."""
    info = knowledge_base.personal_info
    lines = []
    if info.email:
        lines.append(f"📧 **Email**: {info.email}")
    if info.linkedin:
        lines.append(f"💼 **LinkedIn**: [Connect with me]({info.linkedin})")
    if info.github:
        lines.append(f"🐙 **GitHub**: [{info.github.rstrip('/').split('/')[-1]}]({info.github})")
    return lines


def fallback_reply(query: str, knowledge_base: KnowledgeBase) -> str:
    """
    Select a canned reply by keyword sniffing on the query.

    Used when the completion relay cannot be reached. Always returns a
    non-empty reply, also for an empty knowledge base.
    """
    query_lower = query.lower()
    kb = knowledge_base

    if any(word in query_lower for word in PROJECT_TRIGGERS):
        projects = [
            f"**{p.title}** - {p.description}" for p in kb.projects[:2]
        ] or ["Project write-ups are being updated - ask me about my background in the meantime."]
        return FALLBACK_PROJECTS.format(projects="\n\n".join(projects))

    if any(word in query_lower for word in SKILL_TRIGGERS):
        skills = [
            f"**{category}**: {', '.join(entry.technologies)}"
            for category, entry in kb.skills.items()
            if entry.technologies
        ] or [kb.professional_summary or kb.personal_info.title]
        return FALLBACK_SKILLS.format(skills="\n\n".join(skills))

    if any(word in query_lower for word in BLOG_TRIGGERS):
        posts = [
            f"📝 **[{p.title}]({p.url})** - {p.summary}" for p in kb.blog_posts[:3]
        ] or ["New posts are on the way - check back soon!"]
        return FALLBACK_BLOG.format(posts="\n\n".join(posts))

    if any(word in query_lower for word in CONTACT_TRIGGERS):
        contact = contact_lines(kb) or ["Use the contact form on this portfolio."]
        return FALLBACK_CONTACT.format(contact="\n".join(contact))

    return FALLBACK_DEFAULT.format(name=kb.personal_info.name)


class ChatEngine:
    """Builds prompts, calls the completion relay and records the exchange."""

    def __init__(
        self,
        knowledge_base: KnowledgeBase,
        client: Optional[RelayClient] = None,
        config: Optional[Config] = None,
    ):
        """
        Initialize the chat engine.

        Args:
            knowledge_base: Loaded profile data.
            client: Relay client; created from the config when omitted.
            config: Optional configuration (uses the default when omitted).
        """
        self.knowledge_base = knowledge_base
        self.config = config or get_config()
        self.client = client or RelayClient(
            self.config.relay_url, timeout=self.config.request_timeout
        )
        self.context_builder = ContextBuilder(knowledge_base)
        self.system_prompt = CHAT_SYSTEM_PROMPT.format(
            name=knowledge_base.personal_info.name,
            title=knowledge_base.personal_info.title,
        )

    def build_messages(self, query: str, history: ConversationState) -> list[dict]:
        """
        Assemble the prompt for a query.

        Order: system instruction, system context, recent history, new
        user message.
        """
        context = self.context_builder.build_context(query)

        messages = [
            {"role": "system", "content": self.system_prompt},
            {"role": "system", "content": CONTEXT_TEMPLATE.format(context=context)},
        ]
        messages.extend(history.as_messages(self.config.history_window))
        messages.append({"role": "user", "content": query})
        return messages

    async def respond(self, query: str, history: ConversationState) -> str:
        """
        Answer a query.

        On success the user and assistant turns are appended to the history.
        When the relay fails a canned reply is returned and the history is
        left untouched.

        Args:
            query: The user's message.
            history: Conversation state of the session.

        Returns:
            Reply text.
        """
        messages = self.build_messages(query, history)

        try:
            answer = await self.client.complete(
                messages,
                model=self.config.llm_model,
                max_tokens=self.config.llm_max_tokens,
                temperature=self.config.llm_temperature,
            )
        except CompletionError as e:
            logger.warning(f"Completion relay unavailable, using fallback reply: {e}")
            return fallback_reply(query, self.knowledge_base)

        history.append(Turn(role="user", content=query))
        history.append(Turn(role="assistant", content=answer))
        return answer
