"""
Quick-action suggestions offered alongside assistant replies.
"""

from enum import Enum
from typing import Optional


class QuickAction(str, Enum):
    """Follow-up actions a renderer can offer as buttons."""

    TRY_MODEL_DEMO = "try_model"
    DOWNLOAD_RESUME = "download_resume"
    SCHEDULE_CALL = "schedule_call"
    SEE_ALL_PROJECTS = "see_all_projects"


ACTION_LABELS = {
    QuickAction.TRY_MODEL_DEMO: "Try Model Demo",
    QuickAction.DOWNLOAD_RESUME: "Download Resume",
    QuickAction.SCHEDULE_CALL: "Schedule Call",
    QuickAction.SEE_ALL_PROJECTS: "See All Projects",
}

MAX_SUGGESTED_ACTIONS = 3

DEMO_TRIGGERS = ("model", "demo", "try")
RESUME_TRIGGERS = ("experience", "resume", "cv")
CALL_TRIGGERS = ("talk", "discuss", "meeting")


def suggest_actions(query: str, reply: str) -> Optional[list[QuickAction]]:
    """
    Pick quick actions from keywords in the query and the reply.

    Returns None when nothing matched.
    """
    query_lower = query.lower()
    actions: list[QuickAction] = []

    if any(word in query_lower for word in DEMO_TRIGGERS):
        actions.append(QuickAction.TRY_MODEL_DEMO)

    if any(word in query_lower for word in RESUME_TRIGGERS):
        actions.append(QuickAction.DOWNLOAD_RESUME)

    if any(word in query_lower for word in CALL_TRIGGERS):
        actions.append(QuickAction.SCHEDULE_CALL)

    # Only offered when the reply talks about projects and there is room left
    if "project" in reply and len(actions) < 2:
        actions.append(QuickAction.SEE_ALL_PROJECTS)

    return actions[:MAX_SUGGESTED_ACTIONS] or None
