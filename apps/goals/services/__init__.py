"""Services for goals business logic."""

from .exceptions import (
    GoalsServiceError,
    TemplateNotFoundError,
    TemplateArchivedError,
    GoalNotFoundError,
    ActiveGoalLimitError,
    NoRequiredStepsError,
    GoalArchivedError,
    GoalAlreadyArchivedError,
)
from .template_management import (
    get_template_by_id,
    create_template,
    update_template,
    archive_template,
)
from .goal_assignment import (
    MAX_ACTIVE_GOALS,
    DEFAULT_TARGET_DAYS,
    assign_goal_from_template,
    create_custom_goal,
    get_goal_by_id,
    update_goal,
    archive_goal,
)
from .goal_progress import refresh_goal_progress

__all__ = [
    # Exceptions
    'GoalsServiceError',
    'TemplateNotFoundError',
    'TemplateArchivedError',
    'GoalNotFoundError',
    'ActiveGoalLimitError',
    'NoRequiredStepsError',
    'GoalArchivedError',
    'GoalAlreadyArchivedError',
    # Templates
    'get_template_by_id',
    'create_template',
    'update_template',
    'archive_template',
    # Goals
    'MAX_ACTIVE_GOALS',
    'DEFAULT_TARGET_DAYS',
    'assign_goal_from_template',
    'create_custom_goal',
    'get_goal_by_id',
    'update_goal',
    'archive_goal',
    # Progression
    'refresh_goal_progress',
]
