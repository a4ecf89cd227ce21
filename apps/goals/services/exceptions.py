"""
Domain-specific exceptions for goals app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class GoalsServiceError(Exception):
    """Base exception for all goals service errors."""
    pass


class TemplateNotFoundError(GoalsServiceError):
    """Raised when a goal template does not exist."""
    pass


class TemplateArchivedError(GoalsServiceError):
    """Raised when assigning from or editing an archived template."""
    pass


class GoalNotFoundError(GoalsServiceError):
    """Raised when a development goal does not exist."""
    pass


class ActiveGoalLimitError(GoalsServiceError):
    """Raised when an employee already has the maximum number of active goals."""
    pass


class NoRequiredStepsError(GoalsServiceError):
    """Raised when a goal or template would have no required step."""
    pass


class GoalArchivedError(GoalsServiceError):
    """Raised when changing a goal that has been archived."""
    pass


class GoalAlreadyArchivedError(GoalArchivedError):
    """Raised when archiving a goal that is already archived."""
    pass
