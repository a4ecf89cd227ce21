"""
Domain exceptions for analytics app.

Exception Hierarchy:
    AnalyticsServiceError (base)
    ├── InvalidWindowError
    └── EmployeeNotFoundError

Usage:
    from apps.analytics.exceptions import AnalyticsServiceError

    try:
        data = AnalyticsQueries.employee_goal_progress(employee_id)
    except AnalyticsServiceError as e:
        return Response({'error': str(e)}, status=400)
"""


class AnalyticsServiceError(Exception):
    """Base exception for all analytics service errors."""

    pass


class InvalidWindowError(AnalyticsServiceError):
    """
    Raised when a trailing window length is invalid.

    Example:
        raise InvalidWindowError("Window length cannot be negative")
    """

    pass


class EmployeeNotFoundError(AnalyticsServiceError):
    """
    Raised when the specified employee does not exist.

    Example:
        raise EmployeeNotFoundError("Employee not found")
    """

    pass
