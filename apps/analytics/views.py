from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework import status
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from apps.accounts.permissions import IsShiftStaff
from .analytics import AnalyticsQueries
from .serializers import (
    # Input serializers
    SuccessRateQuerySerializer,
    # Response serializers
    NearMasteryGoalSerializer,
    SuccessRateSerializer,
    DashboardResponseSerializer,
    EmployeeProgressResponseSerializer,
    ErrorSerializer,
)
from .exceptions import AnalyticsServiceError, EmployeeNotFoundError


@extend_schema(
    responses={200: DashboardResponseSerializer},
    description="Headline counts, current shift, goals near mastery and recent activity.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsShiftStaff])
def dashboard(request):
    """Get dashboard summary - thin HTTP handler."""
    return Response(AnalyticsQueries.dashboard_summary())


@extend_schema(
    responses={200: NearMasteryGoalSerializer(many=True)},
    description="Active goals with a streak of at least 2 fully correct days.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsShiftStaff])
def goals_near_mastery(request):
    """List goals near mastery."""
    return Response(AnalyticsQueries.goals_near_mastery())


@extend_schema(
    parameters=[
        OpenApiParameter('days', OpenApiTypes.INT, description='Window length in days (default 7)'),
        OpenApiParameter('today', OpenApiTypes.DATE, description='End of the window (YYYY-MM-DD)'),
    ],
    responses={
        200: SuccessRateSerializer,
        400: ErrorSerializer,
    },
    description="Share of correct outcomes over a trailing window.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsShiftStaff])
def success_rate(request):
    """Get success rate for a trailing window."""
    query_serializer = SuccessRateQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    params = query_serializer.validated_data

    try:
        data = AnalyticsQueries.success_rate(
            days=params['days'],
            today=params.get('today'),
        )
    except AnalyticsServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(data)


@extend_schema(
    responses={
        200: EmployeeProgressResponseSerializer,
        404: ErrorSerializer,
    },
    description="Progress of every goal of one employee with recent outcomes.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsShiftStaff])
def employee_progress(request, employee_id):
    """Get goal progress for an employee."""
    try:
        data = AnalyticsQueries.employee_goal_progress(employee_id)
    except EmployeeNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(data)
