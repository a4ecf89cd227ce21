from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.accounts.permissions import IsShiftStaff
from apps.employees.services import EmployeeNotFoundError, EmployeeInactiveError
from apps.goals.serializers import DevelopmentGoalSerializer
from apps.goals.services import GoalNotFoundError
from .serializers import (
    ShiftRosterSerializer,
    StartShiftSerializer,
    StepProgressSerializer,
    RecordOutcomeSerializer,
    ShiftSummarySerializer,
    SaveSummarySerializer,
    OutcomeQuerySerializer,
)
from .services import (
    get_active_shift,
    get_shift_by_id,
    start_shift,
    end_shift,
    record_step_outcome,
    get_shift_outcomes,
    save_shift_summary,
    get_shift_summaries,
    # Exceptions
    ShiftNotFoundError,
    EmptyRosterError,
    ShiftAlreadyActiveError,
    NoActiveShiftError,
    ShiftNotActiveError,
    EmployeeNotOnShiftError,
    StepNotInGoalError,
    GoalNotTrackableError,
)


class ActiveShiftResponseSerializer(serializers.Serializer):
    shift = ShiftRosterSerializer(allow_null=True)


class RecordOutcomeResponseSerializer(serializers.Serializer):
    progress = StepProgressSerializer()
    goal = DevelopmentGoalSerializer()


class EndShiftSerializer(serializers.Serializer):
    shift_id = serializers.UUIDField(required=False)


@extend_schema(responses={200: ActiveShiftResponseSerializer}, tags=['shifts'])
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsShiftStaff])
def active_shift(request):
    """Get the currently active shift (null when none)."""
    shift = get_active_shift()
    return Response({
        'shift': ShiftRosterSerializer(shift).data if shift else None
    })


@extend_schema(request=StartShiftSerializer, responses={201: ShiftRosterSerializer}, tags=['shifts'])
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsShiftStaff])
def start(request):
    """Start a shift with the selected employees."""
    serializer = StartShiftSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        shift = start_shift(
            manager=request.user,
            employee_ids=serializer.validated_data['employee_ids']
        )
    except ShiftAlreadyActiveError as e:
        return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)
    except (EmptyRosterError, EmployeeInactiveError) as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except EmployeeNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    shift = get_shift_by_id(shift_id=shift.id)
    return Response(ShiftRosterSerializer(shift).data, status=status.HTTP_201_CREATED)


@extend_schema(request=EndShiftSerializer, responses={200: ShiftRosterSerializer}, tags=['shifts'])
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsShiftStaff])
def end(request):
    """End the active shift."""
    serializer = EndShiftSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        shift = end_shift(
            shift_id=serializer.validated_data.get('shift_id'),
            ended_by=request.user
        )
    except NoActiveShiftError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    shift = get_shift_by_id(shift_id=shift.id)
    return Response(ShiftRosterSerializer(shift).data)


@extend_schema(responses={200: ShiftRosterSerializer}, tags=['shifts'])
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsShiftStaff])
def shift_detail(request, shift_id):
    """Get a shift with its roster."""
    try:
        shift = get_shift_by_id(shift_id=shift_id)
    except ShiftNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(ShiftRosterSerializer(shift).data)


@extend_schema(
    methods=['GET'],
    parameters=[OpenApiParameter('employee', str, description='Employee ID')],
    responses={200: StepProgressSerializer(many=True)},
    tags=['shifts'],
)
@extend_schema(
    methods=['POST'],
    request=RecordOutcomeSerializer,
    responses={200: RecordOutcomeResponseSerializer},
    tags=['shifts'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, IsShiftStaff])
def shift_outcomes(request, shift_id):
    """
    GET: Outcomes recorded in the shift (optionally ?employee=).
    POST: Record or overwrite a step outcome and return the refreshed goal.
    """
    if request.method == 'GET':
        query_serializer = OutcomeQuerySerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)

        try:
            outcomes = get_shift_outcomes(
                shift_id=shift_id,
                employee_id=query_serializer.validated_data.get('employee')
            )
        except ShiftNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(StepProgressSerializer(outcomes, many=True).data)

    serializer = RecordOutcomeSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data

    try:
        progress, goal = record_step_outcome(
            shift_id=shift_id,
            goal_id=data['goal'],
            step_id=data['step'],
            outcome=data['outcome'],
            notes=data.get('notes', ''),
            recorded_by=request.user,
        )
    except (ShiftNotFoundError, GoalNotFoundError) as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except (
        ShiftNotActiveError,
        GoalNotTrackableError,
        StepNotInGoalError,
        EmployeeNotOnShiftError,
    ) as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response({
        'progress': StepProgressSerializer(progress).data,
        'goal': DevelopmentGoalSerializer(goal).data,
    })


@extend_schema(
    methods=['GET'],
    responses={200: ShiftSummarySerializer(many=True)},
    tags=['shifts'],
)
@extend_schema(
    methods=['POST'],
    request=SaveSummarySerializer,
    responses={200: ShiftSummarySerializer},
    tags=['shifts'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, IsShiftStaff])
def shift_summaries(request, shift_id):
    """
    GET: Summaries written for the shift.
    POST: Create or replace an employee's summary.
    """
    if request.method == 'GET':
        try:
            summaries = get_shift_summaries(shift_id=shift_id)
        except ShiftNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(ShiftSummarySerializer(summaries, many=True).data)

    serializer = SaveSummarySerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        summary = save_shift_summary(
            shift_id=shift_id,
            employee_id=serializer.validated_data['employee'],
            summary=serializer.validated_data['summary'],
            author=request.user,
        )
    except (ShiftNotFoundError, EmployeeNotFoundError) as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except EmployeeNotOnShiftError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(ShiftSummarySerializer(summary).data)
