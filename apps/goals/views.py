from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.accounts.permissions import IsAdminRole, IsShiftStaff
from apps.employees.services import EmployeeNotFoundError, EmployeeInactiveError
from .models import GoalTemplate, DevelopmentGoal
from .serializers import (
    GoalTemplateSerializer,
    GoalTemplateWriteSerializer,
    DevelopmentGoalSerializer,
    DevelopmentGoalListSerializer,
    CustomGoalCreateSerializer,
    GoalFromTemplateSerializer,
    GoalUpdateSerializer,
    GoalQuerySerializer,
)
from .services import (
    create_template,
    update_template,
    archive_template,
    assign_goal_from_template,
    create_custom_goal,
    update_goal,
    archive_goal,
    # Exceptions
    TemplateNotFoundError,
    TemplateArchivedError,
    ActiveGoalLimitError,
    NoRequiredStepsError,
    GoalArchivedError,
)


class GoalTemplateViewSet(viewsets.ModelViewSet):
    """
    ViewSet for the goal template catalog.

    list: Templates (filter with ?status=active|archived)
    retrieve: Template with steps
    create: Create template (admin only)
    partial_update: Edit template, replacing steps when given (admin only)
    archive: Archive template (admin only)
    """

    queryset = GoalTemplate.objects.prefetch_related('steps')
    serializer_class = GoalTemplateSerializer
    http_method_names = ['get', 'post', 'patch', 'head', 'options']

    def get_queryset(self):
        queryset = GoalTemplate.objects.prefetch_related('steps')
        template_status = self.request.query_params.get('status')
        if template_status:
            queryset = queryset.filter(status=template_status)
        return queryset

    def get_permissions(self):
        """Writes are admin only; both roles can browse."""
        if self.action in ['create', 'partial_update', 'archive']:
            return [IsAuthenticated(), IsAdminRole()]
        return [IsAuthenticated(), IsShiftStaff()]

    @extend_schema(parameters=[OpenApiParameter('status', str, description='active or archived')])
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(request=GoalTemplateWriteSerializer, responses={201: GoalTemplateSerializer})
    def create(self, request, *args, **kwargs):
        """Create a template."""
        serializer = GoalTemplateWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            template = create_template(created_by=request.user, **serializer.validated_data)
        except NoRequiredStepsError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(GoalTemplateSerializer(template).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=GoalTemplateWriteSerializer, responses={200: GoalTemplateSerializer})
    def partial_update(self, request, *args, **kwargs):
        """Edit a template."""
        serializer = GoalTemplateWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            template = update_template(template_id=self.kwargs['pk'], **serializer.validated_data)
        except TemplateNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except (TemplateArchivedError, NoRequiredStepsError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        template = GoalTemplate.objects.prefetch_related('steps').get(id=template.id)
        return Response(GoalTemplateSerializer(template).data)

    @extend_schema(request=None, responses={200: GoalTemplateSerializer})
    @action(detail=True, methods=['post'])
    def archive(self, request, pk=None):
        """Archive a template."""
        try:
            template = archive_template(template_id=pk)
        except TemplateNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(GoalTemplateSerializer(template).data)


class DevelopmentGoalViewSet(viewsets.ModelViewSet):
    """
    ViewSet for employee development goals.

    list: Goals (filter with ?employee= and ?status=)
    retrieve: Goal with steps and progression
    create: Create a custom goal
    partial_update: Edit title, description, criteria or target date
    from_template: Assign a template to an employee
    archive: Archive a goal (terminal)
    """

    queryset = DevelopmentGoal.objects.select_related('employee').prefetch_related('steps')
    serializer_class = DevelopmentGoalSerializer
    permission_classes = [IsAuthenticated, IsShiftStaff]
    http_method_names = ['get', 'post', 'patch', 'head', 'options']

    def get_queryset(self):
        queryset = DevelopmentGoal.objects.select_related('employee').prefetch_related('steps')

        query_serializer = GoalQuerySerializer(data=self.request.query_params)
        query_serializer.is_valid(raise_exception=True)
        params = query_serializer.validated_data

        if 'employee' in params:
            queryset = queryset.filter(employee_id=params['employee'])

        if 'status' in params:
            queryset = queryset.filter(status=params['status'])

        return queryset

    def get_serializer_class(self):
        if self.action == 'list':
            return DevelopmentGoalListSerializer
        return DevelopmentGoalSerializer

    def _goal_response(self, goal, response_status=status.HTTP_200_OK):
        goal = self.get_queryset().get(id=goal.id)
        return Response(DevelopmentGoalSerializer(goal).data, status=response_status)

    @extend_schema(
        parameters=[
            OpenApiParameter('employee', str, description='Employee ID'),
            OpenApiParameter('status', str, description='active, maintenance or archived'),
        ]
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(request=CustomGoalCreateSerializer, responses={201: DevelopmentGoalSerializer})
    def create(self, request, *args, **kwargs):
        """Create a custom goal."""
        serializer = CustomGoalCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)

        try:
            goal = create_custom_goal(
                employee_id=data.pop('employee'),
                assigned_by=request.user,
                **data
            )
        except EmployeeNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except (EmployeeInactiveError, ActiveGoalLimitError, NoRequiredStepsError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return self._goal_response(goal, status.HTTP_201_CREATED)

    @extend_schema(request=GoalUpdateSerializer, responses={200: DevelopmentGoalSerializer})
    def partial_update(self, request, *args, **kwargs):
        """Edit a goal."""
        goal = self.get_object()
        serializer = GoalUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            goal = update_goal(goal_id=goal.id, **serializer.validated_data)
        except GoalArchivedError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return self._goal_response(goal)

    @extend_schema(request=GoalFromTemplateSerializer, responses={201: DevelopmentGoalSerializer})
    @action(detail=False, methods=['post'], url_path='from-template')
    def from_template(self, request):
        """Assign a template to an employee."""
        serializer = GoalFromTemplateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            goal = assign_goal_from_template(
                template_id=data['template'],
                employee_id=data['employee'],
                assigned_by=request.user,
                start_date=data.get('start_date'),
                target_end_date=data.get('target_end_date'),
            )
        except (TemplateNotFoundError, EmployeeNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except (
            TemplateArchivedError,
            EmployeeInactiveError,
            ActiveGoalLimitError,
            NoRequiredStepsError,
        ) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return self._goal_response(goal, status.HTTP_201_CREATED)

    @extend_schema(request=None, responses={200: DevelopmentGoalSerializer})
    @action(detail=True, methods=['post'])
    def archive(self, request, pk=None):
        """Archive a goal."""
        goal = self.get_object()
        try:
            goal = archive_goal(goal_id=goal.id, archived_by=request.user)
        except GoalArchivedError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return self._goal_response(goal)
