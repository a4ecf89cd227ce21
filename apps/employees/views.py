from rest_framework import viewsets, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from django.db.models import Q
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.accounts.permissions import IsShiftStaff
from .models import Employee
from .serializers import (
    EmployeeSerializer,
    EmployeeListSerializer,
    EmployeeWriteSerializer,
)
from .services import (
    create_employee,
    update_employee,
    deactivate_employee,
    EmployeeNotFoundError,
)


class EmployeePagination(PageNumberPagination):
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 200


class EmployeeViewSet(viewsets.ModelViewSet):
    """
    ViewSet for employee records.

    list: Employees (filter with ?active=true|false and ?search=)
    create: Add an employee
    retrieve: Full employee profile
    partial_update: Edit an employee
    destroy: Deactivate an employee (records are never deleted)
    """

    queryset = Employee.objects.all()
    serializer_class = EmployeeSerializer
    permission_classes = [IsAuthenticated, IsShiftStaff]
    pagination_class = EmployeePagination
    http_method_names = ['get', 'post', 'patch', 'delete', 'head', 'options']

    def get_queryset(self):
        queryset = Employee.objects.all()

        active = self.request.query_params.get('active')
        if active is not None:
            queryset = queryset.filter(is_active=active.lower() in ('1', 'true', 'yes'))

        search = self.request.query_params.get('search')
        if search:
            queryset = queryset.filter(Q(name__icontains=search) | Q(role__icontains=search))

        return queryset

    def get_serializer_class(self):
        if self.action == 'list':
            return EmployeeListSerializer
        if self.action in ['create', 'partial_update']:
            return EmployeeWriteSerializer
        return EmployeeSerializer

    @extend_schema(
        parameters=[
            OpenApiParameter('active', bool, description='Filter by active flag'),
            OpenApiParameter('search', str, description='Search in name and role'),
        ]
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(request=EmployeeWriteSerializer, responses={201: EmployeeSerializer})
    def create(self, request, *args, **kwargs):
        """Add an employee."""
        serializer = EmployeeWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        employee = create_employee(**serializer.validated_data)

        return Response(EmployeeSerializer(employee).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=EmployeeWriteSerializer, responses={200: EmployeeSerializer})
    def partial_update(self, request, *args, **kwargs):
        """Edit an employee."""
        serializer = EmployeeWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            employee = update_employee(employee_id=self.kwargs['pk'], **serializer.validated_data)
        except EmployeeNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(EmployeeSerializer(employee).data)

    def destroy(self, request, *args, **kwargs):
        """Deactivate an employee."""
        try:
            deactivate_employee(employee_id=self.kwargs['pk'])
        except EmployeeNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)
