"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data
    python manage.py create_sample_data --clear

This creates:
- 2 accounts (admin, shift manager)
- 6 employees (one inactive)
- 2 goal templates
- 6 development goals, one of them already mastered
"""

from datetime import timedelta

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User, UserRole
from apps.employees.models import Employee
from apps.goals.models import DevelopmentGoal, GoalStatus, GoalTemplate
from apps.goals.services import (
    create_template,
    assign_goal_from_template,
    create_custom_goal,
)
from apps.shifts.models import ShiftRoster, ShiftSummary, StepProgress

DEMO_PASSWORD = 'demo123'


class Command(BaseCommand):
    help = 'Create sample data for trying out the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        employees = self.create_employees()
        templates = self.create_templates(users['admin'])
        self.create_goals(users['manager'], employees, templates)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Demo accounts:')
        self.stdout.write(f'  admin@goldenscoop.com / {DEMO_PASSWORD} (administrator)')
        self.stdout.write(f'  manager@goldenscoop.com / {DEMO_PASSWORD} (shift manager)')

    def clear_data(self):
        """Clear all shop data. Superusers created by hand are kept."""
        ShiftSummary.objects.all().delete()
        StepProgress.objects.all().delete()
        ShiftRoster.objects.all().delete()
        DevelopmentGoal.objects.all().delete()
        GoalTemplate.objects.all().delete()
        Employee.objects.all().delete()
        User.objects.filter(is_superuser=False).delete()

    def create_users(self):
        """Create the demo accounts."""
        self.stdout.write('  Creating accounts...')

        admin, _ = User.objects.get_or_create(
            email='admin@goldenscoop.com',
            defaults={
                'name': 'Shop Admin',
                'role': UserRole.ADMIN,
                'is_staff': True,
            }
        )
        admin.set_password(DEMO_PASSWORD)
        admin.save()

        manager, _ = User.objects.get_or_create(
            email='manager@goldenscoop.com',
            defaults={
                'name': 'Shift Manager',
                'role': UserRole.SHIFT_MANAGER,
            }
        )
        manager.set_password(DEMO_PASSWORD)
        manager.save()

        return {'admin': admin, 'manager': manager}

    def create_employees(self):
        """Create employees with support profiles."""
        self.stdout.write('  Creating employees...')

        employees_data = [
            {
                'name': 'Sally Martinez',
                'allergies': ['Tree nuts', 'Shellfish'],
                'emergency_contacts': [
                    {'name': 'Maria Martinez', 'relationship': 'Mother', 'phone': '(555) 123-4567'},
                    {'name': 'Carlos Martinez', 'relationship': 'Father', 'phone': '(555) 234-5678'},
                ],
                'interests_motivators': ['Pop music', 'High-fives', 'Colorful stickers'],
                'challenges': ['Loud noises from blender', 'Rush periods with long lines'],
                'regulation_strategies': ['Offer 5-minute breaks during busy periods', 'Use visual order cards'],
            },
            {
                'name': 'Alex Thompson',
                'emergency_contacts': [
                    {'name': 'Jennifer Thompson', 'relationship': 'Mother', 'phone': '(555) 345-6789'},
                ],
                'interests_motivators': ['Video games', 'Basketball', 'Team competitions'],
                'challenges': ['Processing multiple instructions at once'],
                'regulation_strategies': ['Give one instruction at a time', 'Allow extra processing time'],
            },
            {
                'name': 'Emma Rodriguez',
                'allergies': ['Latex'],
                'emergency_contacts': [
                    {'name': 'Rosa Rodriguez', 'relationship': 'Grandmother', 'phone': '(555) 456-7890'},
                ],
                'interests_motivators': ['Art and drawing', 'Helping customers'],
                'challenges': ['Anxiety with new customers', 'Counting change quickly'],
                'regulation_strategies': ['Start with familiar customers', 'Use calculator for change'],
            },
            {
                'name': 'Jordan Kim',
                'allergies': ['Dairy', 'Eggs'],
                'emergency_contacts': [
                    {'name': 'Susan Kim', 'relationship': 'Mother', 'phone': '(555) 678-9012'},
                ],
                'interests_motivators': ['K-pop music', 'Making friends'],
                'challenges': ['Speaking loudly enough', 'Initiating conversations with customers'],
                'regulation_strategies': ['Use scripts for common interactions', 'Celebrate small social wins'],
            },
            {
                'name': 'Marcus Johnson',
                'emergency_contacts': [
                    {'name': 'Denise Johnson', 'relationship': 'Mother', 'phone': '(555) 789-0123'},
                ],
                'interests_motivators': ['Football', 'Being recognized as reliable'],
                'challenges': ['Following detailed cleaning procedures'],
                'regulation_strategies': ['Break cleaning tasks into smaller steps'],
            },
            {
                'name': 'Aisha Patel',
                'is_active': False,
                'allergies': ['Peanuts'],
                'emergency_contacts': [
                    {'name': 'Priya Patel', 'relationship': 'Sister', 'phone': '(555) 901-2345'},
                ],
                'interests_motivators': ['Reading', 'Animals'],
                'challenges': ['Loud environments', 'Time pressure'],
                'regulation_strategies': ['Assign quieter work stations'],
            },
        ]

        employees = {}
        for data in employees_data:
            employee, _ = Employee.objects.get_or_create(name=data['name'], defaults=data)
            employees[employee.name.split()[0].lower()] = employee

        return employees

    def create_templates(self, admin):
        """Create the goal template catalog."""
        self.stdout.write('  Creating goal templates...')

        target = timezone.localdate() + timedelta(days=90)
        templates = {}

        existing = GoalTemplate.objects.filter(name='Ice Cream Flavors Knowledge').first()
        templates['flavors'] = existing or create_template(
            name='Ice Cream Flavors Knowledge',
            goal_statement=(
                'Employee will independently state all current ice cream flavors and their '
                'mix-in ingredients with 100% accuracy in 3 consecutive shifts to increase '
                'customer service skills.'
            ),
            default_target_date=target,
            created_by=admin,
            steps=[
                {'step_description': 'Vanilla: vanilla ice cream'},
                {'step_description': "Charlie's Chocolate: chocolate ice cream (regular)"},
                {'step_description': 'Chocolate Gold Rush: chocolate ice cream with golden Oreos'},
                {'step_description': 'Chocolate No Cow: dairy-free chocolate; oat and coconut milk; vegan'},
                {'step_description': 'Cookies and Cream: vanilla ice cream with Oreos'},
                {'step_description': 'Cookie Dough: vanilla ice cream with cookie dough pieces'},
                {'step_description': 'Coffee: coffee ice cream'},
                {'step_description': 'Mint Chocolate Chip: mint ice cream with chocolate chips'},
            ],
        )

        existing = GoalTemplate.objects.filter(name='Phone Answering Protocol').first()
        templates['phone'] = existing or create_template(
            name='Phone Answering Protocol',
            goal_statement=(
                'Employee will independently answer the shop phone and answer all common '
                'questions asked by customers with 100% accuracy to increase independence '
                'in the workplace.'
            ),
            default_target_date=target,
            created_by=admin,
            steps=[
                {'step_description': 'Picks up the phone'},
                {'step_description': 'Selects "talk"'},
                {'step_description': 'Brings the phone to ear'},
                {'step_description': 'Says greeting: "Thank you for calling The Golden Scoop, this is [name], how can I help you?"'},
                {'step_description': 'Answers the question or states "Let me grab my manager for you"'},
                {'step_description': 'Hands the phone to a manager (if applicable)', 'is_required': False},
                {'step_description': 'Says "Thank you, have a nice day, bye"'},
                {'step_description': 'Selects "end" on the phone'},
                {'step_description': 'Puts the phone on the charger'},
            ],
        )

        return templates

    def create_goals(self, manager, employees, templates):
        """Assign goals and seed some progression state for the dashboard."""
        self.stdout.write('  Creating development goals...')

        if DevelopmentGoal.objects.exists():
            self.stdout.write('  Goals already exist, skipping.')
            return

        flavors = assign_goal_from_template(
            template_id=templates['flavors'].id,
            employee_id=employees['sally'].id,
            assigned_by=manager,
        )
        create_custom_goal(
            employee_id=employees['sally'].id,
            title='Customer Greeting Skills',
            description='Sally will greet every customer within 30 seconds of entry with appropriate eye contact and friendly demeanor.',
            assigned_by=manager,
            steps=[
                {'step_description': 'Makes eye contact with customer'},
                {'step_description': 'Smiles and says "Welcome to The Golden Scoop"'},
                {'step_description': 'Asks "How can I help you today?"'},
            ],
        )
        phone = assign_goal_from_template(
            template_id=templates['phone'].id,
            employee_id=employees['alex'].id,
            assigned_by=manager,
        )
        create_custom_goal(
            employee_id=employees['emma'].id,
            title='Cash Register Operation',
            description='Emma will independently operate the cash register for simple transactions with 100% accuracy.',
            assigned_by=manager,
            steps=[
                {'step_description': 'Greets customer and asks for their order'},
                {'step_description': 'Enters items correctly on register'},
                {'step_description': 'States total clearly to customer'},
                {'step_description': 'Processes payment (cash or card)'},
                {'step_description': 'Gives correct change and receipt'},
            ],
        )
        confidence = create_custom_goal(
            employee_id=employees['jordan'].id,
            title='Customer Interaction Confidence',
            description='Jordan will initiate friendly conversations with customers and speak at appropriate volume.',
            assigned_by=manager,
            steps=[
                {'step_description': 'Makes eye contact when greeting customers'},
                {'step_description': 'Speaks loud enough to be heard clearly'},
                {'step_description': 'Asks at least one friendly question (weather, day, etc.)', 'is_required': False},
                {'step_description': 'Thanks customer and wishes them well'},
            ],
        )
        cleaning = create_custom_goal(
            employee_id=employees['marcus'].id,
            title='Cleaning and Sanitization',
            description='Marcus will complete the end-of-shift cleaning checklist independently with 100% accuracy.',
            assigned_by=manager,
            steps=[
                {'step_description': 'Wipes down all counters with sanitizer'},
                {'step_description': 'Cleans ice cream scoops and utensils'},
                {'step_description': 'Sweeps and mops floor areas'},
                {'step_description': 'Empties trash and replaces liners'},
                {'step_description': 'Checks and refills napkin/spoon dispensers', 'is_required': False},
            ],
        )

        # Streaks from earlier shifts
        DevelopmentGoal.objects.filter(id=flavors.id).update(consecutive_all_correct=1)
        DevelopmentGoal.objects.filter(id=phone.id).update(consecutive_all_correct=2)
        DevelopmentGoal.objects.filter(id=confidence.id).update(consecutive_all_correct=1)
        DevelopmentGoal.objects.filter(id=cleaning.id).update(
            consecutive_all_correct=5,
            mastery_achieved=True,
            mastery_date=timezone.localdate() - timedelta(days=14),
            status=GoalStatus.MAINTENANCE,
        )
