from django.conf import settings
import django.core.validators
from django.db import migrations, models
import django.db.models.deletion
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('employees', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='GoalTemplate',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('goal_statement', models.TextField()),
                ('default_mastery_criteria', models.CharField(default='3 consecutive shifts with all required steps Correct', max_length=255)),
                ('default_target_date', models.DateField(blank=True, null=True)),
                ('status', models.CharField(choices=[('active', 'Active'), ('archived', 'Archived')], db_index=True, default='active', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='goal_templates', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'goal_templates',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='GoalTemplateStep',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('step_order', models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ('step_description', models.TextField()),
                ('is_required', models.BooleanField(default=True)),
                ('template', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='steps', to='goals.goaltemplate')),
            ],
            options={
                'db_table': 'goal_template_steps',
                'ordering': ['template', 'step_order'],
                'constraints': [models.UniqueConstraint(fields=('template', 'step_order'), name='unique_template_step_order')],
            },
        ),
        migrations.CreateModel(
            name='DevelopmentGoal',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
                ('mastery_criteria', models.CharField(default='3 consecutive shifts with all required steps Correct', max_length=255)),
                ('start_date', models.DateField()),
                ('target_end_date', models.DateField(blank=True, null=True)),
                ('status', models.CharField(choices=[('active', 'Active'), ('maintenance', 'Maintenance'), ('archived', 'Archived')], default='active', max_length=20)),
                ('consecutive_all_correct', models.PositiveIntegerField(default=0)),
                ('mastery_achieved', models.BooleanField(default=False)),
                ('mastery_date', models.DateField(blank=True, null=True)),
                ('streak_evaluated_on', models.DateField(blank=True, null=True)),
                ('streak_before_evaluation', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='assigned_goals', to=settings.AUTH_USER_MODEL)),
                ('employee', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='goals', to='employees.employee')),
            ],
            options={
                'db_table': 'development_goals',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['employee', 'status'], name='goals_employee_8a4d2c_idx'),
                    models.Index(fields=['status', 'consecutive_all_correct'], name='goals_status_1c7e9f_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='GoalStep',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('step_order', models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ('step_description', models.TextField()),
                ('is_required', models.BooleanField(default=True)),
                ('goal', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='steps', to='goals.developmentgoal')),
            ],
            options={
                'db_table': 'goal_steps',
                'ordering': ['goal', 'step_order'],
                'constraints': [models.UniqueConstraint(fields=('goal', 'step_order'), name='unique_goal_step_order')],
            },
        ),
    ]
