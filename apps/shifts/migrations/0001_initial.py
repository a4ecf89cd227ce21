from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('employees', '0001_initial'),
        ('goals', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='ShiftRoster',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('date', models.DateField(db_index=True)),
                ('started_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('ended_at', models.DateTimeField(blank=True, null=True)),
                ('is_active', models.BooleanField(default=True)),
                ('employees', models.ManyToManyField(related_name='shifts', to='employees.employee')),
                ('manager', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='shifts', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'shift_rosters',
                'ordering': ['-started_at'],
                'constraints': [
                    models.UniqueConstraint(condition=models.Q(('is_active', True)), fields=('is_active',), name='single_active_shift'),
                ],
            },
        ),
        migrations.CreateModel(
            name='StepProgress',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('date', models.DateField()),
                ('outcome', models.CharField(choices=[('correct', 'Correct'), ('verbal_prompt', 'Verbal Prompt'), ('na', 'N/A')], max_length=20)),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('employee', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='step_progress', to='employees.employee')),
                ('goal', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='step_progress', to='goals.developmentgoal')),
                ('recorded_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='recorded_progress', to=settings.AUTH_USER_MODEL)),
                ('shift', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='step_progress', to='shifts.shiftroster')),
                ('step', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='progress', to='goals.goalstep')),
            ],
            options={
                'db_table': 'step_progress',
                'ordering': ['-date', '-updated_at'],
                'indexes': [
                    models.Index(fields=['goal', 'date'], name='progress_goal_2b6f8e_idx'),
                    models.Index(fields=['date', 'outcome'], name='progress_date_9d3a1c_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(fields=('goal', 'step', 'employee', 'shift', 'date'), name='unique_step_progress_per_day'),
                ],
            },
        ),
        migrations.CreateModel(
            name='ShiftSummary',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('date', models.DateField()),
                ('summary', models.TextField()),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('author', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='shift_summaries', to=settings.AUTH_USER_MODEL)),
                ('employee', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='shift_summaries', to='employees.employee')),
                ('shift', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='summaries', to='shifts.shiftroster')),
            ],
            options={
                'db_table': 'shift_summaries',
                'ordering': ['-date', 'employee__name'],
                'constraints': [
                    models.UniqueConstraint(fields=('employee', 'shift', 'date'), name='unique_shift_summary_per_day'),
                ],
            },
        ),
    ]
