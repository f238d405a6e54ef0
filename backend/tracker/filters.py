"""
Query-string filtering and ordering for the list endpoints.

Every function takes a base queryset and the request's ``query_params`` and
returns the filtered, ordered queryset. Parameters a function does not know
about are ignored.
"""
from datetime import datetime, time
import uuid

from django.db.models import Case, Count, F, IntegerField, Prefetch, Value, When
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime
from rest_framework import serializers

from .models import Interaction, Interview, Reminder, ResumeSection, Resource, Task

# Interactions embedded per contact in the contact list
RECENT_INTERACTIONS = 5


def as_uuid(value):
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError):
        return None


def _filter_by_id(queryset, field, raw):
    """Exact match on a foreign key column; an unparsable id simply matches nothing."""
    if not raw:
        return queryset
    pk = as_uuid(raw)
    if pk is None:
        return queryset.none()
    return queryset.filter(**{field: pk})


def filter_applications(queryset, params):
    status = params.get('status')
    if status:
        queryset = queryset.filter(status=status)
    queryset = _filter_by_id(queryset, 'company_id', params.get('companyId'))
    return (
        queryset
        .select_related('company', 'referred_by')
        .prefetch_related(Prefetch('interviews', queryset=Interview.objects.order_by('interview_date')))
        .annotate(
            interview_count=Count('interviews', distinct=True),
            reminder_count=Count('reminders', distinct=True),
        )
        .order_by('-created_at')
    )


def filter_contacts(queryset, params):
    queryset = _filter_by_id(queryset, 'company_id', params.get('companyId'))
    if params.get('canRefer') == 'true':
        queryset = queryset.filter(can_refer=True)
    return (
        queryset
        .select_related('company')
        .prefetch_related(Prefetch(
            'interactions',
            queryset=Interaction.objects.order_by('-interaction_date')[:RECENT_INTERACTIONS],
            to_attr='recent_interactions',
        ))
        .annotate(
            interaction_count=Count('interactions', distinct=True),
            referred_application_count=Count('referred_applications', distinct=True),
        )
        .order_by(F('last_interaction_date').desc(nulls_last=True), '-created_at')
    )


def filter_interviews(queryset, params):
    queryset = _filter_by_id(queryset, 'application_id', params.get('applicationId'))
    return queryset.select_related('application__company').order_by('interview_date')


def filter_reminders(queryset, params):
    is_completed = params.get('isCompleted')
    if is_completed is not None:
        queryset = queryset.filter(is_completed=(is_completed == 'true'))
    return queryset.select_related('application__company').order_by('due_date')


def local_day_bounds(raw):
    """
    Return the aware ``(start, end)`` datetimes of the calendar day named by
    ``raw`` in the current time zone, 00:00:00.000 through 23:59:59.999.
    """
    day = None
    try:
        day = parse_date(raw)
        if day is None:
            moment = parse_datetime(raw)
            if moment is not None:
                day = timezone.localtime(moment).date() if timezone.is_aware(moment) else moment.date()
    except ValueError:
        day = None
    if day is None:
        raise serializers.ValidationError({'date': f"'{raw}' is not a valid date. Use YYYY-MM-DD."})
    tz = timezone.get_current_timezone()
    start = timezone.make_aware(datetime.combine(day, time.min), tz)
    end = timezone.make_aware(datetime.combine(day, time(23, 59, 59, 999000)), tz)
    return start, end


def filter_tasks(queryset, params):
    queryset = queryset.filter(parent_task__isnull=True)
    raw_date = params.get('date')
    if raw_date:
        start, end = local_day_bounds(raw_date)
        queryset = queryset.filter(due_date__gte=start, due_date__lte=end)
    return (
        queryset
        .prefetch_related(Prefetch('subtasks', queryset=Task.objects.order_by('created_at')))
        .order_by('due_date', 'created_at')
    )


def filter_events(queryset, params):
    return queryset.select_related('application__company', 'contact__company').order_by('scheduled_date')


def filter_resources(queryset, params):
    queryset = _filter_by_id(queryset, 'parent_id', params.get('parentId'))
    return (
        queryset
        .prefetch_related(Prefetch('sub_resources', queryset=Resource.objects.order_by('created_at')))
        .order_by('-created_at')
    )


def filter_learning_items(queryset, params):
    return (
        queryset
        .annotate(
            priority_rank=Case(
                When(priority='HIGH', then=Value(3)),
                When(priority='MEDIUM', then=Value(2)),
                When(priority='LOW', then=Value(1)),
                default=Value(0),
                output_field=IntegerField(),
            )
        )
        .order_by('-priority_rank', '-created_at')
    )


def filter_email_templates(queryset, params):
    category = params.get('category')
    if category:
        queryset = queryset.filter(category=category)
    return queryset.order_by('name')


def filter_resume_entries(queryset, params):
    """Experiences, projects, skill categories and education share one rule."""
    queryset = _filter_by_id(queryset, 'resume_id', params.get('resumeId'))
    return queryset.order_by('order', 'created_at')


def filter_companies(queryset, params):
    return (
        queryset
        .annotate(
            application_count=Count('applications', distinct=True),
            contact_count=Count('contacts', distinct=True),
        )
        .order_by('-created_at')
    )


def filter_resumes(queryset, params):
    return queryset.prefetch_related('experiences', 'projects', 'skills', 'education').order_by('-updated_at')


def filter_resume_templates(queryset, params):
    return (
        queryset
        .prefetch_related(Prefetch('sections', queryset=ResumeSection.objects.order_by('order', 'created_at')))
        .order_by('-created_at')
    )


def open_reminders(application):
    return Reminder.objects.filter(application=application, is_completed=False).order_by('due_date')
