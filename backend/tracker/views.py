"""
API views for the job search tracker.

Plain function views, one list/create and one detail view per resource.
Validation, missing rows and store failures are raised as exceptions and
rendered by ``tracker.exceptions.custom_exception_handler``; every request
runs in a single transaction (``ATOMIC_REQUESTS``).
"""
import json
import logging

from django.db.models import Prefetch
from django.http import QueryDict
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from .analytics import build_analytics
from .exceptions import NotFoundError
from .filters import (
    as_uuid,
    filter_applications,
    filter_companies,
    filter_contacts,
    filter_email_templates,
    filter_events,
    filter_interviews,
    filter_learning_items,
    filter_reminders,
    filter_resources,
    filter_resume_entries,
    filter_resume_templates,
    filter_resumes,
    filter_tasks,
)
from .integrity import delete_instance
from .models import (
    Application, Company, Contact, EmailTemplate, Education, Event, Experience, Interview,
    LearningItem, Project, Reminder, Resource, Resume, ResumeSection, ResumeTemplate,
    SkillCategory, Task,
)
from .serializers import (
    ApplicationDetailSerializer,
    ApplicationSerializer,
    CompanyDetailSerializer,
    CompanySerializer,
    ContactDetailSerializer,
    ContactSerializer,
    EducationSerializer,
    EmailTemplateSerializer,
    EventSerializer,
    ExperienceSerializer,
    InteractionSerializer,
    InterviewSerializer,
    LearningItemSerializer,
    ProjectSerializer,
    ReminderSerializer,
    ResourceSerializer,
    ResumeSectionSerializer,
    ResumeSerializer,
    ResumeTemplateSerializer,
    SkillCategorySerializer,
    TaskSerializer,
)
from .storage_utils import COVER_LETTER_FOLDER, RESUME_FOLDER, delete_upload, save_upload, validate_upload

logger = logging.getLogger(__name__)


# ------------------------------
# Shared helpers
# ------------------------------


def _get_or_404(queryset, pk, label):
    """Fetch one row by id; malformed and unknown ids are both a 404."""
    key = as_uuid(pk)
    if key is None:
        raise NotFoundError(label)
    try:
        return queryset.get(pk=key)
    except queryset.model.DoesNotExist:
        raise NotFoundError(label)


def _list(request, queryset, filter_fn, serializer_class):
    rows = filter_fn(queryset, request.query_params)
    return Response(serializer_class(rows, many=True).data, status=status.HTTP_200_OK)


def _create(serializer_class, data, label, **save_kwargs):
    serializer = serializer_class(data=data)
    serializer.is_valid(raise_exception=True)
    instance = serializer.save(**save_kwargs)
    logger.info("Created %s %s", label, instance.pk)
    return Response(serializer.data, status=status.HTTP_201_CREATED)


def _update(serializer_class, instance, data, read_serializer_class=None):
    serializer = serializer_class(instance, data=data, partial=True)
    serializer.is_valid(raise_exception=True)
    instance = serializer.save()
    read_serializer_class = read_serializer_class or serializer_class
    return Response(read_serializer_class(instance).data, status=status.HTTP_200_OK)


def _delete(instance, label):
    delete_instance(instance)
    return Response(
        {'success': True, 'message': f'{label} deleted successfully.'},
        status=status.HTTP_200_OK,
    )


def _detail(request, queryset, pk, label, serializer_class, read_serializer_class=None):
    """GET / PATCH / DELETE for a single row."""
    instance = _get_or_404(queryset, pk, label)
    read_serializer_class = read_serializer_class or serializer_class
    if request.method == 'GET':
        return Response(read_serializer_class(instance).data, status=status.HTTP_200_OK)
    if request.method == 'PATCH':
        return _update(serializer_class, instance, request.data, read_serializer_class)
    return _delete(instance, label)


# ------------------------------
# Companies
# ------------------------------


@api_view(['GET', 'POST'])
def company_list_create(request):
    """
    GET: all companies, newest first, with application/contact counts
    POST: create a company
    """
    if request.method == 'GET':
        return _list(request, Company.objects.all(), filter_companies, CompanySerializer)
    return _create(CompanySerializer, request.data, 'company')


@api_view(['GET', 'PATCH', 'DELETE'])
def company_detail(request, company_id):
    """
    GET: company with its applications and contacts, newest first
    DELETE: also removes its applications and contacts
    """
    queryset = Company.objects.prefetch_related('applications', 'contacts')
    return _detail(request, queryset, company_id, 'Company', CompanySerializer, CompanyDetailSerializer)


# ------------------------------
# Contacts and interactions
# ------------------------------


@api_view(['GET', 'POST'])
def contact_list_create(request):
    """
    GET: contacts filtered by ``companyId`` / ``canRefer=true``,
    most recently interacted with first
    POST: create a contact
    """
    if request.method == 'GET':
        return _list(request, Contact.objects.all(), filter_contacts, ContactSerializer)
    return _create(ContactSerializer, request.data, 'contact')


@api_view(['GET', 'PATCH', 'DELETE'])
def contact_detail(request, contact_id):
    queryset = Contact.objects.select_related('company').prefetch_related(
        'interactions', 'referred_applications__company'
    )
    return _detail(request, queryset, contact_id, 'Contact', ContactSerializer, ContactDetailSerializer)


@api_view(['GET', 'POST'])
def contact_interactions(request, contact_id):
    """
    GET: interactions logged with a contact, newest first
    POST: log an interaction; moves the contact's lastInteractionDate forward
    """
    contact = _get_or_404(Contact.objects.all(), contact_id, 'Contact')
    if request.method == 'GET':
        return Response(
            InteractionSerializer(contact.interactions.all(), many=True).data,
            status=status.HTTP_200_OK,
        )
    return _create(InteractionSerializer, request.data, 'interaction', contact=contact)


# ------------------------------
# Applications
# ------------------------------


def _form_fields(request):
    """Copy the non-file fields of a multipart body into a fresh QueryDict."""
    payload = QueryDict(mutable=True)
    for key, values in request.data.lists():
        if key not in request.FILES:
            payload.setlist(key, values)
    return payload


@api_view(['GET', 'POST'])
def application_list_create(request):
    """
    GET: applications filtered by ``status`` / ``companyId``, newest first
    POST: create an application from JSON, or from multipart form data with
    a ``resume`` file (required unless ``resumePath`` is given) and an
    optional ``coverLetter`` file
    """
    if request.method == 'GET':
        return _list(request, Application.objects.all(), filter_applications, ApplicationSerializer)

    if not request.FILES:
        return _create(ApplicationSerializer, request.data, 'application')

    resume = request.FILES.get('resume')
    cover_letter = request.FILES.get('coverLetter')
    if resume is not None:
        validate_upload(resume, RESUME_FOLDER, field='resume')
    if cover_letter is not None:
        validate_upload(cover_letter, COVER_LETTER_FOLDER, field='coverLetter')

    payload = _form_fields(request)
    if resume is not None:
        # Satisfies the required check; replaced by the stored path below
        payload['resumePath'] = resume.name

    serializer = ApplicationSerializer(data=payload)
    serializer.is_valid(raise_exception=True)

    stored = {}
    try:
        if resume is not None:
            stored['resume_path'] = save_upload(resume, RESUME_FOLDER)
        if cover_letter is not None:
            stored['cover_letter_path'] = save_upload(cover_letter, COVER_LETTER_FOLDER)
        instance = serializer.save(**stored)
    except Exception:
        # The row is rolled back with the request, so drop the files too
        for reference in stored.values():
            delete_upload(reference)
        raise
    logger.info("Created application %s with uploads %s", instance.pk, sorted(stored))
    return Response(serializer.data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PATCH', 'DELETE'])
def application_detail(request, application_id):
    """
    GET: application with company, referrer, interviews and open reminders
    PATCH: partial update; moving to APPLIED stamps appliedDate
    DELETE: removes its interviews, reminders and events too
    """
    queryset = Application.objects.select_related('company', 'referred_by').prefetch_related('interviews')
    return _detail(
        request, queryset, application_id, 'Application', ApplicationSerializer, ApplicationDetailSerializer
    )


# ------------------------------
# Interviews and reminders
# ------------------------------


@api_view(['GET', 'POST'])
def interview_list_create(request):
    if request.method == 'GET':
        return _list(request, Interview.objects.all(), filter_interviews, InterviewSerializer)
    return _create(InterviewSerializer, request.data, 'interview')


@api_view(['GET', 'PATCH', 'DELETE'])
def interview_detail(request, interview_id):
    queryset = Interview.objects.select_related('application__company')
    return _detail(request, queryset, interview_id, 'Interview', InterviewSerializer)


@api_view(['GET', 'POST'])
def reminder_list_create(request):
    """``?isCompleted=true`` lists completed reminders, any other value open ones."""
    if request.method == 'GET':
        return _list(request, Reminder.objects.all(), filter_reminders, ReminderSerializer)
    return _create(ReminderSerializer, request.data, 'reminder')


@api_view(['GET', 'PATCH', 'DELETE'])
def reminder_detail(request, reminder_id):
    queryset = Reminder.objects.select_related('application__company')
    return _detail(request, queryset, reminder_id, 'Reminder', ReminderSerializer)


# ------------------------------
# Tasks and events
# ------------------------------


@api_view(['GET', 'POST'])
def task_list_create(request):
    """
    GET: top-level tasks with their subtasks nested; ``?date=YYYY-MM-DD``
    limits to tasks due on that local day
    POST: create a task, or a subtask when ``parentTaskId`` is given
    """
    if request.method == 'GET':
        return _list(request, Task.objects.all(), filter_tasks, TaskSerializer)
    return _create(TaskSerializer, request.data, 'task')


@api_view(['GET', 'PATCH', 'DELETE'])
def task_detail(request, task_id):
    """Deleting a task deletes its subtasks."""
    queryset = Task.objects.select_related('parent_task').prefetch_related(
        Prefetch('subtasks', queryset=Task.objects.order_by('created_at'))
    )
    return _detail(request, queryset, task_id, 'Task', TaskSerializer)


def all_next_steps_completed(raw):
    """True when ``raw`` encodes a non-empty list of steps that are all completed."""
    if not raw:
        return False
    try:
        steps = json.loads(raw)
    except ValueError:
        # Unparseable text is stored as sent
        return False
    if not isinstance(steps, list) or not steps:
        return False
    return all(isinstance(step, dict) and bool(step.get('completed')) for step in steps)


@api_view(['GET', 'POST'])
def event_list_create(request):
    if request.method == 'GET':
        return _list(request, Event.objects.all(), filter_events, EventSerializer)
    return _create(EventSerializer, request.data, 'event')


@api_view(['GET', 'PATCH', 'DELETE'])
def event_detail(request, event_id):
    """
    PATCH: partial update. When every one of the event's next steps ends up
    completed the event is done with and gets deleted instead.
    """
    event = _get_or_404(Event.objects.select_related('application__company', 'contact'), event_id, 'Event')
    if request.method == 'GET':
        return Response(EventSerializer(event).data, status=status.HTTP_200_OK)
    if request.method == 'DELETE':
        return _delete(event, 'Event')

    serializer = EventSerializer(event, data=request.data, partial=True)
    serializer.is_valid(raise_exception=True)
    if all_next_steps_completed(serializer.validated_data.get('next_steps')):
        delete_instance(event)
        logger.info("Event %s removed after its next steps were completed", event_id)
        return Response(
            {'success': True, 'deleted': True, 'message': 'All next steps completed; event removed.'},
            status=status.HTTP_200_OK,
        )
    instance = serializer.save()
    return Response(EventSerializer(instance).data, status=status.HTTP_200_OK)


# ------------------------------
# Resources and learning
# ------------------------------


@api_view(['GET', 'POST'])
def resource_list_create(request):
    if request.method == 'GET':
        return _list(request, Resource.objects.all(), filter_resources, ResourceSerializer)
    return _create(ResourceSerializer, request.data, 'resource')


@api_view(['GET', 'PATCH', 'DELETE'])
def resource_detail(request, resource_id):
    queryset = Resource.objects.prefetch_related(
        Prefetch('sub_resources', queryset=Resource.objects.order_by('created_at'))
    )
    return _detail(request, queryset, resource_id, 'Resource', ResourceSerializer)


@api_view(['GET', 'POST'])
def learning_list_create(request):
    """Learning items, highest priority first."""
    if request.method == 'GET':
        return _list(request, LearningItem.objects.all(), filter_learning_items, LearningItemSerializer)
    return _create(LearningItemSerializer, request.data, 'learning item')


@api_view(['GET', 'PATCH', 'DELETE'])
def learning_detail(request, item_id):
    return _detail(request, LearningItem.objects.all(), item_id, 'Learning item', LearningItemSerializer)


@api_view(['GET', 'POST'])
def email_template_list_create(request):
    if request.method == 'GET':
        return _list(request, EmailTemplate.objects.all(), filter_email_templates, EmailTemplateSerializer)
    return _create(EmailTemplateSerializer, request.data, 'email template')


@api_view(['GET', 'PATCH', 'DELETE'])
def email_template_detail(request, template_id):
    return _detail(request, EmailTemplate.objects.all(), template_id, 'Email template', EmailTemplateSerializer)


# ------------------------------
# Resume builder
# ------------------------------


@api_view(['GET', 'POST'])
def resume_list_create(request):
    """Resumes, most recently edited first, with every section nested."""
    if request.method == 'GET':
        return _list(request, Resume.objects.all(), filter_resumes, ResumeSerializer)
    return _create(ResumeSerializer, request.data, 'resume')


@api_view(['GET', 'PATCH', 'DELETE'])
def resume_detail(request, resume_id):
    queryset = Resume.objects.prefetch_related('experiences', 'projects', 'skills', 'education')
    return _detail(request, queryset, resume_id, 'Resume', ResumeSerializer)


@api_view(['GET', 'POST'])
def experience_list_create(request):
    if request.method == 'GET':
        return _list(request, Experience.objects.all(), filter_resume_entries, ExperienceSerializer)
    return _create(ExperienceSerializer, request.data, 'experience')


@api_view(['GET', 'PATCH', 'DELETE'])
def experience_detail(request, entry_id):
    return _detail(request, Experience.objects.all(), entry_id, 'Experience', ExperienceSerializer)


@api_view(['GET', 'POST'])
def project_list_create(request):
    if request.method == 'GET':
        return _list(request, Project.objects.all(), filter_resume_entries, ProjectSerializer)
    return _create(ProjectSerializer, request.data, 'project')


@api_view(['GET', 'PATCH', 'DELETE'])
def project_detail(request, entry_id):
    return _detail(request, Project.objects.all(), entry_id, 'Project', ProjectSerializer)


@api_view(['GET', 'POST'])
def skill_list_create(request):
    if request.method == 'GET':
        return _list(request, SkillCategory.objects.all(), filter_resume_entries, SkillCategorySerializer)
    return _create(SkillCategorySerializer, request.data, 'skill category')


@api_view(['GET', 'PATCH', 'DELETE'])
def skill_detail(request, entry_id):
    return _detail(request, SkillCategory.objects.all(), entry_id, 'Skill category', SkillCategorySerializer)


@api_view(['GET', 'POST'])
def education_list_create(request):
    if request.method == 'GET':
        return _list(request, Education.objects.all(), filter_resume_entries, EducationSerializer)
    return _create(EducationSerializer, request.data, 'education')


@api_view(['GET', 'PATCH', 'DELETE'])
def education_detail(request, entry_id):
    return _detail(request, Education.objects.all(), entry_id, 'Education entry', EducationSerializer)


@api_view(['GET', 'POST'])
def resume_template_list_create(request):
    if request.method == 'GET':
        return _list(request, ResumeTemplate.objects.all(), filter_resume_templates, ResumeTemplateSerializer)
    return _create(ResumeTemplateSerializer, request.data, 'resume template')


@api_view(['GET', 'PATCH', 'DELETE'])
def resume_template_detail(request, template_id):
    """Deleting a template deletes its sections."""
    queryset = ResumeTemplate.objects.prefetch_related('sections')
    return _detail(request, queryset, template_id, 'Resume template', ResumeTemplateSerializer)


@api_view(['POST'])
def resume_section_create(request):
    """Section names are unique within a template; a clash is a 400."""
    return _create(ResumeSectionSerializer, request.data, 'resume section')


@api_view(['GET', 'PATCH', 'DELETE'])
def resume_section_detail(request, section_id):
    return _detail(request, ResumeSection.objects.all(), section_id, 'Resume section', ResumeSectionSerializer)


# ------------------------------
# Analytics
# ------------------------------


@api_view(['GET'])
def analytics_overview(request):
    """Application funnel, referral effectiveness and activity summary."""
    return Response(build_analytics(), status=status.HTTP_200_OK)
