"""
Serializers for the tracker API.

Wire format is camelCase (``positionTitle``); models and serializer fields are
snake_case (``position_title``). ``CamelCaseModelSerializer`` translates keys
on the way in and out so the field lists below stay ordinary Django names.
Only the fields listed in each ``Meta.fields`` are ever written; anything else
in a payload is dropped.
"""
import json
import re

from django.http import QueryDict
from django.utils import timezone
from rest_framework import serializers
from rest_framework.fields import empty

from .derivations import derive_fields
from .filters import open_reminders
from .integrity import check_no_cycle, check_single_level
from .models import (
    Application, Company, Contact, EmailTemplate, Education, Event, Experience, Interaction,
    Interview, LearningItem, Project, Reminder, Resource, Resume, ResumeSection, ResumeTemplate,
    SkillCategory, Task,
)

_CAMEL_BOUNDARY = re.compile(r'(?<!^)(?=[A-Z])')

TIMESTAMP_FIELDS = ['id', 'created_at', 'updated_at']


def camelize(name):
    if name.startswith('_'):
        return '_' + camelize(name[1:])
    head, *rest = name.split('_')
    return head + ''.join(part[:1].upper() + part[1:] for part in rest)


def underscore(name):
    return _CAMEL_BOUNDARY.sub('_', name).lower()


def camelize_errors(detail):
    if isinstance(detail, dict):
        return {
            key if key == 'non_field_errors' else camelize(key): value
            for key, value in detail.items()
        }
    return detail


def related_id(model, source, **kwargs):
    """Writable foreign key exposed as ``<name>Id``; unknown ids fail validation."""
    return serializers.PrimaryKeyRelatedField(
        source=source,
        queryset=model.objects.all(),
        pk_field=serializers.UUIDField(format='hex_verbose'),
        **kwargs,
    )


def optional_related_id(model, source):
    return related_id(model, source, required=False, allow_null=True)


class JSONEncodedField(serializers.CharField):
    """Text column holding JSON; accepts either the encoded string or a list/dict."""

    def __init__(self, **kwargs):
        kwargs.setdefault('allow_blank', True)
        kwargs.setdefault('trim_whitespace', False)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        if isinstance(data, (list, dict)):
            return json.dumps(data)
        return super().to_internal_value(data)


class CamelCaseModelSerializer(serializers.ModelSerializer):
    """
    ModelSerializer speaking camelCase on the wire.

    Also runs the derived-field rules on every create and update, so a
    status or completion change stamps its timestamp in the same write.
    """

    def to_internal_value(self, data):
        if isinstance(data, QueryDict):
            converted = QueryDict(mutable=True)
            for key, values in data.lists():
                converted.setlist(underscore(key), values)
            data = converted
        elif hasattr(data, 'items'):
            data = {underscore(key): value for key, value in data.items()}
        return super().to_internal_value(data)

    def run_validation(self, data=empty):
        try:
            return super().run_validation(data)
        except serializers.ValidationError as exc:
            raise serializers.ValidationError(camelize_errors(exc.detail))

    def to_representation(self, instance):
        data = super().to_representation(instance)
        return {camelize(key): value for key, value in data.items()}

    def _with_derived(self, validated_data):
        validated_data.update(derive_fields(self.Meta.model, validated_data, timezone.now()))
        return validated_data

    def create(self, validated_data):
        return super().create(self._with_derived(validated_data))

    def update(self, instance, validated_data):
        return super().update(instance, self._with_derived(validated_data))


# ------------------------------
# Summaries embedded in other payloads
# ------------------------------


class CompanySummarySerializer(CamelCaseModelSerializer):
    class Meta:
        model = Company
        fields = ['id', 'name', 'website', 'careers_url']


class ContactSummarySerializer(CamelCaseModelSerializer):
    company_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Contact
        fields = ['id', 'name', 'email', 'position', 'company_id', 'linkedin_url']


class ApplicationSummarySerializer(CamelCaseModelSerializer):
    company = CompanySummarySerializer(read_only=True)

    class Meta:
        model = Application
        fields = ['id', 'position_title', 'status', 'applied_date', 'company']


# ------------------------------
# Companies, contacts, applications
# ------------------------------


class CompanySerializer(CamelCaseModelSerializer):
    class Meta:
        model = Company
        fields = ['id', 'name', 'website', 'careers_url', 'notes', 'created_at', 'updated_at']
        read_only_fields = TIMESTAMP_FIELDS

    def to_representation(self, instance):
        data = super().to_representation(instance)
        if hasattr(instance, 'application_count'):
            data['_count'] = {
                'applications': instance.application_count,
                'contacts': instance.contact_count,
            }
        return data


class CompanyApplicationSerializer(CamelCaseModelSerializer):
    class Meta:
        model = Application
        fields = ['id', 'position_title', 'status', 'applied_date', 'is_referred', 'created_at']


class CompanyDetailSerializer(CompanySerializer):
    applications = CompanyApplicationSerializer(many=True, read_only=True)
    contacts = ContactSummarySerializer(many=True, read_only=True)

    class Meta(CompanySerializer.Meta):
        fields = CompanySerializer.Meta.fields + ['applications', 'contacts']


class InteractionSerializer(CamelCaseModelSerializer):
    contact_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Interaction
        fields = ['id', 'contact_id', 'type', 'interaction_date', 'notes', 'created_at', 'updated_at']
        read_only_fields = TIMESTAMP_FIELDS

    def create(self, validated_data):
        interaction = super().create(validated_data)
        # Only ever moves the contact's last interaction forward
        contact = interaction.contact
        if contact.last_interaction_date is None or contact.last_interaction_date < interaction.interaction_date:
            contact.last_interaction_date = interaction.interaction_date
            contact.save(update_fields=['last_interaction_date', 'updated_at'])
        return interaction


class ContactSerializer(CamelCaseModelSerializer):
    company_id = related_id(Company, 'company')
    company = CompanySummarySerializer(read_only=True)

    class Meta:
        model = Contact
        fields = [
            'id', 'name', 'company_id', 'company', 'linkedin_url', 'email', 'phone', 'position', 'status',
            'can_refer', 'willing_to_refer', 'notes', 'conversation_notes', 'messaged_date',
            'last_interaction_date', 'created_at', 'updated_at',
        ]
        read_only_fields = TIMESTAMP_FIELDS

    def to_representation(self, instance):
        data = super().to_representation(instance)
        # Set by filter_contacts for the list view
        if hasattr(instance, 'recent_interactions'):
            data['interactions'] = InteractionSerializer(instance.recent_interactions, many=True).data
        if hasattr(instance, 'interaction_count'):
            data['_count'] = {
                'referredApplications': instance.referred_application_count,
                'interactions': instance.interaction_count,
            }
        return data


class ContactDetailSerializer(ContactSerializer):
    interactions = InteractionSerializer(many=True, read_only=True)
    referred_applications = ApplicationSummarySerializer(many=True, read_only=True)

    class Meta(ContactSerializer.Meta):
        fields = ContactSerializer.Meta.fields + ['interactions', 'referred_applications']


class InterviewSerializer(CamelCaseModelSerializer):
    application_id = related_id(Application, 'application')
    application = ApplicationSummarySerializer(read_only=True)

    class Meta:
        model = Interview
        fields = [
            'id', 'application_id', 'application', 'round', 'title', 'interview_date', 'duration',
            'interviewers', 'location', 'meeting_link', 'status', 'feedback', 'notes',
            'created_at', 'updated_at',
        ]
        read_only_fields = TIMESTAMP_FIELDS


class InterviewSummarySerializer(CamelCaseModelSerializer):
    class Meta:
        model = Interview
        fields = ['id', 'round', 'title', 'interview_date', 'status']


class ReminderSerializer(CamelCaseModelSerializer):
    application_id = optional_related_id(Application, 'application')
    application = ApplicationSummarySerializer(read_only=True)

    class Meta:
        model = Reminder
        fields = [
            'id', 'application_id', 'application', 'title', 'description', 'due_date', 'type',
            'is_completed', 'completed_at', 'created_at', 'updated_at',
        ]
        read_only_fields = TIMESTAMP_FIELDS


class ApplicationSerializer(CamelCaseModelSerializer):
    company_id = related_id(Company, 'company')
    referred_by_id = optional_related_id(Contact, 'referred_by')
    company = CompanySummarySerializer(read_only=True)
    referred_by_contact = ContactSummarySerializer(source='referred_by', read_only=True)
    interviews = InterviewSummarySerializer(many=True, read_only=True)

    class Meta:
        model = Application
        fields = [
            'id', 'position_title', 'company_id', 'company', 'description', 'job_posting_url', 'status',
            'applied_date', 'application_deadline', 'salary_min', 'salary_max', 'salary_currency',
            'resume_path', 'cover_letter_path', 'is_referred', 'referred_by_id', 'referred_by_contact',
            'notes', 'interviews', 'created_at', 'updated_at',
        ]
        read_only_fields = TIMESTAMP_FIELDS

    def to_representation(self, instance):
        data = super().to_representation(instance)
        if hasattr(instance, 'interview_count'):
            data['_count'] = {
                'interviews': instance.interview_count,
                'reminders': instance.reminder_count,
            }
        return data


class ApplicationDetailSerializer(ApplicationSerializer):
    reminders = serializers.SerializerMethodField()

    class Meta(ApplicationSerializer.Meta):
        fields = ApplicationSerializer.Meta.fields + ['reminders']

    def get_reminders(self, obj):
        return ReminderSerializer(open_reminders(obj), many=True).data


# ------------------------------
# Tasks and events
# ------------------------------


class SubtaskSerializer(CamelCaseModelSerializer):
    parent_task_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Task
        fields = [
            'id', 'title', 'notes', 'due_date', 'is_completed', 'completed_at', 'parent_task_id',
            'created_at', 'updated_at',
        ]
        read_only_fields = TIMESTAMP_FIELDS


class TaskSerializer(CamelCaseModelSerializer):
    parent_task_id = optional_related_id(Task, 'parent_task')
    subtasks = SubtaskSerializer(many=True, read_only=True)

    class Meta:
        model = Task
        fields = SubtaskSerializer.Meta.fields + ['subtasks']
        read_only_fields = TIMESTAMP_FIELDS

    def validate(self, attrs):
        if 'parent_task' in attrs:
            check_no_cycle(self.instance, attrs['parent_task'], 'parent_task')
            check_single_level(self.instance, attrs['parent_task'], 'parent_task', 'subtasks')
        return attrs


class EventSerializer(CamelCaseModelSerializer):
    application_id = optional_related_id(Application, 'application')
    contact_id = optional_related_id(Contact, 'contact')
    application = ApplicationSummarySerializer(read_only=True)
    contact = ContactSummarySerializer(read_only=True)
    next_steps = JSONEncodedField(required=False, allow_null=True)

    class Meta:
        model = Event
        fields = [
            'id', 'type', 'title', 'description', 'scheduled_date', 'duration', 'application_id', 'application',
            'contact_id', 'contact', 'round', 'interviewers', 'location', 'meeting_link', 'status',
            'is_completed', 'completed_at', 'feedback', 'notes', 'outcome', 'next_steps',
            'next_steps_due_date', 'created_at', 'updated_at',
        ]
        read_only_fields = TIMESTAMP_FIELDS


# ------------------------------
# Learning
# ------------------------------


class SubResourceSerializer(CamelCaseModelSerializer):
    parent_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Resource
        fields = [
            'id', 'title', 'description', 'url', 'type', 'category', 'tags', 'notes', 'parent_id',
            'is_completed', 'is_favorite', 'created_at', 'updated_at',
        ]
        read_only_fields = TIMESTAMP_FIELDS


class ResourceSerializer(CamelCaseModelSerializer):
    parent_id = optional_related_id(Resource, 'parent')
    sub_resources = SubResourceSerializer(many=True, read_only=True)

    class Meta:
        model = Resource
        fields = SubResourceSerializer.Meta.fields + ['sub_resources']
        read_only_fields = TIMESTAMP_FIELDS

    def validate(self, attrs):
        if 'parent' in attrs:
            check_no_cycle(self.instance, attrs['parent'], 'parent')
            check_single_level(self.instance, attrs['parent'], 'parent', 'sub_resources')
        return attrs


class LearningItemSerializer(CamelCaseModelSerializer):
    class Meta:
        model = LearningItem
        fields = [
            'id', 'type', 'title', 'description', 'resource_url', 'additional_links', 'category', 'tags',
            'status', 'priority', 'progress', 'target_date', 'started_at', 'completed_at', 'notes',
            'key_takeaways', 'created_at', 'updated_at',
        ]
        read_only_fields = TIMESTAMP_FIELDS


class EmailTemplateSerializer(CamelCaseModelSerializer):
    class Meta:
        model = EmailTemplate
        fields = ['id', 'name', 'subject', 'body', 'category', 'created_at', 'updated_at']
        read_only_fields = TIMESTAMP_FIELDS


# ------------------------------
# Resume builder
# ------------------------------


class ExperienceSerializer(CamelCaseModelSerializer):
    resume_id = related_id(Resume, 'resume')
    bullet_points = JSONEncodedField(required=False)

    class Meta:
        model = Experience
        fields = [
            'id', 'resume_id', 'company', 'position', 'location', 'start_date', 'end_date', 'bullet_points',
            'order', 'created_at', 'updated_at',
        ]
        read_only_fields = TIMESTAMP_FIELDS


class ProjectSerializer(CamelCaseModelSerializer):
    resume_id = related_id(Resume, 'resume')
    bullet_points = JSONEncodedField(required=False)

    class Meta:
        model = Project
        fields = [
            'id', 'resume_id', 'name', 'description', 'technologies', 'github_url', 'live_url', 'start_date',
            'end_date', 'bullet_points', 'order', 'created_at', 'updated_at',
        ]
        read_only_fields = TIMESTAMP_FIELDS


class SkillCategorySerializer(CamelCaseModelSerializer):
    resume_id = related_id(Resume, 'resume')
    skills = JSONEncodedField(required=False)

    class Meta:
        model = SkillCategory
        fields = ['id', 'resume_id', 'name', 'skills', 'order', 'created_at', 'updated_at']
        read_only_fields = TIMESTAMP_FIELDS


class EducationSerializer(CamelCaseModelSerializer):
    resume_id = related_id(Resume, 'resume')

    class Meta:
        model = Education
        fields = [
            'id', 'resume_id', 'school', 'degree', 'field', 'location', 'start_date', 'end_date', 'gpa',
            'achievements', 'order', 'created_at', 'updated_at',
        ]
        read_only_fields = TIMESTAMP_FIELDS


class ResumeSerializer(CamelCaseModelSerializer):
    experiences = ExperienceSerializer(many=True, read_only=True)
    projects = ProjectSerializer(many=True, read_only=True)
    skills = SkillCategorySerializer(many=True, read_only=True)
    education = EducationSerializer(many=True, read_only=True)

    class Meta:
        model = Resume
        fields = [
            'id', 'name', 'description', 'target_role', 'is_default', 'last_used_at',
            'experiences', 'projects', 'skills', 'education', 'created_at', 'updated_at',
        ]
        read_only_fields = TIMESTAMP_FIELDS


class ResumeSectionSerializer(CamelCaseModelSerializer):
    template_id = related_id(ResumeTemplate, 'template')

    class Meta:
        model = ResumeSection
        fields = ['id', 'template_id', 'name', 'order', 'latex_code', 'notes', 'created_at', 'updated_at']
        read_only_fields = TIMESTAMP_FIELDS
        # Uniqueness is checked in validate() so the message names the template rule
        validators = []

    def validate(self, attrs):
        template = attrs.get('template', getattr(self.instance, 'template', None))
        name = attrs.get('name', getattr(self.instance, 'name', None))
        if template is not None and name:
            clash = ResumeSection.objects.filter(template=template, name=name)
            if self.instance is not None:
                clash = clash.exclude(pk=self.instance.pk)
            if clash.exists():
                raise serializers.ValidationError(
                    {'name': 'A section with this name already exists in this template.'},
                    code='unique',
                )
        return attrs


class ResumeTemplateSerializer(CamelCaseModelSerializer):
    sections = ResumeSectionSerializer(many=True, read_only=True)

    class Meta:
        model = ResumeTemplate
        fields = ['id', 'name', 'description', 'sections', 'created_at', 'updated_at']
        read_only_fields = TIMESTAMP_FIELDS
