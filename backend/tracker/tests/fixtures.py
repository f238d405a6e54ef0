"""
Test fixtures and factories for creating test data.
Uses factory_boy for consistent test data generation.
"""
from datetime import timedelta

import factory
from factory.django import DjangoModelFactory
from django.utils import timezone

from tracker.models import (
    Application,
    Company,
    Contact,
    Education,
    EmailTemplate,
    Event,
    Experience,
    Interaction,
    Interview,
    LearningItem,
    Project,
    Reminder,
    Resource,
    Resume,
    ResumeSection,
    ResumeTemplate,
    SkillCategory,
    Task,
)


class CompanyFactory(DjangoModelFactory):
    """Factory for companies"""
    class Meta:
        model = Company

    name = factory.Faker('company')
    website = factory.Sequence(lambda n: f'https://company{n}.example.com')


class ContactFactory(DjangoModelFactory):
    """Factory for networking contacts"""
    class Meta:
        model = Contact

    company = factory.SubFactory(CompanyFactory)
    name = factory.Faker('name')
    email = factory.Sequence(lambda n: f'contact{n}@example.com')
    position = factory.Faker('job')


class InteractionFactory(DjangoModelFactory):
    class Meta:
        model = Interaction

    contact = factory.SubFactory(ContactFactory)
    type = 'call'
    interaction_date = factory.LazyFunction(timezone.now)


class ApplicationFactory(DjangoModelFactory):
    """Factory for job applications"""
    class Meta:
        model = Application

    company = factory.SubFactory(CompanyFactory)
    position_title = factory.Faker('job')
    resume_path = factory.Sequence(lambda n: f'/uploads/resumes/resume{n}.pdf')


class InterviewFactory(DjangoModelFactory):
    class Meta:
        model = Interview

    application = factory.SubFactory(ApplicationFactory)
    round = factory.Sequence(lambda n: n + 1)
    title = 'Phone Screen'
    interview_date = factory.LazyFunction(lambda: timezone.now() + timedelta(days=3))


class ReminderFactory(DjangoModelFactory):
    class Meta:
        model = Reminder

    title = factory.Sequence(lambda n: f'Reminder {n}')
    due_date = factory.LazyFunction(lambda: timezone.now() + timedelta(days=1))


class TaskFactory(DjangoModelFactory):
    class Meta:
        model = Task

    title = factory.Sequence(lambda n: f'Task {n}')
    due_date = factory.LazyFunction(timezone.now)


class EventFactory(DjangoModelFactory):
    class Meta:
        model = Event

    title = factory.Sequence(lambda n: f'Event {n}')
    scheduled_date = factory.LazyFunction(lambda: timezone.now() + timedelta(days=2))


class ResourceFactory(DjangoModelFactory):
    class Meta:
        model = Resource

    title = factory.Sequence(lambda n: f'Resource {n}')
    url = factory.Sequence(lambda n: f'https://docs.example.com/{n}')
    type = 'article'


class LearningItemFactory(DjangoModelFactory):
    class Meta:
        model = LearningItem

    title = factory.Sequence(lambda n: f'Learning item {n}')


class EmailTemplateFactory(DjangoModelFactory):
    class Meta:
        model = EmailTemplate

    name = factory.Sequence(lambda n: f'Template {n}')
    subject = 'Hello {name}'
    body = 'Hi {name}, nice to meet you.'
    category = 'FOLLOW_UP'


class ResumeFactory(DjangoModelFactory):
    class Meta:
        model = Resume

    name = factory.Sequence(lambda n: f'Resume {n}')
    target_role = 'Backend Engineer'


class ExperienceFactory(DjangoModelFactory):
    class Meta:
        model = Experience

    resume = factory.SubFactory(ResumeFactory)
    company = factory.Faker('company')
    position = 'Software Engineer'
    start_date = 'Jan 2021'


class ProjectFactory(DjangoModelFactory):
    class Meta:
        model = Project

    resume = factory.SubFactory(ResumeFactory)
    name = factory.Sequence(lambda n: f'Project {n}')


class SkillCategoryFactory(DjangoModelFactory):
    class Meta:
        model = SkillCategory

    resume = factory.SubFactory(ResumeFactory)
    name = 'Languages'
    skills = '["Python", "SQL"]'


class EducationFactory(DjangoModelFactory):
    class Meta:
        model = Education

    resume = factory.SubFactory(ResumeFactory)
    school = 'State University'
    degree = 'BSc'
    start_date = 'Sep 2016'


class ResumeTemplateFactory(DjangoModelFactory):
    class Meta:
        model = ResumeTemplate

    name = factory.Sequence(lambda n: f'Template {n}')


class ResumeSectionFactory(DjangoModelFactory):
    class Meta:
        model = ResumeSection

    template = factory.SubFactory(ResumeTemplateFactory)
    name = factory.Sequence(lambda n: f'Section {n}')
    order = factory.Sequence(lambda n: n)
