"""
Management command to load a small demo dataset.
Usage: python manage.py seed_database [--reset]
"""
from datetime import datetime, timedelta

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from tracker.models import (
    Application, Company, Contact, EmailTemplate, Event, Interview, LearningItem, Reminder, Resource,
    Resume, ResumeTemplate, Task,
)

CONNECTION_REQUEST_BODY = """Hi {name},

I came across your profile and noticed you work at {company}. I'm very interested in opportunities there, particularly in {position}.

Would you be open to a brief chat about your experience at {company}?

Best regards,
Your Name"""


def _day(year, month, day):
    return timezone.make_aware(datetime(year, month, day))


class Command(BaseCommand):
    help = 'Seed the tracker with demo companies, contacts, applications and reminders'

    def add_arguments(self, parser):
        parser.add_argument(
            '--reset',
            action='store_true',
            help='Delete all tracked data before seeding',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['reset']:
            # Companies cascade to applications, contacts and everything under them
            for model in (Company, Task, Event, Reminder, Resource, LearningItem, EmailTemplate,
                          Resume, ResumeTemplate):
                model.objects.all().delete()
            self.stdout.write(self.style.WARNING('Removed existing tracker data'))

        google = Company.objects.create(
            name='Google',
            website='https://google.com',
            careers_url='https://careers.google.com',
            notes='Great company culture and benefits',
        )
        microsoft = Company.objects.create(
            name='Microsoft',
            website='https://microsoft.com',
            careers_url='https://careers.microsoft.com',
            notes='Excellent work-life balance',
        )
        meta = Company.objects.create(
            name='Meta',
            website='https://meta.com',
            careers_url='https://careers.meta.com',
        )

        john = Contact.objects.create(
            name='John Smith',
            linkedin_url='https://linkedin.com/in/johnsmith',
            email='john@google.com',
            company=google,
            position='Senior Software Engineer',
            status='CONNECTED',
            can_refer=True,
            willing_to_refer=True,
            last_interaction_date=timezone.now(),
        )
        Contact.objects.create(
            name='Sarah Johnson',
            linkedin_url='https://linkedin.com/in/sarahjohnson',
            company=microsoft,
            position='Engineering Manager',
            status='MESSAGED',
            messaged_date=timezone.now(),
            can_refer=True,
            willing_to_refer=False,
        )

        google_app = Application.objects.create(
            company=google,
            position_title='Software Engineer',
            description='Full-stack development position',
            job_posting_url='https://careers.google.com/jobs/123',
            status='APPLIED',
            applied_date=_day(2024, 1, 15),
            salary_min=150000,
            salary_max=200000,
            resume_path='/uploads/resumes/resume1.pdf',
            is_referred=True,
            referred_by=john,
        )
        microsoft_app = Application.objects.create(
            company=microsoft,
            position_title='Senior Software Engineer',
            job_posting_url='https://careers.microsoft.com/jobs/456',
            status='INTERVIEW_SCHEDULED',
            applied_date=_day(2024, 1, 20),
            salary_min=160000,
            salary_max=210000,
            resume_path='/uploads/resumes/resume2.pdf',
        )
        Application.objects.create(
            company=meta,
            position_title='Frontend Engineer',
            status='IN_REVIEW',
            applied_date=_day(2024, 1, 25),
            salary_min=155000,
            salary_max=205000,
            resume_path='/uploads/resumes/resume3.pdf',
        )

        Interview.objects.create(
            application=microsoft_app,
            round=1,
            title='Phone Screen',
            interview_date=_day(2024, 2, 1),
            duration=45,
            location='Phone',
            status='COMPLETED',
            feedback='Went well, moving to next round',
        )
        Interview.objects.create(
            application=microsoft_app,
            round=2,
            title='Technical Interview',
            interview_date=_day(2024, 2, 10),
            duration=90,
            location='Zoom',
            meeting_link='https://zoom.us/j/123456',
            status='SCHEDULED',
        )

        Reminder.objects.create(
            application=google_app,
            title='Follow up with Google',
            description='Check on application status',
            due_date=timezone.now() + timedelta(days=7),
            type='FOLLOW_UP',
        )
        Reminder.objects.create(
            application=microsoft_app,
            title='Prepare for Microsoft interview',
            description='Review system design concepts',
            due_date=_day(2024, 2, 9),
            type='INTERVIEW_PREP',
        )

        EmailTemplate.objects.create(
            name='Connection Request',
            subject='Connecting to discuss opportunities at {company}',
            body=CONNECTION_REQUEST_BODY,
            category='CONNECTION_REQUEST',
        )

        self.stdout.write(
            self.style.SUCCESS(
                'Database seeded successfully:\n'
                '  3 companies\n'
                '  2 contacts (1 willing to refer)\n'
                '  3 applications (1 referred, 1 in interview stage)\n'
                '  2 interviews\n'
                '  2 reminders\n'
                '  1 email template'
            )
        )
