import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from django.db import DatabaseError
from django.urls import reverse
from django.utils import timezone
from django.utils.dateparse import parse_datetime
from rest_framework.test import APIClient

from tracker.models import Application, Interview
from tracker.serializers import ApplicationSerializer
from tracker.tests.fixtures import (
    ApplicationFactory,
    CompanyFactory,
    ContactFactory,
    InterviewFactory,
    ReminderFactory,
)


@pytest.mark.django_db
class TestApplicationCrud:
    def setup_method(self):
        self.client = APIClient()
        self.company = CompanyFactory(name='Acme')
        self.list_url = reverse('tracker:application-list')

    def detail_url(self, application):
        return reverse('tracker:application-detail', kwargs={'application_id': application.id})

    def test_create_then_fetch_stamps_applied_date(self):
        before = timezone.now()
        response = self.client.post(self.list_url, {
            'companyId': str(self.company.id),
            'positionTitle': 'SWE',
            'resumePath': '/uploads/resumes/r.pdf',
            'status': 'APPLIED',
        })
        after = timezone.now()
        assert response.status_code == 201

        fetched = self.client.get(reverse('tracker:application-detail', kwargs={'application_id': response.data['id']}))
        assert fetched.status_code == 200
        applied = parse_datetime(fetched.data['appliedDate'])
        assert before <= applied <= after
        assert fetched.data['company']['name'] == 'Acme'

    @pytest.mark.parametrize('missing', ['companyId', 'positionTitle', 'resumePath'])
    def test_required_fields(self, missing):
        payload = {
            'companyId': str(self.company.id),
            'positionTitle': 'SWE',
            'resumePath': '/uploads/resumes/r.pdf',
        }
        payload.pop(missing)
        response = self.client.post(self.list_url, payload)
        assert response.status_code == 400
        assert missing in response.data['error']['details']
        assert Application.objects.count() == 0

    def test_invalid_enum_and_date_are_rejected(self):
        base = {'companyId': str(self.company.id), 'positionTitle': 'SWE', 'resumePath': '/r.pdf'}
        assert self.client.post(self.list_url, {**base, 'status': 'HIRED'}).status_code == 400
        assert self.client.post(self.list_url, {**base, 'applicationDeadline': 'next tuesday'}).status_code == 400
        assert Application.objects.count() == 0

    def test_update_to_applied_sets_applied_date(self):
        application = ApplicationFactory(company=self.company)
        before = timezone.now()
        response = self.client.patch(self.detail_url(application), {'status': 'APPLIED'})
        assert response.status_code == 200
        application.refresh_from_db()
        assert before <= application.applied_date <= timezone.now()

    def test_explicit_applied_date_overrides_derivation(self):
        application = ApplicationFactory(company=self.company)
        response = self.client.patch(
            self.detail_url(application), {'status': 'APPLIED', 'appliedDate': '2023-12-24T08:00:00Z'}
        )
        assert response.status_code == 200
        application.refresh_from_db()
        assert application.applied_date.isoformat().startswith('2023-12-24T08:00:00')

    def test_partial_update_leaves_other_fields(self):
        application = ApplicationFactory(company=self.company, notes='keep me', salary_min=100)
        response = self.client.patch(self.detail_url(application), {'salaryMax': 200})
        assert response.status_code == 200
        application.refresh_from_db()
        assert application.notes == 'keep me'
        assert application.salary_min == 100
        assert application.salary_max == 200

    def test_unknown_referrer_is_validation_error(self):
        application = ApplicationFactory(company=self.company)
        response = self.client.patch(
            self.detail_url(application), {'referredById': '7b0c8b9e-7f43-4b8e-9d0c-1c1c1c1c1c1c'}
        )
        assert response.status_code == 400
        assert 'referredById' in response.data['error']['details']

    def test_referrer_can_be_cleared(self):
        referrer = ContactFactory()
        application = ApplicationFactory(company=self.company, referred_by=referrer, is_referred=True)
        response = self.client.patch(self.detail_url(application), {'referredById': None})
        assert response.status_code == 200
        application.refresh_from_db()
        assert application.referred_by is None

    def test_list_filters_and_embeds(self):
        applied = ApplicationFactory(company=self.company, status='APPLIED')
        InterviewFactory(application=applied)
        ReminderFactory(application=applied)
        ApplicationFactory(company=self.company, status='REJECTED')
        ApplicationFactory(status='APPLIED')

        response = self.client.get(self.list_url, {'status': 'APPLIED', 'companyId': str(self.company.id)})
        assert response.status_code == 200
        assert len(response.data) == 1
        row = response.data[0]
        assert row['id'] == str(applied.id)
        assert row['_count'] == {'interviews': 1, 'reminders': 1}
        assert len(row['interviews']) == 1
        assert row['company']['name'] == 'Acme'

    def test_referrer_is_embedded_as_referred_by_contact(self):
        referrer = ContactFactory(name='Jane')
        application = ApplicationFactory(company=self.company, referred_by=referrer, is_referred=True)
        response = self.client.get(self.detail_url(application))
        assert response.data['referredById'] == str(referrer.id)
        assert response.data['referredByContact']['name'] == 'Jane'
        assert 'referredBy' not in response.data

        listing = self.client.get(self.list_url).data
        assert listing[0]['referredByContact']['id'] == str(referrer.id)

    def test_detail_lists_only_open_reminders(self):
        application = ApplicationFactory(company=self.company)
        ReminderFactory(application=application, title='open')
        ReminderFactory(application=application, title='done', is_completed=True)
        response = self.client.get(self.detail_url(application))
        assert [r['title'] for r in response.data['reminders']] == ['open']

    def test_delete_removes_interviews(self):
        application = ApplicationFactory(company=self.company)
        InterviewFactory(application=application)
        response = self.client.delete(self.detail_url(application))
        assert response.status_code == 200
        assert Interview.objects.count() == 0
        assert self.client.get(self.detail_url(application)).status_code == 404


@pytest.mark.django_db
class TestApplicationUploads:
    @pytest.fixture(autouse=True)
    def media_root(self, settings, tmp_path):
        settings.MEDIA_ROOT = str(tmp_path)
        self.media_dir = tmp_path

    def setup_method(self):
        self.client = APIClient()
        self.company = CompanyFactory()
        self.url = reverse('tracker:application-list')

    def test_multipart_create_stores_files(self):
        response = self.client.post(
            self.url,
            {
                'companyId': str(self.company.id),
                'positionTitle': 'Data Engineer',
                'salaryMin': '',
                'isReferred': 'false',
                'resume': SimpleUploadedFile('My CV (final).pdf', b'%PDF-1.4', content_type='application/pdf'),
                'coverLetter': SimpleUploadedFile('letter.txt', b'Dear team', content_type='text/plain'),
            },
            format='multipart',
        )
        assert response.status_code == 201
        application = Application.objects.get(pk=response.data['id'])
        assert application.resume_path.startswith('/uploads/resumes/')
        assert application.resume_path.endswith('-My_CV__final_.pdf')
        assert application.cover_letter_path.startswith('/uploads/cover-letters/')
        assert application.salary_min is None
        stored = application.resume_path[len('/uploads/'):]
        assert (self.media_dir / stored).read_bytes() == b'%PDF-1.4'

    def test_bad_extension_is_rejected_before_anything_is_saved(self):
        response = self.client.post(
            self.url,
            {
                'companyId': str(self.company.id),
                'positionTitle': 'Data Engineer',
                'resume': SimpleUploadedFile('cv.exe', b'MZ', content_type='application/octet-stream'),
            },
            format='multipart',
        )
        assert response.status_code == 400
        assert 'resume' in response.data['error']['details']
        assert Application.objects.count() == 0
        assert not (self.media_dir / 'resumes').exists()

    def test_failed_insert_removes_stored_files(self, monkeypatch):
        def explode(serializer, **kwargs):
            raise DatabaseError('disk full')

        monkeypatch.setattr(ApplicationSerializer, 'save', explode)
        response = self.client.post(
            self.url,
            {
                'companyId': str(self.company.id),
                'positionTitle': 'Data Engineer',
                'resume': SimpleUploadedFile('cv.pdf', b'%PDF', content_type='application/pdf'),
                'coverLetter': SimpleUploadedFile('letter.txt', b'Hi', content_type='text/plain'),
            },
            format='multipart',
        )
        assert response.status_code == 500
        assert Application.objects.count() == 0
        leftovers = [path for path in self.media_dir.rglob('*') if path.is_file()]
        assert leftovers == []

    def test_multipart_without_resume_requires_path(self):
        response = self.client.post(
            self.url,
            {
                'companyId': str(self.company.id),
                'positionTitle': 'Data Engineer',
                'coverLetter': SimpleUploadedFile('letter.pdf', b'%PDF', content_type='application/pdf'),
            },
            format='multipart',
        )
        assert response.status_code == 400
        assert 'resumePath' in response.data['error']['details']
        assert Application.objects.count() == 0
