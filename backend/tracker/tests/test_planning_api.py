"""Interviews, reminders, tasks and events."""
import json
from datetime import datetime, timedelta, timezone as dt_timezone

import pytest
from django.urls import reverse
from django.utils import timezone
from rest_framework.test import APIClient

from tracker.models import Event, Interview, Reminder, Task
from tracker.tests.fixtures import (
    ApplicationFactory,
    ContactFactory,
    EventFactory,
    InterviewFactory,
    ReminderFactory,
    TaskFactory,
)


def _utc(*args):
    return datetime(*args, tzinfo=dt_timezone.utc)


@pytest.mark.django_db
class TestInterviews:
    def setup_method(self):
        self.client = APIClient()
        self.application = ApplicationFactory()

    def test_create_requires_round_and_date(self):
        url = reverse('tracker:interview-list')
        payload = {'applicationId': str(self.application.id), 'title': 'Onsite'}
        response = self.client.post(url, payload)
        assert response.status_code == 400
        assert {'round', 'interviewDate'} <= set(response.data['error']['details'])
        assert Interview.objects.count() == 0

        response = self.client.post(url, {**payload, 'round': 2, 'interviewDate': '2024-06-01T15:00:00Z'})
        assert response.status_code == 201
        assert response.data['status'] == 'SCHEDULED'
        assert response.data['application']['id'] == str(self.application.id)

    def test_list_by_application_in_date_order(self):
        later = InterviewFactory(application=self.application, interview_date=timezone.now() + timedelta(days=5))
        sooner = InterviewFactory(application=self.application, interview_date=timezone.now() + timedelta(days=1))
        InterviewFactory()
        response = self.client.get(reverse('tracker:interview-list'), {'applicationId': str(self.application.id)})
        assert [row['id'] for row in response.data] == [str(sooner.id), str(later.id)]


@pytest.mark.django_db
class TestReminders:
    def setup_method(self):
        self.client = APIClient()

    def test_completion_round_trip(self):
        reminder = ReminderFactory()
        url = reverse('tracker:reminder-detail', kwargs={'reminder_id': reminder.id})

        self.client.patch(url, {'isCompleted': True})
        reminder.refresh_from_db()
        assert reminder.completed_at is not None

        self.client.patch(url, {'isCompleted': False})
        reminder.refresh_from_db()
        assert reminder.completed_at is None

    def test_is_completed_filter(self):
        ReminderFactory(title='open')
        ReminderFactory(title='done', is_completed=True)
        url = reverse('tracker:reminder-list')
        assert [r['title'] for r in self.client.get(url, {'isCompleted': 'true'}).data] == ['done']
        assert [r['title'] for r in self.client.get(url, {'isCompleted': 'no'}).data] == ['open']
        assert len(self.client.get(url).data) == 2

    def test_reminder_without_application(self):
        response = self.client.post(
            reverse('tracker:reminder-list'), {'title': 'Update portfolio', 'dueDate': '2024-07-01T09:00:00Z'}
        )
        assert response.status_code == 201
        assert response.data['applicationId'] is None
        assert response.data['type'] == 'FOLLOW_UP'
        assert Reminder.objects.count() == 1


@pytest.mark.django_db
class TestTasks:
    def setup_method(self):
        self.client = APIClient()
        self.list_url = reverse('tracker:task-list')

    def detail_url(self, task_id):
        return reverse('tracker:task-detail', kwargs={'task_id': task_id})

    def test_subtasks_nest_under_top_level_task(self):
        due = '2024-03-10T12:00:00Z'
        parent = self.client.post(self.list_url, {'title': 'A', 'dueDate': due}).data
        child = self.client.post(self.list_url, {'title': 'B', 'dueDate': due, 'parentTaskId': parent['id']})
        assert child.status_code == 201

        response = self.client.get(self.list_url)
        assert response.status_code == 200
        assert [row['title'] for row in response.data] == ['A']
        assert [sub['title'] for sub in response.data[0]['subtasks']] == ['B']

    def test_subtask_cannot_have_subtasks(self):
        due = '2024-03-10T12:00:00Z'
        parent = self.client.post(self.list_url, {'title': 'A', 'dueDate': due}).data
        child = self.client.post(self.list_url, {'title': 'B', 'dueDate': due, 'parentTaskId': parent['id']}).data

        response = self.client.post(self.list_url, {'title': 'C', 'dueDate': due, 'parentTaskId': child['id']})
        assert response.status_code == 400
        assert 'parentTaskId' in response.data['error']['details']
        assert not Task.objects.filter(title='C').exists()

        listing = self.client.get(self.list_url).data
        assert [(row['title'], [sub['title'] for sub in row['subtasks']]) for row in listing] == [('A', ['B'])]

    def test_task_with_subtasks_cannot_be_nested(self):
        parent = TaskFactory(title='A')
        TaskFactory(title='B', parent_task=parent)
        other = TaskFactory(title='D')

        response = self.client.patch(self.detail_url(parent.id), {'parentTaskId': str(other.id)})
        assert response.status_code == 400
        assert 'parentTaskId' in response.data['error']['details']
        parent.refresh_from_db()
        assert parent.parent_task is None

    def test_leaf_task_can_move_between_parents(self):
        first = TaskFactory()
        second = TaskFactory()
        child = TaskFactory(parent_task=first)
        response = self.client.patch(self.detail_url(child.id), {'parentTaskId': str(second.id)})
        assert response.status_code == 200
        child.refresh_from_db()
        assert child.parent_task_id == second.id

    def test_toggling_completion(self):
        task = TaskFactory()
        before = timezone.now()
        self.client.patch(self.detail_url(task.id), {'isCompleted': True})
        task.refresh_from_db()
        assert before <= task.completed_at <= timezone.now()

        self.client.patch(self.detail_url(task.id), {'isCompleted': False, 'completedAt': '2024-01-01T00:00:00Z'})
        task.refresh_from_db()
        assert task.is_completed is False
        assert task.completed_at is None

    def test_explicit_completed_at_is_kept(self):
        task = TaskFactory()
        self.client.patch(self.detail_url(task.id), {'isCompleted': True, 'completedAt': '2024-01-01T00:00:00Z'})
        task.refresh_from_db()
        assert task.completed_at == _utc(2024, 1, 1)

    def test_date_filter_covers_the_whole_day(self):
        TaskFactory(title='start', due_date=_utc(2024, 3, 10, 0, 0, 0))
        TaskFactory(title='end', due_date=_utc(2024, 3, 10, 23, 59, 59, 999000))
        TaskFactory(title='next day', due_date=_utc(2024, 3, 11, 0, 0, 0))
        TaskFactory(title='day before', due_date=_utc(2024, 3, 9, 23, 59, 59))

        response = self.client.get(self.list_url, {'date': '2024-03-10'})
        assert [row['title'] for row in response.data] == ['start', 'end']

    def test_date_filter_uses_configured_time_zone(self, settings):
        settings.TIME_ZONE = 'America/New_York'
        TaskFactory(title='late evening', due_date=_utc(2024, 3, 11, 2, 0))  # 22:00 on the 10th in New York
        TaskFactory(title='morning', due_date=_utc(2024, 3, 10, 2, 0))  # 22:00 on the 9th
        response = self.client.get(self.list_url, {'date': '2024-03-10'})
        assert [row['title'] for row in response.data] == ['late evening']

    def test_malformed_date_is_validation_error(self):
        response = self.client.get(self.list_url, {'date': 'tomorrow'})
        assert response.status_code == 400
        assert 'date' in response.data['error']['details']

    def test_task_cannot_become_its_own_ancestor(self):
        parent = TaskFactory()
        child = TaskFactory(parent_task=parent)
        response = self.client.patch(self.detail_url(parent.id), {'parentTaskId': str(child.id)})
        assert response.status_code == 400
        assert 'parentTaskId' in response.data['error']['details']

        response = self.client.patch(self.detail_url(parent.id), {'parentTaskId': str(parent.id)})
        assert response.status_code == 400
        parent.refresh_from_db()
        assert parent.parent_task is None

    def test_deleting_parent_deletes_subtasks(self):
        parent = TaskFactory()
        TaskFactory(parent_task=parent)
        response = self.client.delete(self.detail_url(parent.id))
        assert response.status_code == 200
        assert Task.objects.count() == 0

    def test_missing_title_persists_nothing(self):
        response = self.client.post(self.list_url, {'dueDate': '2024-03-10T12:00:00Z'})
        assert response.status_code == 400
        assert Task.objects.count() == 0


@pytest.mark.django_db
class TestEvents:
    def setup_method(self):
        self.client = APIClient()

    def detail_url(self, event):
        return reverse('tracker:event-detail', kwargs={'event_id': event.id})

    def test_create_with_links(self):
        application = ApplicationFactory()
        contact = ContactFactory()
        response = self.client.post(reverse('tracker:event-list'), {
            'title': 'Coffee chat',
            'type': 'NETWORKING_CALL',
            'scheduledDate': '2024-04-02T16:00:00Z',
            'applicationId': str(application.id),
            'contactId': str(contact.id),
        })
        assert response.status_code == 201
        assert response.data['status'] == 'PENDING'
        assert response.data['contact']['name'] == contact.name

    def test_completing_event_sets_status_and_timestamp(self):
        event = EventFactory()
        response = self.client.patch(self.detail_url(event), {'isCompleted': True, 'status': 'PENDING'})
        assert response.status_code == 200
        assert response.data['status'] == 'COMPLETED'
        event.refresh_from_db()
        assert event.completed_at is not None

        self.client.patch(self.detail_url(event), {'isCompleted': False})
        event.refresh_from_db()
        assert event.completed_at is None

    def test_completing_every_next_step_removes_event(self):
        event = EventFactory(next_steps=json.dumps([{'text': 'Send thanks', 'completed': False}]))
        steps = [{'text': 'Send thanks', 'completed': True}, {'text': 'Share portfolio', 'completed': True}]
        response = self.client.patch(self.detail_url(event), {'nextSteps': json.dumps(steps)})
        assert response.status_code == 200
        assert response.data['deleted'] is True
        assert not Event.objects.filter(pk=event.pk).exists()

    def test_partially_done_next_steps_are_saved(self):
        event = EventFactory()
        steps = [{'text': 'Send thanks', 'completed': True}, {'text': 'Share portfolio', 'completed': False}]
        response = self.client.patch(self.detail_url(event), {'nextSteps': steps})
        assert response.status_code == 200
        event.refresh_from_db()
        assert json.loads(event.next_steps) == steps

    def test_unparseable_next_steps_are_stored_as_sent(self):
        event = EventFactory()
        response = self.client.patch(self.detail_url(event), {'nextSteps': 'call back friday'})
        assert response.status_code == 200
        event.refresh_from_db()
        assert event.next_steps == 'call back friday'

    def test_list_in_schedule_order(self):
        later = EventFactory(scheduled_date=timezone.now() + timedelta(days=4))
        sooner = EventFactory(scheduled_date=timezone.now() + timedelta(hours=1))
        response = self.client.get(reverse('tracker:event-list'))
        assert [row['id'] for row in response.data] == [str(sooner.id), str(later.id)]
