import logging

import pytest
from rest_framework import serializers

from tracker.integrity import check_no_cycle, check_single_level, delete_instance, delete_plan
from tracker.models import Application, Contact, Event, Interview, Reminder, Resource, Task
from tracker.tests.fixtures import (
    ApplicationFactory,
    CompanyFactory,
    ContactFactory,
    EventFactory,
    InteractionFactory,
    InterviewFactory,
    ReminderFactory,
    ResourceFactory,
    TaskFactory,
)


@pytest.mark.django_db
class TestCycleChecks:
    def test_self_parenting_is_rejected(self):
        task = TaskFactory()
        with pytest.raises(serializers.ValidationError) as exc:
            check_no_cycle(task, task, 'parent_task')
        assert 'parent_task_id' in exc.value.detail

    def test_descendant_as_parent_is_rejected(self):
        root = ResourceFactory()
        child = ResourceFactory(parent=root)
        grandchild = ResourceFactory(parent=child)
        with pytest.raises(serializers.ValidationError):
            check_no_cycle(root, grandchild, 'parent')

    def test_unrelated_parent_is_allowed(self):
        task = TaskFactory()
        other = TaskFactory()
        check_no_cycle(task, other, 'parent_task')
        check_no_cycle(task, None, 'parent_task')

    def test_new_rows_never_form_cycles(self):
        check_no_cycle(None, TaskFactory(), 'parent_task')
        check_no_cycle(Task(title='draft'), TaskFactory(), 'parent_task')

    def test_parent_must_be_top_level(self):
        parent = TaskFactory()
        child = TaskFactory(parent_task=parent)
        check_single_level(None, parent, 'parent_task', 'subtasks')
        with pytest.raises(serializers.ValidationError) as exc:
            check_single_level(None, child, 'parent_task', 'subtasks')
        assert 'parent_task_id' in exc.value.detail

    def test_row_with_children_stays_top_level(self):
        root = ResourceFactory()
        ResourceFactory(parent=root)
        with pytest.raises(serializers.ValidationError):
            check_single_level(root, ResourceFactory(), 'parent', 'sub_resources')
        check_single_level(root, None, 'parent', 'sub_resources')


@pytest.mark.django_db
class TestDeletePolicy:
    def test_plan_lists_cascades_and_nullifications(self):
        company = CompanyFactory()
        ApplicationFactory.create_batch(2, company=company)
        ContactFactory(company=company)
        plan = delete_plan(company)
        assert plan['cascade'] == {'tracker.Application': 2, 'tracker.Contact': 1}
        assert plan['nullify'] == {}

        referrer = ContactFactory()
        ApplicationFactory(referred_by=referrer, is_referred=True)
        InteractionFactory(contact=referrer)
        plan = delete_plan(referrer)
        assert plan['nullify'] == {'tracker.Application': 1}
        assert plan['cascade'] == {'tracker.Interaction': 1}

    def test_application_delete_cascades_to_children(self):
        application = ApplicationFactory()
        InterviewFactory(application=application)
        ReminderFactory(application=application)
        EventFactory(application=application)
        delete_instance(application)
        assert not Interview.objects.exists()
        assert not Reminder.objects.exists()
        assert not Event.objects.exists()

    def test_contact_delete_nullifies_referrer_and_keeps_flag(self):
        referrer = ContactFactory()
        application = ApplicationFactory(referred_by=referrer, is_referred=True)
        delete_instance(referrer)
        application.refresh_from_db()
        assert application.referred_by is None
        assert application.is_referred is True
        assert not Contact.objects.filter(pk=referrer.pk).exists()

    def test_plan_is_only_counted_when_info_logging_is_on(self, caplog, monkeypatch):
        company = CompanyFactory()
        ApplicationFactory(company=company)

        caplog.set_level(logging.WARNING, logger='tracker.integrity')
        monkeypatch.setattr(
            'tracker.integrity.delete_plan', lambda instance: pytest.fail('plan counted with INFO disabled')
        )
        assert delete_instance(company) is None
        assert Application.objects.count() == 0

        monkeypatch.undo()
        caplog.set_level(logging.INFO, logger='tracker.integrity')
        referrer = ContactFactory()
        ApplicationFactory(referred_by=referrer)
        plan = delete_instance(referrer)
        assert plan['nullify'] == {'tracker.Application': 1}

    def test_task_and_resource_trees_cascade(self):
        parent = TaskFactory()
        TaskFactory.create_batch(2, parent_task=parent)
        delete_instance(parent)
        assert Task.objects.count() == 0

        root = ResourceFactory()
        ResourceFactory(parent=root)
        delete_instance(root)
        assert Resource.objects.count() == 0

    def test_company_delete_removes_everything_below_it(self):
        company = CompanyFactory()
        application = ApplicationFactory(company=company)
        InterviewFactory(application=application)
        ContactFactory(company=company)
        delete_instance(company)
        assert Application.objects.count() == 0
        assert Contact.objects.count() == 0
        assert Interview.objects.count() == 0
