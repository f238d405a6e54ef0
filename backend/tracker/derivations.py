"""
Derived field rules applied to every create and partial update.

Each ``derive_*`` function receives the validated payload (snake_case keys,
only the keys the caller actually sent) and the request time, and returns the
extra field values to write alongside it. Nothing here touches the database,
so the rules can be exercised directly in tests.

A value counts as supplied when its key is present and not None.
"""
import logging

logger = logging.getLogger(__name__)


def _supplied(payload, field):
    return payload.get(field) is not None


def derive_application(payload, now):
    derived = {}
    if payload.get('status') == 'APPLIED' and not _supplied(payload, 'applied_date'):
        derived['applied_date'] = now
    return derived


MESSAGED_STATUSES = ('MESSAGED', 'REPLIED', 'MEETING_SCHEDULED')


def derive_contact(payload, now):
    derived = {}
    if payload.get('status') in MESSAGED_STATUSES and not _supplied(payload, 'messaged_date'):
        derived['messaged_date'] = now
    return derived


def _derive_completion(payload, now):
    """Shared isCompleted/completedAt pairing for reminders and tasks."""
    derived = {}
    if 'is_completed' not in payload:
        return derived
    if payload['is_completed']:
        if not _supplied(payload, 'completed_at'):
            derived['completed_at'] = now
    else:
        # Un-completing always clears the stamp, even if one was sent
        derived['completed_at'] = None
    return derived


def derive_reminder(payload, now):
    return _derive_completion(payload, now)


def derive_task(payload, now):
    return _derive_completion(payload, now)


def derive_event(payload, now):
    derived = {}
    if 'is_completed' not in payload:
        return derived
    if payload['is_completed']:
        derived['completed_at'] = now
        derived['status'] = 'COMPLETED'
    else:
        derived['completed_at'] = None
    return derived


def derive_learning_item(payload, now):
    derived = {}
    status = payload.get('status')
    if status == 'IN_PROGRESS' and not _supplied(payload, 'started_at'):
        derived['started_at'] = now
    elif status == 'COMPLETED':
        derived['completed_at'] = now
        derived['progress'] = 100
    return derived


RULES = {
    'application': derive_application,
    'contact': derive_contact,
    'reminder': derive_reminder,
    'task': derive_task,
    'event': derive_event,
    'learningitem': derive_learning_item,
}


def derive_fields(model, payload, now):
    """Return the derived mutations for ``payload`` on ``model`` (may be empty)."""
    rule = RULES.get(model._meta.model_name)
    if rule is None:
        return {}
    derived = rule(payload, now)
    if derived:
        logger.debug("Derived %s fields for %s: %s", sorted(derived), model.__name__, derived)
    return derived
