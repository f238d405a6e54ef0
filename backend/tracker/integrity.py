"""
Referential consistency helpers.

Foreign key existence is enforced by the serializers (``PrimaryKeyRelatedField``)
and the delete policy lives on each ``ForeignKey.on_delete``. This module adds
what the schema cannot express on its own: cycle checks for the
self-referencing trees (tasks, resources) and a readable plan of what a delete
will take with it.
"""
import logging

from django.db import models, transaction
from django.db.models import ProtectedError, RestrictedError
from rest_framework import serializers

logger = logging.getLogger(__name__)


def check_no_cycle(instance, parent, parent_attr):
    """
    Reject ``parent`` as the new parent of ``instance`` if that would close a loop.

    Walks up from ``parent`` through ``parent_attr`` and fails if ``instance``
    is found, including the degenerate case of an item parenting itself.
    ``instance`` may be None (a brand new row can never be its own ancestor).
    """
    if parent is None or instance is None or instance.pk is None:
        return
    seen = set()
    node = parent
    while node is not None:
        if node.pk == instance.pk:
            raise serializers.ValidationError(
                {f"{parent_attr}_id": f"{type(instance).__name__} cannot be nested under itself or one of its descendants."}
            )
        if node.pk in seen:
            # Pre-existing loop in stored data; stop walking
            break
        seen.add(node.pk)
        node = getattr(node, parent_attr)


def check_single_level(instance, parent, parent_attr, children_attr):
    """
    Keep a tree one level deep: ``parent`` must itself be top-level, and a row
    that already has children cannot be moved under another row.
    """
    if parent is None:
        return
    name = type(parent).__name__
    if getattr(parent, f"{parent_attr}_id") is not None:
        raise serializers.ValidationError(
            {f"{parent_attr}_id": f"{name} is already nested; only one level of nesting is allowed."}
        )
    if instance is not None and instance.pk is not None and getattr(instance, children_attr).exists():
        raise serializers.ValidationError(
            {f"{parent_attr}_id": f"{name} has nested items of its own and cannot be moved under another."}
        )


def delete_plan(instance):
    """
    Describe the direct dependents a delete of ``instance`` will touch.

    Returns ``{'cascade': {label: count}, 'nullify': {label: count},
    'restrict': {label: count}}`` keyed by the dependent model's label.
    """
    plan = {'cascade': {}, 'nullify': {}, 'restrict': {}}
    for rel in instance._meta.related_objects:
        if not (rel.one_to_many or rel.one_to_one):
            continue
        count = rel.related_model._default_manager.filter(**{rel.field.name: instance}).count()
        if not count:
            continue
        label = rel.related_model._meta.label
        if rel.on_delete is models.CASCADE:
            plan['cascade'][label] = count
        elif rel.on_delete is models.SET_NULL:
            plan['nullify'][label] = count
        elif rel.on_delete in (models.PROTECT, models.RESTRICT):
            plan['restrict'][label] = count
    return plan


def delete_instance(instance):
    """
    Delete ``instance`` and its dependents in one transaction. The plan is
    only counted (and returned) when INFO logging is on.
    """
    plan = delete_plan(instance) if logger.isEnabledFor(logging.INFO) else None
    label = instance._meta.label
    pk = instance.pk
    try:
        with transaction.atomic():
            instance.delete()
    except (ProtectedError, RestrictedError) as exc:
        raise serializers.ValidationError(
            {'detail': f"{type(instance).__name__} is still referenced and cannot be deleted."}
        ) from exc
    if plan is not None:
        logger.info("Deleted %s %s (cascade=%s, nullify=%s)", label, pk, plan['cascade'], plan['nullify'])
    return plan
