"""
File storage utilities for resume and cover letter uploads.

Uses Django's default_storage so the backend can be switched in settings.
Only the returned reference path is persisted on the application row; the
file contents are never inspected.
"""
import logging
import os
import re

from django.conf import settings
from django.core.files.storage import default_storage
from django.utils import timezone
from rest_framework import serializers

logger = logging.getLogger(__name__)

RESUME_FOLDER = 'resumes'
COVER_LETTER_FOLDER = 'cover-letters'

DEFAULT_ALLOWED_EXTENSIONS = {
    RESUME_FOLDER: ['.pdf', '.doc', '.docx'],
    COVER_LETTER_FOLDER: ['.pdf', '.doc', '.docx', '.txt'],
}

_UNSAFE_CHARS = re.compile(r'[^a-zA-Z0-9.\-]')


def allowed_extensions(folder):
    configured = getattr(settings, 'UPLOAD_ALLOWED_EXTENSIONS', DEFAULT_ALLOWED_EXTENSIONS)
    return configured.get(folder, DEFAULT_ALLOWED_EXTENSIONS.get(folder, []))


def validate_upload(file_obj, folder, field='file'):
    """
    Check the file extension against the folder's allow-list.

    Raises:
        serializers.ValidationError: unknown folder or extension not allowed
    """
    allowed = allowed_extensions(folder)
    if not allowed:
        raise serializers.ValidationError({field: f"Unknown upload folder '{folder}'."})
    ext = os.path.splitext(file_obj.name or '')[1].lower()
    if ext not in allowed:
        raise serializers.ValidationError(
            {field: f"Invalid file type '{ext or file_obj.name}'. Allowed types: {', '.join(allowed)}"}
        )


def build_upload_name(original_name, now=None):
    """``<epoch millis>-<original name with unsafe characters replaced by _>``"""
    now = now or timezone.now()
    millis = int(now.timestamp() * 1000)
    return f"{millis}-{_UNSAFE_CHARS.sub('_', original_name)}"


def save_upload(file_obj, folder, now=None):
    """
    Validate and store an uploaded file.

    Args:
        file_obj: Uploaded file object
        folder: 'resumes' or 'cover-letters'

    Returns:
        Reference path such as ``/uploads/resumes/1700000000000-cv.pdf``
    """
    validate_upload(file_obj, folder)
    name = build_upload_name(file_obj.name, now)
    stored_name = default_storage.save(f"{folder}/{name}", file_obj)
    reference = f"{_media_url()}{stored_name}"
    logger.info("Stored upload %s (%s bytes)", reference, getattr(file_obj, 'size', 'unknown'))
    return reference


def delete_upload(reference):
    """
    Remove a file stored by ``save_upload``, given the reference it returned.

    Returns:
        True if deleted or didn't exist, False on error
    """
    if not reference:
        return True
    media_url = _media_url()
    stored_name = reference[len(media_url):] if reference.startswith(media_url) else reference
    try:
        if default_storage.exists(stored_name):
            default_storage.delete(stored_name)
            logger.info("Deleted upload %s", reference)
        return True
    except Exception as e:
        logger.error("Failed to delete upload %s: %s", reference, e)
        return False


def _media_url():
    media_url = getattr(settings, 'MEDIA_URL', '/uploads/') or '/uploads/'
    if not media_url.endswith('/'):
        media_url += '/'
    return media_url
