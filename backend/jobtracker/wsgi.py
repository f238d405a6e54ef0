"""
WSGI config for the jobtracker project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'jobtracker.settings')

application = get_wsgi_application()
