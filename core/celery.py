"""
Celery app for background jobs (expired sale cleanup)
Run with: celery -A core worker -B
"""
import os

from celery import Celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "core.settings")

app = Celery("fresh")
app.config_from_object("django.conf:settings", namespace="CELERY")
app.autodiscover_tasks()
