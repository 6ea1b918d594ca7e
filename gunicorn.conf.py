"""Gunicorn settings for serving wsgi:application."""

import os

bind = os.environ.get('BIND', '0.0.0.0:8000')

# One process; SQLite serializes writers on the database file
workers = 1
threads = int(os.environ.get('GUNICORN_THREADS', 4))
worker_class = 'gthread'
timeout = 30

# The app keeps its own file log in production
accesslog = '-'
errorlog = '-'
loglevel = os.environ.get('LOG_LEVEL', 'info')

proc_name = 'boat-inventory'
