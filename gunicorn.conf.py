"""
Gunicorn Configuration for Production
Usage: gunicorn -c gunicorn.conf.py wsgi:app
"""

import multiprocessing
import os

# Server socket
# PORT is set by managed hosting platforms; 8080 otherwise
port = int(os.environ.get('PORT', 8080))
bind = f"0.0.0.0:{port}"

# Worker processes
# Every card request launches its own Chromium, so stay close to the core count
workers = int(os.environ.get('GUNICORN_WORKERS', multiprocessing.cpu_count() + 1))
worker_class = 'sync'
# Browser startup plus printing can take several seconds on a cold host
timeout = int(os.environ.get('GUNICORN_TIMEOUT', 60))
graceful_timeout = 30
keepalive = 2

# Logging
accesslog = os.environ.get('GUNICORN_ACCESS_LOG', '-')  # '-' means stdout
errorlog = os.environ.get('GUNICORN_ERROR_LOG', '-')  # '-' means stderr
loglevel = os.environ.get('GUNICORN_LOG_LEVEL', 'info')
access_log_format = '%(h)s "%(r)s" %(s)s %(b)s %(D)sus "%(a)s"'

# Process naming
proc_name = 'matchcard'

# Recycle workers now and then in case a browser leaks memory
max_requests = int(os.environ.get('GUNICORN_MAX_REQUESTS', 500))
max_requests_jitter = 50
preload_app = True

# Security
limit_request_line = 4094
limit_request_fields = 100
limit_request_field_size = 8190


def when_ready(server):
    """Called just after the server is started"""
    server.log.info("Match card server is ready. Accepting connections.")


def post_fork(server, worker):
    """Called just after a worker has been forked"""
    server.log.info("Worker spawned (pid: %s)", worker.pid)


def worker_abort(worker):
    """Called when a worker times out, usually a hung browser"""
    worker.log.warning("Worker aborted (pid: %s) - a render may have hung", worker.pid)
