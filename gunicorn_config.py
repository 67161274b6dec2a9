"""Gunicorn configuration for production.

Run with: gunicorn -c gunicorn_config.py "petclinic:create_app()"
"""
import multiprocessing
import os

# Server socket
port = os.getenv("PORT", "8000")
bind = f"0.0.0.0:{port}"
backlog = 2048

# Worker processes
workers_env = os.getenv("GUNICORN_WORKERS")
if workers_env:
    workers = int(workers_env)
else:
    workers = min(multiprocessing.cpu_count() * 2 + 1, 8)

# In-memory storage is per process; use PET_STORAGE_TYPE=redis with more than one worker
worker_class = "sync"
timeout = 30
keepalive = 5
graceful_timeout = 30

# Logging
accesslog = "-"
errorlog = "-"
loglevel = "info"
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'
capture_output = True

# Process naming
proc_name = "petclinic"

# Server mechanics
daemon = False
pidfile = None
umask = 0
