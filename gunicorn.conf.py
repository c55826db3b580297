# Gunicorn Production Configuration for sigcheck
# ==============================================

# Bind to localhost only (reverse proxy in front)
bind = "127.0.0.1:5000"

# Verification is CPU bound and stateless
workers = 2
worker_class = "sync"
threads = 1

# Timeouts
timeout = 30
graceful_timeout = 30
keepalive = 5

# Security
limit_request_line = 4094
limit_request_fields = 50
limit_request_field_size = 8190

# Logging
accesslog = "-"
errorlog = "-"
loglevel = "warning"
capture_output = True

# Process naming
proc_name = "sigcheck"

# Don't daemonize - let systemd handle it
daemon = False

# Preload app for faster worker spawning
preload_app = True

# Restart workers periodically
max_requests = 1000
max_requests_jitter = 100
