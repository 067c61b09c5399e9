import time
from flask import request, g

def request_logging(app):
    @app.before_request
    def start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def log_request(response):
        started = g.pop("request_started", None)
        elapsed_ms = (time.perf_counter() - started) * 1000 if started else 0.0

        app.logger.info(
            f"{request.method} {request.path} -> {response.status_code} ({elapsed_ms:.1f} ms)"
        )
        return response
