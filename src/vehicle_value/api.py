#!/usr/bin/env python3
"""
Vehicle Value Code Hook - Local REST API

A Flask development server exposing the code hook over HTTP, so dialog turns
can be exercised without deploying to the bot platform.

Usage:
    python -m vehicle_value.api

    or

    gunicorn -w 2 -b 0.0.0.0:9002 vehicle_value.api:app

Endpoints:
    POST /fulfill - Run one dialog turn and return the directive
    GET /health - Health check
    GET /info - API information
"""
import time
from typing import Optional

from flask import Flask, g, jsonify, request

from vehicle_value import __version__
from vehicle_value.config import config
from vehicle_value.data_types import IntentRequest
from vehicle_value.dispatch import Dispatcher, get_dispatcher
from vehicle_value.errors import ContractViolation, UnsupportedIntentError
from vehicle_value.logging_config import generate_request_id, setup_logging

logger = setup_logging(
    app_name='vehicle_value',
    log_level=config.LOG_LEVEL,
    log_format=config.LOG_FORMAT,
    log_file=config.LOG_FILE
)


def create_app(dispatcher: Optional[Dispatcher] = None) -> Flask:
    """
    Build the Flask app.

    Args:
        dispatcher: Dispatcher to serve (process-wide dispatcher if omitted)
    """
    app = Flask(__name__)
    app.config["DISPATCHER"] = dispatcher

    def _dispatcher() -> Dispatcher:
        return app.config["DISPATCHER"] or get_dispatcher()

    @app.before_request
    def before_request():
        """Track request start time and generate request ID."""
        g.start_time = time.perf_counter()
        g.request_id = request.headers.get('X-Request-ID', generate_request_id())

    @app.after_request
    def after_request(response):
        """Log request completion with timing and status."""
        if hasattr(g, 'start_time') and config.ENABLE_REQUEST_LOGGING:
            duration_ms = round((time.perf_counter() - g.start_time) * 1000, 2)
            logger.info(
                f'{request.method} {request.path} {response.status_code}',
                extra={
                    'request_id': g.request_id,
                    'method': request.method,
                    'path': request.path,
                    'status_code': response.status_code,
                    'duration_ms': duration_ms,
                }
            )

        if hasattr(g, 'request_id'):
            response.headers['X-Request-ID'] = g.request_id

        return response

    @app.route("/health", methods=["GET"])
    def health():
        """Health check endpoint."""
        return jsonify({
            "status": "healthy",
            "intents": _dispatcher().intent_names,
        })

    @app.route("/info", methods=["GET"])
    def info():
        """API information endpoint."""
        return jsonify({
            "name": "Vehicle Value Code Hook",
            "version": __version__,
            "description": "Validates vehicle year, make and model slots and returns the next dialog action",
            "endpoints": {
                "/fulfill": {
                    "method": "POST",
                    "description": "Run one dialog turn",
                    "parameters": {
                        "invocationPhase": "string (required) - 'Collecting' or 'Fulfilling'",
                        "intentName": "string (required) - Intent name",
                        "slots": "object (optional) - Slot name -> string or null",
                        "sessionAttributes": "object (optional) - Echoed back unchanged",
                    }
                },
                "/health": {"method": "GET", "description": "Health check"},
                "/info": {"method": "GET", "description": "API information"},
            },
            "configuration": {
                "intent": config.INTENT_NAME,
                "timezone": config.TIMEZONE,
            }
        })

    @app.route("/fulfill", methods=["POST"])
    def fulfill():
        """
        Run one dialog turn.

        Request body: a flat event or the platform's code hook event.

        Response: the directive, e.g.
        {
            "sessionAttributes": {},
            "dialogAction": {"type": "Delegate", "slots": {...}}
        }
        """
        event = request.get_json(silent=True)
        try:
            directive = _dispatcher().dispatch(IntentRequest.from_event(event))
        except ContractViolation as e:
            return jsonify({"success": False, "error": str(e)}), 400
        except UnsupportedIntentError as e:
            return jsonify({"success": False, "error": str(e)}), 422
        return jsonify(directive.to_dict())

    @app.errorhandler(404)
    def not_found(error):  # noqa: ARG001, pylint: disable=unused-argument
        """Handle 404 errors."""
        return jsonify({
            "success": False,
            "error": "Endpoint not found",
            "available_endpoints": ["/fulfill", "/health", "/info"]
        }), 404

    @app.errorhandler(500)
    def internal_error(error):  # noqa: ARG001, pylint: disable=unused-argument
        """Handle 500 errors."""
        return jsonify({
            "success": False,
            "error": "Internal server error"
        }), 500

    return app


app = create_app()


def main():
    """Run the Flask development server."""
    logger.info("=" * 60)
    logger.info("Vehicle Value Code Hook API")
    logger.info(f"Starting server on http://localhost:{config.API_PORT}")
    logger.info("=" * 60)
    logger.info(
        f"Try: curl -X POST http://localhost:{config.API_PORT}/fulfill -H 'Content-Type: application/json' "
        f"-d '{{\"invocationPhase\": \"Collecting\", \"intentName\": \"{config.INTENT_NAME}\", "
        f"\"slots\": {{\"VehicleYear\": \"2015\"}}}}'"
    )

    app.run(
        host=config.API_HOST,
        port=config.API_PORT,
        debug=config.API_DEBUG
    )


if __name__ == "__main__":
    main()
