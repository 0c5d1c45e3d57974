import logging

from vehicle_value.config import config
from vehicle_value.data_types import IntentRequest
from vehicle_value.dispatch import dispatch
from vehicle_value.logging_config import generate_request_id, log_with_context, setup_logging


logger = setup_logging(
    app_name="vehicle_value",
    log_level=config.LOG_LEVEL,
    log_format=config.LOG_FORMAT,
    log_file=config.LOG_FILE,
)


def lambda_handler(event, context):
    """
    Route the incoming request based on intent.

    The JSON body of the request is provided in the event. Errors are logged
    and re-raised so the platform reports the turn as failed.
    """
    request_id = getattr(context, "aws_request_id", None) or generate_request_id()
    try:
        request = IntentRequest.from_event(event)
        log_with_context(
            logger, logging.INFO, f"event.bot.name={request.bot_name}",
            request_id=request_id,
            intent_name=request.intent_name,
            invocation_phase=request.invocation_phase.value,
        )
        directive = dispatch(request)
        log_with_context(
            logger, logging.INFO, f"Responding with {directive.action_type.value}",
            request_id=request_id,
            dialog_action=directive.action_type.value,
        )
        return directive.to_dict()
    except Exception as e:
        logger.error(
            f"Error handling event: {e}",
            extra={"request_id": request_id, "error_type": type(e).__name__},
            exc_info=True,
        )
        raise
