# backend/interview_eval/lambda_handler.py
# AWS Lambda entry point for the evaluator API

import json
import logging

from mangum import Mangum

from .main import app

logger = logging.getLogger("interview-evaluator.lambda")

# Wrap the FastAPI app with Mangum for Lambda compatibility
asgi_handler = Mangum(app, lifespan="off")


def handler(event, context):
    """
    Lambda handler for the evaluator API
    Handles POST /evaluateMockInterview and GET /health
    """
    try:
        return asgi_handler(event, context)
    except Exception:
        logger.exception("Unhandled error in Lambda adapter")
        return {
            "statusCode": 500,
            "body": json.dumps({
                "error": {"status": "INTERNAL", "message": "Error evaluating interview"}
            }),
            "headers": {
                "Content-Type": "application/json",
                "Access-Control-Allow-Origin": "*"
            }
        }
