# backend/interview_eval/main.py
import logging
from datetime import datetime, timezone
from typing import Optional
from fastapi import FastAPI, Header, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

# local modules
from .auth import caller_id_from_header
from .db import archives_path, get_document, update_document, db
from .errors import EvaluationError
from .evaluator import evaluate_interview_answers
from .notifications import send_evaluation_notification
from .schemas import CallableError, CallableRequest, CallableResponse, EvaluateResult

# ------ logging ------
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("interview-evaluator")

app = FastAPI(title="Mock Interview Evaluator", version="1.0")

# mobile + web clients call the function directly
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(EvaluationError)
async def evaluation_error_handler(request: Request, exc: EvaluationError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.on_event("startup")
async def startup_event():
    logger.info("Starting Mock Interview Evaluator.")
    try:
        await db.command("ping")
        logger.info("Document store appears reachable.")
    except Exception as e:
        logger.warning("DB startup check failed (may still be okay): %s", e)


@app.get("/health")
async def health():
    return {"status": "ok", "time": datetime.now(timezone.utc).isoformat()}


# ------------------------------
# Callable: evaluateMockInterview
# ------------------------------

@app.post(
    "/evaluateMockInterview",
    response_model=CallableResponse,
    responses={code: {"model": CallableError} for code in (400, 401, 404, 500)},
)
async def evaluate_mock_interview(request: Request, authorization: Optional[str] = Header(None)):
    """
    Expects a callable-style JSON payload:
    {
      "data": {"docId": "<archive document id>"}
    }
    The document is looked up under the authenticated caller's own archives.
    """
    user_id = caller_id_from_header(authorization)
    if not user_id:
        raise EvaluationError("unauthenticated", "The function must be called while authenticated.")

    try:
        payload = CallableRequest.model_validate(await request.json())
    except (ValueError, ValidationError):
        raise EvaluationError("invalid-argument", "Payload must be {\"data\": {\"docId\": string}}")

    doc_id = payload.data.docId.strip()
    if not doc_id:
        raise EvaluationError("invalid-argument", "docId (string) is required")

    collection_path = archives_path(user_id)

    try:
        logger.info("Starting evaluation docId=%s", doc_id)

        interview_data = await get_document(collection_path, doc_id)
        if interview_data is None:
            raise EvaluationError("not-found", "Interview document not found")
        logger.info("Loaded interview docId=%s; questions=%d",
                    doc_id, len(interview_data.get("interviewQuestions") or []))

        await update_document(collection_path, doc_id, {
            "analysed": False,
            "evaluationInProgress": True,
        })

        evaluated_questions = await evaluate_interview_answers(interview_data)

        await update_document(collection_path, doc_id, {
            "interviewQuestions": evaluated_questions,
            "analysed": True,
            "evaluationInProgress": False,
        })
        logger.info("Stored evaluation docId=%s", doc_id)

        await send_evaluation_notification(doc_id)

        return CallableResponse(result=EvaluateResult(success=True, docId=doc_id))
    except EvaluationError:
        raise
    except Exception:
        logger.exception("Error evaluating interview docId=%s", doc_id)
        raise EvaluationError("internal", "Error evaluating interview")
