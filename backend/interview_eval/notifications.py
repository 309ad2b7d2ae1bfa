# backend/interview_eval/notifications.py
import os
import pathlib
import logging
from typing import Any, Dict
import httpx
from dotenv import load_dotenv

# load backend/.env
BASE_DIR = pathlib.Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=os.path.join(BASE_DIR, ".env"))

PUSH_NOTIFICATION_URL = os.getenv("PUSH_NOTIFICATION_URL")
PUSH_NOTIFICATION_TOKEN = os.getenv("PUSH_NOTIFICATION_TOKEN")
PUSH_TIMEOUT_SECONDS = float(os.getenv("PUSH_TIMEOUT_SECONDS", "10"))

logger = logging.getLogger("interview-evaluator.notifications")


def build_evaluation_message(doc_id: str) -> Dict[str, Any]:
    return {
        "data": {
            "type": "interview_evaluation",
            "title": "Interview Evaluation Ready",
            "message": "Your mock interview has been evaluated! Tap to view results.",
            "docId": doc_id,
        },
        "topic": f"interview-evaluation-{doc_id}",
    }


async def send_evaluation_notification(doc_id: str) -> bool:
    """Push "evaluation ready" to the interview's topic.

    Failures are logged and swallowed. Returns whether the push was accepted.
    """
    if not PUSH_NOTIFICATION_URL:
        logger.warning("PUSH_NOTIFICATION_URL not set; skipping notification for docId=%s", doc_id)
        return False

    headers = {"Content-Type": "application/json"}
    if PUSH_NOTIFICATION_TOKEN:
        headers["Authorization"] = f"Bearer {PUSH_NOTIFICATION_TOKEN}"

    try:
        async with httpx.AsyncClient(timeout=PUSH_TIMEOUT_SECONDS) as client:
            resp = await client.post(
                PUSH_NOTIFICATION_URL,
                json={"message": build_evaluation_message(doc_id)},
                headers=headers,
            )
            resp.raise_for_status()
    except Exception:
        logger.exception("Error sending notification for docId=%s", doc_id)
        return False

    logger.info("Notification sent successfully for docId=%s", doc_id)
    return True
