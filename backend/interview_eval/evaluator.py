# backend/interview_eval/evaluator.py
import os
import pathlib
import asyncio
import json
import logging
from dotenv import load_dotenv
import openai
from typing import Dict, List, Any, Optional

# load backend/.env
BASE_DIR = pathlib.Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=os.path.join(BASE_DIR, ".env"))

# Configure once
DEEPSEEK_API_KEY = os.getenv("DEEPSEEK_API_KEY")
if not DEEPSEEK_API_KEY:
    raise RuntimeError("DEEPSEEK_API_KEY not set in backend/.env or the function environment.")
DEEPSEEK_BASE_URL = os.getenv("DEEPSEEK_BASE_URL", "https://api.deepseek.com")
DEEPSEEK_MODEL = os.getenv("DEEPSEEK_MODEL", "deepseek-chat")

openai.api_key = DEEPSEEK_API_KEY
openai.base_url = DEEPSEEK_BASE_URL
# one request per question, failures fall back to the placeholder
openai.max_retries = 0

logger = logging.getLogger("interview-evaluator.evaluator")

NO_ANSWER_EXPLANATION = "No answer provided"
ERROR_EXPLANATION = "Error evaluating answer. Please try again later."


class NoInterviewQuestionsError(ValueError):
    """The document has no questions to evaluate."""

    def __init__(self, message: str = "No interview questions found"):
        super().__init__(message)


def build_messages(question: Dict[str, Any], domain: Optional[str] = None) -> List[Dict[str, str]]:
    """Two-message grading prompt: interviewer persona + the answer under review."""
    keywords = question.get("keywords") or []
    return [
        {
            "role": "system",
            "content": (
                "You are an expert technical interviewer for "
                f"{domain or 'technology'} positions.\n"
                "Evaluate the candidate's answer to the interview question.\n"
                "Consider technical accuracy, clarity, completeness.\n"
                "Score from 0-5 and provide brief, specific feedback.\n"
                'Format as JSON: {"score": number, "explanation": "string"}'
            ),
        },
        {
            "role": "user",
            "content": (
                f"Question: {question.get('question')}\n\n"
                f"Candidate's Answer: {question.get('candidateAnswer')}\n\n"
                f"Difficulty: {question.get('difficulty')}\n"
                f"Topics: {question.get('topic')}\n"
                f"Keywords: {', '.join(str(k) for k in keywords)}"
            ),
        },
    ]


async def _call_llm(messages: List[Dict[str, str]]) -> str:
    """Single non-streaming chat completion; returns the first choice's content.

    Errors propagate to the caller, there is no retry.
    """
    resp = await asyncio.to_thread(
        openai.chat.completions.create,
        model=DEEPSEEK_MODEL,
        messages=messages,
        response_format={"type": "json_object"},
    )
    return resp.choices[0].message.content


async def evaluate_question(question: Dict[str, Any], domain: Optional[str] = None) -> Dict[str, Any]:
    """Score one question. Never raises: failures become the error placeholder."""
    if not question.get("candidateAnswer"):
        return {**question, "score": 0, "explanation": NO_ANSWER_EXPLANATION}

    try:
        messages = build_messages(question, domain)
        content = await _call_llm(messages)
        evaluation = json.loads(content)
        return {
            **question,
            "score": evaluation["score"],
            "explanation": evaluation["explanation"],
        }
    except Exception:
        logger.exception("Error calling model API for question %r", question.get("question"))
        return {**question, "score": 0, "explanation": ERROR_EXPLANATION}


async def evaluate_interview_answers(interview_data: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Evaluate every question of an interview document, in order.

    Questions are scored one at a time. The returned list matches the input
    positionally; input mappings are left untouched.
    """
    questions = interview_data.get("interviewQuestions")
    if not questions:
        raise NoInterviewQuestionsError()

    domain = interview_data.get("domain")
    evaluated: List[Dict[str, Any]] = []
    for question in questions:
        evaluated.append(await evaluate_question(question, domain))
    return evaluated
