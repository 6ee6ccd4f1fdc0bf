"""FastAPI server that exposes the color quiz page and its JSON endpoints."""

from __future__ import annotations

from fastapi import Depends, FastAPI, HTTPException, Request, Response
from fastapi.responses import HTMLResponse
from pydantic import BaseModel
import uvicorn

from color_quiz.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from color_quiz.constants.quiz_constants import (
    HEX_ANSWER_LENGTH,
    SESSION_COOKIE,
    SESSION_COOKIE_MAX_AGE_SECONDS,
)
from color_quiz.core.models import ColorQuestion, ScoreReport
from color_quiz.core.quiz_manager import QuizManager


def _ensure_session_id(request: Request, response: Response, manager: QuizManager) -> str:
    session_id = request.cookies.get(SESSION_COOKIE)
    if session_id:
        return session_id
    session_id = manager.new_session_id()
    response.set_cookie(
        key=SESSION_COOKIE,
        value=session_id,
        max_age=SESSION_COOKIE_MAX_AGE_SECONDS,
        samesite="lax",
        httponly=True,
    )
    return session_id


_QUIZ_PAGE_HTML = """<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <title>Color Sense Quiz</title>
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <style>
      :root { font-family: 'Inter', system-ui, sans-serif; background: #0b1120; color: #f5f7ff; }
      body { margin: 0; padding: 1.5rem; display: flex; flex-direction: column; gap: 1rem; }
      .card { background: #111a30; border-radius: 0.75rem; padding: 1.5rem; box-shadow: 0 0.5rem 1.5rem rgba(0, 0, 0, 0.4); }
      .hidden { display: none; }
      .primary-button { border: none; border-radius: 0.75rem; padding: 0.85rem 1.5rem; font-size: 1rem; background: #1f9aa5; color: #fff; cursor: pointer; transition: transform 120ms ease, background 120ms ease; }
      .primary-button:hover { transform: translateY(-2px); background: #16808a; }
      .primary-button:disabled { opacity: 0.6; cursor: not-allowed; }
      .question { display: flex; align-items: center; gap: 1rem; margin-bottom: 0.75rem; }
      .color-box { width: 4rem; height: 4rem; border-radius: 0.5rem; border: 1px solid #334155; }
      .answer-input { font-family: monospace; font-size: 1rem; padding: 0.5rem; width: 7rem; border-radius: 0.5rem; border: 1px solid #334155; background: #0b1120; color: #f5f7ff; text-transform: uppercase; }
      #status { min-height: 1.25rem; color: #f87171; }
      .result-line { font-family: monospace; font-size: 1.05rem; }
    </style>
  </head>
  <body>
    <section class=\"card\">
      <h1>Color Sense Quiz</h1>
      <p>Guess each color as a hexadecimal code (RRGGBB).</p>
      <div id=\"question-area\"></div>
      <button id=\"submit-button\" class=\"primary-button\" disabled>Submit Answers</button>
      <p id=\"status\"></p>
    </section>
    <section class=\"card hidden\" id=\"result-area\">
      <h2>Results</h2>
      <p class=\"result-line\">Average RGB error: <span id=\"rgb-error\"></span></p>
      <p class=\"result-line\">Average HSL error: <span id=\"hsl-error\"></span></p>
      <p class=\"result-line\">RGB RMSE: <span id=\"rmse-score\"></span></p>
      <button id=\"retry-button\" class=\"primary-button\">Try Again</button>
    </section>
    <script>
      const ANSWER_LENGTH = __ANSWER_LENGTH__;
      const questionArea = document.getElementById('question-area');
      const submitButton = document.getElementById('submit-button');
      const statusEl = document.getElementById('status');
      const resultArea = document.getElementById('result-area');
      const rgbErrorSpan = document.getElementById('rgb-error');
      const hslErrorSpan = document.getElementById('hsl-error');
      const rmseScoreSpan = document.getElementById('rmse-score');
      const retryButton = document.getElementById('retry-button');

      function answerInputs() {
        return Array.from(document.querySelectorAll('.answer-input'));
      }

      function updateSubmitState() {
        const inputs = answerInputs();
        submitButton.disabled = !(inputs.length > 0 && inputs.every(inp => inp.value.length === ANSWER_LENGTH));
      }

      function renderQuestions(questions) {
        questionArea.innerHTML = '';
        questions.forEach((question) => {
          const questionDiv = document.createElement('div');
          questionDiv.className = 'question';
          const box = document.createElement('div');
          box.className = 'color-box';
          box.style.backgroundColor = question.hex;
          const label = document.createElement('label');
          label.htmlFor = `answer-${question.index}`;
          label.textContent = `Question ${question.index + 1}: `;
          const input = document.createElement('input');
          input.type = 'text';
          input.id = `answer-${question.index}`;
          input.className = 'answer-input';
          input.placeholder = 'RRGGBB';
          input.maxLength = ANSWER_LENGTH;
          input.autocomplete = 'off';
          input.addEventListener('input', updateSubmitState);
          questionDiv.append(box, label, input);
          questionArea.appendChild(questionDiv);
        });
        updateSubmitState();
      }

      async function setupQuestions() {
        statusEl.textContent = '';
        resultArea.classList.add('hidden');
        submitButton.disabled = true;
        try {
          const response = await fetch('/quiz', { method: 'POST' });
          const payload = await response.json();
          renderQuestions(payload.questions || []);
        } catch (error) {
          console.error('Error starting quiz:', error);
          statusEl.textContent = 'Unable to reach the quiz server.';
        }
      }

      async function calculateScore() {
        statusEl.textContent = '';
        const answers = answerInputs().map(inp => inp.value);
        try {
          const response = await fetch('/score', {
            method: 'POST',
            headers: { 'Content-Type': 'application/json' },
            body: JSON.stringify({ answers })
          });
          const body = await response.json();
          if (!response.ok) {
            statusEl.textContent = typeof body.detail === 'string' ? body.detail : 'Unable to score answers.';
            return;
          }
          rgbErrorSpan.textContent = body.display.rgb_error;
          hslErrorSpan.textContent = body.display.hsl_error;
          rmseScoreSpan.textContent = body.display.rmse;
          resultArea.classList.remove('hidden');
        } catch (error) {
          console.error('Error scoring answers:', error);
          statusEl.textContent = 'Unable to reach the quiz server.';
        }
      }

      submitButton.addEventListener('click', calculateScore);
      retryButton.addEventListener('click', setupQuestions);
      setupQuestions();
    </script>
  </body>
</html>
""".replace("__ANSWER_LENGTH__", str(HEX_ANSWER_LENGTH))


class ScorePayload(BaseModel):
    """Payload schema for a full set of submitted answers."""

    answers: list[str]


def _question_payload(questions: list[ColorQuestion]) -> list[dict[str, object]]:
    return [{"index": index, "hex": question.hex} for index, question in enumerate(questions)]


def _report_payload(report: ScoreReport) -> dict[str, object]:
    rounded = report.rounded()
    return {
        "avg_rgb_error": list(report.avg_rgb_error),
        "avg_hsl_error": list(report.avg_hsl_error),
        "rmse": report.rmse,
        "rounded": {
            "avg_rgb_error": list(rounded.avg_rgb_error),
            "avg_hsl_error": list(rounded.avg_hsl_error),
            "rmse": rounded.rmse,
        },
        "display": {
            "rgb_error": report.format_rgb_error(),
            "hsl_error": report.format_hsl_error(),
            "rmse": report.format_rmse(),
        },
    }


def _get_quiz_manager_dependency(quiz_manager: QuizManager):
    def dependency() -> QuizManager:
        return quiz_manager

    return dependency


def create_api_app(quiz_manager: QuizManager) -> FastAPI:
    """Create a FastAPI application wired to the provided quiz manager."""
    app = FastAPI(title="Color Sense Quiz API", version="0.1.0")
    quiz_manager_dep = _get_quiz_manager_dependency(quiz_manager)

    @app.get("/", response_class=HTMLResponse)
    def serve_quiz_page() -> str:
        return _QUIZ_PAGE_HTML

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/quiz", status_code=201)
    def start_quiz(
        request: Request,
        response: Response,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, object]:
        session_id = _ensure_session_id(request, response, manager)
        questions = manager.start_quiz(session_id)
        return {
            "state": manager.get_state(session_id).value,
            "num_questions": len(questions),
            "questions": _question_payload(questions),
        }

    @app.get("/quiz")
    def get_quiz(
        request: Request,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, object]:
        session_id = request.cookies.get(SESSION_COOKIE, "")
        questions = manager.get_questions(session_id)
        return {
            "state": manager.get_state(session_id).value,
            "num_questions": len(questions),
            "questions": _question_payload(questions),
        }

    @app.post("/score")
    def submit_answers(
        payload: ScorePayload,
        request: Request,
        response: Response,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, object]:
        session_id = _ensure_session_id(request, response, manager)
        try:
            report = manager.submit_answers(session_id, payload.answers)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except RuntimeError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc

        body = _report_payload(report)
        body["state"] = manager.get_state(session_id).value
        return body

    return app


def run_api_server(
    quiz_manager: QuizManager,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> None:
    """Serve the quiz with uvicorn until interrupted."""
    app = create_api_app(quiz_manager)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)
    server.run()
