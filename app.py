# app.py — Flask backend
import logging
import os

from flask import Flask, request, jsonify
from pydantic import ValidationError

from diagnosis_engine import diagnose
from pydantic_models import DiagnoseRequest, Feedback

HOST = os.environ.get("SYMPTOM_CHECKER_HOST", "0.0.0.0")
PORT = int(os.environ.get("SYMPTOM_CHECKER_PORT", "5000"))
LOG_LEVEL = os.environ.get("SYMPTOM_CHECKER_LOG_LEVEL", "INFO").upper()

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
# basicConfig is a no-op when the server already configured the root logger
logging.getLogger("symptom_checker").setLevel(LOG_LEVEL)

DISCLAIMER = (
    "This assistant provides general information only and should not be used for "
    "diagnosis, treatment, or as a substitute for professional medical advice. "
    "If you're experiencing a medical emergency, call your local emergency services immediately."
)
PROCESSING_ERROR = "An error occurred while processing your symptoms. Please try again."
FEEDBACK_THANKS = "Thank you for your feedback! This helps improve our system."

logger = logging.getLogger("symptom_checker.api")

app = Flask(__name__)


def _validation_message(exc: ValidationError) -> str:
    first = exc.errors()[0]
    where = ".".join(str(p) for p in first.get("loc", ()))
    return f"{where}: {first.get('msg')}" if where else first.get("msg", "invalid request")


@app.route("/", methods=["GET"])
def index():
    return "Symptom Checker — POST /api/diagnose with {'symptoms':'...'}"


@app.route("/api/diagnose", methods=["POST"])
def diagnose_symptoms():
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict) or "symptoms" not in data:
        return jsonify({"error": "Please POST JSON with 'symptoms' field."}), 400
    try:
        req = DiagnoseRequest(**data)
    except ValidationError as e:
        return jsonify({"error": _validation_message(e)}), 400

    try:
        result = diagnose(req.to_symptoms())
    except Exception:
        logger.exception("error processing symptoms")
        return jsonify({"error": PROCESSING_ERROR}), 500
    return jsonify({"diagnosis": result.model_dump(), "disclaimer": DISCLAIMER})


@app.route("/api/feedback", methods=["POST"])
def feedback():
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict) or not data:
        return jsonify({"error": "Please POST JSON with 'diagnosis_id' and 'was_helpful' fields."}), 400
    try:
        fb = Feedback(**data)
    except ValidationError as e:
        return jsonify({"error": _validation_message(e)}), 400

    logger.info(
        "feedback received diagnosis_id=%s was_helpful=%s timestamp=%s",
        fb.diagnosis_id, fb.was_helpful, fb.timestamp,
    )
    return jsonify({"message": FEEDBACK_THANKS})


if __name__ == "__main__":
    app.run(host=HOST, port=PORT)
