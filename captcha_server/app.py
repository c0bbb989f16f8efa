"""Flask application serving captcha images and verification endpoints."""

from __future__ import annotations

import logging
import posixpath

from flask import Flask, Response, abort, jsonify, render_template_string, request
from flask_cors import CORS
from pydantic import ValidationError

from captcha_core import CaptchaService, ChallengeNotFoundError, default_service

from .config import ServerSettings
from .schemas import CaptchaResponse, NewCaptchaRequest, NewCaptchaResponse, VerifyRequest

LOGGER = logging.getLogger(__name__)

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}

FORM_TEMPLATE = """<!doctype html>
<head><title>Captcha Example</title></head>
<body>
<script>
function reload() {
  var image = document.getElementById('image');
  image.src = image.src.split('?')[0] + '?reload=' + (new Date()).getTime();
  return false;
}
</script>
<form action="{{ url_for('process_form') }}" method="post">
<p>Type the letters and numbers you see in the picture below:</p>
<p><img id="image" src="{{ image_url }}" alt="Captcha image"></p>
<a href="#" onclick="return reload()">Reload</a>
<input type="hidden" name="captchaId" value="{{ captcha_id }}"><br>
<input name="captchaSolution" title="Only letters and numbers are allowed" required autocomplete="off">
<input type="submit" value="Submit">
</form>
</body>
"""

RESULT_TEMPLATE = """<!doctype html>
<body>
<p>{{ message }}</p>
<a href="{{ url_for('show_form') }}">Try another one</a>
</body>
"""


def create_app(
    settings: ServerSettings | None = None,
    service: CaptchaService | None = None,
) -> Flask:
    settings = settings or ServerSettings()
    service = service or default_service()
    prefix = settings.url_prefix.rstrip("/")

    app = Flask(__name__)
    CORS(app)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    logging.getLogger("werkzeug").setLevel(logging.WARNING)

    def image_url(challenge_id: str) -> str:
        return f"{prefix}/{challenge_id}.png"

    @app.get(f"{prefix}/<path:filename>")
    def serve_image(filename: str):
        directory, name = posixpath.split(filename)
        challenge_id, ext = posixpath.splitext(name)
        if not challenge_id or ext != ".png":
            abort(404)
        if request.args.get("reload"):
            service.reload(challenge_id)
        try:
            data = service.image_bytes(challenge_id, settings.image_width, settings.image_height)
        except ChallengeNotFoundError:
            abort(404)
        response = Response(data, mimetype="image/png", headers=NO_CACHE_HEADERS)
        if posixpath.basename(directory) == "download":
            response.mimetype = "application/octet-stream"
            response.headers["Content-Disposition"] = f"attachment; filename={name}"
        return response

    @app.get("/")
    def show_form():
        challenge_id = service.new()
        return render_template_string(
            FORM_TEMPLATE,
            captcha_id=challenge_id,
            image_url=image_url(challenge_id),
        )

    @app.post("/process")
    def process_form():
        challenge_id = request.form.get("captchaId", "")
        solution = request.form.get("captchaSolution", "")
        if service.verify_string(challenge_id, solution):
            message = "Great job, human! You solved the captcha."
        else:
            message = "Wrong captcha solution! No robots allowed!"
        return render_template_string(RESULT_TEMPLATE, message=message)

    @app.post("/api/captcha")
    def new_captcha():
        payload = NewCaptchaRequest.model_validate(request.get_json(silent=True) or {})
        if payload.length is None:
            challenge_id = service.new()
        else:
            challenge_id = service.new_len(payload.length)
        response = NewCaptchaResponse(id=challenge_id, image_url=image_url(challenge_id))
        return jsonify(CaptchaResponse(success=True, data=response.model_dump()).model_dump())

    @app.post("/api/captcha/<challenge_id>/reload")
    def reload_captcha(challenge_id: str):
        if not service.reload(challenge_id):
            return jsonify(CaptchaResponse(success=False, message="Captcha not found").model_dump()), 404
        response = NewCaptchaResponse(id=challenge_id, image_url=image_url(challenge_id))
        return jsonify(CaptchaResponse(success=True, data=response.model_dump()).model_dump())

    @app.post("/api/captcha/verify")
    def verify_captcha():
        payload = VerifyRequest.model_validate(request.get_json(silent=True) or {})
        if not service.verify_string(payload.id, payload.solution):
            return jsonify(CaptchaResponse(success=False, message="Wrong captcha solution").model_dump()), 400
        return jsonify(CaptchaResponse(success=True).model_dump())

    @app.errorhandler(ValidationError)
    def handle_validation_error(error: ValidationError):
        LOGGER.warning("Rejected malformed payload: %s", error.errors(include_url=False))
        return jsonify(CaptchaResponse(success=False, message="Malformed request").model_dump()), 400

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


if __name__ == "__main__":
    server_settings = ServerSettings()
    create_app(server_settings).run(host=server_settings.host, port=server_settings.port, debug=True)
