"""Development entrypoint for running the Flask API locally.

Usage:
- FLASK_APP=blueprints_backend.main:app flask run --reload
- python -m blueprints_backend.main
"""

from __future__ import annotations

from blueprints_backend import create_app
from blueprints_backend.config import Config

app = create_app()

if __name__ == "__main__":
    # Simple built-in server for quick smoke testing
    app.run(host=Config.HOST, port=Config.PORT, debug=Config.BLUEPRINTS_ENV == "dev")
