"""Template route for the flightbook server."""

import logging
from pathlib import Path

from flask import Blueprint, Response, current_app
from jinja2 import Environment, StrictUndefined, Template

logger = logging.getLogger(__name__)

# Create blueprint
main_bp = Blueprint('main', __name__)

# The root handler answers the whole path tree with any method
ALL_METHODS = ['GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS']

# Undefined names fail the render instead of rendering as empty strings
_environment = Environment(autoescape=True, undefined=StrictUndefined)


def load_template(path: str) -> Template:
    """Read and parse the template file. Nothing is cached between calls."""
    source = Path(path).read_text(encoding='utf-8')
    return _environment.from_string(source)


def error_response(error: Exception) -> Response:
    """Plain-text 500 response carrying the raw error text."""
    response = Response(f"{error}\n", status=500, mimetype='text/plain')
    response.headers['X-Content-Type-Options'] = 'nosniff'
    return response


@main_bp.route('/', methods=ALL_METHODS)
@main_bp.route('/<path:subpath>', methods=ALL_METHODS)
def index(subpath=None):
    """Render the template file with HiddenValue bound, for every path under /."""
    data = {
        'HiddenValue': current_app.config['HIDDEN_VALUE'],
    }

    try:
        template = load_template(current_app.config['TEMPLATE_PATH'])
    except Exception as e:
        logger.error(f"Error parsing template: {e}")
        return error_response(e)

    try:
        body = template.render(**data)
    except Exception as e:
        logger.error(f"Error executing template: {e}")
        return error_response(e)

    return Response(body, status=200, mimetype='text/html')
