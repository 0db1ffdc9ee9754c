"""
Flask web application for the syllabus assignment extractor.

Provides the JSON API used by the timeline frontend:
- Canvas API proxy (with starred-course filtering)
- PDF syllabus upload and assignment extraction
"""

import logging

import requests
from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import RequestEntityTooLarge

from .assignment_extractor import extract_assignments
from .canvas_client import CanvasAPIError, CanvasClient
from .config import DEFAULT_COURSE_NAME, MAX_FILE_SIZE, PORT, setup_logger
from .pdf_extractor import extract_pdf_text

logger = logging.getLogger(__name__)

# Initialize Flask app
app = Flask(__name__)
app.config['MAX_CONTENT_LENGTH'] = MAX_FILE_SIZE
CORS(app)

ALLOWED_MIMETYPES = {'application/pdf'}


@app.route('/api/canvas-proxy', methods=['POST'])
def canvas_proxy():
    """Forward a GET request to the Canvas API.

    Expects a JSON body with canvasUrl, apiToken and endpoint.

    Returns:
        Canvas JSON response, or a JSON error with a matching status code
    """
    body = request.get_json(silent=True) or {}
    canvas_url = body.get('canvasUrl')
    api_token = body.get('apiToken')
    endpoint = body.get('endpoint')

    if not canvas_url or not api_token or not endpoint:
        return jsonify({'error': 'Missing required parameters'}), 400

    try:
        client = CanvasClient(canvas_url, api_token)
        return jsonify(client.fetch(endpoint))
    except CanvasAPIError as e:
        return jsonify({'error': str(e), 'details': e.details}), e.status_code
    except (requests.RequestException, ValueError) as e:
        logger.error("Proxy error: %s", e, exc_info=True)
        return jsonify({'error': str(e)}), 500


@app.route('/api/parse-pdf', methods=['POST'])
def parse_pdf():
    """Extract assignments from an uploaded PDF syllabus.

    Expects multipart form data with a "pdf" file and an optional
    "courseName" field.

    Returns:
        JSON with the assignments and a sample of the extracted text
    """
    upload = request.files.get('pdf')
    if upload is None or not upload.filename:
        return jsonify({'error': 'No PDF file uploaded'}), 400

    if upload.mimetype not in ALLOWED_MIMETYPES:
        return jsonify({'error': 'Only PDF files are allowed'}), 400

    course_name = request.form.get('courseName') or DEFAULT_COURSE_NAME
    logger.info("Parsing PDF: %s", upload.filename)

    try:
        text = extract_pdf_text(upload.read())
        result = extract_assignments(text, course_name=course_name)
    except Exception as e:
        logger.error("PDF parsing error: %s", e, exc_info=True)
        return jsonify({'error': str(e)}), 500

    return jsonify(result.to_dict())


@app.errorhandler(RequestEntityTooLarge)
def file_too_large(error):
    """Handle uploads over the size limit."""
    limit_mb = MAX_FILE_SIZE // (1024 * 1024)
    return jsonify({'error': f'File too large (limit {limit_mb}MB)'}), 413


@app.errorhandler(404)
def not_found(error):
    """Handle 404 errors."""
    return jsonify({'error': 'Not found'}), 404


if __name__ == '__main__':
    setup_logger()
    logger.info("Syllabus extractor running on http://localhost:%d", PORT)
    app.run(debug=True, host='0.0.0.0', port=PORT)
