"""
TCGplayer / Manapool Order Processor
Serverless function for Vercel
"""
from http.server import BaseHTTPRequestHandler
import json
import logging

from order_processor import (
    EmptyInputError,
    OrderProcessorError,
    SetMappingError,
    export_filename,
    load_set_mappings,
    load_set_mappings_file,
    process_order_numbers,
    process_orders,
    to_csv,
    to_tsv,
)
from order_processor.logging_setup import configure_logging
from order_processor.sets import EMPTY_SET_MAPPINGS

configure_logging()
logger = logging.getLogger(__name__)

MODES = ('csv', 'urls')
OUTPUTS = ('json', 'tsv', 'csv')


def get_set_mappings(body):
    """Mappings sent with the request, else the configured file"""
    errors = []
    mappings_csv = body.get('setMappings')
    if mappings_csv:
        return load_set_mappings(mappings_csv), errors

    try:
        return load_set_mappings_file(), errors
    except SetMappingError as e:
        logger.warning("Set mappings unavailable: %s", e)
        errors.append('Failed to load set mappings. Using empty mappings.')
        return EMPTY_SET_MAPPINGS, errors


def json_summary(summary):
    summary = dict(summary)
    summary['totalNet'] = float(summary['totalNet'])
    return summary


def handle_request(body):
    """Return ``(status, response)`` for a decoded request body"""
    if not isinstance(body, dict):
        return 400, {'success': False, 'error': 'Request body must be a JSON object'}

    mode = body.get('mode', 'csv')
    output = body.get('output', 'json')
    if mode not in MODES:
        return 400, {'success': False, 'error': f"Unknown mode: {mode}"}
    if output not in OUTPUTS:
        return 400, {'success': False, 'error': f"Unknown output: {output}"}

    data = body.get('data') or ''
    if not isinstance(data, str):
        return 400, {'success': False, 'error': "'data' must be a string"}
    mappings_csv = body.get('setMappings')
    if mappings_csv is not None and not isinstance(mappings_csv, str):
        return 400, {'success': False, 'error': "'setMappings' must be CSV text"}

    try:
        if mode == 'urls':
            urls, summary = process_order_numbers(data)
            return 200, {
                'success': True,
                'mode': mode,
                'urls': urls,
                'summary': json_summary(summary),
                'export': '\n'.join(urls),
            }

        set_mappings, errors = get_set_mappings(body)
        orders, summary = process_orders(data, set_mappings)
    except EmptyInputError as e:
        return 400, {'success': False, 'error': str(e)}
    except OrderProcessorError as e:
        return 500, {'success': False, 'error': str(e)}

    response = {
        'success': True,
        'mode': mode,
        'orders': orders,
        'totalOrders': summary['totalOrders'],
        'summary': json_summary(summary),
        'errors': errors,
    }
    if output == 'tsv':
        response['export'] = to_tsv(orders)
    elif output == 'csv':
        response['export'] = to_csv(orders)
        response['filename'] = export_filename()

    return 200, response


class handler(BaseHTTPRequestHandler):
    def do_POST(self):
        """Handle pasted order data"""
        try:
            # Read request body
            content_length = int(self.headers.get('Content-Length', 0))
            post_data = self.rfile.read(content_length)

            try:
                body = json.loads(post_data.decode('utf-8'))
            except (json.JSONDecodeError, UnicodeDecodeError):
                self.send_error_response(400, "Invalid JSON in request body")
                return

            status, response = handle_request(body)
            self.send_json(status, response)

        except Exception as e:
            logger.exception("Unhandled error in parse function")
            self.send_error_response(500, f"Internal server error: {str(e)}")

    def do_OPTIONS(self):
        """Handle CORS preflight"""
        self.send_response(200)
        self.send_header('Access-Control-Allow-Origin', '*')
        self.send_header('Access-Control-Allow-Methods', 'POST, OPTIONS')
        self.send_header('Access-Control-Allow-Headers', 'Content-Type')
        self.end_headers()

    def send_json(self, code, response):
        self.send_response(code)
        self.send_header('Content-type', 'application/json')
        self.send_header('Access-Control-Allow-Origin', '*')
        self.end_headers()

        self.wfile.write(json.dumps(response).encode('utf-8'))

    def send_error_response(self, code, message):
        """Send error response"""
        self.send_json(code, {
            'success': False,
            'error': message
        })

    def log_message(self, format, *args):
        logger.info("%s - %s", self.address_string(), format % args)
